"""
Interview session endpoints.

Start a session, submit answers for scoring, run an explicit adaptive step and
complete the session.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from interview_coach.db.models.interview_session import InterviewSession
from interview_coach.db.session import get_db
from interview_coach.schemas.evaluation import AnswerSubmission, EvaluationOutput, EvaluationRequest
from interview_coach.schemas.progress import (
    AdaptiveStepRequest,
    AdaptiveStepResult,
    CompleteSessionRequest,
    SessionCompletionResult,
    SessionResponse,
    StartSessionRequest,
)
from interview_coach.services.adaptive_service import process_adaptive_step
from interview_coach.services.evaluation_service import evaluate_response
from interview_coach.services.session_service import complete_session, get_session, start_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["Sessions"])


def get_owned_session(session_id: int, user_id: int, db: Session) -> InterviewSession:
    """Fetch a session owned by the user or raise 404."""
    session = get_session(db, session_id, user_id)
    if not session:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Session not found"
        )
    return session


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SessionResponse)
def create_session(
    request: StartSessionRequest,
    db: Session = Depends(get_db)
):
    """Start a new interview session for a user."""
    try:
        return start_session(
            db,
            user_id=request.user_id,
            role=request.role,
            category=request.category,
            difficulty=request.difficulty,
            mode=request.mode,
            company_preset=request.company_preset,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except SQLAlchemyError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to start session"
        )


@router.post("/{session_id}/responses", response_model=EvaluationOutput)
def submit_response(
    session_id: int,
    submission: AnswerSubmission,
    db: Session = Depends(get_db)
):
    """
    Score an answer and update session averages, weak skills and difficulty.

    Degraded scoring (backend down, malformed output) still returns 200 with
    llm_output_valid=false.
    """
    session = get_owned_session(session_id, submission.user_id, db)

    request = EvaluationRequest(
        session_id=session.id,
        user_id=submission.user_id,
        question_id=submission.question_id,
        question_text=submission.question_text,
        user_answer=submission.user_answer,
        role=session.role,
        category=submission.category or session.category,
        difficulty=session.difficulty,
        mode=session.mode,
        company_preset=session.company_preset,
    )
    result = evaluate_response(db, request)
    if not result.success and result.error == "Question not found in session":
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.error)
    return result


@router.post("/{session_id}/adaptive-step", response_model=AdaptiveStepResult)
def adaptive_step(
    session_id: int,
    request: AdaptiveStepRequest,
    db: Session = Depends(get_db)
):
    """Apply a difficulty recommendation and pick the next question."""
    get_owned_session(session_id, request.user_id, db)
    return process_adaptive_step(
        db,
        session_id=session_id,
        user_id=request.user_id,
        current_difficulty=request.current_difficulty,
        evaluation_recommendation=request.evaluation_recommendation,
        weak_topics=request.weak_topics,
    )


@router.post("/{session_id}/complete", response_model=SessionCompletionResult)
def finish_session(
    session_id: int,
    request: CompleteSessionRequest,
    db: Session = Depends(get_db)
):
    """Complete a session; refreshes readiness, badges and the roadmap."""
    get_owned_session(session_id, request.user_id, db)
    return complete_session(db, session_id, request.user_id)
