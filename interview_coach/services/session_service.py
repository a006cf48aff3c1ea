"""
Interview session lifecycle.

Completing a session is what triggers readiness, badge and roadmap updates.
"""
import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from interview_coach.core.constants import COMPANY_PRESETS, DEFAULT_MODE, INTERVIEW_MODES
from interview_coach.db.models.interview_session import InterviewSession
from interview_coach.db.models.response import Response
from interview_coach.db.models.user import User
from interview_coach.schemas.progress import SessionCompletionResult
from interview_coach.services.badge_service import evaluate_and_award_badges
from interview_coach.services.difficulty_engine import normalize_difficulty
from interview_coach.services.evaluation_service import upsert_score_breakdown
from interview_coach.services.readiness_service import update_readiness_index
from interview_coach.services.roadmap_service import generate_and_store_roadmap
from interview_coach.services.score_calculator import calculate_session_averages

logger = logging.getLogger(__name__)


def get_session(db: Session, session_id: int, user_id: int) -> Optional[InterviewSession]:
    """Session if it exists and belongs to the user."""
    return db.query(InterviewSession).filter(
        InterviewSession.id == session_id,
        InterviewSession.user_id == user_id,
    ).first()


def start_session(
    db: Session,
    user_id: int,
    role: str,
    category: str = "general",
    difficulty: str = "medium",
    mode: str = "normal",
    company_preset: Optional[str] = None,
) -> InterviewSession:
    """
    Create a new interview session.

    Invalid difficulty falls back to medium, invalid mode to normal. The
    company preset is kept only in company mode.

    Raises:
        ValueError: User does not exist
        SQLAlchemyError: Session could not be stored (rolled back)
    """
    if not db.query(User).filter(User.id == user_id).first():
        raise ValueError("User not found")

    mode = mode if mode in INTERVIEW_MODES else DEFAULT_MODE
    preset = None
    if mode == "company":
        preset = company_preset if company_preset in COMPANY_PRESETS else "generic"

    session = InterviewSession(
        user_id=user_id,
        role=role,
        category=(category or "general").strip() or "general",
        difficulty=normalize_difficulty(difficulty),
        mode=mode,
        company_preset=preset,
        average_score=0.0,
        started_at=datetime.utcnow(),
    )
    try:
        db.add(session)
        db.commit()
        db.refresh(session)
    except SQLAlchemyError:
        db.rollback()
        logger.error(f"Failed to start session for user_id={user_id}", exc_info=True)
        raise

    logger.info(f"Session {session.id} started: user_id={user_id}, difficulty={session.difficulty}, mode={mode}")
    return session


def complete_session(db: Session, session_id: int, user_id: int) -> SessionCompletionResult:
    """
    Close a session and refresh the user's progression state.

    Stamps completed_at (first completion only), recomputes the session
    breakdown, then updates readiness, awards badges and regenerates the
    roadmap. Never raises.
    """
    try:
        session = get_session(db, session_id, user_id)
        if not session:
            return SessionCompletionResult(success=False, session_id=session_id, error="Session not found")

        rows = db.query(Response).filter(Response.session_id == session.id).all()
        averages = calculate_session_averages(rows)
        upsert_score_breakdown(db, session.id, averages)
        session.average_score = averages.overall_score
        if session.completed_at is None:
            session.completed_at = datetime.utcnow()
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to complete session {session_id}: {e}", exc_info=True)
        return SessionCompletionResult(success=False, session_id=session_id, error="Failed to complete session")

    readiness = update_readiness_index(db, user_id)
    badges = evaluate_and_award_badges(db, user_id)
    roadmap = generate_and_store_roadmap(db, user_id)

    logger.info(f"Session {session_id} completed: overall={averages.overall_score}, readiness={readiness}")
    return SessionCompletionResult(
        success=True,
        session_id=session_id,
        overall_score=averages.overall_score,
        readiness_score=readiness,
        badges=badges,
        roadmap=roadmap,
    )
