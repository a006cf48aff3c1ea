"""
Adaptive step: apply the difficulty transition to a session and pick the next question.
"""
import logging
from typing import Callable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from interview_coach.db.models.interview_session import InterviewSession
from interview_coach.schemas.progress import AdaptiveStepResult, SelectedQuestion
from interview_coach.services.difficulty_engine import next_difficulty, normalize_difficulty
from interview_coach.services.question_selector import default_question_selector

logger = logging.getLogger(__name__)

QuestionSelector = Callable[[Session, InterviewSession, str, List[str]], Optional[SelectedQuestion]]


def process_adaptive_step(
    db: Session,
    session_id: int,
    user_id: int,
    current_difficulty: str,
    evaluation_recommendation: str,
    weak_topics: Optional[List[str]] = None,
    selector: Optional[QuestionSelector] = None,
) -> AdaptiveStepResult:
    """
    Advance a session's difficulty by at most one level.

    If the session is not the user's or the update cannot be stored, the
    current difficulty is returned and no question is selected. Selector
    failures only drop the next question.
    """
    current = normalize_difficulty(current_difficulty)
    target = next_difficulty(current, evaluation_recommendation)
    weak_topics = list(weak_topics or [])

    try:
        session = db.query(InterviewSession).filter(
            InterviewSession.id == session_id,
            InterviewSession.user_id == user_id,
        ).first()
        if not session:
            logger.warning(f"Adaptive step skipped: session {session_id} not found for user_id={user_id}")
            return AdaptiveStepResult(next_difficulty=current)

        session.difficulty = target
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to store difficulty for session {session_id}: {e}", exc_info=True)
        return AdaptiveStepResult(next_difficulty=current)

    if target != current:
        logger.info(f"Session {session_id} difficulty {current} -> {target}")

    try:
        question = (selector or default_question_selector)(db, session, target, weak_topics)
    except Exception as e:
        logger.warning(f"Question selection failed for session {session_id}: {e}")
        question = None

    return AdaptiveStepResult(next_difficulty=target, next_question=question)
