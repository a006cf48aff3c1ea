"""
Readiness index persistence.
"""
import logging
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from interview_coach.db.models.interview_session import InterviewSession
from interview_coach.db.models.readiness_index import ReadinessIndex
from interview_coach.db.models.score_breakdown import ScoreBreakdown
from interview_coach.services.readiness_calculator import ReadinessParams, calculate_readiness
from interview_coach.services.weak_skill_memory import count_weak_skills

logger = logging.getLogger(__name__)


def get_latest_session(db: Session, user_id: int):
    return (
        db.query(InterviewSession)
        .filter(InterviewSession.user_id == user_id)
        .order_by(InterviewSession.started_at.desc(), InterviewSession.id.desc())
        .first()
    )


def count_completed_sessions(db: Session, user_id: int) -> int:
    return db.query(InterviewSession).filter(
        InterviewSession.user_id == user_id,
        InterviewSession.completed_at.isnot(None),
    ).count()


def build_readiness_params(db: Session, user_id: int):
    """Gather calculator inputs from the user's latest session. None when the user has no sessions."""
    latest = get_latest_session(db, user_id)
    if not latest:
        return None

    breakdown = db.query(ScoreBreakdown).filter(ScoreBreakdown.session_id == latest.id).first()
    params = ReadinessParams(
        weak_skill_count=count_weak_skills(db, user_id),
        current_difficulty=latest.difficulty,
        total_sessions=count_completed_sessions(db, user_id),
    )
    if breakdown:
        params.overall_score = breakdown.overall_score
        params.technical_average = breakdown.technical_average
        params.communication_average = breakdown.communication_average
        params.confidence_average = breakdown.confidence_average
        params.logic_average = breakdown.logic_average
        params.depth_average = breakdown.depth_average
    return params


def update_readiness_index(db: Session, user_id: int) -> float:
    """
    Recompute and store the user's readiness score.

    A user without sessions stores 0. On failure nothing changes and the
    previously stored score (0 if none) is returned.
    """
    try:
        params = build_readiness_params(db, user_id)
        score = calculate_readiness(params) if params else 0.0

        index = db.query(ReadinessIndex).filter(ReadinessIndex.user_id == user_id).first()
        if not index:
            index = ReadinessIndex(user_id=user_id)
            db.add(index)
        index.readiness_score = score
        index.calculated_at = datetime.utcnow()
        db.commit()

        logger.info(f"Readiness updated: user_id={user_id}, score={score}")
        return score
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Readiness update failed for user_id={user_id}, rolled back: {e}", exc_info=True)
        return get_readiness_score(db, user_id)


def get_readiness_score(db: Session, user_id: int) -> float:
    """Stored readiness score; 0 when absent or unreadable."""
    try:
        index = db.query(ReadinessIndex).filter(ReadinessIndex.user_id == user_id).first()
        return float(index.readiness_score) if index else 0.0
    except SQLAlchemyError as e:
        logger.error(f"Failed to read readiness for user_id={user_id}: {e}", exc_info=True)
        return 0.0
