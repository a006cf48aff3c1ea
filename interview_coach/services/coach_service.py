"""
Coach dashboard: read-only view of a user's progression.
"""
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from interview_coach.db.models.interview_session import InterviewSession
from interview_coach.schemas.progress import CoachDashboard, ProgressPoint
from interview_coach.services.badge_service import get_user_badges
from interview_coach.services.readiness_service import get_readiness_score
from interview_coach.services.roadmap_service import get_latest_roadmap
from interview_coach.services.weak_skill_memory import get_top_weak_skills

logger = logging.getLogger(__name__)

DASHBOARD_WEAK_SKILLS_LIMIT = 10


def get_coach_dashboard(db: Session, user_id: int) -> CoachDashboard:
    """Aggregate readiness, weak skills, roadmap, badges and score history. Empty dashboard on failure."""
    try:
        sessions = (
            db.query(InterviewSession)
            .filter(InterviewSession.user_id == user_id)
            .order_by(InterviewSession.started_at.asc(), InterviewSession.id.asc())
            .all()
        )
    except SQLAlchemyError as e:
        logger.error(f"Failed to load sessions for dashboard user_id={user_id}: {e}", exc_info=True)
        return CoachDashboard()

    progress = [
        ProgressPoint(session=index + 1, score=round(session.average_score or 0.0, 2))
        for index, session in enumerate(sessions)
    ]

    return CoachDashboard(
        readiness_score=get_readiness_score(db, user_id),
        weak_skills=get_top_weak_skills(db, user_id, limit=DASHBOARD_WEAK_SKILLS_LIMIT),
        roadmap=get_latest_roadmap(db, user_id),
        badges=get_user_badges(db, user_id),
        progress=progress,
        difficulty=sessions[-1].difficulty if sessions else "easy",
        total_sessions=len(sessions),
    )
