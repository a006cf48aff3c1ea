"""
Achievement badges.

Badges are awarded once per user and never revoked.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from interview_coach.db.models.badge import Badge
from interview_coach.db.models.readiness_index import ReadinessIndex
from interview_coach.db.models.score_breakdown import ScoreBreakdown
from interview_coach.schemas.progress import BadgeRecord
from interview_coach.services.readiness_service import count_completed_sessions, get_latest_session

logger = logging.getLogger(__name__)


@dataclass
class BadgeDefinition:
    badge_name: str
    description: str
    is_eligible: Callable[[Dict[str, float]], bool]


# Add a badge by adding an entry; context keys come from _badge_context()
BADGE_DEFINITIONS: List[BadgeDefinition] = [
    BadgeDefinition(
        "DSA Master",
        "Achieved a technical average of 85 or above",
        lambda ctx: ctx["technical_average"] >= 85,
    ),
    BadgeDefinition(
        "Communication Pro",
        "Achieved a communication average of 80 or above",
        lambda ctx: ctx["communication_average"] >= 80,
    ),
    BadgeDefinition(
        "Interview Ready",
        "Achieved a readiness score of 85 or above",
        lambda ctx: ctx["readiness_score"] >= 85,
    ),
    BadgeDefinition(
        "Consistent Performer",
        "Completed 10 or more interview sessions",
        lambda ctx: ctx["total_sessions"] >= 10,
    ),
]

_DESCRIPTIONS = {definition.badge_name: definition.description for definition in BADGE_DEFINITIONS}


def _badge_context(db: Session, user_id: int) -> Dict[str, float]:
    readiness = db.query(ReadinessIndex).filter(ReadinessIndex.user_id == user_id).first()
    context = {
        "readiness_score": readiness.readiness_score if readiness else 0.0,
        "technical_average": 0.0,
        "communication_average": 0.0,
        "total_sessions": count_completed_sessions(db, user_id),
    }
    latest = get_latest_session(db, user_id)
    if latest:
        breakdown = db.query(ScoreBreakdown).filter(ScoreBreakdown.session_id == latest.id).first()
        if breakdown:
            context["technical_average"] = breakdown.technical_average
            context["communication_average"] = breakdown.communication_average
    return context


def evaluate_and_award_badges(db: Session, user_id: int) -> List[BadgeRecord]:
    """
    Award every badge the user now qualifies for.

    Returns all of the user's badges in definition order, newly awarded ones
    flagged is_new. Empty on failure, with nothing stored.
    """
    try:
        context = _badge_context(db, user_id)
        existing = {badge.badge_name: badge for badge in db.query(Badge).filter(Badge.user_id == user_id).all()}

        now = datetime.utcnow()
        badges: List[BadgeRecord] = []
        for definition in BADGE_DEFINITIONS:
            owned = existing.get(definition.badge_name)
            if owned:
                badges.append(BadgeRecord(
                    badge_name=owned.badge_name,
                    description=definition.description,
                    awarded_at=owned.awarded_at,
                    is_new=False,
                ))
            elif definition.is_eligible(context):
                db.add(Badge(user_id=user_id, badge_name=definition.badge_name, awarded_at=now))
                badges.append(BadgeRecord(
                    badge_name=definition.badge_name,
                    description=definition.description,
                    awarded_at=now,
                    is_new=True,
                ))

        db.commit()
        awarded = [badge.badge_name for badge in badges if badge.is_new]
        if awarded:
            logger.info(f"Badges awarded: user_id={user_id}, badges={awarded}")
        return badges
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Badge evaluation failed for user_id={user_id}, rolled back: {e}", exc_info=True)
        return []


def get_user_badges(db: Session, user_id: int) -> List[BadgeRecord]:
    """User's badges, most recent first."""
    try:
        rows = (
            db.query(Badge)
            .filter(Badge.user_id == user_id)
            .order_by(Badge.awarded_at.desc(), Badge.id.desc())
            .all()
        )
    except SQLAlchemyError as e:
        logger.error(f"Failed to load badges for user_id={user_id}: {e}", exc_info=True)
        return []
    return [
        BadgeRecord(
            badge_name=row.badge_name,
            description=_DESCRIPTIONS.get(row.badge_name, ""),
            awarded_at=row.awarded_at,
        )
        for row in rows
    ]
