"""
Roadmap generation and storage.

Every generation appends a new ImprovementPlan snapshot; stored plans are
never modified.
"""
import logging
from datetime import datetime
from typing import List, Optional

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from interview_coach.core.config import ROADMAP_WEAK_SKILLS_LIMIT
from interview_coach.db.models.improvement_plan import ImprovementPlan
from interview_coach.db.models.score_breakdown import ScoreBreakdown
from interview_coach.db.models.weak_skill_memory import WeakSkillMemory
from interview_coach.schemas.progress import Roadmap, RoadmapSnapshot
from interview_coach.services.readiness_service import get_latest_session
from interview_coach.services.roadmap_generator import RoadmapParams, default_roadmap, generate_roadmap

logger = logging.getLogger(__name__)


def build_roadmap_params(db: Session, user_id: int) -> RoadmapParams:
    rows = (
        db.query(WeakSkillMemory.skill_name)
        .filter(WeakSkillMemory.user_id == user_id)
        .order_by(WeakSkillMemory.weakness_count.desc(), WeakSkillMemory.skill_name.asc())
        .limit(ROADMAP_WEAK_SKILLS_LIMIT)
        .all()
    )
    params = RoadmapParams(weak_skills=[name for (name,) in rows])

    latest = get_latest_session(db, user_id)
    if latest:
        params.difficulty = latest.difficulty
        breakdown = db.query(ScoreBreakdown).filter(ScoreBreakdown.session_id == latest.id).first()
        if breakdown:
            params.technical_average = breakdown.technical_average
            params.communication_average = breakdown.communication_average
            params.logic_average = breakdown.logic_average
    return params


def generate_and_store_roadmap(db: Session, user_id: int) -> Roadmap:
    """
    Generate a plan from the user's current state and append it to history.

    On failure nothing is stored and the default plan is returned.
    """
    try:
        roadmap = generate_roadmap(build_roadmap_params(db, user_id))
        db.add(ImprovementPlan(
            user_id=user_id,
            plan=roadmap.model_dump(),
            generated_at=datetime.utcnow(),
        ))
        db.commit()
        logger.info(f"Roadmap generated for user_id={user_id}")
        return roadmap
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Roadmap generation failed for user_id={user_id}, rolled back: {e}", exc_info=True)
        return default_roadmap()


def _latest_plans(db: Session, user_id: int, limit: int):
    return (
        db.query(ImprovementPlan)
        .filter(ImprovementPlan.user_id == user_id)
        .order_by(ImprovementPlan.generated_at.desc(), ImprovementPlan.id.desc())
        .limit(limit)
        .all()
    )


def get_latest_roadmap(db: Session, user_id: int) -> Optional[Roadmap]:
    """Most recent stored plan, or None."""
    try:
        plans = _latest_plans(db, user_id, 1)
        if not plans:
            return None
        return Roadmap.model_validate(plans[0].plan)
    except (SQLAlchemyError, ValidationError) as e:
        logger.error(f"Failed to load roadmap for user_id={user_id}: {e}", exc_info=True)
        return None


def list_roadmaps(db: Session, user_id: int, limit: int = 10) -> List[RoadmapSnapshot]:
    """Stored plans, newest first. Unreadable snapshots are skipped."""
    snapshots = []
    try:
        limit = max(1, int(limit))
    except (TypeError, ValueError, OverflowError):
        logger.warning(f"Invalid roadmap limit {limit!r}, using 10")
        limit = 10

    try:
        plans = _latest_plans(db, user_id, limit)
    except SQLAlchemyError as e:
        logger.error(f"Failed to list roadmaps for user_id={user_id}: {e}", exc_info=True)
        return snapshots

    for plan in plans:
        try:
            snapshots.append(RoadmapSnapshot(id=plan.id, generated_at=plan.generated_at, plan=plan.plan))
        except ValidationError:
            logger.warning(f"Skipping malformed improvement plan {plan.id}")
    return snapshots
