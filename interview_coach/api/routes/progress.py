"""
Progression endpoints: readiness, weak skills, roadmaps, badges and the coach dashboard.
"""
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from interview_coach.db.models.user import User
from interview_coach.db.session import get_db
from interview_coach.schemas.progress import (
    BadgeRecord,
    CoachDashboard,
    MemoryUpdateRequest,
    MemoryUpdateResult,
    ReadinessResponse,
    Roadmap,
    RoadmapSnapshot,
    WeakSkillRecord,
)
from interview_coach.services.badge_service import get_user_badges
from interview_coach.services.coach_service import get_coach_dashboard
from interview_coach.services.readiness_service import get_readiness_score, update_readiness_index
from interview_coach.services.roadmap_service import (
    generate_and_store_roadmap,
    get_latest_roadmap,
    list_roadmaps,
)
from interview_coach.services.weak_skill_memory import list_weak_skills, process_memory_update

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Progress"])


def require_user(user_id: int, db: Session) -> User:
    """Fetch User or raise 404."""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user


@router.get("/{user_id}/readiness", response_model=ReadinessResponse)
def read_readiness(user_id: int, db: Session = Depends(get_db)):
    require_user(user_id, db)
    return ReadinessResponse(user_id=user_id, readiness_score=get_readiness_score(db, user_id))


@router.post("/{user_id}/readiness", response_model=ReadinessResponse)
def recompute_readiness(user_id: int, db: Session = Depends(get_db)):
    """Recompute readiness from the latest session."""
    require_user(user_id, db)
    return ReadinessResponse(user_id=user_id, readiness_score=update_readiness_index(db, user_id))


@router.get("/{user_id}/weak-skills", response_model=List[WeakSkillRecord])
def read_weak_skills(user_id: int, db: Session = Depends(get_db)):
    require_user(user_id, db)
    try:
        return list_weak_skills(db, user_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to list weak skills: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list weak skills"
        )


@router.post("/{user_id}/weak-skills", response_model=MemoryUpdateResult)
def record_weak_skills(user_id: int, request: MemoryUpdateRequest, db: Session = Depends(get_db)):
    """Record weak topics outside of an answer evaluation."""
    require_user(user_id, db)
    return process_memory_update(db, user_id, request.weak_topics)


@router.get("/{user_id}/roadmap", response_model=Roadmap)
def read_roadmap(user_id: int, db: Session = Depends(get_db)):
    require_user(user_id, db)
    roadmap = get_latest_roadmap(db, user_id)
    if roadmap is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No roadmap generated yet"
        )
    return roadmap


@router.post("/{user_id}/roadmap", response_model=Roadmap, status_code=status.HTTP_201_CREATED)
def regenerate_roadmap(user_id: int, db: Session = Depends(get_db)):
    require_user(user_id, db)
    return generate_and_store_roadmap(db, user_id)


@router.get("/{user_id}/roadmaps", response_model=List[RoadmapSnapshot])
def read_roadmap_history(
    user_id: int,
    limit: int = Query(10, ge=1, le=100, description="Number of plans to return"),
    db: Session = Depends(get_db)
):
    require_user(user_id, db)
    return list_roadmaps(db, user_id, limit=limit)


@router.get("/{user_id}/badges", response_model=List[BadgeRecord])
def read_badges(user_id: int, db: Session = Depends(get_db)):
    require_user(user_id, db)
    return get_user_badges(db, user_id)


@router.get("/{user_id}/dashboard", response_model=CoachDashboard)
def read_dashboard(user_id: int, db: Session = Depends(get_db)):
    require_user(user_id, db)
    return get_coach_dashboard(db, user_id)
