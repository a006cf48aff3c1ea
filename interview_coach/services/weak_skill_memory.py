"""
Weak skill memory service.

Keeps a per-user tally of recurring weak topics. Topic names are normalized so
that case and whitespace variants land on one row; counts only ever go up.
"""
import logging
from datetime import datetime
from typing import Iterable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from interview_coach.core.config import TOP_WEAK_SKILLS_LIMIT
from interview_coach.db.models.weak_skill_memory import WeakSkillMemory
from interview_coach.schemas.progress import WeakSkillRecord, MemoryUpdateResult

logger = logging.getLogger(__name__)


def normalize_topic(topic) -> str:
    """Trim, lowercase and collapse internal whitespace. Non-strings normalize to ''."""
    if not isinstance(topic, str):
        return ""
    return " ".join(topic.split()).lower()


def normalize_topics(topics: Optional[Iterable]) -> List[str]:
    """Normalize a batch, dropping empties and repeats (first occurrence wins)."""
    seen = []
    for topic in topics or []:
        name = normalize_topic(topic)
        if name and name not in seen:
            seen.append(name)
    return seen


def list_weak_skills(db: Session, user_id: int) -> List[WeakSkillRecord]:
    """All of a user's weak skills, highest count first, ties by name."""
    rows = (
        db.query(WeakSkillMemory)
        .filter(WeakSkillMemory.user_id == user_id)
        .order_by(WeakSkillMemory.weakness_count.desc(), WeakSkillMemory.skill_name.asc())
        .all()
    )
    return [WeakSkillRecord.model_validate(row) for row in rows]


def _safe_list(db: Session, user_id: int) -> List[WeakSkillRecord]:
    try:
        return list_weak_skills(db, user_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to load weak skills for user_id={user_id}: {e}", exc_info=True)
        return []


def update_weak_skills(db: Session, user_id: int, topics: Iterable) -> List[WeakSkillRecord]:
    """
    Record one evaluation's weak topics for a user.

    Existing rows are incremented by one and re-stamped; new topics start at
    one. The batch commits as a unit. On failure the batch is rolled back and
    the pre-update state is returned.

    Args:
        db: Database session
        user_id: Owner of the memory
        topics: Raw weak topics from one evaluation

    Returns:
        All of the user's weak skills, weakest first
    """
    names = normalize_topics(topics)
    if not names:
        return _safe_list(db, user_id)

    now = datetime.utcnow()
    try:
        for name in names:
            row = db.query(WeakSkillMemory).filter(
                WeakSkillMemory.user_id == user_id,
                WeakSkillMemory.skill_name == name,
            ).first()
            if row:
                row.weakness_count = (row.weakness_count or 0) + 1
                row.last_occurred_at = now
            else:
                db.add(WeakSkillMemory(
                    user_id=user_id,
                    skill_name=name,
                    weakness_count=1,
                    last_occurred_at=now,
                ))
        db.commit()
        logger.info(f"Weak skills updated: user_id={user_id}, topics={names}")
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Weak skill update failed for user_id={user_id}, rolled back: {e}", exc_info=True)

    return _safe_list(db, user_id)


def get_top_weak_skills(db: Session, user_id: int, limit: int = TOP_WEAK_SKILLS_LIMIT) -> List[str]:
    """Names of the user's most frequent weak skills. Empty on failure."""
    try:
        limit = max(0, int(limit))
    except (TypeError, ValueError, OverflowError):
        logger.warning(f"Invalid weak skill limit {limit!r}, using {TOP_WEAK_SKILLS_LIMIT}")
        limit = TOP_WEAK_SKILLS_LIMIT

    try:
        rows = (
            db.query(WeakSkillMemory.skill_name)
            .filter(WeakSkillMemory.user_id == user_id)
            .order_by(WeakSkillMemory.weakness_count.desc(), WeakSkillMemory.skill_name.asc())
            .limit(limit)
            .all()
        )
        return [name for (name,) in rows]
    except SQLAlchemyError as e:
        logger.error(f"Failed to load top weak skills for user_id={user_id}: {e}", exc_info=True)
        return []


def count_weak_skills(db: Session, user_id: int) -> int:
    return db.query(WeakSkillMemory).filter(WeakSkillMemory.user_id == user_id).count()


def process_memory_update(db: Session, user_id: int, weak_topics: Optional[Iterable]) -> MemoryUpdateResult:
    """Update memory with one evaluation's topics and report the new top list."""
    try:
        if normalize_topics(weak_topics):
            updated = update_weak_skills(db, user_id, weak_topics)
        else:
            updated = _safe_list(db, user_id)
        return MemoryUpdateResult(
            updated_weak_skills=updated,
            top_weak_skills=get_top_weak_skills(db, user_id),
        )
    except Exception as e:
        logger.error(f"Memory update failed for user_id={user_id}: {e}", exc_info=True)
        return MemoryUpdateResult()
