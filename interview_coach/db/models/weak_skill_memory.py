"""
Weak skill memory model for recurring per-user weaknesses.
"""
from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint, Index
from interview_coach.db.base import Base


class WeakSkillMemory(Base):
    __tablename__ = "weak_skill_memory"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    skill_name = Column(String, nullable=False)  # Normalized: trimmed, lowercased, single-spaced
    weakness_count = Column(Integer, nullable=False, default=1)
    last_occurred_at = Column(DateTime(timezone=True), nullable=False, default=datetime.utcnow)

    __table_args__ = (
        UniqueConstraint('user_id', 'skill_name', name='uq_user_skill'),
        Index('idx_user_weakness', 'user_id', 'weakness_count'),
    )
