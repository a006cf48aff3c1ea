"""
ImprovementPlan model for storing generated 4-week roadmaps.
"""
from datetime import datetime

from sqlalchemy import Column, Integer, DateTime, ForeignKey, Index, JSON
from interview_coach.db.base import Base


class ImprovementPlan(Base):
    """
    Append-only snapshot of a generated roadmap.

    The plan column holds the serialized week1..week4 task lists as they were
    at generation time.
    """
    __tablename__ = "improvement_plans"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    plan = Column(JSON, nullable=False)
    generated_at = Column(DateTime(timezone=True), nullable=False, default=datetime.utcnow, index=True)

    __table_args__ = (
        Index('idx_plan_user_generated', 'user_id', 'generated_at'),
    )

    def __repr__(self):
        return f"<ImprovementPlan(id={self.id}, user_id={self.user_id})>"
