"""
ScoreBreakdown model: per-session aggregate of the five score dimensions.

One row per session, recomputed from every response of the session.
"""
from sqlalchemy import Column, Integer, ForeignKey, DateTime, Float
from sqlalchemy.sql import func
from interview_coach.db.base import Base


class ScoreBreakdown(Base):
    __tablename__ = "score_breakdowns"

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(Integer, ForeignKey("interview_sessions.id"), nullable=False, unique=True, index=True)

    overall_score = Column(Float, nullable=False, default=0.0)
    technical_average = Column(Float, nullable=False, default=0.0)
    communication_average = Column(Float, nullable=False, default=0.0)
    confidence_average = Column(Float, nullable=False, default=0.0)
    logic_average = Column(Float, nullable=False, default=0.0)
    depth_average = Column(Float, nullable=False, default=0.0)
    response_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
