from datetime import datetime

from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Float, Index
from sqlalchemy.sql import func
from interview_coach.db.base import Base

class InterviewSession(Base):
    __tablename__ = "interview_sessions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    role = Column(String, nullable=False)
    category = Column(String, nullable=False, default="general")
    difficulty = Column(String, nullable=False, default="medium")  # easy / medium / hard
    mode = Column(String, nullable=False, default="normal")  # normal / stress / company
    company_preset = Column(String, nullable=True)
    average_score = Column(Float, nullable=False, default=0.0)
    started_at = Column(DateTime(timezone=True), default=datetime.utcnow, server_default=func.now(), nullable=False)
    completed_at = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index('idx_session_user_started', 'user_id', 'started_at'),
    )

    def __repr__(self):
        return f"<InterviewSession(id={self.id}, user_id={self.user_id}, difficulty={self.difficulty})>"
