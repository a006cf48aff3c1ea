"""
AI Run model for tracking scoring-backend calls.
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text, Boolean, Index
from sqlalchemy.sql import func
from interview_coach.db.base import Base


class AiRun(Base):
    __tablename__ = "ai_runs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    session_id = Column(Integer, ForeignKey("interview_sessions.id"), nullable=False, index=True)
    provider = Column(String, nullable=False)  # e.g., "mock", "openai", "ollama"
    model = Column(String, nullable=False, default="")
    tokens_in = Column(Integer, default=0)
    tokens_out = Column(Integer, default=0)
    status = Column(String, nullable=False, default="completed")  # "completed", "failed"
    llm_output_valid = Column(Boolean, nullable=False, default=False)
    error_message = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        Index('idx_run_user_created', 'user_id', 'created_at'),
    )
