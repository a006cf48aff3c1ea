from sqlalchemy import Column, Integer, String, ForeignKey, Text, DateTime
from sqlalchemy.sql import func
from interview_coach.db.base import Base

class Question(Base):
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(Integer, ForeignKey("interview_sessions.id"), nullable=False, index=True)
    text = Column(Text, nullable=False)
    difficulty = Column(String, nullable=False)
    category = Column(String, nullable=False, default="general")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
