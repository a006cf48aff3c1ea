"""
Response model: one scored answer to one question.

Rows are written once by the evaluation pipeline and never updated.
"""
from sqlalchemy import Column, Integer, String, ForeignKey, Text, DateTime, Float, Boolean, JSON
from sqlalchemy.sql import func
from interview_coach.db.base import Base

class Response(Base):
    __tablename__ = "responses"

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(Integer, ForeignKey("interview_sessions.id"), nullable=False, index=True)
    question_id = Column(Integer, ForeignKey("questions.id"), nullable=False, index=True)
    answer_text = Column(Text, nullable=False)

    technical_score = Column(Float, nullable=False, default=0.0)
    communication_score = Column(Float, nullable=False, default=0.0)
    confidence_score = Column(Float, nullable=False, default=0.0)
    logic_score = Column(Float, nullable=False, default=0.0)
    depth_score = Column(Float, nullable=False, default=0.0)

    difficulty_recommendation = Column(String, nullable=False, default="maintain")
    weak_topics = Column(JSON, nullable=False, default=list)
    strengths = Column(JSON, nullable=False, default=list)
    feedback = Column(Text)
    ideal_answer = Column(Text)
    improvement_tip = Column(Text)
    llm_output_valid = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
