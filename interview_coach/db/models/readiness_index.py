from datetime import datetime

from sqlalchemy import Column, Integer, ForeignKey, DateTime, Float
from interview_coach.db.base import Base

class ReadinessIndex(Base):
    __tablename__ = "readiness_index"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True, index=True)
    readiness_score = Column(Float, nullable=False, default=0.0)
    calculated_at = Column(DateTime(timezone=True), nullable=False, default=datetime.utcnow)
