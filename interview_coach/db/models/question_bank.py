from sqlalchemy import Column, Integer, String, Text, Index
from interview_coach.db.base import Base


class QuestionBankItem(Base):
    """Shared question catalogue used when picking the next question."""
    __tablename__ = "question_bank"

    id = Column(Integer, primary_key=True, index=True)
    text = Column(Text, nullable=False)
    difficulty = Column(String, nullable=False, index=True)
    category = Column(String, nullable=False, default="general", index=True)

    __table_args__ = (
        Index('idx_bank_difficulty_category', 'difficulty', 'category'),
    )
