"""
Database models module.

This module imports all database models to ensure they are registered with SQLAlchemy's Base.metadata
before table creation.

All models must be imported here to be included in database migrations and table creation.
"""
from interview_coach.db.models.user import User
from interview_coach.db.models.interview_session import InterviewSession
from interview_coach.db.models.question import Question
from interview_coach.db.models.response import Response
from interview_coach.db.models.score_breakdown import ScoreBreakdown
from interview_coach.db.models.weak_skill_memory import WeakSkillMemory
from interview_coach.db.models.readiness_index import ReadinessIndex
from interview_coach.db.models.improvement_plan import ImprovementPlan
from interview_coach.db.models.badge import Badge
from interview_coach.db.models.question_bank import QuestionBankItem
from interview_coach.db.models.ai_run import AiRun

# Explicitly export all models for clarity
__all__ = [
    "User",
    "InterviewSession",
    "Question",
    "Response",
    "ScoreBreakdown",
    "WeakSkillMemory",
    "ReadinessIndex",
    "ImprovementPlan",
    "Badge",
    "QuestionBankItem",
    "AiRun",
]
