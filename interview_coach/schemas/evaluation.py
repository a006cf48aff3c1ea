"""
Pydantic schemas for answer evaluation.
"""
from typing import Optional, List, Literal
from pydantic import BaseModel, Field, field_validator

from interview_coach.core.constants import SCORE_FIELDS


class ScoreRecord(BaseModel):
    """
    Validated evaluation of one answer.

    Mirrors the eleven-field JSON object the scoring backend is instructed to
    return. Unknown fields, out-of-range scores and wrong types are rejected.
    """
    technical_score: float = Field(..., ge=0, le=100, description="Technical correctness 0-100")
    communication_score: float = Field(..., ge=0, le=100, description="Clarity and structure 0-100")
    confidence_score: float = Field(..., ge=0, le=100, description="Assertiveness 0-100")
    logic_score: float = Field(..., ge=0, le=100, description="Reasoning quality 0-100")
    depth_score: float = Field(..., ge=0, le=100, description="Depth of knowledge 0-100")
    difficulty_recommendation: Literal["increase", "decrease", "maintain"] = Field(
        ..., description="Next difficulty recommendation"
    )
    weak_topics: List[str] = Field(..., description="Topics the candidate struggled with")
    strengths: List[str] = Field(..., description="Strengths demonstrated")
    feedback: str = Field(..., min_length=1, description="Actionable feedback")
    ideal_answer: str = Field(..., min_length=1, description="What a strong answer looks like")
    improvement_tip: str = Field(..., min_length=1, description="One concrete improvement tip")

    class Config:
        extra = "forbid"

    @field_validator(*SCORE_FIELDS.values(), mode="before")
    @classmethod
    def _require_number(cls, value):
        # bool is an int subclass; "80" must not sneak through lax coercion
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("must be a number")
        return value

    @field_validator(*SCORE_FIELDS.values())
    @classmethod
    def _round_score(cls, value: float) -> float:
        return round(float(value), 2)

    @field_validator("feedback", "ideal_answer", "improvement_tip")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


def default_score_record() -> ScoreRecord:
    """Safe record persisted when the backend output cannot be trusted."""
    return ScoreRecord(
        technical_score=0,
        communication_score=0,
        confidence_score=0,
        logic_score=0,
        depth_score=0,
        difficulty_recommendation="maintain",
        weak_topics=[],
        strengths=[],
        feedback="Evaluation could not be completed. Default scores applied.",
        ideal_answer="Not available for this answer.",
        improvement_tip="Try answering again with a structured, detailed response.",
    )


class EvaluationRequest(BaseModel):
    """Input for evaluating one answer. Field presence is the caller's job."""
    session_id: int = Field(..., description="Interview session ID")
    user_id: int = Field(..., description="Owner of the session")
    question_id: Optional[int] = Field(None, description="Existing question ID in this session")
    question_text: Optional[str] = Field(None, description="Question text (creates a question row when no ID)")
    user_answer: str = Field(..., description="Candidate's answer")
    role: str = Field(..., description="Target job role")
    category: str = Field(default="general", description="Question category")
    difficulty: str = Field(default="medium", description="easy | medium | hard")
    mode: str = Field(default="normal", description="normal | stress | company")
    company_preset: Optional[str] = Field(None, description="Company preset for company mode")


class AnswerSubmission(BaseModel):
    """HTTP body for submitting an answer to a session."""
    user_id: int = Field(..., description="Owner of the session")
    question_id: Optional[int] = Field(None, description="Existing question ID in this session")
    question_text: Optional[str] = Field(None, description="Question text")
    user_answer: str = Field(..., min_length=1, description="Candidate's answer")
    category: Optional[str] = Field(None, description="Overrides the session category")

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": 1,
                "question_text": "How would you design a rate limiter?",
                "user_answer": "I would use a token bucket per client...",
                "category": "system design"
            }
        }


class SessionAverages(BaseModel):
    """Recomputed per-session aggregate."""
    response_count: int = Field(default=0, description="Responses included")
    technical_average: float = Field(default=0.0)
    communication_average: float = Field(default=0.0)
    confidence_average: float = Field(default=0.0)
    logic_average: float = Field(default=0.0)
    depth_average: float = Field(default=0.0)
    overall_score: float = Field(default=0.0, description="Mean of the five averages")


class EvaluationOutput(BaseModel):
    """Result of the evaluation pipeline. Always well-formed."""
    success: bool = Field(..., description="False when nothing was persisted")
    response_id: Optional[int] = Field(None, description="Stored response ID")
    llm_output_valid: bool = Field(..., description="False when defaults were substituted")
    validation_errors: List[str] = Field(default_factory=list, description="Itemized defects")
    evaluation: ScoreRecord
    session_averages: SessionAverages = Field(default_factory=SessionAverages)
    next_difficulty: Optional[str] = Field(None, description="Difficulty after the adaptive step")
    top_weak_skills: List[str] = Field(default_factory=list, description="User's top weak skills")
    error: Optional[str] = Field(None, description="Pipeline error, if any")
