"""
Pydantic schemas for progression state: weak skills, difficulty, readiness,
roadmaps, badges and the coach dashboard.
"""
from typing import Optional, List, Literal
from datetime import datetime
from pydantic import BaseModel, Field


class WeakSkillRecord(BaseModel):
    """Schema for a weak skill memory row."""
    id: int
    user_id: int
    skill_name: str
    weakness_count: int
    last_occurred_at: datetime

    class Config:
        from_attributes = True


class MemoryUpdateRequest(BaseModel):
    weak_topics: List[str] = Field(default_factory=list, description="Raw weak topics from one evaluation")


class MemoryUpdateResult(BaseModel):
    updated_weak_skills: List[WeakSkillRecord] = Field(default_factory=list, description="All rows, weakest first")
    top_weak_skills: List[str] = Field(default_factory=list, description="Top weak skill names")


class SelectedQuestion(BaseModel):
    """Question chosen for the next turn."""
    id: int
    text: str
    difficulty: str
    category: str

    class Config:
        from_attributes = True


class AdaptiveStepRequest(BaseModel):
    user_id: int
    current_difficulty: str = Field(..., description="easy | medium | hard")
    evaluation_recommendation: str = Field(..., description="increase | decrease | maintain")
    weak_topics: List[str] = Field(default_factory=list)


class AdaptiveStepResult(BaseModel):
    next_difficulty: str
    next_question: Optional[SelectedQuestion] = None


class ReadinessResponse(BaseModel):
    user_id: int
    readiness_score: float = Field(..., ge=0, le=100)


class WeekTask(BaseModel):
    """A single action item within a roadmap week."""
    topic: str
    action: str
    frequency: str
    priority: Literal["high", "medium", "low"]


class Roadmap(BaseModel):
    """Structured 4-week improvement plan."""
    week1: List[WeekTask]
    week2: List[WeekTask]
    week3: List[WeekTask]
    week4: List[WeekTask]


class RoadmapSnapshot(BaseModel):
    """Stored ImprovementPlan row."""
    id: int
    generated_at: datetime
    plan: Roadmap


class BadgeRecord(BaseModel):
    badge_name: str
    description: str
    awarded_at: datetime
    is_new: bool = False


class StartSessionRequest(BaseModel):
    user_id: int
    role: str = Field(..., min_length=1, description="Target job role")
    category: str = Field(default="general")
    difficulty: str = Field(default="medium", description="easy | medium | hard")
    mode: str = Field(default="normal", description="normal | stress | company")
    company_preset: Optional[str] = Field(None, description="google | amazon | meta | startup | consulting | generic")

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": 1,
                "role": "Senior Backend Engineer",
                "category": "system design",
                "difficulty": "medium",
                "mode": "company",
                "company_preset": "amazon"
            }
        }


class SessionResponse(BaseModel):
    id: int
    user_id: int
    role: str
    category: str
    difficulty: str
    mode: str
    company_preset: Optional[str] = None
    average_score: float
    started_at: datetime
    completed_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CompleteSessionRequest(BaseModel):
    user_id: int


class SessionCompletionResult(BaseModel):
    success: bool
    session_id: int
    overall_score: float = 0.0
    readiness_score: float = 0.0
    badges: List[BadgeRecord] = Field(default_factory=list)
    roadmap: Optional[Roadmap] = None
    error: Optional[str] = None


class ProgressPoint(BaseModel):
    session: int = Field(..., description="1-based session ordinal")
    score: float


class CoachDashboard(BaseModel):
    readiness_score: float = 0.0
    weak_skills: List[str] = Field(default_factory=list)
    roadmap: Optional[Roadmap] = None
    badges: List[BadgeRecord] = Field(default_factory=list)
    progress: List[ProgressPoint] = Field(default_factory=list)
    difficulty: str = "easy"
    total_sessions: int = 0
