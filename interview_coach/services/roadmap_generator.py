"""
4-week improvement plan generator.

Pure rule-based logic: the same inputs always give the same plan.
"""
from dataclasses import dataclass, field
from typing import Dict, List

from interview_coach.core.constants import DIFFICULTY_LEVELS
from interview_coach.schemas.progress import Roadmap, WeekTask

LOW_SCORE_THRESHOLD = 65

# Dimension label -> RoadmapParams attribute
ROADMAP_DIMENSIONS = [
    ("technical skills", "technical_average"),
    ("communication", "communication_average"),
    ("logical reasoning", "logic_average"),
]

PRACTICE_INTENSITY: Dict[str, Dict[str, str]] = {
    "easy": {"daily_problems": "2-3 problems/day", "mock_frequency": "1 mock interview/week"},
    "medium": {"daily_problems": "3-5 problems/day", "mock_frequency": "2 mock interviews/week"},
    "hard": {"daily_problems": "4-6 problems/day", "mock_frequency": "3 mock interviews/week"},
}


@dataclass
class RoadmapParams:
    weak_skills: List[str] = field(default_factory=list)
    technical_average: float = 0.0
    communication_average: float = 0.0
    logic_average: float = 0.0
    difficulty: str = "easy"


def _score(value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value != value:
        return 0.0
    return float(value)


def find_low_dimensions(params: RoadmapParams) -> List[str]:
    """Dimensions averaging below the threshold, lowest first (ties keep declaration order)."""
    scored = [(_score(getattr(params, attr, 0.0)), index, label) for index, (label, attr) in enumerate(ROADMAP_DIMENSIONS)]
    return [label for value, _, label in sorted(scored) if value < LOW_SCORE_THRESHOLD]


def _task(topic: str, action: str, frequency: str, priority: str) -> WeekTask:
    return WeekTask(topic=topic, action=action, frequency=frequency, priority=priority)


def generate_roadmap(params: RoadmapParams) -> Roadmap:
    """
    Build the plan.

    Week 1 targets the top two weak skills and the weakest dimension, week 2
    adds timed practice and the remaining gaps, week 3 is mock interviews and
    behavioral prep, week 4 is stress simulation and a final assessment.
    Practice volume scales with difficulty.
    """
    weak_skills = [skill for skill in (params.weak_skills or []) if isinstance(skill, str) and skill.strip()]
    difficulty = params.difficulty if params.difficulty in DIFFICULTY_LEVELS else "easy"
    intensity = PRACTICE_INTENSITY[difficulty]
    daily = intensity["daily_problems"]
    mocks = intensity["mock_frequency"]

    low_dimensions = find_low_dimensions(params)
    top_weak = weak_skills[:2]
    secondary_weak = weak_skills[2:5]

    week1: List[WeekTask] = []
    if top_weak:
        for skill in top_weak:
            week1.append(_task(
                skill,
                f'Study the fundamentals of "{skill}". Review core concepts, solve basic problems and build a cheat sheet.',
                daily,
                "high",
            ))
    else:
        week1.append(_task(
            "General Fundamentals",
            "Review data structures, algorithms and system design basics. Set up a revision schedule.",
            daily,
            "high",
        ))
    if low_dimensions:
        week1.append(_task(
            low_dimensions[0],
            f"Targeted practice for {low_dimensions[0]}. Focus on structured, clear explanations.",
            "30 min/day",
            "high",
        ))
    week1.append(_task(
        "Self-Assessment",
        "Take a diagnostic practice session to benchmark your current level.",
        "Once this week",
        "medium",
    ))

    week2: List[WeekTask] = [_task(
        "Timed Problem Solving",
        "Solve problems against a 25-minute timer. Work on speed and accuracy.",
        daily,
        "high",
    )]
    for dimension in low_dimensions[1:]:
        week2.append(_task(
            dimension,
            f"Intermediate practice for {dimension}. Work through medium-difficulty scenarios.",
            "45 min/day",
            "medium",
        ))
    for skill in secondary_weak:
        week2.append(_task(
            skill,
            f'Practice "{skill}" at medium difficulty. Attempt 2-3 problems and review the solutions.',
            "Every other day",
            "medium",
        ))
    week2.append(_task(
        "Mock Interview",
        "Complete a timed mock interview focused on the Week 1 topics.",
        mocks,
        "high",
    ))

    week3: List[WeekTask] = [
        _task(
            "Full Mock Interviews",
            "Simulate complete interview rounds with both technical and behavioral questions.",
            mocks,
            "high",
        ),
        _task(
            "Behavioral Questions",
            "Practice STAR-method answers. Prepare stories about leadership, conflict and failure.",
            "2-3 stories/day",
            "high",
        ),
    ]
    if top_weak:
        week3.append(_task(
            top_weak[0],
            f'Advanced practice for "{top_weak[0]}". Attempt hard problems and edge cases.',
            daily,
            "medium",
        ))
    week3.append(_task(
        "Communication Drill",
        "Explain solutions out loud. Record yourself and review for clarity and structure.",
        "1 session/day",
        "medium",
    ))

    review_scope = ", ".join(weak_skills[:4]) if weak_skills else "general topics"
    week4: List[WeekTask] = [
        _task(
            "Stress Interview Simulation",
            'Run sessions in "stress" mode with tight time limits.',
            mocks,
            "high",
        ),
        _task(
            "Hard-Difficulty Problems",
            "Attempt hard questions across all categories, with emphasis on system design and complex algorithms.",
            daily,
            "high",
        ),
        _task(
            "Weakness Review",
            f"Review every weak area: {review_scope}. Make sure the gaps are closed.",
            "Daily review sessions",
            "high",
        ),
        _task(
            "Final Assessment",
            "Take a comprehensive mock interview across all categories and compare with the Week 1 benchmark.",
            "End of week",
            "high",
        ),
    ]

    return Roadmap(week1=week1, week2=week2, week3=week3, week4=week4)


def default_roadmap() -> Roadmap:
    """Plan returned when the user's data cannot be read."""
    return generate_roadmap(RoadmapParams(
        weak_skills=[],
        technical_average=50.0,
        communication_average=50.0,
        logic_average=50.0,
        difficulty="easy",
    ))
