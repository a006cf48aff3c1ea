"""
Difficulty state machine: easy <-> medium <-> hard, one step at a time.
"""
from interview_coach.core.constants import (
    DIFFICULTY_LEVELS,
    DIFFICULTY_RECOMMENDATIONS,
    DEFAULT_DIFFICULTY,
    DEFAULT_RECOMMENDATION,
)

# current difficulty -> recommendation -> next difficulty
TRANSITION_TABLE = {
    "easy": {"increase": "medium", "maintain": "easy", "decrease": "easy"},
    "medium": {"increase": "hard", "maintain": "medium", "decrease": "easy"},
    "hard": {"increase": "hard", "maintain": "hard", "decrease": "medium"},
}


def normalize_difficulty(value) -> str:
    return value if value in DIFFICULTY_LEVELS else DEFAULT_DIFFICULTY


def next_difficulty(current, recommendation) -> str:
    """
    Next difficulty for a recommendation.

    Unknown current levels are treated as medium and unknown recommendations
    as maintain.
    """
    current = normalize_difficulty(current)
    if recommendation not in DIFFICULTY_RECOMMENDATIONS:
        recommendation = DEFAULT_RECOMMENDATION
    return TRANSITION_TABLE[current][recommendation]
