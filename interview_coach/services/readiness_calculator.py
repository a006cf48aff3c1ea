"""
Interview readiness score.

readiness = overall * 0.6 - min(weak_skills * 1.5, 20) + difficulty bonus + consistency bonus,
clamped to [0, 100] and rounded to 2 decimals.
"""
import math
from dataclasses import dataclass

from interview_coach.core.constants import DIFFICULTY_LEVELS

BASE_SCORE_WEIGHT = 0.6
WEAK_SKILL_PENALTY_PER = 1.5
MAX_WEAK_SKILL_PENALTY = 20.0

DIFFICULTY_BONUS = {
    "easy": 0.0,
    "medium": 5.0,
    "hard": 10.0,
}

# (min sessions, bonus), highest tier first
CONSISTENCY_TIERS = [
    (10, 8.0),
    (5, 5.0),
]


@dataclass
class ReadinessParams:
    overall_score: float = 0.0
    technical_average: float = 0.0
    communication_average: float = 0.0
    confidence_average: float = 0.0
    logic_average: float = 0.0
    depth_average: float = 0.0
    weak_skill_count: int = 0
    current_difficulty: str = "easy"
    total_sessions: int = 0


def _finite_or_zero(value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    value = float(value)
    return 0.0 if math.isnan(value) else value


def _count(value) -> int:
    value = _finite_or_zero(value)
    if math.isinf(value) or value < 0:
        return 0
    return int(math.floor(value))


def _clamp(value: float) -> float:
    return min(100.0, max(0.0, value))


def consistency_bonus(total_sessions: int) -> float:
    for min_sessions, bonus in CONSISTENCY_TIERS:
        if total_sessions >= min_sessions:
            return bonus
    return 0.0


def calculate_readiness(params: ReadinessParams) -> float:
    """Pure and never raises; malformed inputs count as zero, unknown difficulty as easy."""
    base = _clamp(_finite_or_zero(params.overall_score)) * BASE_SCORE_WEIGHT
    penalty = min(_count(params.weak_skill_count) * WEAK_SKILL_PENALTY_PER, MAX_WEAK_SKILL_PENALTY)
    difficulty = params.current_difficulty if params.current_difficulty in DIFFICULTY_LEVELS else "easy"
    bonus = DIFFICULTY_BONUS[difficulty] + consistency_bonus(_count(params.total_sessions))
    return round(_clamp(base - penalty + bonus), 2)
