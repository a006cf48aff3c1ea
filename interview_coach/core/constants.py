"""
Engine-wide enumerations.

Single source of truth for difficulty levels, recommendations, interview modes
and company presets.
"""
from typing import Dict, List

DIFFICULTY_LEVELS: List[str] = ["easy", "medium", "hard"]
DEFAULT_DIFFICULTY = "medium"

DIFFICULTY_RECOMMENDATIONS: List[str] = ["increase", "decrease", "maintain"]
DEFAULT_RECOMMENDATION = "maintain"

INTERVIEW_MODES: List[str] = ["normal", "stress", "company"]
DEFAULT_MODE = "normal"

COMPANY_PRESETS: List[str] = ["google", "amazon", "meta", "startup", "consulting", "generic"]
DEFAULT_COMPANY_PRESET = "generic"

# Score dimension -> Response column / ScoreRecord field
SCORE_FIELDS: Dict[str, str] = {
    "technical": "technical_score",
    "communication": "communication_score",
    "confidence": "confidence_score",
    "logic": "logic_score",
    "depth": "depth_score",
}
