"""
Per-session score aggregation.
"""
from typing import Iterable, Mapping, Union

from interview_coach.core.constants import SCORE_FIELDS
from interview_coach.schemas.evaluation import SessionAverages


def _read(row: Union[Mapping, object], name: str) -> float:
    value = row.get(name) if isinstance(row, Mapping) else getattr(row, name, 0.0)
    return float(value or 0.0)


def calculate_session_averages(score_rows: Iterable) -> SessionAverages:
    """
    Average every score dimension over a session's responses.

    Accepts Response rows or mappings with the *_score keys. Each average is
    rounded to 2 decimals and the overall score is the mean of the five
    rounded averages. No rows gives all zeros.
    """
    rows = list(score_rows)
    if not rows:
        return SessionAverages()

    averages = {}
    for dimension, column in SCORE_FIELDS.items():
        total = sum(_read(row, column) for row in rows)
        averages[f"{dimension}_average"] = round(total / len(rows), 2)

    overall = round(sum(averages.values()) / len(averages), 2)
    return SessionAverages(response_count=len(rows), overall_score=overall, **averages)
