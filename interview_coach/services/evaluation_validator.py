"""
Validation of raw scoring-backend output.
"""
import json
import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from pydantic import ValidationError

from interview_coach.schemas.evaluation import ScoreRecord

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"^```(?:json|JSON)?\s*\n?(.*?)\n?\s*```$", re.DOTALL)


@dataclass
class ValidationOutcome:
    valid: bool
    record: Optional[ScoreRecord] = None
    defects: List[str] = field(default_factory=list)


def strip_code_fence(raw_text: str) -> str:
    """Remove one surrounding markdown code fence, if present."""
    text = raw_text.strip()
    match = _CODE_FENCE.match(text)
    if match:
        return match.group(1).strip()
    return text


def _format_errors(error: ValidationError) -> List[str]:
    defects = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ())) or "response"
        defects.append(f"{location}: {item.get('msg', 'invalid value')}")
    return defects


def validate_evaluation_output(raw_text) -> ValidationOutcome:
    """
    Parse and validate backend output against the ScoreRecord contract.

    Never raises. Every defect is reported as "<field>: <message>"; parse
    failures are reported against "response".
    """
    if not isinstance(raw_text, str) or not raw_text.strip():
        return ValidationOutcome(valid=False, defects=["response: empty response"])

    try:
        payload = json.loads(strip_code_fence(raw_text))
    except (json.JSONDecodeError, ValueError, RecursionError) as e:
        return ValidationOutcome(valid=False, defects=[f"response: invalid JSON ({e})"])

    if not isinstance(payload, dict):
        return ValidationOutcome(
            valid=False,
            defects=[f"response: expected a JSON object, got {type(payload).__name__}"],
        )

    try:
        record = ScoreRecord.model_validate(payload)
    except ValidationError as e:
        defects = _format_errors(e)
        logger.warning(f"Evaluation output rejected with {len(defects)} defect(s): {defects}")
        return ValidationOutcome(valid=False, defects=defects)
    except Exception as e:
        logger.error(f"Unexpected validation failure: {e}", exc_info=True)
        return ValidationOutcome(valid=False, defects=[f"response: {type(e).__name__}: {e}"])

    return ValidationOutcome(valid=True, record=record)
