"""
Tests for evaluation output validation.
"""
import json

import pytest

from interview_coach.schemas.evaluation import default_score_record
from interview_coach.services.evaluation_validator import validate_evaluation_output


@pytest.fixture
def raw(valid_evaluation):
    """Serialize the valid evaluation with changes; a value of ... drops the field."""
    def _raw(**changes):
        payload = dict(valid_evaluation)
        for key, value in changes.items():
            if value is ...:
                payload.pop(key)
            else:
                payload[key] = value
        return json.dumps(payload)
    return _raw


def test_valid_output(raw):
    outcome = validate_evaluation_output(raw())
    assert outcome.valid is True
    assert outcome.defects == []
    assert outcome.record.communication_score == 64.5


def test_code_fence_is_stripped(raw):
    outcome = validate_evaluation_output(f"```json\n{raw()}\n```")
    assert outcome.valid is True


def test_scores_are_rounded_to_two_decimals(raw):
    outcome = validate_evaluation_output(raw(technical_score=71.23456))
    assert outcome.record.technical_score == 71.23


def test_missing_feedback_is_one_defect(raw):
    outcome = validate_evaluation_output(raw(feedback=...))
    assert outcome.valid is False
    assert len(outcome.defects) == 1
    assert outcome.defects[0].startswith("feedback:")


def test_out_of_range_and_wrong_types(raw):
    outcome = validate_evaluation_output(raw(depth_score=120, logic_score="80", confidence_score=True))
    assert outcome.valid is False
    fields = sorted(defect.split(":")[0] for defect in outcome.defects)
    assert fields == ["confidence_score", "depth_score", "logic_score"]


def test_extra_field_is_a_defect(raw):
    outcome = validate_evaluation_output(raw(mood="happy"))
    assert outcome.valid is False
    assert outcome.defects[0].startswith("mood:")


def test_bad_recommendation_and_blank_text(raw):
    outcome = validate_evaluation_output(raw(difficulty_recommendation="skip", improvement_tip="  "))
    fields = sorted(defect.split(":")[0] for defect in outcome.defects)
    assert fields == ["difficulty_recommendation", "improvement_tip"]


def test_unparseable_output():
    outcome = validate_evaluation_output("Sure! Here is my evaluation: great answer")
    assert outcome.valid is False
    assert len(outcome.defects) == 1
    assert outcome.defects[0].startswith("response:")


def test_non_object_json():
    outcome = validate_evaluation_output("[1, 2, 3]")
    assert outcome.valid is False
    assert outcome.defects == ["response: expected a JSON object, got list"]


def test_deeply_nested_json_is_a_response_defect():
    nested = "[" * 100000 + "]" * 100000
    outcome = validate_evaluation_output(nested)
    assert outcome.valid is False
    assert len(outcome.defects) == 1
    assert outcome.defects[0].startswith("response:")


def test_non_string_input_never_raises():
    outcome = validate_evaluation_output(None)
    assert outcome.valid is False


def test_default_record_is_zeroed():
    record = default_score_record()
    assert record.technical_score == 0
    assert record.difficulty_recommendation == "maintain"
    assert record.weak_topics == []
    assert record.feedback
