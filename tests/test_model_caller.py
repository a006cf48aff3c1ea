"""
Tests for the model caller boundary and providers.
"""
import json

import pytest

from interview_coach.llm import openai_provider
from interview_coach.llm.caller import call_model
from interview_coach.llm.mock_provider import MockProvider
from interview_coach.llm.router import ModelCallConfig, available_providers
from interview_coach.schemas.evaluation import ScoreRecord


def test_mock_provider_is_deterministic_and_schema_valid():
    first = MockProvider().complete("same prompt")
    second = MockProvider().complete("same prompt")
    assert first.content == second.content

    record = ScoreRecord.model_validate(json.loads(first.content))
    assert 0 <= record.technical_score <= 100


def test_call_model_with_mock_provider():
    result = call_model("Evaluate this", ModelCallConfig(provider="mock"))
    assert result.success is True
    assert result.error is None
    assert result.provider == "mock"
    assert json.loads(result.content)["difficulty_recommendation"] in ("increase", "maintain", "decrease")


def test_unknown_provider_is_a_failure_not_an_exception():
    result = call_model("Evaluate this", ModelCallConfig(provider="nope"))
    assert result.success is False
    assert "Unknown scoring provider" in result.error


def test_missing_openai_key_is_a_failure(monkeypatch):
    monkeypatch.setattr(openai_provider, "OPENAI_API_KEY", None)
    result = call_model("Evaluate this", ModelCallConfig(provider="openai"))
    assert result.success is False
    assert "OPENAI_API_KEY" in result.error


def test_provider_exception_is_normalized(fake_backend):
    provider, config = fake_backend
    provider.error = TimeoutError("timed out")

    result = call_model("Evaluate this", config)

    assert result.success is False
    assert "TimeoutError" in result.error


def test_empty_response_is_a_failure(fake_backend):
    provider, config = fake_backend
    provider.content = "   "

    result = call_model("Evaluate this", config)

    assert result.success is False
    assert "empty response" in result.error


def test_usage_is_reported(fake_backend):
    provider, config = fake_backend
    result = call_model("Evaluate this", config)
    assert result.success is True
    assert result.usage == {"prompt_tokens": 120, "completion_tokens": 80, "total_tokens": 200}
    assert provider.prompts == ["Evaluate this"]


@pytest.mark.parametrize("name", ["mock", "openai", "ollama"])
def test_registered_providers(name):
    assert name in available_providers()
