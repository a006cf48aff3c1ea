"""
Provider router: selects the scoring backend from configuration.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from interview_coach.core import config
from interview_coach.llm.provider import LLMProvider
from interview_coach.llm.mock_provider import MockProvider
from interview_coach.llm.openai_provider import OpenAIProvider
from interview_coach.llm.ollama_provider import OllamaProvider

logger = logging.getLogger(__name__)


@dataclass
class ModelCallConfig:
    """Per-call backend settings. Unset values fall back to environment config."""
    provider: str = config.LLM_PROVIDER
    model: Optional[str] = None
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    temperature: float = config.LLM_TEMPERATURE
    max_tokens: int = config.LLM_MAX_TOKENS
    timeout: float = config.LLM_TIMEOUT_SECONDS


def _build_mock(call_config: ModelCallConfig) -> LLMProvider:
    return MockProvider()


def _build_openai(call_config: ModelCallConfig) -> LLMProvider:
    return OpenAIProvider(
        api_key=call_config.api_key,
        base_url=call_config.base_url,
        default_model=call_config.model,
        timeout=call_config.timeout,
    )


def _build_ollama(call_config: ModelCallConfig) -> LLMProvider:
    return OllamaProvider(
        base_url=call_config.base_url,
        default_model=call_config.model,
        timeout=call_config.timeout,
    )


# Provider name -> factory
PROVIDER_FACTORIES: Dict[str, Callable[[ModelCallConfig], LLMProvider]] = {
    "mock": _build_mock,
    "openai": _build_openai,
    "ollama": _build_ollama,
}


def available_providers() -> list[str]:
    """Names of the registered scoring backends."""
    return sorted(PROVIDER_FACTORIES)


def get_provider(call_config: ModelCallConfig) -> LLMProvider:
    """
    Build the provider named by the config.

    Raises:
        ValueError: Unknown provider name or missing credentials
    """
    name = (call_config.provider or "").strip().lower()
    factory = PROVIDER_FACTORIES.get(name)
    if factory is None:
        raise ValueError(
            f"Unknown scoring provider '{call_config.provider}'. "
            f"Available: {', '.join(available_providers())}"
        )
    return factory(call_config)
