"""
Model caller: the single boundary between the engine and scoring backends.

Every backend failure (unknown provider, missing key, network, auth, timeout,
empty or malformed response) is converted into a ModelCallResult here.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from interview_coach.llm.router import ModelCallConfig, get_provider

logger = logging.getLogger(__name__)


@dataclass
class ModelCallResult:
    """Uniform outcome of one backend call."""
    success: bool
    content: str = ""
    error: Optional[str] = None
    provider: str = ""
    model: str = ""
    usage: Dict[str, int] = field(default_factory=dict)


def call_model(prompt: str, call_config: Optional[ModelCallConfig] = None) -> ModelCallResult:
    """
    Send the prompt to the configured backend and return its raw text.

    Never raises.
    """
    call_config = call_config or ModelCallConfig()
    provider_name = call_config.provider

    try:
        provider = get_provider(call_config)
    except ValueError as e:
        logger.warning(f"Scoring provider unavailable: {e}")
        return ModelCallResult(success=False, error=str(e), provider=provider_name)
    except Exception as e:
        logger.error(f"Failed to initialize provider '{provider_name}': {e}", exc_info=True)
        return ModelCallResult(
            success=False,
            error=f"Provider '{provider_name}' initialization failed: {type(e).__name__}: {e}",
            provider=provider_name,
        )

    try:
        response = provider.complete(
            prompt,
            model=call_config.model,
            temperature=call_config.temperature,
            max_tokens=call_config.max_tokens,
        )
    except Exception as e:
        logger.error(f"Scoring call failed (provider={provider_name}): {type(e).__name__}: {e}")
        return ModelCallResult(
            success=False,
            error=f"LLM call failed: {type(e).__name__}: {e}",
            provider=provider_name,
            model=call_config.model or "",
        )

    if not response.content or not response.content.strip():
        logger.warning(f"Scoring provider '{provider_name}' returned an empty response")
        return ModelCallResult(
            success=False,
            error=f"{provider_name} returned empty response",
            provider=provider_name,
            model=response.model,
        )

    logger.info(
        f"Scoring call completed: provider={provider_name}, model={response.model}, "
        f"tokens={response.tokens_in + response.tokens_out}"
    )
    return ModelCallResult(
        success=True,
        content=response.content,
        provider=provider_name,
        model=response.model,
        usage={
            "prompt_tokens": response.tokens_in,
            "completion_tokens": response.tokens_out,
            "total_tokens": response.tokens_in + response.tokens_out,
        },
    )
