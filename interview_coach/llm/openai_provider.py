"""
OpenAI provider implementation.
"""
import logging
from typing import Optional
from openai import OpenAI, APIError

from interview_coach.core.config import OPENAI_API_KEY, OPENAI_MODEL, LLM_TIMEOUT_SECONDS
from interview_coach.llm.provider import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are a strict interview evaluator. Reply with a single JSON object only."


class OpenAIProvider(LLMProvider):
    """OpenAI provider using official OpenAI SDK."""

    name = "openai"

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        default_model: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize OpenAI client."""
        self.api_key = api_key or OPENAI_API_KEY
        if not self.api_key:
            raise ValueError("OPENAI_API_KEY not configured")
        self.default_model = default_model or OPENAI_MODEL
        self.client = OpenAI(
            api_key=self.api_key,
            base_url=base_url,
            timeout=timeout or LLM_TIMEOUT_SECONDS,
            max_retries=0,
        )
        logger.info(f"{self.name} provider initialized (model={self.default_model})")

    def complete(
        self,
        prompt: str,
        model: Optional[str] = None,
        temperature: float = 0.2,
        max_tokens: Optional[int] = None,
        **kwargs
    ) -> LLMResponse:
        """Generate a chat completion for the evaluation prompt."""
        target_model = model or self.default_model
        try:
            response = self.client.chat.completions.create(
                model=target_model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=temperature,
                max_tokens=max_tokens or 2048,
                **kwargs
            )
        except APIError as e:
            logger.error(f"{self.name} API error: {e}", exc_info=True)
            raise

        if not response.choices:
            raise ValueError(f"{self.name} returned no choices")

        content = response.choices[0].message.content or ""
        usage = response.usage
        return LLMResponse(
            content=content,
            tokens_in=usage.prompt_tokens if usage else 0,
            tokens_out=usage.completion_tokens if usage else 0,
            model=target_model,
            metadata={
                "finish_reason": response.choices[0].finish_reason,
            }
        )
