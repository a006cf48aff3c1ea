"""
Ollama provider for local, offline scoring.

Talks to Ollama's OpenAI-compatible endpoint through the OpenAI SDK.
"""
from typing import Optional

from interview_coach.core.config import OLLAMA_BASE_URL, OLLAMA_MODEL
from interview_coach.llm.openai_provider import OpenAIProvider


class OllamaProvider(OpenAIProvider):
    """Local Ollama server; the API key is ignored by Ollama but required by the SDK."""

    name = "ollama"

    def __init__(
        self,
        base_url: Optional[str] = None,
        default_model: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        super().__init__(
            api_key="ollama",
            base_url=base_url or OLLAMA_BASE_URL,
            default_model=default_model or OLLAMA_MODEL,
            timeout=timeout,
        )
