"""
Deterministic mock provider for development, tests and offline use.
"""
import hashlib
import json
from typing import Optional

from interview_coach.llm.provider import LLMProvider, LLMResponse


class MockProvider(LLMProvider):
    """Returns schema-valid evaluation JSON derived from a hash of the prompt."""

    name = "mock"

    def complete(
        self,
        prompt: str,
        model: Optional[str] = None,
        temperature: float = 0.2,
        max_tokens: Optional[int] = None,
        **kwargs
    ) -> LLMResponse:
        digest = hashlib.md5(prompt.encode("utf-8")).digest()
        base_score = 55 + digest[0] % 30

        def score(index: int) -> int:
            return max(0, min(100, base_score + digest[index] % 21 - 10))

        evaluation = {
            "technical_score": score(1),
            "communication_score": score(2),
            "confidence_score": score(3),
            "logic_score": score(4),
            "depth_score": score(5),
            "difficulty_recommendation": ("increase", "maintain", "decrease")[digest[6] % 3],
            "weak_topics": ["Error handling", "Edge cases"],
            "strengths": ["Core concept understanding", "Clear structure"],
            "feedback": (
                "The answer shows a solid grasp of the core concept but skips edge cases "
                "and concrete examples. Structure the explanation around the main trade-offs."
            ),
            "ideal_answer": (
                "A strong answer defines the concept, walks through two or three edge cases, "
                "compares alternatives and ties the choice to real-world constraints."
            ),
            "improvement_tip": "For every concept you explain, add one edge case and one trade-off.",
        }
        return LLMResponse(
            content=json.dumps(evaluation),
            tokens_in=0,
            tokens_out=0,
            model=model or "mock-evaluator",
        )
