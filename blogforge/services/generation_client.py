# blogforge/services/generation_client.py

import logging
from typing import Optional, Protocol

from openai import APIConnectionError, APIError, OpenAI, RateLimitError

from blogforge.core.config import OPENAI_API_KEY, OPENAI_MODEL, OPENAI_TEMPERATURE, OPENAI_TIMEOUT
from blogforge.services.errors import GenerationError
from blogforge.utils.cost_calculator import calculate_openai_cost

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    """Anything that turns a system + user prompt into raw text."""

    def generate(self, system_prompt: str, user_prompt: str) -> str:
        ...


class OpenAIGenerator:
    """Chat-completions adapter.

    Failures are raised as GenerationError and never retried here; retry
    policy belongs to the article pipeline.
    """

    def __init__(
        self,
        client: Optional[OpenAI] = None,
        *,
        model: str = OPENAI_MODEL,
        temperature: float = OPENAI_TEMPERATURE,
        api_key: Optional[str] = None,
        timeout: float = OPENAI_TIMEOUT,
    ):
        self.model = model
        self.temperature = temperature
        self._client = client or OpenAI(api_key=api_key or OPENAI_API_KEY, timeout=timeout)

    def generate(self, system_prompt: str, user_prompt: str) -> str:
        try:
            response = self._client.chat.completions.create(
                model=self.model,
                temperature=self.temperature,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (APIConnectionError, RateLimitError, APIError) as e:
            raise GenerationError(f"OpenAI API request failed: {e}") from e

        if not response.choices:
            raise GenerationError("OpenAI returned no choices")

        message = response.choices[0].message
        content = message.content if message else None
        if not content or not content.strip():
            raise GenerationError("OpenAI returned an empty message")

        self._log_usage(response)
        return content

    def _log_usage(self, response) -> None:
        usage = getattr(response, "usage", None)
        prompt_tokens = getattr(usage, "prompt_tokens", 0) or 0
        completion_tokens = getattr(usage, "completion_tokens", 0) or 0
        total_tokens = getattr(usage, "total_tokens", 0) or 0
        cost = calculate_openai_cost(
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            model=self.model,
        )
        logger.info(
            "OpenAI call model=%s prompt_tokens=%s completion_tokens=%s total_tokens=%s estimated_cost_usd=%.6f",
            self.model,
            prompt_tokens,
            completion_tokens,
            total_tokens,
            cost,
        )
