"""Claude/Anthropic API provider."""

from typing import Optional

import anthropic

from ..exceptions import LLMError
from .base import LLMProvider, retry_rate_limited

# A single learning note is a few thousand tokens at most
_DEFAULT_MAX_OUTPUT = 8_192


class AnthropicProvider(LLMProvider):
    def __init__(self, api_key: str, model: str = "claude-sonnet-4-20250514"):
        self._client = anthropic.Anthropic(api_key=api_key)
        self._model = model

    @property
    def default_max_output_tokens(self) -> int:
        return _DEFAULT_MAX_OUTPUT

    def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        max_output_tokens: Optional[int] = None,
    ) -> str:
        def call():
            return self._client.messages.create(
                model=self._model,
                max_tokens=max_output_tokens or _DEFAULT_MAX_OUTPUT,
                system=system_prompt,
                messages=[{"role": "user", "content": user_prompt}],
            )

        try:
            response = retry_rate_limited(call, anthropic.RateLimitError)
        except anthropic.APIError as e:
            raise LLMError(f"Anthropic API error: {e}") from e

        return "".join(
            block.text for block in response.content if getattr(block, "type", "") == "text"
        )
