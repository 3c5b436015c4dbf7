"""OpenAI API provider."""

from typing import Optional

import openai

from ..exceptions import LLMError
from .base import LLMProvider, retry_rate_limited

_DEFAULT_MAX_OUTPUT = 8_192


class OpenAIProvider(LLMProvider):
    def __init__(self, api_key: str, model: str = "gpt-4o"):
        self._client = openai.OpenAI(api_key=api_key)
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
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]

        def call():
            return self._client.chat.completions.create(
                model=self._model,
                messages=messages,
                max_completion_tokens=max_output_tokens or _DEFAULT_MAX_OUTPUT,
            )

        try:
            response = retry_rate_limited(call, openai.RateLimitError)
        except openai.APIError as e:
            raise LLMError(f"OpenAI API error: {e}") from e
        return response.choices[0].message.content or ""
