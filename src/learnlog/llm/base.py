"""Abstract base class for LLM providers."""

import logging
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional, TypeVar

from ..exceptions import LLMError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LLMProvider(ABC):
    """Abstract LLM provider interface."""

    @abstractmethod
    def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        max_output_tokens: Optional[int] = None,
    ) -> str:
        """Generate a completion given system and user prompts.

        Args:
            system_prompt: System-level instructions for the LLM.
            user_prompt: The note request.
            max_output_tokens: Override the default max output tokens.

        Returns the text content of the response.
        """

    @property
    @abstractmethod
    def default_max_output_tokens(self) -> int:
        """Default maximum output tokens for this provider."""


def retry_rate_limited(
    call: Callable[[], T],
    rate_limit_error: type[Exception],
    attempts: int = 3,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """Run call, backing off exponentially while it raises rate_limit_error."""
    last_error = None
    for attempt in range(attempts):
        try:
            return call()
        except rate_limit_error as e:
            last_error = e
            if attempt < attempts - 1:
                delay = 2 ** (attempt + 1)
                logger.warning("Rate limited, retrying in %ss", delay)
                sleep(delay)
    raise LLMError(f"Rate limited after {attempts} attempts: {last_error}")
