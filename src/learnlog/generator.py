"""Daily note generation through the configured LLM provider."""

import logging
import re
from pathlib import Path
from typing import Optional

from .exceptions import LLMError
from .llm.base import LLMProvider
from .prompts import LEARNING_PROMPT, SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class NoteGenerator:
    """Asks the LLM for one learning note and returns its markdown.

    The user prompt comes from ``prompt_file`` when given, otherwise the
    packaged learning prompt is used.
    """

    def __init__(self, llm: LLMProvider, prompt_file: Optional[Path] = None):
        self._llm = llm
        self._prompt_file = prompt_file

    def _system_prompt(self) -> str:
        return SYSTEM_PROMPT

    def _user_prompt(self) -> str:
        if self._prompt_file is None:
            return LEARNING_PROMPT
        try:
            return Path(self._prompt_file).read_text(encoding="utf-8")
        except OSError as e:
            raise LLMError(f"Cannot read prompt file {self._prompt_file}: {e}") from e

    def generate(self) -> str:
        """Generate the note body. Raises LLMError on an empty response."""
        logger.info("Generating learning note...")
        text = self._llm.generate(
            self._system_prompt(),
            self._user_prompt(),
            max_output_tokens=self._llm.default_max_output_tokens,
        )
        text = self._clean_output(text)
        if not text:
            raise LLMError("LLM returned an empty note")
        logger.debug("Generated %d chars", len(text))
        return text

    @staticmethod
    def _clean_output(text: str) -> str:
        """Strip surrounding whitespace and any YAML frontmatter the LLM added."""
        if not text:
            return ""

        text = text.strip()
        text = re.sub(
            r"^---\s*\n.*?\n---\s*\n?",
            "",
            text,
            count=1,
            flags=re.DOTALL,
        )

        # Remove trailing whitespace on each line
        text = "\n".join(line.rstrip() for line in text.split("\n"))

        return text.strip()
