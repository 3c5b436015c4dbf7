"""LLM provider that shells out to the ``claude`` command-line tool."""

import subprocess
from typing import Optional

from ..exceptions import LLMError
from .base import LLMProvider


class ClaudeCLIProvider(LLMProvider):
    """Runs ``claude -p <prompt> --output-format text`` with tools disabled."""

    def __init__(self, binary: str = "claude", model: str = "", timeout: int = 600):
        self._binary = binary
        self._model = model
        self._timeout = timeout

    @property
    def default_max_output_tokens(self) -> int:
        return 16_384

    def _command(self, prompt: str) -> list[str]:
        command = [self._binary, "-p", prompt, "--output-format", "text", "--tools", ""]
        if self._model:
            command.extend(["--model", self._model])
        return command

    def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        max_output_tokens: Optional[int] = None,
    ) -> str:
        # The CLI takes a single prompt
        prompt = f"{system_prompt}\n\n{user_prompt}" if system_prompt else user_prompt
        try:
            result = subprocess.run(
                self._command(prompt),
                capture_output=True,
                text=True,
                timeout=self._timeout,
                check=True,
            )
        except FileNotFoundError as e:
            raise LLMError(f"'{self._binary}' not found on PATH") from e
        except subprocess.TimeoutExpired as e:
            raise LLMError(f"'{self._binary}' timed out after {self._timeout}s") from e
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or "").strip()
            raise LLMError(
                f"'{self._binary}' exited with status {e.returncode}: {detail}"
            ) from e
        return result.stdout
