"""Custom exceptions for learnlog."""


class LearnlogError(Exception):
    """Base exception for learnlog."""


class ConfigError(LearnlogError):
    """Raised when configuration is missing or invalid."""


class LLMError(LearnlogError):
    """Raised when note generation fails."""


class GitError(LearnlogError):
    """Raised when a git command fails."""

    def __init__(self, command: list[str], stderr: str = ""):
        self.command = command
        self.stderr = stderr.strip()
        message = f"`{' '.join(command)}` failed"
        if self.stderr:
            message += f": {self.stderr}"
        super().__init__(message)


class NotifyError(LearnlogError):
    """Raised when a webhook or email notification cannot be delivered."""
