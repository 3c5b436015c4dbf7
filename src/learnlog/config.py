"""Configuration loading and validation."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigError

PROVIDERS = ("claude-cli", "claude", "openai")


@dataclass
class Config:
    """Application configuration."""

    repo_dir: Path = field(default_factory=Path.cwd)
    notes_dir: Optional[Path] = None
    prompt_file: Optional[Path] = None
    rules_file: Optional[Path] = None
    llm_provider: str = "claude-cli"
    model: str = ""
    claude_bin: str = "claude"
    llm_timeout: int = 600
    anthropic_api_key: str = ""
    openai_api_key: str = ""
    discord_webhook_url: str = ""
    github_repo_url: str = ""
    gmail_user: str = ""
    gmail_app_password: str = ""
    email_to: str = ""
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    commit: bool = True
    push: bool = True
    notify: bool = True
    verbose: bool = False

    def __post_init__(self):
        if self.notes_dir is None:
            self.notes_dir = self.repo_dir / "learning-notes"

    @property
    def index_path(self) -> Path:
        return self.notes_dir / "README.md"

    @property
    def default_model(self) -> str:
        if self.model:
            return self.model
        if self.llm_provider == "claude":
            return "claude-sonnet-4-20250514"
        if self.llm_provider == "openai":
            return "gpt-4o"
        # The CLI picks its own model unless told otherwise
        return ""

    @property
    def email_enabled(self) -> bool:
        return bool(self.gmail_user and self.gmail_app_password and self.email_to)

    @property
    def webhook_enabled(self) -> bool:
        return bool(self.discord_webhook_url)

    def note_url(self, relative_path: str) -> str:
        """Public URL of a note inside the hosted repository."""
        try:
            notes_rel = self.notes_dir.relative_to(self.repo_dir).as_posix()
        except ValueError:
            notes_rel = self.notes_dir.name
        base = self.github_repo_url.rstrip("/")
        return f"{base}/blob/main/{notes_rel}/{relative_path}"

    def validate(self, llm: bool = True) -> None:
        """Validate required configuration.

        Provider and API key checks are skipped when ``llm`` is False.
        """
        if llm:
            self._validate_llm()
        if not self.repo_dir.is_dir():
            raise ConfigError(f"Repository directory does not exist: {self.repo_dir}")
        if self.prompt_file is not None and not self.prompt_file.is_file():
            raise ConfigError(f"Prompt file not found: {self.prompt_file}")
        if self.rules_file is not None and not self.rules_file.is_file():
            raise ConfigError(f"Category rules file not found: {self.rules_file}")

    def _validate_llm(self) -> None:
        if self.llm_provider not in PROVIDERS:
            raise ConfigError(
                f"Unknown LLM provider: {self.llm_provider}. "
                f"Use one of: {', '.join(PROVIDERS)}."
            )
        if self.llm_provider == "claude" and not self.anthropic_api_key:
            raise ConfigError(
                "ANTHROPIC_API_KEY is required when using Claude provider."
            )
        if self.llm_provider == "openai" and not self.openai_api_key:
            raise ConfigError(
                "OPENAI_API_KEY is required when using OpenAI provider."
            )
        if self.llm_timeout <= 0:
            raise ConfigError("LLM_TIMEOUT must be a positive number of seconds.")


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name, "")
    if not value:
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from e


def load_config(
    repo_dir: Optional[str] = None,
    provider: Optional[str] = None,
    model: Optional[str] = None,
    commit: bool = True,
    push: bool = True,
    notify: bool = True,
    verbose: bool = False,
    validate_llm: bool = True,
) -> Config:
    """Load config from .env and apply CLI overrides.

    Commands that never call an LLM pass ``validate_llm=False``.
    """
    load_dotenv(os.getenv("ENV_FILE") or find_dotenv(usecwd=True))

    repo = Path(repo_dir or os.getenv("REPO_DIR") or Path.cwd()).expanduser()
    notes_dir = os.getenv("NOTES_DIR")
    prompt_file = os.getenv("PROMPT_FILE")
    rules_file = os.getenv("CATEGORY_RULES_FILE")

    config = Config(
        repo_dir=repo,
        notes_dir=Path(notes_dir).expanduser() if notes_dir else None,
        prompt_file=Path(prompt_file).expanduser() if prompt_file else None,
        rules_file=Path(rules_file).expanduser() if rules_file else None,
        llm_provider=provider or os.getenv("LLM_PROVIDER", "claude-cli"),
        model=model or os.getenv("LLM_MODEL", ""),
        claude_bin=os.getenv("CLAUDE_BIN", "claude"),
        llm_timeout=_int_env("LLM_TIMEOUT", 600),
        anthropic_api_key=os.getenv("ANTHROPIC_API_KEY", ""),
        openai_api_key=os.getenv("OPENAI_API_KEY", ""),
        discord_webhook_url=os.getenv("DISCORD_WEBHOOK_URL", ""),
        github_repo_url=os.getenv("GITHUB_REPO_URL", ""),
        gmail_user=os.getenv("GMAIL_USER", ""),
        gmail_app_password=os.getenv("GMAIL_APP_PASSWORD", ""),
        email_to=os.getenv("EMAIL_TO", ""),
        smtp_host=os.getenv("SMTP_HOST", "smtp.gmail.com"),
        smtp_port=_int_env("SMTP_PORT", 465),
        commit=commit,
        push=push,
        notify=notify,
        verbose=verbose,
    )

    config.validate(llm=validate_llm)
    return config
