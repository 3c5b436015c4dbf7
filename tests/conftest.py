"""Shared test fixtures."""

from pathlib import Path
from typing import Optional

import pytest

from learnlog.config import Config
from learnlog.index import render_index
from learnlog.llm.base import LLMProvider


class FakeLLM(LLMProvider):
    """Provider returning canned text and recording its prompts."""

    def __init__(self, text: str):
        self.text = text
        self.calls: list[tuple[str, str]] = []

    @property
    def default_max_output_tokens(self) -> int:
        return 4_096

    def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        max_output_tokens: Optional[int] = None,
    ) -> str:
        self.calls.append((system_prompt, user_prompt))
        return self.text


@pytest.fixture
def sample_note_content() -> str:
    """A generated note as the LLM returns it."""
    return """# TypeScript 泛型（Generics）

> 泛型讓你的函式保持型別安全。

## 核心概念

泛型是型別的參數。

> 這一行引用不是摘要。

## 程式碼範例

```ts
function identity<T>(value: T): T {
  return value;
}
```
"""


@pytest.fixture
def index_document() -> str:
    """Index with one populated section and three empty ones."""
    return (
        "# 每日學習筆記\n"
        "\n"
        "## React\n"
        "\n"
        "- [2026-01-10] [Bar](2026/01/10-bar.md)\n"
        "\n"
        "## TypeScript\n"
        "\n"
        "*尚無筆記*\n"
        "\n"
        "## 前端架構\n"
        "\n"
        "*尚無筆記*\n"
        "\n"
        "## 跨領域\n"
        "\n"
        "*尚無筆記*\n"
    )


@pytest.fixture
def tmp_repo(tmp_path: Path) -> Path:
    """Notes repository with an empty index."""
    repo = tmp_path / "repo"
    notes = repo / "learning-notes"
    notes.mkdir(parents=True)
    (notes / "README.md").write_text(render_index(), encoding="utf-8")
    return repo


@pytest.fixture
def config(tmp_repo: Path) -> Config:
    """Config pointing at tmp_repo with every external channel disabled."""
    return Config(
        repo_dir=tmp_repo,
        github_repo_url="https://github.com/someone/notes",
        commit=False,
        notify=False,
    )


@pytest.fixture
def fake_llm(sample_note_content: str) -> FakeLLM:
    return FakeLLM(sample_note_content)


ENV_VARS = (
    "ENV_FILE", "REPO_DIR", "NOTES_DIR", "PROMPT_FILE", "CATEGORY_RULES_FILE",
    "LLM_PROVIDER", "LLM_MODEL", "CLAUDE_BIN", "LLM_TIMEOUT",
    "ANTHROPIC_API_KEY", "OPENAI_API_KEY", "DISCORD_WEBHOOK_URL",
    "GITHUB_REPO_URL", "GMAIL_USER", "GMAIL_APP_PASSWORD", "EMAIL_TO",
    "SMTP_HOST", "SMTP_PORT",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path: Path):
    """Isolate tests from the developer's environment and .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
