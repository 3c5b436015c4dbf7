"""Data models for learnlog."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Optional


class Category(Enum):
    """Topic buckets used to group notes in the index."""

    REACT = "react"
    TYPESCRIPT = "typescript"
    FRONTEND_ARCHITECTURE = "frontend_architecture"
    CROSS_DOMAIN = "cross_domain"


@dataclass(frozen=True)
class CategoryRule:
    """A category, the heading text of its index section, and its keywords."""

    category: Category
    heading: str
    keywords: tuple[str, ...] = ()


@dataclass(frozen=True)
class GeneratedNote:
    """One run's AI-generated markdown note."""

    raw_content: str
    display_title: str
    slug: str
    summary: str
    date: date

    @property
    def filename(self) -> str:
        return f"{self.date:%d}-{self.slug}.md"

    @property
    def relative_path(self) -> str:
        """Path of the note relative to the notes directory (and the index)."""
        return f"{self.date:%Y}/{self.date:%m}/{self.filename}"


@dataclass
class RunResult:
    """Outcome of one daily run."""

    note: GeneratedNote
    note_path: Path
    category: Category
    heading: str = ""
    index_updated: bool = False
    pushed: bool = False
    notifications: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    commit_message: Optional[str] = None
