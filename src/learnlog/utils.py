"""Utility functions for learnlog."""

import hashlib
import os
import re
import tempfile
from pathlib import Path

FALLBACK_TITLE = "daily-note"


def derive_slug(title: str) -> str:
    """Convert a display title to a filesystem-safe slug.

    Lowercases, turns each whitespace run into a single hyphen and drops
    every character that is not an ASCII letter, digit or hyphen. The result
    is empty when the title has no ASCII alphanumerics.
    """
    text = title.lower()
    text = re.sub(r"\s+", "-", text)
    return re.sub(r"[^a-z0-9-]", "", text)


def fallback_slug(title: str) -> str:
    """Stable slug for titles whose derived slug is empty."""
    if not title:
        return FALLBACK_TITLE
    digest = hashlib.sha1(title.encode("utf-8")).hexdigest()[:8]
    return f"note-{digest}"


def atomic_write_text(path: Path, text: str) -> None:
    """Write text to path via a temp file in the same directory."""
    path = Path(path)
    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
