"""Title and summary extraction for generated notes."""

import re
from datetime import date

from .models import GeneratedNote
from .utils import FALLBACK_TITLE, derive_slug, fallback_slug

# Exactly one '#', one space, then the title text
_TITLE_RE = re.compile(r"^# (.*)$")
_SUMMARY_MARKER = "> "


def extract_title(raw_content: str) -> str:
    """Return the text of the first level-1 heading, or "" if there is none."""
    for line in raw_content.splitlines():
        match = _TITLE_RE.match(line)
        if match:
            return match.group(1).strip()
    return ""


def extract_summary(raw_content: str) -> str:
    """Return the first blockquote line with its marker stripped, or ""."""
    for line in raw_content.splitlines():
        stripped = line.lstrip()
        if stripped.startswith(_SUMMARY_MARKER):
            return stripped[len(_SUMMARY_MARKER):].strip()
    return ""


def build_note(raw_content: str, on: date) -> GeneratedNote:
    """Build a GeneratedNote, substituting fallbacks for a missing title or slug."""
    title = extract_title(raw_content) or FALLBACK_TITLE
    slug = derive_slug(title) or fallback_slug(title)
    return GeneratedNote(
        raw_content=raw_content,
        display_title=title,
        slug=slug,
        summary=extract_summary(raw_content),
        date=on,
    )
