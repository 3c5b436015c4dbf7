"""Category index document (learning-notes/README.md).

The index is a markdown file made of ``## <heading>`` sections. Each heading
is followed by one blank line and then the section's entries, newest first,
or the sentinel line while the section is still empty:

    ## React

    *尚無筆記*

Edits are done on the list of lines and every line outside the insertion
point is written back unchanged, line endings included.
"""

from pathlib import Path
from typing import Optional, Sequence

from .classifier import DEFAULT_RULES, heading_for
from .models import Category, CategoryRule
from .utils import atomic_write_text

SENTINEL = "*尚無筆記*"
INDEX_TITLE = "每日學習筆記"


def _strip_eol(line: str) -> str:
    return line.rstrip("\r\n")


def _eol(line: str) -> str:
    return line[len(_strip_eol(line)):]


def section_heading(heading: str) -> str:
    return f"## {heading}"


def find_section(lines: Sequence[str], heading: str) -> Optional[int]:
    """Index of the line that is exactly ``## <heading>``, or None."""
    target = section_heading(heading)
    for i, line in enumerate(lines):
        if _strip_eol(line) == target:
            return i
    return None


def has_section(
    document: str,
    category: Category,
    rules: Sequence[CategoryRule] = DEFAULT_RULES,
) -> bool:
    lines = document.splitlines(keepends=True)
    return find_section(lines, heading_for(category, rules)) is not None


def insert_entry(
    document: str,
    category: Category,
    entry: str,
    rules: Sequence[CategoryRule] = DEFAULT_RULES,
) -> str:
    """Return document with entry added at the top of the category's section.

    The sentinel line is replaced when the section is empty. If the section
    heading is not in the document, the document is returned unchanged.
    """
    lines = document.splitlines(keepends=True)
    start = find_section(lines, heading_for(category, rules))
    if start is None:
        return document

    newline = _eol(lines[start])
    if not newline:
        # Heading is the last line and has no line ending
        newline = "\n"
        lines[start] += newline

    pos = start + 1
    if pos < len(lines) and not _strip_eol(lines[pos]).strip():
        pos += 1

    if pos < len(lines) and _strip_eol(lines[pos]).strip() == SENTINEL:
        lines[pos] = entry + _eol(lines[pos])
    else:
        lines.insert(pos, entry + newline)

    return "".join(lines)


def render_index(rules: Sequence[CategoryRule] = DEFAULT_RULES) -> str:
    """An index document with one empty section per category."""
    parts = [f"# {INDEX_TITLE}", ""]
    for rule in rules:
        parts.extend([section_heading(rule.heading), "", SENTINEL, ""])
    return "\n".join(parts)


def read_index(path: Path) -> str:
    with open(path, encoding="utf-8", newline="") as fh:
        return fh.read()


def update_index(
    path: Path,
    category: Category,
    entry: str,
    rules: Sequence[CategoryRule] = DEFAULT_RULES,
) -> bool:
    """Insert entry into the index file. Returns False if nothing was changed.

    Nothing is changed when the file or the category's section is missing.
    """
    path = Path(path)
    if not path.is_file():
        return False

    document = read_index(path)
    if not has_section(document, category, rules):
        return False

    atomic_write_text(path, insert_entry(document, category, entry, rules))
    return True


def init_index(path: Path, rules: Sequence[CategoryRule] = DEFAULT_RULES) -> Path:
    """Create a fresh index file. Refuses to overwrite an existing one."""
    path = Path(path)
    if path.exists():
        raise FileExistsError(f"Index already exists: {path}")
    path.parent.mkdir(parents=True, exist_ok=True)
    atomic_write_text(path, render_index(rules))
    return path
