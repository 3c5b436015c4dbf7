"""Write generated notes to the notes directory."""

from pathlib import Path

from .models import GeneratedNote


def note_path(note: GeneratedNote, notes_dir: Path) -> Path:
    """Absolute location of a note: ``notes_dir/YYYY/MM/DD-slug.md``."""
    return Path(notes_dir) / note.relative_path


def write_note(note: GeneratedNote, notes_dir: Path) -> Path:
    """Write the note's markdown to disk and return its path."""
    filepath = note_path(note, notes_dir)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    content = note.raw_content
    if not content.endswith("\n"):
        content += "\n"
    filepath.write_text(content, encoding="utf-8")

    return filepath
