"""One daily run: generate, save, index, commit, notify."""

import logging
from datetime import date
from typing import Optional

from .classifier import classify, heading_for, load_rules
from .config import Config
from .formatter import format_entry
from .generator import NoteGenerator
from .git import commit_and_push, commit_message
from .index import update_index
from .llm.base import LLMProvider
from .models import RunResult
from .notes import build_note, extract_title
from .notify import notify_all
from .utils import derive_slug
from .writer import write_note

logger = logging.getLogger(__name__)


def _warn(result: RunResult, message: str) -> None:
    result.warnings.append(message)
    logger.warning("%s", message)


def run_daily(config: Config, llm: LLMProvider, today: Optional[date] = None) -> RunResult:
    """Run the whole pipeline once.

    LLMError and GitError propagate. A missing title, summary or index
    section only produces a warning; notification failures are logged.
    """
    today = today or date.today()
    rules = load_rules(config.rules_file)

    raw = NoteGenerator(llm, prompt_file=config.prompt_file).generate()
    note = build_note(raw, today)
    category = classify(note.display_title, rules)

    path = write_note(note, config.notes_dir)
    logger.info("Note saved to %s", path)
    result = RunResult(note=note, note_path=path, category=category)

    title = extract_title(raw)
    if not title:
        _warn(result, f"No '# ' title in generated note; using '{note.display_title}'")
    elif not derive_slug(title):
        _warn(result, f"Title {title!r} gives an empty slug; using '{note.slug}'")
    if not note.summary:
        logger.info("No summary line in generated note; summary omitted")

    result.heading = heading_for(category, rules)
    if not config.index_path.is_file():
        _warn(
            result,
            f"Index {config.index_path} does not exist; run `learnlog init-index` to create it",
        )
    else:
        try:
            result.index_updated = update_index(
                config.index_path, category, format_entry(note), rules
            )
        except (OSError, UnicodeDecodeError) as e:
            _warn(result, f"Cannot update index {config.index_path}: {e}")
        else:
            if result.index_updated:
                logger.info("Index updated under '## %s'", result.heading)
            else:
                _warn(
                    result,
                    f"Section '## {result.heading}' not found in {config.index_path}; "
                    "index not updated",
                )

    if config.commit:
        result.commit_message = commit_message(note)
        commit_and_push(config.repo_dir, result.commit_message, push=config.push)
        result.pushed = config.push
    else:
        logger.info("Git commit disabled")

    if config.notify:
        result.notifications = notify_all(config, note)
    else:
        logger.info("Notifications disabled")

    return result
