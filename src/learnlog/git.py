"""Commit and push the notes repository with the git CLI."""

import logging
import subprocess
from pathlib import Path

from .exceptions import GitError
from .models import GeneratedNote

logger = logging.getLogger(__name__)


def run_git(args: list[str], repo_dir: Path) -> str:
    """Run a git command in repo_dir and return its stdout."""
    command = ["git", *args]
    logger.debug("Running %s", " ".join(command))
    try:
        result = subprocess.run(
            command,
            cwd=repo_dir,
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError as e:
        raise GitError(command, "git executable not found") from e
    except subprocess.CalledProcessError as e:
        raise GitError(command, e.stderr or e.stdout or "") from e
    return result.stdout


def commit_message(note: GeneratedNote) -> str:
    return f"feat: 新增 {note.date:%Y/%m/%d} 學習筆記 - {note.slug}"


def commit_and_push(repo_dir: Path, message: str, push: bool = True) -> None:
    """Stage everything, commit, and optionally push."""
    run_git(["add", "."], repo_dir)
    run_git(["commit", "-m", message], repo_dir)
    logger.info("Committed: %s", message)
    if push:
        run_git(["push"], repo_dir)
        logger.info("Pushed to remote")
