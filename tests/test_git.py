"""Tests for git helpers."""

import subprocess
from datetime import date
from pathlib import Path
from unittest.mock import MagicMock, call, patch

import pytest

from learnlog.exceptions import GitError
from learnlog.git import commit_and_push, commit_message, run_git
from learnlog.notes import build_note


class TestRunGit:
    """Tests for run_git."""

    def test_returns_stdout(self, tmp_path: Path):
        with patch("learnlog.git.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(stdout="ok\n")
            assert run_git(["status"], tmp_path) == "ok\n"
            assert mock_run.call_args[0][0] == ["git", "status"]
            assert mock_run.call_args[1]["cwd"] == tmp_path

    def test_failure_raises_git_error(self, tmp_path: Path):
        error = subprocess.CalledProcessError(1, ["git", "push"], stderr="rejected\n")
        with patch("learnlog.git.subprocess.run", side_effect=error):
            with pytest.raises(GitError, match="rejected") as exc_info:
                run_git(["push"], tmp_path)
        assert exc_info.value.command == ["git", "push"]

    def test_missing_git(self, tmp_path: Path):
        with patch("learnlog.git.subprocess.run", side_effect=FileNotFoundError()):
            with pytest.raises(GitError, match="not found"):
                run_git(["status"], tmp_path)


class TestCommitAndPush:
    """Tests for commit_and_push."""

    def test_add_commit_push(self, tmp_path: Path):
        with patch("learnlog.git.run_git") as mock_git:
            commit_and_push(tmp_path, "msg")
        assert mock_git.call_args_list == [
            call(["add", "."], tmp_path),
            call(["commit", "-m", "msg"], tmp_path),
            call(["push"], tmp_path),
        ]

    def test_no_push(self, tmp_path: Path):
        with patch("learnlog.git.run_git") as mock_git:
            commit_and_push(tmp_path, "msg", push=False)
        assert call(["push"], tmp_path) not in mock_git.call_args_list

    def test_commit_message(self):
        note = build_note("# Hello World\n", date(2026, 1, 5))
        assert commit_message(note) == "feat: 新增 2026/01/05 學習筆記 - hello-world"
