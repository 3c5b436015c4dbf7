"""Tests for webhook and email notifications."""

import smtplib
from datetime import date
from unittest.mock import MagicMock, patch

import pytest
import requests

from learnlog.config import Config
from learnlog.exceptions import NotifyError
from learnlog.models import GeneratedNote
from learnlog.notify import notify_all, send_email, send_webhook


@pytest.fixture
def note() -> GeneratedNote:
    return GeneratedNote("# Foo\n", "Foo", "foo", "Sum", date(2026, 1, 15))


@pytest.fixture
def notify_config(tmp_path) -> Config:
    return Config(
        repo_dir=tmp_path,
        github_repo_url="https://github.com/someone/notes",
        discord_webhook_url="https://discord.example/webhook",
        gmail_user="me@example.com",
        gmail_app_password="secret",
        email_to="you@example.com",
    )


class TestSendWebhook:
    """Tests for send_webhook."""

    def test_posts_json_content(self):
        with patch("learnlog.notify.requests.post") as mock_post:
            send_webhook("https://hook", "hello")
        args, kwargs = mock_post.call_args
        assert args == ("https://hook",)
        assert kwargs["json"] == {"content": "hello"}
        assert kwargs["timeout"] > 0

    def test_http_error(self):
        response = MagicMock()
        response.raise_for_status.side_effect = requests.HTTPError("400 Bad Request")
        with patch("learnlog.notify.requests.post", return_value=response):
            with pytest.raises(NotifyError, match="400"):
                send_webhook("https://hook", "hello")

    def test_connection_error(self):
        with patch(
            "learnlog.notify.requests.post",
            side_effect=requests.ConnectionError("refused"),
        ):
            with pytest.raises(NotifyError):
                send_webhook("https://hook", "hello")


class TestSendEmail:
    """Tests for send_email."""

    def test_sends_over_ssl(self, notify_config: Config):
        with patch("learnlog.notify.smtplib.SMTP_SSL") as mock_smtp:
            server = mock_smtp.return_value.__enter__.return_value
            send_email(notify_config, "Subject", "<p>hi</p>", "hi")

        assert mock_smtp.call_args[0] == ("smtp.gmail.com", 465)
        server.login.assert_called_once_with("me@example.com", "secret")
        msg = server.send_message.call_args[0][0]
        assert msg["Subject"] == "Subject"
        assert msg["To"] == "you@example.com"

    def test_smtp_failure(self, notify_config: Config):
        with patch("learnlog.notify.smtplib.SMTP_SSL") as mock_smtp:
            server = mock_smtp.return_value.__enter__.return_value
            server.login.side_effect = smtplib.SMTPAuthenticationError(535, b"bad")
            with pytest.raises(NotifyError, match="you@example.com"):
                send_email(notify_config, "Subject", "<p>hi</p>")


class TestNotifyAll:
    """Tests for notify_all."""

    def test_all_channels(self, notify_config: Config, note: GeneratedNote):
        with patch("learnlog.notify.send_webhook") as mock_hook, patch(
            "learnlog.notify.send_email"
        ) as mock_email:
            sent = notify_all(notify_config, note)

        assert sent == ["webhook", "email"]
        content = mock_hook.call_args[0][1]
        assert "learning-notes/2026/01/15-foo.md" in content
        assert mock_email.call_args[0][1] == "[Daily Learning] Foo"

    def test_webhook_failure_does_not_stop_email(self, notify_config: Config, note: GeneratedNote):
        with patch(
            "learnlog.notify.send_webhook", side_effect=NotifyError("down")
        ), patch("learnlog.notify.send_email") as mock_email:
            sent = notify_all(notify_config, note)

        assert sent == ["email"]
        mock_email.assert_called_once()

    def test_unconfigured_channels_skipped(self, tmp_path, note: GeneratedNote):
        config = Config(repo_dir=tmp_path, gmail_user="me@example.com")
        with patch("learnlog.notify.send_webhook") as mock_hook, patch(
            "learnlog.notify.send_email"
        ) as mock_email:
            assert notify_all(config, note) == []
        mock_hook.assert_not_called()
        mock_email.assert_not_called()
