"""Webhook and email notifications for a finished run."""

import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

import requests

from .config import Config
from .exceptions import NotifyError
from .formatter import (
    format_email_html,
    format_email_subject,
    format_email_text,
    format_webhook_message,
)
from .models import GeneratedNote

logger = logging.getLogger(__name__)

WEBHOOK_TIMEOUT = 10
SMTP_TIMEOUT = 30


def send_webhook(url: str, content: str, timeout: int = WEBHOOK_TIMEOUT) -> None:
    """POST a Discord-style ``{"content": ...}`` message."""
    try:
        resp = requests.post(url, json={"content": content}, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise NotifyError(f"Webhook request failed: {e}") from e


def send_email(config: Config, subject: str, html_body: str, text_body: str = "") -> None:
    """Send an HTML email over implicit-TLS SMTP."""
    msg = MIMEMultipart("alternative")
    msg["Subject"] = subject
    msg["From"] = config.gmail_user
    msg["To"] = config.email_to

    if text_body:
        msg.attach(MIMEText(text_body, "plain", "utf-8"))
    msg.attach(MIMEText(html_body, "html", "utf-8"))

    try:
        with smtplib.SMTP_SSL(config.smtp_host, config.smtp_port, timeout=SMTP_TIMEOUT) as server:
            server.login(config.gmail_user, config.gmail_app_password)
            server.send_message(msg)
    except (smtplib.SMTPException, OSError) as e:
        raise NotifyError(f"Email to {config.email_to} failed: {e}") from e


def notify_all(config: Config, note: GeneratedNote) -> list[str]:
    """Send every configured notification. Returns the channels that succeeded.

    A failing channel is logged and does not stop the others.
    """
    sent = []
    url = config.note_url(note.relative_path)

    if config.webhook_enabled:
        try:
            send_webhook(config.discord_webhook_url, format_webhook_message(note, url))
            sent.append("webhook")
            logger.info("Webhook notification sent")
        except NotifyError as e:
            logger.warning("%s", e)
    else:
        logger.info("DISCORD_WEBHOOK_URL not set, skipping webhook")

    if config.email_enabled:
        try:
            send_email(
                config,
                format_email_subject(note),
                format_email_html(note, url),
                format_email_text(note, url),
            )
            sent.append("email")
            logger.info("Email notification sent to %s", config.email_to)
        except NotifyError as e:
            logger.warning("%s; continuing", e)
    else:
        logger.info("Email settings incomplete, skipping email")

    return sent
