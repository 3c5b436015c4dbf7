"""Index entry and notification message formatting."""

import html
import re

from .models import GeneratedNote


def format_entry(note: GeneratedNote) -> str:
    """Index line for a note: ``- [YYYY-MM-DD] [title](YYYY/MM/DD-slug.md)``."""
    title = _single_line(note.display_title).replace("[", r"\[").replace("]", r"\]")
    return f"- [{note.date.isoformat()}] [{title}]({note.relative_path})"


def format_webhook_message(note: GeneratedNote, note_url: str) -> str:
    """Chat message announcing the day's note."""
    lines = [
        "📚 **今日學習筆記**",
        "",
        f"**主題**: {_single_line(note.display_title)}",
    ]
    if note.summary:
        lines.append(f"**摘要**: {_single_line(note.summary)}")
    lines.extend(["", f"🔗 查看完整筆記：{note_url}"])
    return "\n".join(lines)


def format_email_subject(note: GeneratedNote) -> str:
    return f"[Daily Learning] {_single_line(note.display_title)}"


def format_email_html(note: GeneratedNote, note_url: str) -> str:
    """HTML body of the notification email. All note text is escaped."""
    summary = ""
    if note.summary:
        summary = f"<p><strong>摘要：</strong>{html.escape(note.summary)}</p>\n"
    return (
        "<html>\n<body>\n"
        "<h2>📚 每日學習筆記</h2>\n"
        f"<p><strong>日期：</strong>{note.date.isoformat()}</p>\n"
        f"<p><strong>主題：</strong>{html.escape(note.display_title)}</p>\n"
        f"{summary}"
        "<hr>\n"
        f"<p>🔗 <a href=\"{html.escape(note_url, quote=True)}\">查看完整筆記</a></p>\n"
        "</body>\n</html>"
    )


def format_email_text(note: GeneratedNote, note_url: str) -> str:
    """Plain text fallback of the notification email."""
    lines = [
        "每日學習筆記",
        f"日期：{note.date.isoformat()}",
        f"主題：{note.display_title}",
    ]
    if note.summary:
        lines.append(f"摘要：{note.summary}")
    lines.extend(["", f"查看完整筆記：{note_url}"])
    return "\n".join(lines)


def _single_line(text: str) -> str:
    """Collapse line breaks so the text stays on one line."""
    return re.sub(r"\s*[\r\n]+\s*", " ", text).strip()
