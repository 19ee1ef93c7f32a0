"""Hand-off formats for rendered HTML.

Clipboard consumers receive the same markup as both ``text/html`` and
``text/plain``; mail clients that only read the plain part still get readable
markup.
"""

from email.header import Header
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from pydantic import BaseModel

from email_styler.log import logger
from email_styler.rendering import markdown_to_email_html
from email_styler.styles import StyleConfig


class ClipboardPayload(BaseModel):
    """Clipboard representations of one rendered email"""

    html: str
    plain_text: str

    def as_mime_map(self) -> dict[str, str]:
        return {"text/html": self.html, "text/plain": self.plain_text}


def build_clipboard_payload(
    text: str,
    styles: StyleConfig | None = None,
    wrap_in_html: bool = True,
) -> ClipboardPayload:
    """Render ``text`` and package it for a clipboard write."""
    html = markdown_to_email_html(text, styles, wrap_in_html=wrap_in_html)
    return ClipboardPayload(html=html, plain_text=html)


def _header_value(value: str) -> str | Header:
    # Non-ASCII subjects and display names need RFC 2047 encoding
    if any(ord(c) > 127 for c in value):
        return Header(value, "utf-8")
    return value


def build_mime_message(
    html: str,
    subject: str | None = None,
    sender: str | None = None,
    recipients: list[str] | None = None,
) -> MIMEMultipart:
    """Build a ``multipart/alternative`` draft holding the rendered HTML.

    Args:
        html: Rendered email HTML.
        subject: Optional Subject header.
        sender: Optional From header.
        recipients: Optional To addresses.

    Returns:
        A message with a text/plain part followed by a text/html part.
    """
    msg = MIMEMultipart("alternative")
    msg.attach(MIMEText(html, "plain", "utf-8"))
    msg.attach(MIMEText(html, "html", "utf-8"))

    if subject:
        msg["Subject"] = _header_value(subject)
    if sender:
        msg["From"] = _header_value(sender)
    if recipients:
        msg["To"] = ", ".join(recipients)

    logger.debug(f"Built MIME draft ({len(html)} characters of HTML)")
    return msg
