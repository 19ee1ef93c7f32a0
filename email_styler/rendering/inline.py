"""Inline markdown spans to inline-styled HTML.

Spans are rewritten by an ordered list of regex passes. The order matters:
bold runs before italic so ``**x**`` is not split into two ``*`` spans, and
images run before links so the leading ``!`` does not end up as link text.
"""

import html
import re
from collections.abc import Callable

from email_styler.rendering.css import MONOSPACE_STACK

_AMPERSAND_RE = re.compile(r"&(?!amp;|lt;|gt;|quot;|#)")

_BOLD_RES = (
    re.compile(r"\*\*(.+?)\*\*"),
    re.compile(r"(?<!\w)__(.+?)__(?!\w)"),
)
_ITALIC_RES = (
    re.compile(r"\*(.+?)\*"),
    re.compile(r"(?<!\w)_(.+?)_(?!\w)"),
)
_STRIKE_RE = re.compile(r"~~(.+?)~~")
_CODE_RE = re.compile(r"`(.+?)`")
_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\(([^)\s]+)\)")
_LINK_RE = re.compile(r"\[(.+?)\]\(([^)\s]+)\)")

INLINE_CODE_STYLE = (
    "background-color:rgba(0,0,0,0.05);padding:2px 6px;border-radius:3px;"
    f"font-family:{MONOSPACE_STACK};font-size:0.9em;"
)
INLINE_IMAGE_STYLE = "max-width:100%;height:auto;border:0;vertical-align:middle;"
LINK_STYLE = "color:inherit;text-decoration:underline;"


def escape_html(text: str) -> str:
    """Escape ``&``, ``<`` and ``>``, leaving existing entities alone."""
    text = _AMPERSAND_RE.sub("&amp;", text)
    return text.replace("<", "&lt;").replace(">", "&gt;")


def escape_code(text: str) -> str:
    """Escape code verbatim: every ``&`` is escaped so entities show literally."""
    return html.escape(text, quote=False)


def quote_attr(value: str) -> str:
    return value.replace('"', "&quot;")


def escape_attr(value: str) -> str:
    """Escape raw text for use inside a double-quoted attribute."""
    return quote_attr(escape_html(value))


def _image(match: re.Match[str]) -> str:
    alt, src = match.groups()
    return f'<img src="{quote_attr(src)}" alt="{quote_attr(alt)}" style="{INLINE_IMAGE_STYLE}">'


def _link(match: re.Match[str]) -> str:
    label, href = match.groups()
    return f'<a href="{quote_attr(href)}" style="{LINK_STYLE}">{label}</a>'


def _passes(render_bold: bool) -> list[tuple[re.Pattern[str], str | Callable[[re.Match[str]], str]]]:
    bold = r"<strong>\1</strong>" if render_bold else r"\1"
    return [
        *((pattern, bold) for pattern in _BOLD_RES),
        *((pattern, r"<em>\1</em>") for pattern in _ITALIC_RES),
        (_STRIKE_RE, r"<s>\1</s>"),
        (_CODE_RE, f'<code style="{INLINE_CODE_STYLE}">\\1</code>'),
        (_IMAGE_RE, _image),
        (_LINK_RE, _link),
    ]


def format_inline(text: str, render_bold: bool = True) -> str:
    """Convert the inline markdown of one block to HTML.

    Args:
        text: Block text with its block-level marker already removed.
        render_bold: When False, bold markers are dropped instead of turned
            into ``<strong>`` (headings get their weight from the style).

    Returns:
        Escaped HTML with bold, italic, strikethrough, code, image and link
        spans substituted. Unmatched delimiters stay as literal text.
    """
    result = escape_html(text)
    for pattern, replacement in _passes(render_bold):
        result = pattern.sub(replacement, result)
    return result
