"""Markdown to email-safe HTML conversion.

The output uses inline ``style`` attributes only: no ``<style>`` blocks, no
stylesheets, no scripts. Rendering is a pure function of the text and the
style record.
"""

import re

from email_styler.log import logger
from email_styler.rendering.blocks import render_blocks
from email_styler.rendering.css import (
    MONOSPACE_STACK,
    escape_font_family,
    format_number,
    hex_to_rgb,
    px,
)
from email_styler.rendering.parser import parse_blocks
from email_styler.rendering.preprocess import normalize_source
from email_styler.styles import DEFAULT_STYLES, StyleConfig

FOOTER_TEXT = "Styled with Email Styler"

_BLOCK_MARGIN_RE = re.compile(r"margin:(\S+) 0 \S+ 0;")
# Item text is escaped, so the last literal "<li " is the last item
_LAST_ITEM_MARGIN_RE = re.compile(r'(<li style="margin:\S+ 0 )\S+( 0;)(?!.*<li )', re.DOTALL)


def collapse_trailing_margin(fragments: list[str]) -> list[str]:
    """Zero the bottom margin of the last fragment, whatever block produced it.

    A trailing list also drops the bottom margin of its last item.
    """
    if not fragments:
        return fragments
    *head, last = fragments
    last = _BLOCK_MARGIN_RE.sub(r"margin:\1 0 0 0;", last, count=1)
    if last.startswith(("<ul ", "<ol ")):
        last = _LAST_ITEM_MARGIN_RE.sub(r"\g<1>0\g<2>", last, count=1)
    return [*head, last]


def render_fragments(text: str, styles: StyleConfig) -> list[str]:
    blocks = parse_blocks(normalize_source(text))
    logger.debug(f"Parsed {len(blocks)} block(s) from {len(text)} characters")
    return collapse_trailing_margin(render_blocks(blocks, styles))


def render_footer(styles: StyleConfig) -> str:
    style = (
        f"margin:{px(styles.paragraph_spacing * 2)} 0 0 0;"
        f"font-family:{MONOSPACE_STACK};font-size:11px;line-height:1.4;"
        "letter-spacing:0.12em;text-transform:uppercase;"
        f"color:{hex_to_rgb(styles.text_color)};opacity:0.45;"
    )
    return f'<div style="{style}">{FOOTER_TEXT}</div>'


def render_container(body: str, styles: StyleConfig) -> str:
    style = (
        f"padding:{px(styles.margin_top)} {px(styles.margin_sides)} "
        f"{px(styles.margin_bottom)} {px(styles.margin_sides)};"
        f"max-width:{px(styles.max_width)};margin:0 auto;"
        f"background-color:{hex_to_rgb(styles.background_color)};"
        f"font-family:{escape_font_family(styles.font_family)};"
        f"font-size:{px(styles.font_size)};"
        f"line-height:{format_number(styles.line_height)};"
        f"color:{hex_to_rgb(styles.text_color)};"
        "text-align:left;"
    )
    return f'<div dir="ltr" style="{style}">\n{body}\n</div>'


def render_outlook_frame(container: str, styles: StyleConfig) -> str:
    """Pin the container width for Outlook desktop, which ignores max-width on a div."""
    return (
        f'<!--[if mso]><table width="{styles.max_width}" align="center" cellpadding="0" '
        'cellspacing="0" border="0"><tr><td><![endif]-->\n'
        f"{container}\n"
        "<!--[if mso]></td></tr></table><![endif]-->"
    )


def render_email_body(text: str, styles: StyleConfig | None = None) -> str:
    """Render only the content blocks, for live preview inside a styled pane."""
    return "\n".join(render_fragments(text, styles or DEFAULT_STYLES))


def markdown_to_email_html(text: str, styles: StyleConfig | None = None, wrap_in_html: bool = False) -> str:
    """Convert markdown text to email-safe HTML.

    Args:
        text: Markdown-formatted text, as exported by the editor
        styles: Style parameters; DEFAULT_STYLES when omitted
        wrap_in_html: If True, wrap output in a minimal HTML document whose
            body carries the background color and an Outlook width frame

    Returns:
        HTML string suitable for email clients
    """
    styles = styles or DEFAULT_STYLES
    fragments = render_fragments(text, styles)
    container = render_container("\n".join([*fragments, render_footer(styles)]), styles)

    if wrap_in_html:
        return f"""<!DOCTYPE html>
<html dir="ltr">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body style="margin:0;padding:0;background-color:{hex_to_rgb(styles.background_color)};">
{render_outlook_frame(container, styles)}
</body>
</html>"""

    return container
