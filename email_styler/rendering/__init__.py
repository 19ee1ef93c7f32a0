from email_styler.rendering.css import escape_font_family, hex_to_rgb
from email_styler.rendering.document import markdown_to_email_html, render_email_body
from email_styler.rendering.inline import format_inline
from email_styler.rendering.parser import parse_blocks
from email_styler.rendering.preprocess import normalize_source

__all__ = [
    "escape_font_family",
    "format_inline",
    "hex_to_rgb",
    "markdown_to_email_html",
    "normalize_source",
    "parse_blocks",
    "render_email_body",
]
