"""Style-to-CSS mapping helpers.

Email sanitizers (Gmail in particular) keep ``rgb()`` colors more reliably
than hex or named colors, and every value ends up inside a double-quoted
``style`` attribute.
"""

import math
import re

from email_styler.styles import StyleConfig

_HEX_COLOR_RE = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")

MONOSPACE_STACK = "ui-monospace, SFMono-Regular, Menlo, Consolas, monospace"


def hex_to_rgb(color: str) -> str:
    """Convert ``#rrggbb`` (case-insensitive, ``#`` optional) to ``rgb(r,g,b)``.

    Anything that is not a six digit hex color is returned unchanged.
    """
    match = _HEX_COLOR_RE.match(color.strip())
    if not match:
        return color
    r, g, b = (int(part, 16) for part in match.groups())
    return f"rgb({r},{g},{b})"


def hex_to_rgba(color: str, alpha: float) -> str:
    """Like hex_to_rgb but with an alpha channel; non-hex input is returned unchanged."""
    match = _HEX_COLOR_RE.match(color.strip())
    if not match:
        return color
    r, g, b = (int(part, 16) for part in match.groups())
    return f"rgba({r},{g},{b},{format_number(alpha)})"


def escape_font_family(value: str) -> str:
    """Make a font stack safe to embed in a double-quoted HTML attribute."""
    return value.replace('"', "&quot;")


def round_half_up(value: float) -> int:
    # round() uses banker's rounding, which makes 40.5px headings come out as 40
    if not math.isfinite(value):
        return 0
    return math.floor(value + 0.5)


def format_number(value: float) -> str:
    """Format a CSS number without trailing zeros (1.35, 16, 0.3)."""
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        return "0"
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def px(value: float) -> str:
    if value == 0:
        return "0"
    return f"{format_number(value)}px"


def margin(top: str, bottom: str) -> str:
    """Block margin declaration; always the first declaration of a block's style."""
    return f"margin:{top} 0 {bottom} 0;"


def text_declarations(
    styles: StyleConfig,
    weight: int | None = None,
    font_size: float | None = None,
    line_height: float | None = None,
) -> str:
    """Declarations repeated on every text block.

    Gmail drops inherited typography in several contexts, so each block
    carries its own font, size, line height, weight and color.
    """
    size = styles.font_size if font_size is None else font_size
    weight = styles.body_weight if weight is None else weight
    line_height = styles.line_height if line_height is None else line_height
    return (
        f"font-family:{escape_font_family(styles.font_family)};"
        f"font-size:{px(size)};"
        f"line-height:{format_number(line_height)};"
        f"font-weight:{weight};"
        f"color:{hex_to_rgb(styles.text_color)};"
    )
