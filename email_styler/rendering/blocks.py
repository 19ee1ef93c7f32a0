"""Block records to inline-styled HTML fragments.

Each renderer returns one fragment whose outermost element starts its style
attribute with a ``margin:T 0 B 0;`` declaration, so the document assembler
can collapse the bottom margin of whichever block comes last.
"""

from collections.abc import Callable
from typing import Any

from email_styler.rendering.css import (
    MONOSPACE_STACK,
    format_number,
    hex_to_rgb,
    hex_to_rgba,
    margin,
    px,
    round_half_up,
    text_declarations,
)
from email_styler.rendering.inline import escape_attr, escape_code, format_inline
from email_styler.rendering.parser import (
    Block,
    Blockquote,
    CodeFence,
    Heading,
    HorizontalRule,
    Image,
    ListBlock,
    Paragraph,
    Table,
)
from email_styler.styles import StyleConfig

HEADING_SCALE = {1: 2.25, 2: 1.6, 3: 1.2}
HEADING_LINE_HEIGHT_SCALE = 0.9
CODE_FONT_SCALE = 0.9
LIST_INDENT = 24  # px


def render_heading(block: Heading, styles: StyleConfig, first: bool) -> str:
    top = "0" if first else f"{format_number(styles.heading_top_margin)}rem"
    size = round_half_up(styles.font_size * HEADING_SCALE.get(block.level, 1.0))
    style = (
        margin(top, px(styles.paragraph_spacing))
        + text_declarations(
            styles,
            weight=styles.heading_weight,
            font_size=size,
            line_height=styles.line_height * HEADING_LINE_HEIGHT_SCALE,
        )
    )
    tag = f"h{block.level}"
    return f'<{tag} style="{style}">{format_inline(block.text, render_bold=False)}</{tag}>'


def render_paragraph(block: Paragraph, styles: StyleConfig, first: bool) -> str:
    style = margin("0", px(styles.paragraph_spacing)) + text_declarations(styles)
    return f'<p style="{style}">{format_inline(block.text)}</p>'


def render_list(block: ListBlock, styles: StyleConfig, first: bool) -> str:
    tag = block.kind.value
    start = f' start="{block.start}"' if tag == "ol" else ""
    list_style = (
        margin("0", px(styles.paragraph_spacing))
        + f"padding:0 0 0 {LIST_INDENT}px;"
        + text_declarations(styles)
    )
    item_style = margin("0", px(round_half_up(styles.paragraph_spacing / 2))) + text_declarations(styles)
    items = "".join(f'<li style="{item_style}">{format_inline(item)}</li>' for item in block.items)
    return f'<{tag}{start} style="{list_style}">{items}</{tag}>'


def render_blockquote(block: Blockquote, styles: StyleConfig, first: bool) -> str:
    style = (
        margin("0", px(styles.paragraph_spacing))
        + f"padding:0 0 0 16px;border-left:3px solid {hex_to_rgb(styles.text_color)};"
        + text_declarations(styles)
    )
    body = "<br>".join(format_inline(line) for line in block.lines)
    return f'<blockquote style="{style}">{body}</blockquote>'


def render_code_fence(block: CodeFence, styles: StyleConfig, first: bool) -> str:
    style = (
        margin("0", px(styles.paragraph_spacing))
        + "padding:12px 16px;background-color:rgba(0,0,0,0.05);border-radius:6px;"
        + "overflow-x:auto;white-space:pre;"
        + f"font-family:{MONOSPACE_STACK};"
        + f"font-size:{px(round_half_up(styles.font_size * CODE_FONT_SCALE))};"
        + f"line-height:{format_number(styles.line_height)};"
        + f"color:{hex_to_rgb(styles.text_color)};"
    )
    code = "\n".join(escape_code(line) for line in block.lines)
    return f'<pre style="{style}"><code style="font-family:inherit;">{code}</code></pre>'


def render_table(block: Table, styles: StyleConfig, first: bool) -> str:
    table_style = (
        margin("0", px(styles.paragraph_spacing))
        + "border-collapse:collapse;width:100%;"
        + text_declarations(styles)
    )
    cell_style = f"border:1px solid {hex_to_rgba(styles.text_color, 0.2)};padding:6px 10px;text-align:left;"
    header_style = cell_style + f"font-weight:{styles.heading_weight};"
    rows = []
    for index, row in enumerate(block.rows):
        if index == 0 and block.has_header:
            cells = "".join(f'<th style="{header_style}">{format_inline(cell)}</th>' for cell in row)
        else:
            cells = "".join(f'<td style="{cell_style}">{format_inline(cell)}</td>' for cell in row)
        rows.append(f"<tr>{cells}</tr>")
    return (
        f'<table cellpadding="0" cellspacing="0" border="0" style="{table_style}">'
        + "".join(rows)
        + "</table>"
    )


def render_horizontal_rule(block: HorizontalRule, styles: StyleConfig, first: bool) -> str:
    spacing = px(styles.paragraph_spacing)
    style = (
        margin(spacing, spacing)
        + f"border:0;border-top:1px solid {hex_to_rgb(styles.text_color)};height:0;opacity:0.3;"
    )
    return f'<hr style="{style}">'


def render_image(block: Image, styles: StyleConfig, first: bool) -> str:
    # Some clients strip border-radius from <img> but keep it on a block
    # wrapper, so the wrapper clips the corners.
    wrapper_style = (
        margin("0", px(styles.paragraph_spacing))
        + f"border-radius:{px(styles.image_radius)};overflow:hidden;line-height:0;font-size:0;"
    )
    img_style = "display:block;max-width:100%;height:auto;border:0;"
    return (
        f'<div style="{wrapper_style}">'
        f'<img src="{escape_attr(block.src)}" alt="{escape_attr(block.alt)}" style="{img_style}">'
        "</div>"
    )


_RENDERERS: dict[type, Callable[[Any, StyleConfig, bool], str]] = {
    Heading: render_heading,
    Paragraph: render_paragraph,
    ListBlock: render_list,
    Blockquote: render_blockquote,
    CodeFence: render_code_fence,
    Table: render_table,
    HorizontalRule: render_horizontal_rule,
    Image: render_image,
}


def render_block(block: Block, styles: StyleConfig, first: bool = False) -> str:
    """Render one block; ``first`` is True for the first block of the document."""
    return _RENDERERS[type(block)](block, styles, first)


def render_blocks(blocks: list[Block], styles: StyleConfig) -> list[str]:
    return [render_block(block, styles, first=index == 0) for index, block in enumerate(blocks)]
