from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from email_styler.config import get_settings
from email_styler.export import ClipboardPayload, build_clipboard_payload
from email_styler.rendering import markdown_to_email_html, render_email_body
from email_styler.styles import FONT_FAMILY_OPTIONS, FontFamilyOption, StyleConfig

mcp = FastMCP("email-styler")

StylesParam = Annotated[
    StyleConfig | None,
    Field(
        default=None,
        description="Style parameters (camelCase or snake_case keys). Omitted fields use the configured defaults.",
    ),
]


def _resolve_styles(styles: StyleConfig | None) -> StyleConfig:
    settings = get_settings()
    if styles is None:
        return settings.default_styles()
    # Only the fields the caller actually sent override the configured defaults
    return settings.default_styles().merged(**styles.model_dump(exclude_unset=True))


@mcp.resource("styles://default")
async def get_default_styles_resource() -> StyleConfig:
    return get_settings().default_styles()


@mcp.tool(description="Get the default style parameters used when a render call omits them.")
async def get_default_styles() -> StyleConfig:
    return get_settings().default_styles()


@mcp.tool(description="List the font stacks offered by the style controls.")
async def list_font_families() -> list[FontFamilyOption]:
    return list(FONT_FAMILY_OPTIONS)


@mcp.tool(
    description="Render markdown into email-safe HTML that uses inline styles only. Returns a container fragment, or a full HTML document when wrap_in_html is true."
)
async def render_email_html(
    markdown: Annotated[str, Field(description="The markdown text of the email.")],
    styles: StylesParam = None,
    wrap_in_html: Annotated[
        bool | None,
        Field(default=None, description="Wrap in a full HTML document. Defaults to the configured setting."),
    ] = None,
) -> str:
    if wrap_in_html is None:
        wrap_in_html = get_settings().wrap_in_html
    return markdown_to_email_html(markdown, _resolve_styles(styles), wrap_in_html=wrap_in_html)


@mcp.tool(description="Render only the content blocks of the email (no container, no footer) for previewing.")
async def render_email_preview(
    markdown: Annotated[str, Field(description="The markdown text of the email.")],
    styles: StylesParam = None,
) -> str:
    return render_email_body(markdown, _resolve_styles(styles))


@mcp.tool(
    description="Render markdown into a full HTML email document packaged for the clipboard as text/html and text/plain."
)
async def get_clipboard_payload(
    markdown: Annotated[str, Field(description="The markdown text of the email.")],
    styles: StylesParam = None,
) -> ClipboardPayload:
    return build_clipboard_payload(markdown, _resolve_styles(styles), wrap_in_html=True)
