"""Email Styler CLI entry point."""

import sys
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer

from email_styler import __version__
from email_styler.config import get_settings
from email_styler.errors import EmailStylerError
from email_styler.export import build_mime_message
from email_styler.log import configure_logging, logger
from email_styler.rendering import markdown_to_email_html, render_email_body
from email_styler.styles import FONT_FAMILY_OPTIONS, StyleConfig, load_styles

app = typer.Typer(
    name="email-styler",
    help="Render markdown into email-safe HTML with inline styles.",
    add_completion=False,
)

SourceArg = Annotated[str, typer.Argument(help="Markdown file to render, or '-' to read stdin.")]
StylesOpt = Annotated[
    Optional[Path],
    typer.Option("--styles", "-s", help="JSON style file exported by the style controls."),
]
OutputOpt = Annotated[
    Optional[Path],
    typer.Option("--output", "-o", help="Write to this file instead of stdout."),
]


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"email-styler {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Print version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose (DEBUG) logging.",
        ),
    ] = False,
) -> None:
    """Email Styler - compose in markdown, paste inline-styled HTML into any mail client."""
    configure_logging("DEBUG" if verbose else get_settings().log_level)


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except OSError as e:
        _fail(f"Could not read {source}: {e.strerror or e}")


def _load_styles(styles_path: Path | None) -> StyleConfig:
    try:
        base = get_settings().default_styles()
        return load_styles(styles_path, base=base) if styles_path else base
    except EmailStylerError as e:
        _fail(str(e))


def _write(content: str, output: Path | None) -> None:
    if output is None:
        typer.echo(content)
        return
    output.write_text(content, encoding="utf-8")
    logger.info(f"Wrote {len(content)} characters to {output}")


@app.command()
def render(
    source: SourceArg = "-",
    styles: StylesOpt = None,
    document: Annotated[
        Optional[bool],
        typer.Option(
            "--document/--fragment",
            help="Emit a full HTML document or only the styled container (default from settings).",
        ),
    ] = None,
    output: OutputOpt = None,
) -> None:
    """Render markdown to email-safe HTML."""
    text = _read_source(source)
    style_config = _load_styles(styles)
    wrap = get_settings().wrap_in_html if document is None else document
    _write(markdown_to_email_html(text, style_config, wrap_in_html=wrap), output)


@app.command()
def preview(
    source: SourceArg = "-",
    styles: StylesOpt = None,
    output: OutputOpt = None,
) -> None:
    """Render only the content blocks, without container or footer."""
    text = _read_source(source)
    _write(render_email_body(text, _load_styles(styles)), output)


@app.command()
def export(
    source: SourceArg,
    output: Annotated[Path, typer.Option("--output", "-o", help="Path of the .eml draft to write.")],
    subject: Annotated[Optional[str], typer.Option("--subject", help="Subject header.")] = None,
    sender: Annotated[Optional[str], typer.Option("--sender", help="From header.")] = None,
    to: Annotated[Optional[list[str]], typer.Option("--to", help="Recipient address (repeatable).")] = None,
    styles: StylesOpt = None,
) -> None:
    """Write a multipart/alternative .eml draft of the rendered email."""
    text = _read_source(source)
    html = markdown_to_email_html(text, _load_styles(styles), wrap_in_html=True)
    message = build_mime_message(html, subject=subject, sender=sender, recipients=to)
    output.write_bytes(message.as_bytes())
    typer.echo(f"Draft written to {output}")


@app.command()
def fonts() -> None:
    """List the font stacks offered by the style controls."""
    for option in FONT_FAMILY_OPTIONS:
        typer.echo(f"{option.label}: {option.value}")


@app.command()
def stdio() -> None:
    """Run the MCP server over stdio."""
    from email_styler.app import mcp

    mcp.run(transport="stdio")


if __name__ == "__main__":
    app()
