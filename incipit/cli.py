"""Command-line interface for Incipit."""

import logging
import sys
from pathlib import Path

import click
import typer
from pydantic import ValidationError
from rich.console import Console
from typer.core import TyperCommand

from incipit.config import Settings, get_settings
from incipit.pager import Pager, PagerApp
from incipit.render import render_markdown
from incipit.theme import choose_theme

USAGE = "Usage: incipit [--dark|--light] [--no-pager] [--no-color] <file.md>"

app = typer.Typer(
    name="incipit",
    help="Incipit - a terminal pager for Markdown documents",
    add_completion=False,
)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)


class IncipitCommand(TyperCommand):
    """Command that reports every usage error with exit code 1."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


def fail(message: str) -> typer.Exit:
    """Print an error on stderr and build the exit for it."""
    err_console.print(f"incipit: {message}", markup=False)
    return typer.Exit(1)


def configure_logging(settings: Settings) -> None:
    """Send debug logs to INCIPIT_LOG_FILE when it is set."""
    if settings.incipit_log_file is None:
        return
    logging.basicConfig(
        filename=settings.incipit_log_file,
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command(cls=IncipitCommand)
def main(
    files: list[str] | None = typer.Argument(None, metavar="FILE", help="Markdown file to view"),
    dark: bool = typer.Option(False, "--dark", help="Force dark color theme (default)"),
    light: bool = typer.Option(False, "--light", help="Force light color theme"),
    no_pager: bool = typer.Option(False, "--no-pager", help="Print rendered output without interactive pager"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI colors"),
) -> None:
    """
    View a Markdown file in an interactive pager.

    Output goes straight to stdout when it is not a terminal or --no-pager is given:
        incipit README.md | less -R
    """
    if dark and light:
        raise fail("--dark and --light are mutually exclusive")

    if not files or len(files) != 1:
        err_console.print(USAGE, markup=False)
        raise typer.Exit(1)

    try:
        settings = get_settings()
    except ValidationError as e:
        raise fail(f"invalid configuration: {e}")
    configure_logging(settings)

    filename = files[0]
    try:
        content = Path(filename).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise fail(str(e))

    theme = choose_theme(dark, light, no_color, settings.no_color_requested)

    # Non-interactive mode: --no-pager flag or stdout is not a TTY
    if no_pager or not sys.stdout.isatty():
        typer.echo(render_markdown(content, theme, settings.incipit_width), nl=False, color=True)
        return

    try:
        PagerApp(Pager(filename, content, theme)).run()
    except Exception as e:
        raise fail(str(e))


if __name__ == "__main__":
    app()
