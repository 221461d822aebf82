"""Typer application root for the minigrep CLI."""

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from minigrep import __version__
from minigrep.config import (
    CASE_INSENSITIVE_ENV_VAR,
    EXIT_FAILURE,
    PROGRAM_NAME,
    get_settings,
)
from minigrep.core import ConfigurationError, FileReadError, SearchConfig, get_logger
from minigrep.pipeline import run

logger = get_logger(__name__)

# Errors go to stderr; stdout is reserved for matching lines.
err_console = Console(stderr=True, soft_wrap=True)

app = typer.Typer(
    name=PROGRAM_NAME,
    help=(
        "Print every line of a file that contains a query string. "
        f"Set {CASE_INSENSITIVE_ENV_VAR} to any non-empty value to ignore case."
    ),
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"{PROGRAM_NAME} {__version__}")
        raise typer.Exit()


# Queries may start with "-" and extra positionals are ignored, so unknown
# options and surplus arguments are handed through as plain arguments.
@app.command(
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
def main(
    ctx: typer.Context,
    query: Annotated[
        Optional[str],
        typer.Argument(help="Substring to search for.", show_default=False),
    ] = None,
    filename: Annotated[
        Optional[str],
        typer.Argument(help="File to search.", show_default=False),
    ] = None,
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """
    Print every line of FILENAME that contains QUERY.

    Set CASE_INSENSITIVE to any non-empty value to ignore case.

    Examples:

        minigrep frog poem.txt

        CASE_INSENSITIVE=1 minigrep to poem.txt

        minigrep -- --version notes.txt
    """
    args = [arg for arg in (query, filename) if arg is not None] + list(ctx.args)

    try:
        settings = get_settings()
        config = SearchConfig.from_args(
            args,
            case_insensitive=settings.search.case_insensitive,
        )
    except ConfigurationError as e:
        err_console.print(f"[red]Problem parsing arguments:[/red] {escape(str(e))}")
        raise typer.Exit(code=EXIT_FAILURE) from None

    try:
        run(config, encoding=settings.read.encoding)
    except FileReadError as e:
        logger.debug("Read failed: kind=%s", e.kind.value)
        err_console.print(f"[red]Application error:[/red] {escape(str(e))}")
        raise typer.Exit(code=EXIT_FAILURE) from None
