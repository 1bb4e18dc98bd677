"""Main CLI application entry point.

Defines the Typer application, global options and logging setup.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from wsg import __version__
from wsg.cli.commands import cache, clean, listing, recognizers
from wsg.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="wsg",
    help="Reclaim disk space from project build and dependency artifacts.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"wsg version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Route wsg log records to stderr through Rich.

    Args:
        verbose: Show DEBUG records.
        quiet: Only show ERROR records.
    """
    logger = logging.getLogger("wsg")
    if verbose:
        logger.setLevel(logging.DEBUG)
    elif quiet:
        logger.setLevel(logging.ERROR)
    else:
        logger.setLevel(logging.WARNING)

    # Clear existing handlers to avoid duplicates across invocations
    if logger.handlers:
        logger.handlers.clear()

    handler = RichHandler(console=err_console, show_time=verbose, show_path=False)
    logger.addHandler(handler)


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """wsg - Find and delete build and dependency folders of your projects.

    List the garbage under a directory, then clean it by index.
    """
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    configure_logging(verbose=verbose, quiet=quiet)


# Register commands
app.command(name="list")(listing.list_garbage)
app.command(name="clean")(clean.clean_garbage)
app.command(name="recognizers")(recognizers.list_recognizers)
app.add_typer(cache.app, name="cache")


if __name__ == "__main__":
    app()
