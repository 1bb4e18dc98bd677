"""CLI package for wsg.

This package contains the Typer application and all subcommands.
"""

from wsg.cli.main import app

__all__ = ["app"]
