"""CLI commands for wsg.

This package contains all subcommand implementations.
"""

from wsg.cli.commands import cache, clean, listing, recognizers

__all__ = ["cache", "clean", "listing", "recognizers"]
