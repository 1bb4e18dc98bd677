"""Recognizers command implementation.

Lists the built-in recognizers and the markers they look for.
"""

from wsg.cli.display import create_recognizers_table
from wsg.recognizers.registry import BUILTIN_RECOGNIZERS
from wsg.utils.formatting import console


def list_recognizers() -> None:
    """Show the available recognizers."""
    console.print(create_recognizers_table(BUILTIN_RECOGNIZERS))
    console.print(
        "\n[muted]Filter with --include/--exclude on 'wsg list', "
        "or include_recognizers/exclude_recognizers in config.toml.[/]"
    )
