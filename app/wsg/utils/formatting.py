"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console

from wsg.core.theme import get_theme

_BYTE_UNITS: tuple[str, ...] = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def format_bytes(size_bytes: int) -> str:
    """Format a byte count with decimal (SI) units and two decimals.

    Examples:
        >>> format_bytes(10_000_000)
        '10.00 MB'
        >>> format_bytes(512)
        '512.00 B'

    Args:
        size_bytes: Non-negative byte count.

    Returns:
        Human-readable size string.
    """
    value = float(size_bytes)
    unit_index = 0
    while value >= 1000.0 and unit_index < len(_BYTE_UNITS) - 1:
        value /= 1000.0
        unit_index += 1
    return f"{value:.2f} {_BYTE_UNITS[unit_index]}"


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
