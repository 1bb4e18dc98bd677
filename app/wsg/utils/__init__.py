"""Utility modules for wsg.

This module exports commonly used utility functions.
"""

from wsg.utils.formatting import (
    console,
    err_console,
    format_bytes,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "err_console",
    "format_bytes",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
