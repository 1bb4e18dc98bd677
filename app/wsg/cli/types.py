"""Shared helpers for CLI commands.

This module provides the settings, recognizer and cache wiring used by
several command modules, mapping their errors to CLI exits.
"""

from collections.abc import Iterable

import typer

from wsg.core.settings import Settings, SettingsError, load_settings
from wsg.garbage.cache import ResultCache
from wsg.recognizers.models import Recognizer
from wsg.recognizers.registry import UnknownRecognizerError, select_recognizers
from wsg.utils.formatting import print_error


def split_names(values: Iterable[str] | None) -> list[str]:
    """Flatten repeated and comma-separated name options.

    Args:
        values: Raw option values such as ``["NodeJS,Rust", "Flutter"]``.

    Returns:
        Individual non-empty names.
    """
    if not values:
        return []
    return [name.strip() for value in values for name in value.split(",") if name.strip()]


def require_settings() -> Settings:
    """Load settings or exit with an error.

    Returns:
        Loaded Settings (defaults if no settings file exists).

    Raises:
        typer.Exit: If the settings file is invalid.
    """
    try:
        return load_settings()
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def get_recognizers(
    settings: Settings,
    include: list[str] | None = None,
    exclude: list[str] | None = None,
) -> list[Recognizer]:
    """Select recognizers from CLI filters, falling back to settings.

    Args:
        settings: Loaded settings providing default filters.
        include: Names given with ``--include``.
        exclude: Names given with ``--exclude``.

    Returns:
        Selected recognizers in registry order.

    Raises:
        typer.Exit: If a filter names an unknown recognizer or nothing remains.
    """
    include_names = split_names(include) or settings.include_recognizers
    exclude_names = split_names(exclude) or settings.exclude_recognizers

    try:
        recognizers = select_recognizers(include_names, exclude_names)
    except UnknownRecognizerError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not recognizers:
        print_error("No recognizers selected. Check --include/--exclude.")
        raise typer.Exit(code=1)

    return recognizers


def get_cache(settings: Settings) -> ResultCache:
    """Create the result cache configured by settings."""
    return ResultCache(ttl=settings.cache_ttl_seconds)
