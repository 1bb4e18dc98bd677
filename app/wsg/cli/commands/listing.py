"""List command implementation.

Shows the recognized project garbage under a directory, reusing a fresh
cached listing when one exists so that indices stay stable for a
following clean.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from wsg.cli.display import print_matches
from wsg.cli.types import get_cache, get_recognizers, require_settings
from wsg.core.paths import normalize_path
from wsg.garbage.cache import CacheError, CacheExpiredError, CacheMissingError, ResultCache
from wsg.garbage.models import MatchResult
from wsg.garbage.scanner import GarbageScanner, WalkError
from wsg.utils.formatting import console, print_error, print_info, print_success, print_warning

logger = logging.getLogger(__name__)


def list_garbage(
    path: Annotated[
        Path | None,
        typer.Argument(help="Directory to scan (default: current directory)."),
    ] = None,
    include: Annotated[
        list[str] | None,
        typer.Option(
            "--include",
            "-i",
            help="Only use these recognizers (comma-separated, case-insensitive).",
        ),
    ] = None,
    exclude: Annotated[
        list[str] | None,
        typer.Option(
            "--exclude",
            "-x",
            help="Skip these recognizers (comma-separated, case-insensitive).",
        ),
    ] = None,
    refresh: Annotated[
        bool,
        typer.Option("--refresh", "-r", help="Ignore cached results and rescan."),
    ] = False,
) -> None:
    """List project garbage found under a directory.

    Examples:
        wsg list                         # Scan the current directory
        wsg list ~/code                  # Scan ~/code
        wsg list ~/code --include NodeJS # Only look for node_modules
        wsg list ~/code --refresh        # Rescan even if cached
    """
    settings = require_settings()
    root = normalize_path(path if path is not None else Path.cwd())
    recognizers = get_recognizers(settings, include, exclude)
    cache = get_cache(settings)
    names = [recognizer.name for recognizer in recognizers]

    results, replace = (None, True) if refresh else _read_cached(cache, root, names)
    if results is None:
        results = _scan_and_cache(
            cache, root, GarbageScanner(recognizers), names, replace=replace
        )

    if not results:
        print_success(f"No garbage found in {root}.")
        return

    print_matches(results)
    console.print(
        "[muted]Use 'wsg clean <ids...>' to delete garbage. "
        "<ids...> can be 'all' or integers separated by commas, e.g. 1,2,7[/]"
    )


def _read_cached(
    cache: ResultCache,
    root: Path,
    names: list[str],
) -> tuple[list[MatchResult] | None, bool]:
    """Read cached results made with the given recognizers.

    Returns:
        The cached results, or None when no usable entry exists, and whether
        an existing entry must be dropped before the rescan is written.
    """
    try:
        return cache.read(root, recognizers=names), False
    except (CacheMissingError, CacheExpiredError) as e:
        logger.debug("No usable cache for %s: %s", root, e)
        return None, False
    except CacheError as e:
        logger.debug("Replacing cache entry for %s: %s", root, e)
        return None, True


def _scan_and_cache(
    cache: ResultCache,
    root: Path,
    scanner: GarbageScanner,
    names: list[str],
    replace: bool,
) -> list[MatchResult]:
    """Scan ``root`` and store the results.

    Args:
        cache: Result cache to write.
        root: Directory to scan.
        scanner: Configured scanner.
        names: Names of the scanner's recognizers, stored with the entry.
        replace: Drop any existing entry first, even if still fresh.

    Returns:
        Scan results.

    Raises:
        typer.Exit: If the scan fails.
    """
    print_info(f"Scanning {root} ...")
    try:
        results = scanner.scan(root)
    except WalkError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    try:
        if replace:
            try:
                cache.invalidate(root)
            except CacheMissingError:
                pass
        cache.write(root, results, recognizers=names)
    except CacheError as e:
        print_warning(f"Could not cache results: {e}")

    return results
