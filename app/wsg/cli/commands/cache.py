"""Cache management commands.

Provides commands to inspect and clear cached scan results.
"""

from pathlib import Path
from typing import Annotated

import typer

from wsg.cli.types import get_cache, require_settings
from wsg.core.paths import normalize_path
from wsg.garbage.cache import CacheError
from wsg.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Inspect and clear cached scan results.",
    no_args_is_help=True,
)


@app.command()
def clear() -> None:
    """Remove every cached scan result regardless of age."""
    cache = get_cache(require_settings())

    try:
        removed = cache.clear_all()
    except CacheError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if removed:
        print_success(f"Removed {removed} cached listing(s) from {cache.cache_dir}.")
    else:
        print_info("Cache is already empty.")


@app.command()
def path(
    root: Annotated[
        Path | None,
        typer.Argument(help="Scanned directory (default: current directory)."),
    ] = None,
) -> None:
    """Show where the listing for a directory is cached and whether it is fresh."""
    cache = get_cache(require_settings())
    target = normalize_path(root if root is not None else Path.cwd())
    location = cache.location_for(target)

    try:
        age = cache.age_of(target)
    except CacheError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    console.print(f"{target} -> {location}")
    if age is None:
        print_info("No cached listing.")
    elif age < cache.ttl:
        print_success(f"Fresh ({age:.0f}s old, ttl {cache.ttl:.0f}s).")
    else:
        print_info(f"Expired ({age:.0f}s old, ttl {cache.ttl:.0f}s).")
