"""Clean command implementation.

Deletes garbage selected by index from the most recent cached listing.
The command never rescans: indices are only meaningful against the
listing the operator has actually seen.
"""

from pathlib import Path
from typing import Annotated

import typer

from wsg.cli.display import create_plan_table, create_results_table, print_results_summary
from wsg.cli.types import get_cache, require_settings
from wsg.core.paths import normalize_path
from wsg.garbage.cache import CacheError, CacheExpiredError, CacheMissingError
from wsg.garbage.models import MatchResult
from wsg.garbage.operator import GarbageOperator
from wsg.garbage.selection import SelectionError, filter_results, parse_indices
from wsg.utils.formatting import console, format_bytes, print_error, print_info, print_warning


def clean_garbage(
    ids: Annotated[
        list[str],
        typer.Argument(help="Indices to delete: 'all' or integers, e.g. 1,2,7."),
    ],
    path: Annotated[
        Path | None,
        typer.Option(
            "--path",
            "-p",
            help="Directory that was listed (default: current directory).",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete listed garbage by index.

    Examples:
        wsg clean all -p ~/code          # Delete everything listed for ~/code
        wsg clean 0,2 -p ~/code          # Delete matches 0 and 2
        wsg clean all --dry-run          # Show what would be deleted
    """
    settings = require_settings()
    root = normalize_path(path if path is not None else Path.cwd())

    try:
        indices = parse_indices(ids)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not indices:
        print_error("No indices given.")
        raise typer.Exit(code=1)

    cache = get_cache(settings)
    try:
        cached = cache.read(root)
    except (CacheMissingError, CacheExpiredError) as e:
        print_error(f"{e}. Run 'wsg list {root}' first.")
        raise typer.Exit(code=1) from e
    except CacheError as e:
        print_error(f"Cached listing is unusable ({e}). Run 'wsg list {root} --refresh'.")
        raise typer.Exit(code=1) from e

    try:
        selection = filter_results(cached, indices)
    except SelectionError as e:
        print_error(f"{e}. Run 'wsg list {root}' to see the current indices.")
        raise typer.Exit(code=1) from e

    if not selection:
        print_info("Nothing to clean.")
        return

    console.print(create_plan_table(selection, dry_run=dry_run))
    _print_plan_total(selection)

    if not dry_run and not yes:
        confirmed = typer.confirm(
            "\nAre you sure you want to delete the paths listed above?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    operator = GarbageOperator(dry_run=dry_run)
    reports = operator.execute(selection)

    console.print(create_results_table(reports))
    print_results_summary(reports)

    if not dry_run:
        try:
            cache.invalidate(root)
        except CacheMissingError:
            pass
        except CacheError as e:
            print_warning(f"Could not invalidate cached listing: {e}")

    if any(report.failed for report in reports):
        raise typer.Exit(code=1)


def _print_plan_total(selection: list[MatchResult]) -> None:
    total = sum(match.size for match in selection)
    console.print(f"\n[muted]{len(selection)} match(es), {format_bytes(total)} to free[/]")
