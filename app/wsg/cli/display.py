"""Shared Rich display functions for matches and deletion reports.

Provides the panels and tables used by the list and clean commands.
"""

from collections.abc import Sequence

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from wsg.garbage.models import DeleteOperationSelection, MatchResult
from wsg.garbage.scanner import total_size
from wsg.recognizers.models import PathSignature, Recognizer, SignatureKind
from wsg.utils.formatting import console, format_bytes, print_success, print_warning


def create_match_panel(match: MatchResult) -> Panel:
    """Create a boxed panel describing a single match.

    The title carries the index and recognizer name; the body lists the
    project folder, the cleanable size and every deletable path.

    Args:
        match: Match to display.

    Returns:
        Rich Panel for the match.
    """
    lines = [
        f"[muted]Project folder:[/] {escape(str(match.directory))}",
        f"[muted]To clean:[/] [size]{format_bytes(match.size)}[/]",
    ]
    lines.extend(
        f"[muted]Deletable:[/] [deletable]{escape(str(path))}[/]" for path in match.deletable
    )

    return Panel(
        "\n".join(lines),
        title=f"[index][{match.index}][/] [recognizer]{match.recognizer_name}[/]",
        title_align="left",
        border_style="border",
    )


def print_matches(results: Sequence[MatchResult]) -> None:
    """Print every match as a panel followed by the cleanable total.

    Args:
        results: Matches in index order.
    """
    for match in results:
        console.print(create_match_panel(match))

    console.print(f"\nCleanable storage: [size]{format_bytes(total_size(results))}[/]\n")


def create_plan_table(results: Sequence[MatchResult], dry_run: bool = False) -> Table:
    """Create a table of planned deletions.

    Args:
        results: Selected matches.
        dry_run: Whether this is a dry-run (changes table title).

    Returns:
        Rich Table configured for the deletion plan.
    """
    title = "Planned Deletions (dry-run)" if dry_run else "Planned Deletions"

    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("#", justify="right", width=4)
    table.add_column("Recognizer", no_wrap=True)
    table.add_column("Delete", style="deletable")
    table.add_column("Size", justify="right", style="size")

    for match in results:
        paths = "\n".join(escape(str(path)) for path in match.deletable)
        table.add_row(
            f"[index]{match.index}[/]",
            f"[recognizer]{match.recognizer_name}[/]",
            paths,
            format_bytes(match.size),
        )

    return table


def create_results_table(reports: Sequence[DeleteOperationSelection]) -> Table:
    """Create a table of per-path deletion outcomes.

    Args:
        reports: Reports returned by the operator.

    Returns:
        Rich Table configured for results display.
    """
    table = Table(
        title="Deletion Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("Recognizer", no_wrap=True)
    table.add_column("Path")
    table.add_column("Details", style="muted")

    for report in reports:
        for result in report.results:
            if result.dry_run:
                status = "[info]dry-run[/]"
                detail = "Would delete"
            elif result.success:
                status = "[success]OK[/]"
                detail = ""
            else:
                status = "[error]FAIL[/]"
                detail = result.error_message or "Unknown error"
            table.add_row(status, report.name, escape(str(result.path)), escape(detail))

    return table


def print_results_summary(reports: Sequence[DeleteOperationSelection]) -> None:
    """Print a summary of deletion outcomes.

    Args:
        reports: Reports returned by the operator.
    """
    results = [result for report in reports for result in report.results]
    dry_count = sum(1 for r in results if r.dry_run)
    success_count = sum(1 for r in results if r.success and not r.dry_run)
    fail_count = sum(1 for r in results if not r.success)

    if dry_count:
        console.print(f"[info]Dry-run: {dry_count} path(s) would be deleted.[/]")
    elif fail_count:
        print_warning(f"{success_count} succeeded, {fail_count} failed")
    else:
        print_success(f"All {success_count} path(s) deleted successfully.")


def create_recognizers_table(recognizers: Sequence[Recognizer]) -> Table:
    """Create a table describing recognizers and their markers.

    Args:
        recognizers: Recognizers to display.

    Returns:
        Rich Table configured for recognizer display.
    """
    table = Table(
        title="Recognizers",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Name", style="recognizer", no_wrap=True)
    table.add_column("Recognized by")
    table.add_column("Deletes", style="deletable")

    for recognizer in recognizers:
        table.add_row(
            recognizer.name,
            ", ".join(_format_signature(marker) for marker in recognizer.presence_markers),
            ", ".join(_format_signature(marker) for marker in recognizer.deletable_markers),
        )

    return table


def _format_signature(signature: PathSignature) -> str:
    """Render a marker, suffixing directories with a slash."""
    if signature.kind == SignatureKind.DIRECTORY:
        return f"{signature.path}/"
    return signature.path
