"""Shared Rich display functions for the hide workflow.

Provides the per-entry status line, the batch header and the report
messages used by the hide and unhide commands.
"""

from rich.markup import escape
from rich.table import Table

from finderveil.core.hider import HideResult
from finderveil.core.report import ReportOutcome
from finderveil.utils.formatting import console, print_banner


def print_batch_header(count: int, verb: str) -> None:
    """Print the number of entries about to be processed."""
    console.print(f"[info] {count} files to be {verb}:[/]")


def print_result_line(result: HideResult, action: str) -> None:
    """Print one status line for a processed entry.

    Args:
        result: Outcome for the entry.
        action: Present participle shown before the name ("Hiding").
    """
    if result.dry_run:
        status = "[muted] dry-run [/]"
    elif result.success:
        status = "[ok] OK [/]"
    else:
        status = "[nok] NOK [/]"
    console.print(f"\t{action} [item]{escape(result.name)}[/] … {status}")


def print_report_kept(outcome: ReportOutcome) -> None:
    """Point the user at a report that holds command output."""
    console.print()
    console.print(f"[nok] See {escape(str(outcome.path))} for report. [/]")
    console.print("[nok] Did you run the command as superuser? [/]")


def print_results_summary(results: list[HideResult]) -> None:
    """Print a one-line count of succeeded and failed entries."""
    fail_count = sum(1 for r in results if not r.success)
    success_count = len(results) - fail_count
    if fail_count:
        console.print(
            f"\n[success]{success_count} succeeded[/success], [error]{fail_count} failed[/error]"
        )
    else:
        console.print(f"\n[success]All {success_count} entries processed.[/success]")


def create_targets_table(targets: tuple[str, ...], apps_dir: str) -> Table:
    """Create a Rich table listing resolved targets.

    Args:
        targets: Sorted entry names.
        apps_dir: Directory the names belong to.

    Returns:
        Rich Table with one row per target.
    """
    table = Table(title=f"Targets in {escape(apps_dir)}", show_header=True)
    table.add_column("#", justify="right", style="muted")
    table.add_column("Entry", no_wrap=True, style="item")
    for index, name in enumerate(targets, start=1):
        table.add_row(str(index), escape(name))
    return table


def print_superuser_reminder() -> None:
    """Remind the user that the command needs root."""
    print_banner("Remember to run this command as superuser.")
