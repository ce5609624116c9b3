"""The hide/unhide workflow shared by the CLI commands.

Privilege gate, target resolution, batch flag setting and report
finalization run in that order, once.
"""

import logging
import sys

import typer

from finderveil.cli.display import (
    print_batch_header,
    print_report_kept,
    print_result_line,
    print_results_summary,
    print_superuser_reminder,
)
from finderveil.core.config import HideConfig, load_config
from finderveil.core.errors import FinderveilError
from finderveil.core.hider import AttributeSetter, HideResult
from finderveil.core.paths import get_report_path
from finderveil.core.privilege import is_superuser
from finderveil.core.report import ReportFile, ReportOutcome
from finderveil.core.restart import restart_process, should_restart
from finderveil.core.targets import resolve_targets
from finderveil.utils.formatting import console, print_error, print_info, print_warning
from finderveil.utils.shell import command_exists

logger = logging.getLogger(__name__)

# Exit code when the privilege check fails
EXIT_NOT_SUPERUSER = -1


def get_config(ctx: typer.Context, exclude: list[str] | None = None) -> HideConfig:
    """Load the configuration selected by the global --config option.

    Args:
        ctx: Typer context carrying global options.
        exclude: Extra names to exclude for this run.

    Returns:
        HideConfig with the extra exclusions applied.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    obj = ctx.find_root().obj or {}
    try:
        config = load_config(obj.get("config_path"))
    except FinderveilError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    return config.with_exclusions(exclude)


def read_answer() -> str | None:
    """Read one line from standard input.

    Returns:
        The line, or None at end of input.
    """
    line = sys.stdin.readline()
    return line or None


def run_batch(
    config: HideConfig,
    *,
    flag: str,
    verb: str,
    action: str,
    dry_run: bool = False,
    restart: bool | None = None,
) -> list[HideResult]:
    """Run the full workflow for one flag.

    Args:
        config: Workflow configuration.
        flag: chflags flag to set.
        verb: Past participle for the header ("hidden").
        action: Present participle for status lines ("Hiding").
        dry_run: If True, skip the privilege check and execute nothing.
        restart: Answer to the restart question; None asks interactively.

    Returns:
        One HideResult per processed entry.

    Raises:
        typer.Exit: On failed privilege check or fatal precondition errors.
    """
    print_superuser_reminder()
    if not dry_run and not is_superuser(config.id_path):
        print_error("This command must be run as superuser. Try again with sudo.")
        raise typer.Exit(code=EXIT_NOT_SUPERUSER)

    setter = AttributeSetter(chflags=config.chflags_path, flag=flag, dry_run=dry_run)
    results: list[HideResult] = []
    report: ReportFile | None = None
    outcome: ReportOutcome | None = None
    try:
        targets = resolve_targets(config.apps_dir, config.excluded)
        print_batch_header(len(targets), verb)

        if not dry_run:
            if targets and not command_exists(config.chflags_path):
                print_warning(f"{config.chflags_path} not found; every entry will fail.")
            report = ReportFile.create(get_report_path(config.report_name))

        for result in setter.apply(targets, config.apps_dir, report):
            print_result_line(result, action)
            results.append(result)

        if report is not None:
            outcome = report.finalize()
    except OSError as e:
        print_error(f"Batch aborted: {e}")
        raise typer.Exit(code=1) from e
    except FinderveilError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    finally:
        if report is not None and not report.closed:
            report.close()

    print_results_summary(results)

    if outcome is None:
        # Dry-run: no report, nothing to restart
        return results

    if outcome.kept:
        print_report_kept(outcome)
        return results

    if restart is None:
        console.print(f"\nRestart {config.restart_target} now? (y/N) ", end="")
        restart = should_restart(read_answer())

    if restart:
        logger.info("Restarting %s", config.restart_target)
        restart_process(config.restart_target, config.killall_path)
        print_info(f"{config.restart_target} restarted.")

    return results
