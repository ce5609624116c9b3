"""Unhide command implementation.

Clears the Finder hidden flag on the same entries the hide command
targets, undoing a previous run.
"""

import typer

from finderveil.cli.commands.hide import DryRunOption, ExcludeOption, RestartOption
from finderveil.cli.workflow import get_config, run_batch
from finderveil.core.hider import VISIBLE_FLAG

app = typer.Typer(
    help="Make previously hidden applications visible again.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def unhide_apps(
    ctx: typer.Context,
    exclude: ExcludeOption = None,
    dry_run: DryRunOption = False,
    restart: RestartOption = None,
) -> None:
    """Clear the hidden flag on every non-excluded entry."""
    config = get_config(ctx, exclude)
    run_batch(
        config,
        flag=VISIBLE_FLAG,
        verb="unhidden",
        action="Unhiding",
        dry_run=dry_run,
        restart=restart,
    )
