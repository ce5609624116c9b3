"""List command implementation.

Shows which entries the hide command would touch, without running it.
"""

import json
from typing import Annotated

import typer

from finderveil.cli.commands.hide import ExcludeOption
from finderveil.cli.display import create_targets_table
from finderveil.cli.workflow import get_config
from finderveil.core.errors import TargetResolutionError
from finderveil.core.targets import resolve_targets
from finderveil.utils.formatting import console, print_error, print_success

app = typer.Typer(
    help="List the entries that would be hidden.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def list_targets(
    ctx: typer.Context,
    exclude: ExcludeOption = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the target names as a JSON array."),
    ] = False,
) -> None:
    """List the resolved targets in processing order."""
    config = get_config(ctx, exclude)

    try:
        targets = resolve_targets(config.apps_dir, config.excluded)
    except TargetResolutionError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if as_json:
        console.print_json(json.dumps(list(targets)))
        return

    if not targets:
        print_success(f"Nothing to hide in {config.apps_dir}.")
        return

    console.print(create_targets_table(targets, config.apps_dir))
    console.print(f"\n[dim]{len(targets)} entries, {len(config.excluded)} excluded names[/dim]")
