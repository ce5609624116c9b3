"""Hide command implementation.

Sets the Finder hidden flag on every non-excluded entry of the
applications directory.
"""

from typing import Annotated

import typer

from finderveil.cli.workflow import get_config, run_batch
from finderveil.core.hider import HIDDEN_FLAG

app = typer.Typer(
    help="Hide non-Apple applications from Finder.",
    invoke_without_command=True,
)

ExcludeOption = Annotated[
    list[str] | None,
    typer.Option(
        "--exclude",
        "-x",
        help="Additional entry name to leave untouched (repeatable).",
    ),
]
DryRunOption = Annotated[
    bool,
    typer.Option("--dry-run", help="Show what would be done without running chflags."),
]
RestartOption = Annotated[
    bool | None,
    typer.Option(
        "--restart/--no-restart",
        help="Restart the Dock afterwards without asking.",
        show_default=False,
    ),
]


@app.callback(invoke_without_command=True)
def hide_apps(
    ctx: typer.Context,
    exclude: ExcludeOption = None,
    dry_run: DryRunOption = False,
    restart: RestartOption = None,
) -> None:
    """Hide every non-excluded entry in the applications directory."""
    config = get_config(ctx, exclude)
    run_batch(
        config,
        flag=HIDDEN_FLAG,
        verb="hidden",
        action="Hiding",
        dry_run=dry_run,
        restart=restart,
    )
