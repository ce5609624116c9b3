"""Configuration commands.

Shows where the configuration lives, prints the effective settings and
writes a starter file with the defaults.
"""

from pathlib import Path
from typing import Annotated

import tomli_w
import typer

from finderveil.cli.workflow import get_config
from finderveil.core.config import HideConfig, config_to_dict, save_config
from finderveil.core.errors import ConfigError
from finderveil.core.paths import get_config_path
from finderveil.utils.formatting import print_error, print_info, print_success

app = typer.Typer(
    help="Inspect and create the configuration file.",
    no_args_is_help=True,
)


def _selected_path(ctx: typer.Context) -> Path:
    """Return the --config path, or the default config path."""
    obj = ctx.find_root().obj or {}
    return obj.get("config_path") or get_config_path()


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the configuration file path."""
    config_path = _selected_path(ctx)
    suffix = "" if config_path.exists() else " (not created, defaults in use)"
    typer.echo(f"{config_path}{suffix}")


@app.command()
def show(ctx: typer.Context) -> None:
    """Print the effective configuration as TOML."""
    config = get_config(ctx)
    typer.echo(tomli_w.dumps(config_to_dict(config)), nl=False)


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing configuration file."),
    ] = False,
) -> None:
    """Write a configuration file containing the defaults."""
    config_path = _selected_path(ctx)
    if config_path.exists() and not force:
        print_info(f"Configuration already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=0)

    try:
        saved = save_config(HideConfig(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Configuration written to {saved}")
