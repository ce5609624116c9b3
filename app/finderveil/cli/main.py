"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from finderveil import __version__
from finderveil.cli.commands import config, hide, targets, unhide
from finderveil.utils.formatting import err_console

app = typer.Typer(
    name="finderveil",
    help="Hide non-Apple applications from Finder.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"finderveil version {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: Log at DEBUG when True, otherwise only warnings and errors.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Configuration file (default: ~/.config/finderveil/config.toml).",
        ),
    ] = None,
) -> None:
    """finderveil - hide non-Apple applications from Finder.

    Sets the hidden flag on everything in /Applications that is not
    part of a standard macOS installation.
    """
    setup_logging(verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path


# Register commands
app.add_typer(hide.app, name="hide")
app.add_typer(unhide.app, name="unhide")
app.add_typer(targets.app, name="list")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
