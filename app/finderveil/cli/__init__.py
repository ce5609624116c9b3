"""CLI package for finderveil.

This package contains the Typer application and all subcommands.
"""

from finderveil.cli.main import app

__all__ = ["app"]
