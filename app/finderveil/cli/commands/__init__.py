"""CLI commands for finderveil.

This package contains all subcommand implementations.
"""

from finderveil.cli.commands import config, hide, targets, unhide

__all__ = ["config", "hide", "targets", "unhide"]
