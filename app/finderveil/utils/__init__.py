"""Utility modules for finderveil.

This module exports commonly used utility functions.
"""

from finderveil.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from finderveil.utils.shell import CommandResult, command_exists, run_command, run_to_file

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
    "run_to_file",
]
