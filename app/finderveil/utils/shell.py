"""Shell execution utilities.

Provides subprocess execution with captured output, and execution with
output redirected into an open file.
"""

import shutil
import subprocess
from dataclasses import dataclass
from typing import BinaryIO


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


def run_command(
    args: list[str],
    *,
    check: bool = False,
    timeout: float | None = 60.0,
) -> CommandResult:
    """Execute a command and return its decoded output.

    Output is decoded strictly as UTF-8.

    Args:
        args: Command and arguments to execute.
        check: If True, raise CalledProcessError on non-zero exit.
        timeout: Maximum time in seconds to wait for command.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.CalledProcessError: If check=True and command fails.
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
        UnicodeDecodeError: If the output is not valid UTF-8.
    """
    result = subprocess.run(
        args,
        capture_output=True,
        encoding="utf-8",
        check=check,
        timeout=timeout,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def run_to_file(args: list[str], output: BinaryIO) -> int:
    """Execute a command with stdout and stderr written to a file.

    The call blocks until the command exits. Nothing is captured in
    memory; both streams go to ``output`` in the order they are written.

    Args:
        args: Command and arguments to execute.
        output: Open binary file receiving the command output.

    Returns:
        Exit code of the command.

    Raises:
        FileNotFoundError: If command executable is not found.
        OSError: If command cannot be executed.
    """
    # Anything we buffered must land before the child's bytes
    output.flush()
    result = subprocess.run(
        args,
        stdout=output,
        stderr=subprocess.STDOUT,
        check=False,
    )
    return result.returncode


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH or as a path.

    Args:
        name: Command name or path to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None
