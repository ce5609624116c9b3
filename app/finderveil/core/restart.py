"""Restart of the process that displays the hidden entries.

Killing the Dock makes launchd respawn it, and the new instance picks up
the changed visibility flags.
"""

import logging
import subprocess

from finderveil.utils.shell import run_command

logger = logging.getLogger(__name__)

# Answers accepted as "yes"; matched exactly, case included
CONFIRM_ANSWERS = frozenset({"Y", "y"})


def should_restart(answer: str | None) -> bool:
    """Decide whether a prompt answer confirms the restart.

    Only the single characters ``Y`` and ``y`` confirm. The trailing line
    terminator is ignored; everything else, including ``yes``, an empty
    line and end of input (None), declines.

    Args:
        answer: Line read from the user, or None at end of input.

    Returns:
        True if the restart was confirmed.
    """
    if answer is None:
        return False
    return answer.rstrip("\r\n") in CONFIRM_ANSWERS


def restart_process(name: str, killall: str = "/usr/bin/killall") -> None:
    """Terminate a process by name so the system relaunches it.

    Fire-and-forget: the exit status of killall is not inspected.

    Args:
        name: Process name to signal.
        killall: Path to the killall executable.
    """
    try:
        result = run_command([killall, name], timeout=10.0)
    except (OSError, UnicodeDecodeError, subprocess.TimeoutExpired) as e:
        logger.warning("Could not run %s %s: %s", killall, name, e)
        return
    logger.debug("%s %s exited with %d", killall, name, result.returncode)
