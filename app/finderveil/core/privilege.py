"""Superuser check.

Setting flags on most bundles in /Applications requires root, so the
workflow refuses to start without it.
"""

import logging
import subprocess

from finderveil.utils.shell import run_command

logger = logging.getLogger(__name__)

# Marker printed by id(1) for the superuser
ROOT_IDENTITY = "uid=0(root)"


def is_superuser(id_command: str = "/usr/bin/id") -> bool:
    """Check whether the current process runs as root.

    Runs the identity command without arguments and looks for the root
    marker in its output. The check fails closed: a missing command, an
    execution error, undecodable output or empty output all count as
    "not root".

    Args:
        id_command: Path to the identity-query executable.

    Returns:
        True if the output contains ``uid=0(root)``, False otherwise.
    """
    try:
        result = run_command([id_command], timeout=10.0)
    except UnicodeDecodeError as e:
        logger.warning("Identity check produced undecodable output: %s", e)
        return False
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.warning("Identity check %s could not run: %s", id_command, e)
        return False

    if not result.stdout:
        logger.warning("Identity check %s produced no output", id_command)
        return False

    logger.debug("Identity: %s", result.stdout.strip())
    return ROOT_IDENTITY in result.stdout
