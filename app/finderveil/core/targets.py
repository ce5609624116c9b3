"""Target resolution for the hide workflow."""

import logging
import os
from collections.abc import Iterable

from finderveil.core.errors import TargetResolutionError

logger = logging.getLogger(__name__)


def resolve_targets(apps_dir: str, excluded: Iterable[str]) -> tuple[str, ...]:
    """Compute the entries of a directory that should be processed.

    Direct children are listed (no recursion, dot-entries included), the
    excluded names are removed, and the rest is sorted so every run
    processes entries in the same order.

    Args:
        apps_dir: Directory to list.
        excluded: Names to leave untouched.

    Returns:
        Sorted tuple of entry names.

    Raises:
        TargetResolutionError: If the directory cannot be listed.
    """
    try:
        entries = set(os.listdir(apps_dir))
    except OSError as e:
        msg = f"Cannot list {apps_dir}: {e.strerror or e}"
        raise TargetResolutionError(msg) from e

    targets = tuple(sorted(entries - set(excluded)))
    logger.debug(
        "Resolved %d target(s) from %d entries in %s", len(targets), len(entries), apps_dir
    )
    return targets
