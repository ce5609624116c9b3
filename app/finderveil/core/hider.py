"""Batch attribute setter.

Runs ``chflags <flag> <path>`` once per target, in order, with the output
of every invocation appended to the shared report file.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from finderveil.core.report import ReportFile
from finderveil.utils.shell import run_to_file

logger = logging.getLogger(__name__)

# Flags understood by chflags(1) for Finder visibility
HIDDEN_FLAG = "hidden"
VISIBLE_FLAG = "nohidden"


@dataclass(frozen=True, slots=True)
class HideResult:
    """Outcome of setting the flag on one entry.

    Attributes:
        name: Entry name inside the applications directory.
        path: Full path passed to the command.
        returncode: Exit code of the command (-1 if it could not be started).
        dry_run: Whether this was a dry-run (nothing executed).
    """

    name: str
    path: str
    returncode: int
    dry_run: bool = False

    @property
    def success(self) -> bool:
        """Check if the flag was set."""
        return self.returncode == 0


def build_path(apps_dir: str, name: str) -> str:
    """Join the applications directory and an entry name.

    The name is used verbatim: no quoting or escaping, so names with
    spaces stay a single argument.
    """
    return f"{apps_dir}/{name}"


class AttributeSetter:
    """Sets a chflags flag on a sequence of entries.

    A failing entry never stops the batch; each entry produces exactly
    one HideResult.

    Attributes:
        _chflags: Path to the chflags executable.
        _flag: Flag passed as the first argument.
        _dry_run: If True, report what would be done without executing.
    """

    def __init__(
        self,
        chflags: str = "/usr/bin/chflags",
        flag: str = HIDDEN_FLAG,
        dry_run: bool = False,
    ) -> None:
        self._chflags = chflags
        self._flag = flag
        self._dry_run = dry_run

    @property
    def flag(self) -> str:
        """Flag this setter applies."""
        return self._flag

    @property
    def dry_run(self) -> bool:
        """Check if the setter is in dry-run mode."""
        return self._dry_run

    def apply(
        self,
        targets: Iterable[str],
        apps_dir: str,
        report: ReportFile | None,
    ) -> Iterator[HideResult]:
        """Set the flag on each target in order.

        Results are yielded as soon as each command exits so callers can
        show progress while the batch runs.

        Args:
            targets: Entry names, already sorted.
            apps_dir: Directory containing the entries.
            report: Open report receiving all command output. May be None
                only in dry-run mode, which writes nothing.

        Yields:
            One HideResult per target.

        Raises:
            ValueError: If no report is given outside dry-run mode.
            ReportError: If a note cannot be written to the report.
        """
        if report is None and not self._dry_run:
            raise ValueError("A report is required unless running in dry-run mode")
        for name in targets:
            yield self._apply_single(name, apps_dir, report)

    def _apply_single(self, name: str, apps_dir: str, report: ReportFile | None) -> HideResult:
        path = build_path(apps_dir, name)

        if self._dry_run:
            logger.info("Dry-run: would run %s %s %s", self._chflags, self._flag, path)
            return HideResult(name=name, path=path, returncode=0, dry_run=True)

        assert report is not None

        try:
            returncode = run_to_file([self._chflags, self._flag, path], report.handle)
        except OSError as e:
            # Launch failures are recorded like any other failing entry
            logger.warning("Could not run %s on %s: %s", self._chflags, path, e)
            report.write_note(f"{self._chflags}: {path}: {e}")
            return HideResult(name=name, path=path, returncode=-1)

        if returncode != 0:
            logger.debug("%s %s %s exited with %d", self._chflags, self._flag, path, returncode)
        return HideResult(name=name, path=path, returncode=returncode)
