"""Report artifact for the hide workflow.

All output of the per-entry commands is collected in one temporary file.
After the batch the file is kept when it holds anything, otherwise it is
deleted, so its presence alone signals that something needs a look.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from finderveil.core.errors import ReportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReportOutcome:
    """Result of finalizing a report.

    Attributes:
        path: Location of the report file.
        size: Size in bytes at finalization.
        kept: True if the file was left on disk for inspection.
    """

    path: Path
    size: int
    kept: bool


class ReportFile:
    """Temporary file aggregating command output across a batch.

    Create it with :meth:`create`, hand :attr:`handle` to the commands,
    then call :meth:`finalize` exactly once.
    """

    def __init__(self, path: Path, handle: BinaryIO) -> None:
        self._path = path
        self._handle = handle

    @classmethod
    def create(cls, path: Path) -> "ReportFile":
        """Replace any entry at ``path`` with a fresh report and open it.

        An existing file or symlink is removed first and the new file is
        created exclusively without following links, so a link planted at
        the fixed report path never redirects writes elsewhere.

        Args:
            path: Location of the report.

        Returns:
            Open ReportFile.

        Raises:
            ReportError: If the file cannot be created.
        """
        try:
            path.unlink(missing_ok=True)
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL | os.O_NOFOLLOW, 0o600)
        except OSError as e:
            raise ReportError(f"Couldn't create file \"{path}\": {e}") from e
        logger.debug("Created report %s", path)
        return cls(path, os.fdopen(fd, "wb"))

    @property
    def path(self) -> Path:
        """Location of the report file."""
        return self._path

    @property
    def handle(self) -> BinaryIO:
        """Writable binary handle for command output."""
        return self._handle

    @property
    def closed(self) -> bool:
        """Whether the report has been finalized or discarded."""
        return self._handle.closed

    def write_note(self, text: str) -> None:
        """Append a line of text written by finderveil itself.

        Args:
            text: Line to append (a newline is added).

        Raises:
            ReportError: If the line cannot be written.
        """
        try:
            self._handle.write(f"{text}\n".encode())
        except OSError as e:
            raise ReportError(f"Couldn't write to report \"{self._path}\": {e}") from e

    def close(self) -> None:
        """Close the handle without inspecting the file.

        Used when the batch is aborted; a no-op after :meth:`finalize`.
        """
        if self.closed:
            return
        try:
            self._handle.close()
        except OSError as e:
            logger.warning("Couldn't close report %s: %s", self._path, e)

    def finalize(self) -> ReportOutcome:
        """Sync, close and inspect the report.

        A non-empty report is kept. An empty report is deleted.

        Returns:
            ReportOutcome describing what happened to the file.

        Raises:
            ReportError: If the report was already closed, or cannot be
                synced, inspected or removed.
        """
        if self.closed:
            raise ReportError(f"Report \"{self._path}\" is already closed")

        try:
            self._handle.flush()
            os.fsync(self._handle.fileno())
            size = os.fstat(self._handle.fileno()).st_size
            self._handle.close()
        except OSError as e:
            raise ReportError(f"Couldn't finalize report \"{self._path}\": {e}") from e

        if size != 0:
            logger.info("Report %s kept (%d bytes)", self._path, size)
            return ReportOutcome(path=self._path, size=size, kept=True)

        try:
            self._path.unlink()
        except OSError as e:
            raise ReportError(f"Couldn't remove empty report \"{self._path}\": {e}") from e
        logger.debug("Removed empty report %s", self._path)
        return ReportOutcome(path=self._path, size=0, kept=False)
