"""Unit tests for the report artifact."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from finderveil.core.errors import ReportError
from finderveil.core.report import ReportFile


class TestReportFile:
    """Tests for ReportFile."""

    def test_create_truncates_existing(self, report_path: Path) -> None:
        """A leftover report from a previous run starts out empty."""
        report_path.write_text("old content")

        report = ReportFile.create(report_path)
        outcome = report.finalize()

        assert outcome.size == 0
        assert outcome.kept is False

    def test_empty_report_is_deleted(self, report_path: Path) -> None:
        """A zero-byte report is removed on finalize."""
        report = ReportFile.create(report_path)
        assert report_path.exists()

        outcome = report.finalize()

        assert outcome.kept is False
        assert outcome.path == report_path
        assert not report_path.exists()
        assert report.closed

    def test_non_empty_report_is_kept(self, report_path: Path) -> None:
        """A report with output is kept for inspection."""
        report = ReportFile.create(report_path)
        report.handle.write(b"chflags: /Applications/X.app: Operation not permitted\n")

        outcome = report.finalize()

        assert outcome.kept is True
        assert outcome.size > 0
        assert report_path.read_bytes().startswith(b"chflags:")

    def test_write_note(self, report_path: Path) -> None:
        """Notes are appended as UTF-8 lines."""
        report = ReportFile.create(report_path)
        report.write_note("Résumé.app: failed")

        report.finalize()

        assert report_path.read_text(encoding="utf-8") == "Résumé.app: failed\n"

    def test_create_in_missing_directory_raises(self, tmp_path: Path) -> None:
        """An uncreatable report is a fatal error."""
        with pytest.raises(ReportError, match="Couldn't create file"):
            ReportFile.create(tmp_path / "missing" / "output.out")

    def test_finalize_sync_failure_raises(self, report_path: Path) -> None:
        """Failing to sync the report is a fatal error."""
        report = ReportFile.create(report_path)

        with (
            patch("finderveil.core.report.os.fsync", side_effect=OSError("I/O error")),
            pytest.raises(ReportError, match="Couldn't finalize report"),
        ):
            report.finalize()

        report.close()
        assert report.closed

    def test_symlink_at_report_path_is_replaced(self, tmp_path: Path, report_path: Path) -> None:
        """A link planted at the report path never redirects writes to its target."""
        victim = tmp_path / "sudoers"
        victim.write_bytes(b"precious data\n")
        report_path.symlink_to(victim)

        report = ReportFile.create(report_path)
        report.handle.write(b"chflags output\n")
        outcome = report.finalize()

        assert victim.read_bytes() == b"precious data\n"
        assert outcome.kept is True
        assert not report_path.is_symlink()
        assert report_path.read_bytes() == b"chflags output\n"

    def test_dangling_symlink_is_replaced(self, tmp_path: Path, report_path: Path) -> None:
        """A dangling link does not make the report appear elsewhere."""
        target = tmp_path / "elsewhere"
        report_path.symlink_to(target)

        ReportFile.create(report_path).finalize()

        assert not target.exists()
        assert not report_path.is_symlink()

    def test_created_owner_only(self, report_path: Path) -> None:
        """The report is readable by its owner only."""
        report = ReportFile.create(report_path)

        assert report_path.stat().st_mode & 0o777 == 0o600

        report.close()

    def test_finalize_twice_raises(self, report_path: Path) -> None:
        """A report can only be finalized once."""
        report = ReportFile.create(report_path)
        report.finalize()

        with pytest.raises(ReportError, match="already closed"):
            report.finalize()

    def test_close_discards_without_inspection(self, report_path: Path) -> None:
        """close() leaves the file in place and is idempotent."""
        report = ReportFile.create(report_path)

        report.close()
        report.close()

        assert report.closed
        assert report_path.exists()

    def test_write_note_failure_raises_report_error(self, report_path: Path) -> None:
        """A failing write (disk full) surfaces as ReportError."""
        handle = MagicMock()
        handle.write.side_effect = OSError(28, "No space left on device")
        report = ReportFile(report_path, handle)

        with pytest.raises(ReportError, match="No space left"):
            report.write_note("chflags: failed")
