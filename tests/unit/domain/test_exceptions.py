"""Tests for domain/exceptions.py.

Tests:
- Hierarchy: every public error is a PatchScanError
- Built-in bases kept for except clauses (ValueError, OSError)
- FAIL-FIRST validation of constructor arguments
- Messages carry the offending value
"""

import pytest

from patchscan.domain.exceptions import (
    InvalidSettingsError,
    MalformedRecordError,
    PatchScanError,
    ReportWriteError,
    SourceUnavailableError,
)


class TestHierarchy:
    """All errors share one root."""

    @pytest.mark.parametrize(
        "error",
        [
            SourceUnavailableError("snap.json", "missing"),
            MalformedRecordError("Foo.Bar", "bad index"),
            ReportWriteError("logs/x.txt", "read-only"),
            InvalidSettingsError("output_dir", "empty"),
        ],
    )
    def test_is_patchscan_error(self, error: PatchScanError) -> None:
        """Catching PatchScanError catches every library error."""
        assert isinstance(error, PatchScanError)

    def test_malformed_record_is_value_error(self) -> None:
        """Bad record data is a bad value."""
        assert isinstance(MalformedRecordError("Foo.Bar", "x"), ValueError)

    def test_report_write_is_os_error(self) -> None:
        """Write failures are I/O failures."""
        assert isinstance(ReportWriteError("logs/x.txt", "x"), OSError)

    def test_invalid_settings_is_value_error(self) -> None:
        assert isinstance(InvalidSettingsError("field", "x"), ValueError)


class TestSourceUnavailableError:
    """Tests for SourceUnavailableError."""

    def test_attributes_and_message(self) -> None:
        """Source and reason kept, both in message."""
        error = SourceUnavailableError("snap.json", "No such file")

        assert error.source == "snap.json"
        assert error.reason == "No such file"
        assert str(error) == "Patch source snap.json unavailable: No such file"

    def test_empty_source_raises(self) -> None:
        with pytest.raises(ValueError, match="source must not be empty"):
            SourceUnavailableError("", "reason")

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason must not be empty"):
            SourceUnavailableError("snap.json", "")


class TestMalformedRecordError:
    """Tests for MalformedRecordError."""

    def test_attributes_and_message(self) -> None:
        error = MalformedRecordError("Foo.Bar", "unknown stage")

        assert error.target == "Foo.Bar"
        assert error.reason == "unknown stage"
        assert str(error) == "Malformed patch data for Foo.Bar: unknown stage"

    def test_empty_target_raises(self) -> None:
        with pytest.raises(ValueError, match="target must not be empty"):
            MalformedRecordError("", "reason")


class TestReportWriteError:
    """Tests for ReportWriteError."""

    def test_message(self) -> None:
        error = ReportWriteError("logs/AllHarmonyPatches.txt", "Permission denied")

        assert error.location == "logs/AllHarmonyPatches.txt"
        assert str(error) == "Cannot write report logs/AllHarmonyPatches.txt: Permission denied"

    def test_empty_location_raises(self) -> None:
        with pytest.raises(ValueError, match="location must not be empty"):
            ReportWriteError("", "reason")


class TestInvalidSettingsError:
    """Tests for InvalidSettingsError."""

    def test_message(self) -> None:
        error = InvalidSettingsError("output_dir", "expected non-empty string")

        assert error.field == "output_dir"
        assert str(error) == "Invalid setting 'output_dir': expected non-empty string"

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason must not be empty"):
            InvalidSettingsError("output_dir", "")
