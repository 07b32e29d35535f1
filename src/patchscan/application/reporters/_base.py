"""Base reporter class for plain text reports.

Reporters return the report text. Caller decides destination.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
FILTER_NOTE = "Note: Common lifecycle method patches are excluded from this scan."
BANNER = "=" * 40


class BaseReporter(ABC):
    """Line-buffered text report.

    Concrete reporters add a report() method that resets the buffer,
    writes lines with _write() and returns _text().
    """

    def __init__(self, *, clock: Callable[[], datetime] | None = None) -> None:
        """Initialize reporter.

        Args:
            clock: Source of the scan timestamp (default: datetime.now)
        """
        self._clock = clock or datetime.now
        self._lines: list[str] = []

    @abstractmethod
    def report(self, result: Any) -> str:
        """Format result as report text.

        Args:
            result: Scan result the reporter understands

        Returns:
            Report text
        """

    def _reset(self) -> None:
        """Start a new report."""
        self._lines = []

    def _write(self, text: str = "") -> None:
        """Append one line."""
        self._lines.append(text)

    def _text(self) -> str:
        """Report text, newline-terminated lines."""
        return "".join(f"{line}\n" for line in self._lines)

    def _report_title(self, title: str) -> None:
        """Title line and scan timestamp."""
        self._write(title)
        self._write(f"Scan Time: {self._clock().strftime(TIMESTAMP_FORMAT)}")
        self._write()

    def _report_filter_note(self, filtered: bool) -> None:
        """Lifecycle filter note, only when the filter was on."""
        if filtered:
            self._write(FILTER_NOTE)
            self._write()
