"""Report sink protocol: where finished reports go."""

from __future__ import annotations

from typing import Protocol


class ReportSinkProtocol(Protocol):
    """Contract for report destinations.

    A report is written whole or not at all.
    """

    def write(self, filename: str, text: str) -> str:
        """Store report text under filename.

        Args:
            filename: Fixed report file name.
            text: Complete report text.

        Returns:
            Human-readable location of the stored report.

        Raises:
            ReportWriteError: If the report cannot be stored.
        """
        ...
