"""File report sink: reports as text files in an output directory."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from patchscan.domain.exceptions import ReportWriteError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class FileReportSink:
    """Writes each report to <output_dir>/<filename>.

    Satisfies ReportSinkProtocol. The directory is created on first write.
    """

    def __init__(self, output_dir: Path) -> None:
        """Initialize sink.

        Args:
            output_dir: Directory for report files.
        """
        self._output_dir = output_dir

    @property
    def output_dir(self) -> Path:
        """Directory reports are written to."""
        return self._output_dir

    def path_for(self, filename: str) -> Path:
        """Full path of a report file."""
        return self._output_dir / filename

    def write(self, filename: str, text: str) -> str:
        """Write the full report text, replacing any previous report.

        Returns:
            Path of the written file.

        Raises:
            ReportWriteError: If the directory or file cannot be written.
        """
        if not filename:
            raise ValueError("filename must not be empty")

        path = self.path_for(filename)
        # previous report stays intact until the new one is complete
        staging = path.with_name(f".{filename}.tmp")
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            with staging.open("w", encoding="utf-8") as handle:
                handle.write(text)
            staging.replace(path)
        except UnicodeEncodeError as exc:
            staging.unlink(missing_ok=True)
            raise ReportWriteError(str(path), str(exc)) from exc
        except OSError as exc:
            staging.unlink(missing_ok=True)
            raise ReportWriteError(str(path), exc.strerror or str(exc)) from exc

        logger.info(f"Wrote {len(text)} characters to {path}")
        return str(path)
