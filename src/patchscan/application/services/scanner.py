"""Main facade for patch scanning.

PatchScanner runs the two user actions:
    scan_and_log(): inventory of all patches
    find_duplicate_patches(): conflict report
Each runs to completion, writes one report and sends one notification.
Failures are contained: the host never sees an exception.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from patchscan.application.reporters.conflict import CONFLICT_FILENAME, ConflictReporter
from patchscan.application.reporters.inventory import INVENTORY_FILENAME, InventoryReporter
from patchscan.application.services.aggregator import collect_patches
from patchscan.application.services.conflicts import detect_conflicts
from patchscan.domain.model.settings import ScannerSettings
from patchscan.domain.ports.notifier import NoticeLevel

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from patchscan.domain.model.scan_result import ConflictScanResult, ScanResult
    from patchscan.domain.ports.notifier import NotifierProtocol
    from patchscan.domain.ports.patch_source import PatchSourceProtocol
    from patchscan.domain.ports.report_sink import ReportSinkProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScanOutcome:
    """What a successful scan produced.

    Attributes:
        location: Where the report was written.
        text: Report text.
        result: ScanResult or ConflictScanResult behind the report.
    """

    location: str
    text: str
    result: ScanResult | ConflictScanResult


class PatchScanner:
    """Facade over aggregation, conflict detection, reporting and output.

    Composition-based: source, sink and notifier are injected.

    Example:
        scanner = PatchScanner(source, FileReportSink(Path("logs")), RichNotifier())
        outcome = scanner.find_duplicate_patches()
        if outcome is not None:
            print(outcome.location)
    """

    def __init__(
        self,
        source: PatchSourceProtocol,
        sink: ReportSinkProtocol,
        notifier: NotifierProtocol,
        *,
        settings: ScannerSettings | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize scanner with dependencies.

        Args:
            source: Patch registry snapshot
            sink: Report destination
            notifier: User notification channel
            settings: Scan settings (default: ScannerSettings())
            clock: Timestamp source for reports (default: datetime.now)
        """
        self._source = source
        self._sink = sink
        self._notifier = notifier
        self._settings = settings or ScannerSettings()
        self._clock = clock

    @property
    def settings(self) -> ScannerSettings:
        """Active settings."""
        return self._settings

    def scan_and_log(self) -> ScanOutcome | None:
        """Write the inventory report of all patches.

        Returns:
            ScanOutcome, or None if the scan failed (user already notified).
        """
        # BLE001: a failed scan is reported to the user, never raised into the host
        try:
            result = collect_patches(self._source, self._settings)
            text = InventoryReporter(clock=self._clock).report(result)
            location = self._sink.write(INVENTORY_FILENAME, text)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Inventory scan failed")
            self._notifier.notify(f"Scan failed: {exc}", NoticeLevel.ERROR)
            return None

        owners = result.by_owner()
        patch_count = sum(len(records) for records in owners.values())
        self._notifier.notify(
            f"Scan complete! Found {len(owners)} mods with {patch_count} patches. "
            f"Results saved to {location}",
            NoticeLevel.INFO,
        )
        return ScanOutcome(location=location, text=text, result=result)

    def find_duplicate_patches(self) -> ScanOutcome | None:
        """Write the conflict report.

        Returns:
            ScanOutcome, or None if the scan failed (user already notified).
        """
        # BLE001: a failed scan is reported to the user, never raised into the host
        try:
            result = detect_conflicts(collect_patches(self._source, self._settings))
            text = ConflictReporter(clock=self._clock).report(result)
            location = self._sink.write(CONFLICT_FILENAME, text)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Conflict scan failed")
            self._notifier.notify(f"Conflict scan failed: {exc}", NoticeLevel.ERROR)
            return None

        self._notifier.notify(
            f"Conflict scan complete! Found {result.conflict_count} conflicts "
            f"({result.high_count} high risk). Results saved to {location}",
            conflict_notice_level(result),
        )
        return ScanOutcome(location=location, text=text, result=result)


def conflict_notice_level(result: ConflictScanResult) -> NoticeLevel:
    """ERROR if any HIGH conflict, WARNING if any conflict, else SUCCESS."""
    if result.high_count > 0:
        return NoticeLevel.ERROR
    if result.conflict_count > 0:
        return NoticeLevel.WARNING
    return NoticeLevel.SUCCESS
