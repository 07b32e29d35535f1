"""Conflict detection over aggregated patches."""

from __future__ import annotations

from typing import TYPE_CHECKING

from patchscan.application.services.classifier import assess
from patchscan.domain.model.conflict import ConflictGroup
from patchscan.domain.model.scan_result import ConflictScanResult

if TYPE_CHECKING:
    from collections.abc import Mapping

    from patchscan.domain.model.patch_record import PatchRecord
    from patchscan.domain.model.scan_result import ScanResult


def is_conflict(records: tuple[PatchRecord, ...]) -> bool:
    """More than one record and more than one distinct owner."""
    return len(records) > 1 and len({r.owner for r in records}) > 1


def find_conflicts(
    patches_by_target: Mapping[str, tuple[PatchRecord, ...]],
) -> tuple[ConflictGroup, ...]:
    """Find targets patched by more than one owner.

    Single-owner targets are never conflicts, whatever their stages.

    Args:
        patches_by_target: Target key → records, in scan order.

    Returns:
        Conflicts ordered by risk (HIGH first), then record count (most first).
        Ties keep scan order.
    """
    conflicts = [
        ConflictGroup(target=target, records=records, assessment=assess(records))
        for target, records in patches_by_target.items()
        if is_conflict(records)
    ]
    # list.sort is stable with reverse=True: equal keys keep scan order
    conflicts.sort(key=lambda c: (c.risk_level, c.patch_count), reverse=True)
    return tuple(conflicts)


def detect_conflicts(scan: ScanResult) -> ConflictScanResult:
    """Attach conflicts to a scan result."""
    return ConflictScanResult(scan=scan, conflicts=find_conflicts(scan.patches_by_target))
