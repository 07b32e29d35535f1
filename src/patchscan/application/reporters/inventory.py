"""Inventory reporter: every patch, grouped by owning mod."""

from __future__ import annotations

from typing import TYPE_CHECKING

from patchscan.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from patchscan.domain.model.patch_record import PatchRecord
    from patchscan.domain.model.scan_result import ScanError, ScanResult

INVENTORY_FILENAME = "AllHarmonyPatches.txt"
INVENTORY_TITLE = "=== Harmony Patch Scanner Results ==="


def owner_sort_key(owner: str) -> tuple[str, str]:
    """Case-insensitive owner order, ties broken by exact spelling."""
    return (owner.casefold(), owner)


class InventoryReporter(BaseReporter):
    """Plain text inventory of all patches.

    Owners in case-insensitive order; each owner's patches sorted by target,
    scan order kept among equal targets.
    """

    def report(self, result: ScanResult) -> str:
        """Format scan result as inventory text.

        Args:
            result: Aggregated scan

        Returns:
            Report text
        """
        self._reset()
        self._report_title(INVENTORY_TITLE)
        self._report_filter_note(result.filtered)

        self._write(f"Total Patched Methods: {result.total_patched_methods}")
        self._write()

        self._report_errors(result.errors)

        owners = result.by_owner()
        for owner in sorted(owners, key=owner_sort_key):
            self._report_owner(owner, owners[owner])

        return self._text()

    def _report_errors(self, errors: tuple[ScanError, ...]) -> None:
        """One line per failed target."""
        for error in errors:
            self._write(f"Error processing method {error.target}: {error.message}")

    def _report_owner(self, owner: str, records: list[PatchRecord]) -> None:
        """Owner section."""
        self._write(f"=== {owner} ===")
        self._write(f"Total Patches: {len(records)}")
        self._write()

        for record in sorted(records, key=lambda r: r.target):
            self._write(f"  Target: {record.target}")
            self._write(
                f"    Type: {record.stage.value} | Priority: {record.priority}"
                f" | Owner: {record.owner_id}"
            )
            self._write(f"    Patch: {record.handler}")
            self._write()
        self._write()
