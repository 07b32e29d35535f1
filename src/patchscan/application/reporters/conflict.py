"""Conflict reporter: multi-owner targets grouped by risk.

Line layout is stable: tools parse these logs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from patchscan.application.reporters._base import BANNER, BaseReporter
from patchscan.application.services.execution_order import order_for_execution
from patchscan.domain.model.stage import RiskLevel

if TYPE_CHECKING:
    from patchscan.domain.model.conflict import ConflictAssessment, ConflictGroup
    from patchscan.domain.model.patch_record import PatchRecord
    from patchscan.domain.model.scan_result import ConflictScanResult

CONFLICT_FILENAME = "DuplicateHarmonyPatches.txt"
CONFLICT_TITLE = "=== Duplicate/Conflicting Harmony Patches ==="

SECTION_HEADERS: tuple[tuple[RiskLevel, str], ...] = (
    (RiskLevel.HIGH, "HIGH RISK CONFLICTS"),
    (RiskLevel.MEDIUM, "MEDIUM RISK CONFLICTS"),
    (RiskLevel.LOW, "LOW RISK CONFLICTS"),
)

INTRO = (
    "This report shows methods that have multiple patches from different mods.",
    "These patches may conflict depending on their type and priority.",
)

NO_CONFLICTS = "No conflicting patches found! All methods have patches from a single mod."

TRANSPILER_WARNING = (
    "  ⚠️ WARNING: Multiple transpilers detected! This is HIGH RISK for conflicts.",
    "     Transpilers modify IL code and multiple transpilers may interfere with each other.",
    "     Execution order shown above - first transpiler sees original IL, "
    "subsequent ones see modified IL.",
)
PREFIX_CAUTION = "  ⚠️ CAUTION: Multiple prefix patches. Execution order shown above."
SAME_PRIORITY_NOTE = (
    "     Some patches have the same priority - execution order determined by index."
)
PREFIX_SHORT_CIRCUIT = (
    "     If any prefix returns false, execution stops and remaining prefixes won't run."
)

LEGEND = (
    "Risk Level Definitions:",
    "  HIGH   - Multiple transpilers on same method (IL code conflicts)",
    "  MEDIUM - Multiple prefixes with same priority (execution order issues)",
    "  LOW    - Multiple patches with proper priority ordering",
    "",
    "Execution Order Notes:",
    "  Prefixes:     Higher priority executes first, then by index",
    "  Postfixes:    Lower priority executes first, then by reverse index",
    "  Transpilers:  Higher priority executes first, then by index",
    "  Finalizers:   Lower priority executes first, then by reverse index",
)


def warning_lines(assessment: ConflictAssessment) -> tuple[str, ...]:
    """Annotation for a conflict, chosen by which rule applies.

    Multiple transpilers → HIGH warning.
    Multiple prefixes → caution, plus same-priority note if any pair repeats.
    Otherwise nothing.
    """
    if assessment.multiple_transpilers:
        return TRANSPILER_WARNING
    if assessment.multiple_prefixes:
        lines = [PREFIX_CAUTION]
        if assessment.has_same_priority:
            lines.append(SAME_PRIORITY_NOTE)
        lines.append(PREFIX_SHORT_CIRCUIT)
        return tuple(lines)
    return ()


class ConflictReporter(BaseReporter):
    """Plain text conflict report.

    Sections HIGH, MEDIUM, LOW; empty sections are skipped.
    Inside a target, stages in alphabetical order, records in execution order.
    """

    def report(self, result: ConflictScanResult) -> str:
        """Format conflicts as report text.

        Args:
            result: Scan plus conflicts, already in report order

        Returns:
            Report text
        """
        self._reset()
        self._report_title(CONFLICT_TITLE)
        for line in INTRO:
            self._write(line)
        self._write()
        self._report_filter_note(result.scan.filtered)

        for error in result.scan.errors:
            self._write(f"Error processing method: {error.message}")

        self._write(f"Total Methods Patched: {len(result.scan.patches_by_target)}")
        self._write(f"Methods with Multiple Patches: {result.conflict_count}")
        self._write()

        if not result.conflicts:
            self._write(NO_CONFLICTS)
            return self._text()

        for level, header in SECTION_HEADERS:
            self._report_section(result.at_level(level), header)

        self._report_summary(result)
        return self._text()

    def _report_section(self, conflicts: tuple[ConflictGroup, ...], header: str) -> None:
        """Bannered risk section. Nothing if empty."""
        if not conflicts:
            return

        self._write()
        self._write(BANNER)
        self._write(f"=== {header} ({len(conflicts)}) ===")
        self._write(BANNER)
        self._write()

        for conflict in conflicts:
            self._report_conflict(conflict)

    def _report_conflict(self, conflict: ConflictGroup) -> None:
        """Target block: counts, stage sub-blocks, warning, separator."""
        self._write(f"Target Method: {conflict.target}")
        self._write(
            f"  Patches: {conflict.patch_count} from {conflict.owner_count} different mod(s)"
        )
        self._write()

        by_stage: dict[str, list[PatchRecord]] = {}
        for record in conflict.records:
            by_stage.setdefault(record.stage.value, []).append(record)

        for stage_name in sorted(by_stage):
            self._report_stage(stage_name, by_stage[stage_name])

        for line in warning_lines(conflict.assessment):
            self._write(line)

        self._write()
        self._write("---")
        self._write()

    def _report_stage(self, stage_name: str, records: list[PatchRecord]) -> None:
        """Stage sub-block in execution order, 1-based."""
        self._write(f"  {stage_name} Patches ({len(records)}) - Execution Order:")
        for position, record in enumerate(order_for_execution(stage_name, records), start=1):
            self._write(f"    [{position}] Mod: {record.owner}")
            self._write(f"        Method: {record.handler}")
            self._write(f"        Priority: {record.priority} | Index: {record.index}")
        self._write()

    def _report_summary(self, result: ConflictScanResult) -> None:
        """Totals per level and legend."""
        self._write()
        self._write(BANNER)
        self._write("=== CONFLICT SUMMARY ===")
        self._write(BANNER)
        self._write(f"Total Conflicts: {result.conflict_count}")
        self._write(f"  High Risk:   {result.high_count}")
        self._write(f"  Medium Risk: {result.medium_count}")
        self._write(f"  Low Risk:    {result.low_count}")
        self._write()
        for line in LEGEND:
            self._write(line)
