"""Conflict classifier: structural risk of one target's patches."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from patchscan.domain.model.conflict import ConflictAssessment
from patchscan.domain.model.stage import PatchStage

if TYPE_CHECKING:
    from collections.abc import Iterable

    from patchscan.domain.model.patch_record import PatchRecord
    from patchscan.domain.model.stage import RiskLevel


def assess(records: Iterable[PatchRecord]) -> ConflictAssessment:
    """Derive the structural facts of a target's records.

    Counts only, so the result does not depend on record order.

    Args:
        records: All records of one target, any stage.

    Returns:
        ConflictAssessment with risk_level.
    """
    by_stage: Counter[PatchStage] = Counter()
    by_stage_priority: Counter[tuple[PatchStage, int]] = Counter()

    for record in records:
        by_stage[record.stage] += 1
        by_stage_priority[(record.stage, record.priority)] += 1

    return ConflictAssessment(
        multiple_transpilers=by_stage[PatchStage.TRANSPILER] > 1,
        multiple_prefixes=by_stage[PatchStage.PREFIX] > 1,
        has_same_priority=any(count > 1 for count in by_stage_priority.values()),
    )


def classify(records: Iterable[PatchRecord]) -> RiskLevel:
    """Risk level of a target's records.

    HIGH: more than one transpiler.
    MEDIUM: more than one prefix and a repeated (stage, priority) pair.
    LOW: otherwise.
    """
    return assess(records).risk_level
