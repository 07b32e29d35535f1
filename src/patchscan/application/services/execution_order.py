"""Execution order of same-stage patches.

Reproduces the runtime order of the patching framework:
    Prefix, Transpiler: higher priority first, then lower index first
    Postfix, Finalizer: lower priority first, then higher index first

Postfixes and finalizers wrap outward: the handler that would run last on
the way in runs first on the way out.
Reporting only. Nothing is executed.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import TypeAlias

from patchscan.domain.model.patch_record import PatchRecord
from patchscan.domain.model.stage import PatchStage

SortKey: TypeAlias = Callable[[PatchRecord], tuple[int, int]]


def _inward(record: PatchRecord) -> tuple[int, int]:
    return (-record.priority, record.index)


def _outward(record: PatchRecord) -> tuple[int, int]:
    return (record.priority, -record.index)


EXECUTION_ORDER_KEYS: Mapping[PatchStage, SortKey] = MappingProxyType(
    {
        PatchStage.PREFIX: _inward,
        PatchStage.TRANSPILER: _inward,
        PatchStage.POSTFIX: _outward,
        PatchStage.FINALIZER: _outward,
    }
)

# Stage names no table entry knows about
DEFAULT_SORT_KEY: SortKey = _inward


def sort_key_for(stage: PatchStage | str) -> SortKey:
    """Sort key for a stage or stage name. Unknown → prefix rule."""
    if isinstance(stage, str):
        try:
            stage = PatchStage(stage)
        except ValueError:
            return DEFAULT_SORT_KEY
    return EXECUTION_ORDER_KEYS.get(stage, DEFAULT_SORT_KEY)


def order_for_execution(
    stage: PatchStage | str,
    records: Iterable[PatchRecord],
) -> tuple[PatchRecord, ...]:
    """Order same-stage records as they run.

    Args:
        stage: Stage of all records, or its report name.
        records: Records in any order.

    Returns:
        Records in execution order. Deterministic: (priority, index) is unique per stage.
    """
    return tuple(sorted(records, key=sort_key_for(stage)))
