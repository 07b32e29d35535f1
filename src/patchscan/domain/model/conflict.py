"""Conflict assessment and conflict group."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from patchscan.domain.model.stage import RiskLevel

if TYPE_CHECKING:
    from patchscan.domain.model.patch_record import PatchRecord


@dataclass(frozen=True, slots=True)
class ConflictAssessment:
    """Structural facts about one target's patches.

    Risk precedence:
        HIGH: more than one transpiler.
        MEDIUM: more than one prefix AND a repeated (stage, priority) pair.
        LOW: anything else.

    A repeated priority among postfixes or finalizers alone stays LOW.

    Attributes:
        multiple_transpilers: More than one TRANSPILER record.
        multiple_prefixes: More than one PREFIX record.
        has_same_priority: Two records share stage and priority.
    """

    multiple_transpilers: bool
    multiple_prefixes: bool
    has_same_priority: bool

    @property
    def risk_level(self) -> RiskLevel:
        """Risk derived from the facts."""
        if self.multiple_transpilers:
            return RiskLevel.HIGH
        if self.multiple_prefixes and self.has_same_priority:
            return RiskLevel.MEDIUM
        return RiskLevel.LOW


@dataclass(frozen=True, slots=True)
class ConflictGroup:
    """Target method patched by more than one owner.

    Attributes:
        target: Target key.
        records: All records of the target, all stages, insertion order.
        assessment: Facts the risk level is derived from.
    """

    target: str
    records: tuple[PatchRecord, ...]
    assessment: ConflictAssessment

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.target:
            raise ValueError("target must not be empty")
        if self.owner_count < 2:
            raise ValueError(f"conflict needs at least 2 owners, got {self.owner_count}")

    @property
    def risk_level(self) -> RiskLevel:
        """Risk level of this conflict."""
        return self.assessment.risk_level

    @property
    def patch_count(self) -> int:
        """Number of records."""
        return len(self.records)

    @property
    def owner_count(self) -> int:
        """Number of distinct owners."""
        return len({r.owner for r in self.records})
