"""Scan result aggregates."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from patchscan.domain.model.conflict import ConflictGroup
from patchscan.domain.model.patch_record import PatchRecord
from patchscan.domain.model.stage import RiskLevel


@dataclass(frozen=True, slots=True)
class ScanError:
    """A target method that could not be processed.

    Attributes:
        target: Target key.
        message: Error message.
    """

    target: str
    message: str


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Result of aggregating a patch source.

    Immutable aggregate, rebuilt on every scan.

    Attributes:
        patches_by_target: Target key → records, in source order.
            Overloads share a key; the last one scanned wins.
        total_patched_methods: Methods listed by the source, before filtering.
        errors: Targets that failed, in source order.
        filtered: Lifecycle filter was enabled.
        records: Every record of every scanned method, overloads included.
            Derived from patches_by_target when not given.
    """

    patches_by_target: Mapping[str, tuple[PatchRecord, ...]]
    total_patched_methods: int
    errors: tuple[ScanError, ...] = ()
    filtered: bool = True
    records: tuple[PatchRecord, ...] | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST. Freeze the mapping."""
        if self.total_patched_methods < 0:
            raise ValueError(
                f"total_patched_methods must be >= 0, got {self.total_patched_methods}"
            )
        # slots + frozen: bypass __setattr__ to store read-only view
        frozen = MappingProxyType(dict(self.patches_by_target))
        object.__setattr__(self, "patches_by_target", frozen)
        if self.records is None:
            records = tuple(r for group in frozen.values() for r in group)
        else:
            records = tuple(self.records)
        object.__setattr__(self, "records", records)

    @property
    def record_count(self) -> int:
        """Number of records over all scanned methods."""
        return len(self.records or ())

    def by_owner(self) -> dict[str, list[PatchRecord]]:
        """Group records by owner, owners in first-seen order."""
        grouped: dict[str, list[PatchRecord]] = {}
        for record in self.records or ():
            grouped.setdefault(record.owner, []).append(record)
        return grouped

    @classmethod
    def empty(cls) -> ScanResult:
        """Create empty scan result."""
        return cls(patches_by_target={}, total_patched_methods=0)


@dataclass(frozen=True, slots=True)
class ConflictScanResult:
    """Scan result plus the conflicts found in it.

    Attributes:
        scan: Aggregated scan.
        conflicts: Conflicts, highest risk first, then most records first.
    """

    scan: ScanResult
    conflicts: tuple[ConflictGroup, ...] = field(default=())

    def at_level(self, level: RiskLevel) -> tuple[ConflictGroup, ...]:
        """Conflicts with the given risk level, in report order."""
        return tuple(c for c in self.conflicts if c.risk_level is level)

    @property
    def conflict_count(self) -> int:
        """Number of conflicting targets."""
        return len(self.conflicts)

    @property
    def high_count(self) -> int:
        """Number of HIGH risk conflicts."""
        return len(self.at_level(RiskLevel.HIGH))

    @property
    def medium_count(self) -> int:
        """Number of MEDIUM risk conflicts."""
        return len(self.at_level(RiskLevel.MEDIUM))

    @property
    def low_count(self) -> int:
        """Number of LOW risk conflicts."""
        return len(self.at_level(RiskLevel.LOW))
