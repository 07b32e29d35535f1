"""Normalized patch record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from patchscan.domain.model.stage import PatchStage


@dataclass(frozen=True, slots=True)
class PatchRecord:
    """Snapshot of one patch on one target method.

    Attributes:
        target: Target key, '<declaring type>.<method>'.
        stage: Stage the patch runs at.
        owner: Resolved owner name (mod folder and module).
        handler: Handler identity, '<declaring type>.<name>'.
        priority: Precedence hint. Meaning of higher/lower depends on stage.
        index: Install index, tie-break only.
        owner_id: Raw owner identifier from the registry.
    """

    target: str
    stage: PatchStage
    owner: str
    handler: str
    priority: int
    index: int
    owner_id: str = "Unknown"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.target:
            raise ValueError("target must not be empty")
        if not self.owner:
            raise ValueError("owner must not be empty")
        if not self.handler:
            raise ValueError("handler must not be empty")
        if self.index < 0:
            raise ValueError(f"index must be >= 0, got {self.index}")
