"""Domain model entities."""

from patchscan.domain.model.conflict import ConflictAssessment, ConflictGroup
from patchscan.domain.model.lifecycle import COMMON_LIFECYCLE_METHODS
from patchscan.domain.model.patch_record import PatchRecord
from patchscan.domain.model.raw_patch import (
    UNKNOWN,
    HandlerRef,
    MethodPatches,
    PatchedMethod,
    RawPatch,
)
from patchscan.domain.model.scan_result import ConflictScanResult, ScanError, ScanResult
from patchscan.domain.model.settings import ScannerSettings
from patchscan.domain.model.stage import COLLECTION_ORDER, PatchStage, RiskLevel

__all__ = [
    # Enums
    "PatchStage",
    "RiskLevel",
    "COLLECTION_ORDER",
    # Input shapes
    "UNKNOWN",
    "PatchedMethod",
    "HandlerRef",
    "RawPatch",
    "MethodPatches",
    # Records
    "PatchRecord",
    # Conflicts
    "ConflictAssessment",
    "ConflictGroup",
    # Results
    "ScanError",
    "ScanResult",
    "ConflictScanResult",
    # Configuration
    "COMMON_LIFECYCLE_METHODS",
    "ScannerSettings",
]
