"""Patch stage and risk level enumerations."""

from enum import Enum, IntEnum


class PatchStage(Enum):
    """Point relative to the target's execution at which a patch runs.

    Values are the names used in report text.
    """

    PREFIX = "Prefix"  # before the target, can skip it
    POSTFIX = "Postfix"  # after the target
    TRANSPILER = "Transpiler"  # rewrites the target's instructions
    FINALIZER = "Finalizer"  # runs even if the target raised


# Order in which a method's patch lists are collected
COLLECTION_ORDER: tuple[PatchStage, ...] = (
    PatchStage.PREFIX,
    PatchStage.POSTFIX,
    PatchStage.TRANSPILER,
    PatchStage.FINALIZER,
)


class RiskLevel(IntEnum):
    """Structural conflict risk of a multi-owner target. Ordered."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2
