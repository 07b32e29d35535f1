"""Input shapes read from a patch source.

These mirror what a live patch registry exposes per patched method.
Every field a registry may fail to provide is optional.
"""

from __future__ import annotations

from dataclasses import dataclass

from patchscan.domain.model.stage import PatchStage

UNKNOWN = "Unknown"


@dataclass(frozen=True, slots=True)
class PatchedMethod:
    """A method that has at least one patch attached.

    Attributes:
        declaring_type: Qualified name of the declaring type. None if unavailable.
        name: Method name.
        signature: Parameter signature. Tells overloads apart; not part of the key.
    """

    declaring_type: str | None
    name: str
    signature: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")

    @property
    def key(self) -> str:
        """Target key: '<declaring type>.<method>'."""
        return f"{self.declaring_type or UNKNOWN}.{self.name}"


@dataclass(frozen=True, slots=True)
class HandlerRef:
    """Identity of the function implementing a patch.

    Attributes:
        declaring_type: Qualified name of the type holding the handler.
        name: Handler function name.
        module: Short name of the module (assembly, package) holding the handler.
        module_location: File path of that module.
    """

    declaring_type: str | None = None
    name: str | None = None
    module: str | None = None
    module_location: str | None = None

    @property
    def qualified_name(self) -> str:
        """'<declaring type>.<name>' with 'Unknown' for missing parts."""
        return f"{self.declaring_type or UNKNOWN}.{self.name or UNKNOWN}"


@dataclass(frozen=True, slots=True)
class RawPatch:
    """One patch as registered, before normalization.

    Attributes:
        owner: Registry owner identifier. None if unavailable.
        priority: Precedence hint.
        index: Install index assigned by the registry.
        handler: Handler identity. None if unavailable.
    """

    owner: str | None
    priority: int
    index: int
    handler: HandlerRef | None = None


@dataclass(frozen=True, slots=True)
class MethodPatches:
    """All patches attached to one method, per stage, in registry order."""

    prefixes: tuple[RawPatch, ...] = ()
    postfixes: tuple[RawPatch, ...] = ()
    transpilers: tuple[RawPatch, ...] = ()
    finalizers: tuple[RawPatch, ...] = ()

    def for_stage(self, stage: PatchStage) -> tuple[RawPatch, ...]:
        """Patches registered at the given stage."""
        match stage:
            case PatchStage.PREFIX:
                return self.prefixes
            case PatchStage.POSTFIX:
                return self.postfixes
            case PatchStage.TRANSPILER:
                return self.transpilers
            case PatchStage.FINALIZER:
                return self.finalizers
