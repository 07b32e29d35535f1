"""In-memory patch registry.

Holds patches registered in-process. Install indices are assigned the way
the host registry assigns them: per target and stage, in attach order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from patchscan.domain.model.raw_patch import HandlerRef, MethodPatches, PatchedMethod, RawPatch
from patchscan.domain.model.stage import PatchStage

if TYPE_CHECKING:
    from collections.abc import Iterator


class InMemoryPatchSource:
    """Patch registry kept in dictionaries.

    Satisfies PatchSourceProtocol. Method order is first-registration order.
    """

    __slots__ = ("_patches",)

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._patches: dict[PatchedMethod, dict[PatchStage, list[RawPatch]]] = {}

    def register(
        self,
        method: PatchedMethod,
        stage: PatchStage,
        *,
        owner: str | None,
        priority: int = 0,
        handler: HandlerRef | None = None,
    ) -> RawPatch:
        """Attach a patch to method at stage.

        Args:
            method: Patched method.
            stage: Stage the patch runs at.
            owner: Registry owner id.
            priority: Precedence hint.
            handler: Handler identity.

        Returns:
            The registered patch, with its install index.
        """
        stage_patches = self._patches.setdefault(method, {}).setdefault(stage, [])
        patch = RawPatch(owner=owner, priority=priority, index=len(stage_patches), handler=handler)
        stage_patches.append(patch)
        return patch

    def get_all_patched_methods(self) -> Iterator[PatchedMethod]:
        """Methods with at least one patch."""
        return iter(tuple(self._patches))

    def get_patch_info(self, method: PatchedMethod) -> MethodPatches | None:
        """Patches of method per stage. None if method is unknown."""
        stages = self._patches.get(method)
        if stages is None:
            return None
        return MethodPatches(
            prefixes=tuple(stages.get(PatchStage.PREFIX, ())),
            postfixes=tuple(stages.get(PatchStage.POSTFIX, ())),
            transpilers=tuple(stages.get(PatchStage.TRANSPILER, ())),
            finalizers=tuple(stages.get(PatchStage.FINALIZER, ())),
        )
