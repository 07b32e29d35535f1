"""Test factories for creating domain objects.

Centralized factory functions to avoid duplication across test modules.
All factories accept simplified parameters and return fully constructed
domain objects.
"""

from datetime import datetime

from patchscan.domain.model.patch_record import PatchRecord
from patchscan.domain.model.raw_patch import HandlerRef, PatchedMethod
from patchscan.domain.model.stage import PatchStage
from patchscan.infrastructure.adapters.memory_source import InMemoryPatchSource

# Fixed scan time - reports are compared line by line
FIXED_TIME = datetime(2024, 5, 1, 12, 30, 45)
FIXED_TIME_TEXT = "2024-05-01 12:30:45"


def fixed_clock() -> datetime:
    """Clock that always returns FIXED_TIME."""
    return FIXED_TIME


def make_record(
    owner: str = "ModA",
    stage: PatchStage = PatchStage.PREFIX,
    priority: int = 0,
    index: int = 0,
    target: str = "Foo.Bar",
    handler: str | None = None,
) -> PatchRecord:
    """Create a PatchRecord for tests.

    Args:
        owner: Resolved owner name
        stage: Patch stage (default PREFIX)
        priority: Priority (default 0)
        index: Install index (default 0)
        target: Target key (default "Foo.Bar")
        handler: Handler name (default "<owner>.Patches.<stage>")

    Returns:
        PatchRecord instance
    """
    return PatchRecord(
        target=target,
        stage=stage,
        owner=owner,
        handler=handler or f"{owner}.Patches.{stage.value}",
        priority=priority,
        index=index,
        owner_id=f"com.{owner.lower()}",
    )


def make_handler(
    mod: str,
    name: str = "Prefix",
    module: str | None = None,
    location: str | None = "default",
) -> HandlerRef:
    """Create a HandlerRef living in a mod folder.

    Args:
        mod: Mod folder name
        name: Handler function name
        module: Module name (default: mod name)
        location: Module file path ("default" = /mods/<mod>/bin/Win64/<module>.dll)

    Returns:
        HandlerRef instance
    """
    module = module or mod
    if location == "default":
        location = f"/mods/{mod}/bin/Win64/{module}.dll"
    return HandlerRef(
        declaring_type=f"{mod}.Patches",
        name=name,
        module=module,
        module_location=location,
    )


def make_method(key: str) -> PatchedMethod:
    """Parse "Type.Method" into a PatchedMethod."""
    declaring_type, name = key.rsplit(".", 1)
    return PatchedMethod(declaring_type=declaring_type, name=name)


def make_source(*patches: tuple[str, PatchStage, str, int]) -> InMemoryPatchSource:
    """Create an in-memory source from (target, stage, mod, priority) tuples.

    Install indices follow tuple order per target and stage.
    Handlers are named after the stage, e.g. ModA.Patches.Prefix.
    """
    source = InMemoryPatchSource()
    for target, stage, mod, priority in patches:
        source.register(
            make_method(target),
            stage,
            owner=f"com.{mod.lower()}",
            priority=priority,
            handler=make_handler(mod, name=stage.value),
        )
    return source
