"""Aggregator service: patch source → records grouped by target.

Algorithm:
    1. Enumerate patched methods from the source
    2. Drop lifecycle targets entirely (all stages)
    3. Collect each stage's patches, dropping lifecycle-named handlers
    4. Normalize to PatchRecord, owner via resolve_owner

One failing target never aborts the scan: the error is recorded in
ScanResult.errors and that target's records are omitted.

Overloads share a target key. ScanResult.records keeps every overload
for the inventory; the keyed mapping keeps the last one.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from patchscan.application.services.owner import resolve_owner
from patchscan.domain.model.patch_record import PatchRecord
from patchscan.domain.model.raw_patch import UNKNOWN
from patchscan.domain.model.scan_result import ScanError, ScanResult
from patchscan.domain.model.stage import COLLECTION_ORDER
from patchscan.domain.model.settings import ScannerSettings
from patchscan.infrastructure.filters.lifecycle import should_exclude_handler, should_exclude_target

if TYPE_CHECKING:
    from patchscan.domain.model.raw_patch import MethodPatches, PatchedMethod, RawPatch
    from patchscan.domain.model.stage import PatchStage
    from patchscan.domain.ports.patch_source import PatchSourceProtocol

logger = logging.getLogger(__name__)


def collect_patches(
    source: PatchSourceProtocol,
    settings: ScannerSettings | None = None,
) -> ScanResult:
    """Collect and group all patches of a source.

    Args:
        source: Patch registry snapshot.
        settings: Filter settings. Defaults if None.

    Returns:
        ScanResult with records by target, in source order.

    Raises:
        SourceUnavailableError: If the source cannot enumerate methods.
    """
    settings = settings or ScannerSettings()
    filter_enabled = settings.exclude_common_lifecycle_methods

    methods = list(source.get_all_patched_methods())
    patches_by_target: dict[str, tuple[PatchRecord, ...]] = {}
    all_records: list[PatchRecord] = []
    errors: list[ScanError] = []

    for method in methods:
        if should_exclude_target(method.name, filter_enabled, settings.lifecycle_methods):
            logger.debug(f"Skipping lifecycle target {method.key}")
            continue

        # BLE001: one bad target must not lose the rest of the scan
        try:
            info = source.get_patch_info(method)
            if info is None:
                continue
            records = _collect_method(method, info, settings)
        except Exception as exc:  # noqa: BLE001
            logger.warning(f"Error processing method {method.key}: {exc}")
            errors.append(ScanError(target=method.key, message=str(exc)))
            continue

        all_records.extend(records)
        if method.key in patches_by_target:
            logger.warning(
                f"Duplicate target key {method.key}: earlier overload replaced in conflict view"
            )
        patches_by_target[method.key] = records

    logger.info(f"Collected {len(all_records)} patches on {len(patches_by_target)} targets")

    return ScanResult(
        patches_by_target=patches_by_target,
        total_patched_methods=len(methods),
        errors=tuple(errors),
        filtered=filter_enabled,
        records=tuple(all_records),
    )


def _collect_method(
    method: PatchedMethod,
    info: MethodPatches,
    settings: ScannerSettings,
) -> tuple[PatchRecord, ...]:
    """Normalize all stages of one method."""
    records: list[PatchRecord] = []
    for stage in COLLECTION_ORDER:
        for patch in info.for_stage(stage):
            handler_name = patch.handler.name if patch.handler is not None else None
            if handler_name is not None and should_exclude_handler(
                handler_name,
                settings.exclude_common_lifecycle_methods,
                settings.lifecycle_methods,
            ):
                continue
            records.append(to_record(method, stage, patch))
    return tuple(records)


def to_record(method: PatchedMethod, stage: PatchStage, patch: RawPatch) -> PatchRecord:
    """Normalize one raw patch of method at stage."""
    handler = patch.handler.qualified_name if patch.handler is not None else f"{UNKNOWN}.{UNKNOWN}"
    return PatchRecord(
        target=method.key,
        stage=stage,
        owner=resolve_owner(patch),
        handler=handler,
        priority=patch.priority,
        index=patch.index,
        owner_id=patch.owner or UNKNOWN,
    )
