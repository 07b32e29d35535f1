"""JSON snapshot patch source.

Reads a registry dump written by the host:

    {"methods": [
        {"declaring_type": "Foo", "name": "Bar",
         "patches": {"Prefix": [{"owner": "...", "priority": 0, "index": 0,
                                 "handler": {...}}]}}
    ]}

The file is read once. Per-method data is validated lazily in
get_patch_info(), so one malformed method fails alone.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from patchscan.domain.exceptions import MalformedRecordError, SourceUnavailableError
from patchscan.domain.model.raw_patch import HandlerRef, MethodPatches, PatchedMethod, RawPatch
from patchscan.domain.model.stage import PatchStage

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping
    from pathlib import Path

logger = logging.getLogger(__name__)

_HANDLER_FIELDS = ("declaring_type", "name", "module", "module_location")


class JsonSnapshotSource:
    """Patch source backed by a JSON snapshot file.

    Satisfies PatchSourceProtocol.
    """

    def __init__(self, path: Path) -> None:
        """Initialize source. Nothing is read until first use.

        Args:
            path: Snapshot file.
        """
        self._path = path
        self._entries: dict[PatchedMethod, Mapping[str, object]] | None = None

    def get_all_patched_methods(self) -> Iterator[PatchedMethod]:
        """Methods listed in the snapshot, file order.

        Raises:
            SourceUnavailableError: If the file cannot be read or has no method list.
        """
        return iter(tuple(self._load()))

    def get_patch_info(self, method: PatchedMethod) -> MethodPatches | None:
        """Patches of method per stage. None if not in the snapshot.

        Raises:
            MalformedRecordError: If the method's patch data is invalid.
        """
        entry = self._load().get(method)
        if entry is None:
            return None

        patches = entry.get("patches", {})
        if not isinstance(patches, dict):
            raise MalformedRecordError(method.key, "'patches' must be an object")

        unknown = set(patches) - {stage.value for stage in PatchStage}
        if unknown:
            raise MalformedRecordError(method.key, f"unknown stage(s): {sorted(unknown)}")

        return MethodPatches(
            prefixes=_parse_stage(method, patches, PatchStage.PREFIX),
            postfixes=_parse_stage(method, patches, PatchStage.POSTFIX),
            transpilers=_parse_stage(method, patches, PatchStage.TRANSPILER),
            finalizers=_parse_stage(method, patches, PatchStage.FINALIZER),
        )

    def _load(self) -> dict[PatchedMethod, Mapping[str, object]]:
        """Read and index the snapshot once."""
        if self._entries is not None:
            return self._entries

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise SourceUnavailableError(str(self._path), str(exc)) from exc

        methods = data.get("methods") if isinstance(data, dict) else None
        if not isinstance(methods, list):
            raise SourceUnavailableError(str(self._path), "expected object with 'methods' list")

        entries: dict[PatchedMethod, Mapping[str, object]] = {}
        for position, entry in enumerate(methods):
            method = _parse_method(entry)
            if method is None:
                logger.warning(f"{self._path}: methods[{position}] has no method name, skipped")
                continue
            if method in entries:
                logger.warning(f"{self._path}: duplicate entry for {method.key}, later entry wins")
            entries[method] = entry

        logger.debug(f"Loaded {len(entries)} patched methods from {self._path}")
        self._entries = entries
        return entries


def _parse_method(entry: object) -> PatchedMethod | None:
    """Method identity of a snapshot entry. None if unusable."""
    if not isinstance(entry, dict):
        return None
    name = entry.get("name")
    declaring_type = entry.get("declaring_type")
    signature = entry.get("signature")
    if not isinstance(name, str) or not name:
        return None
    if declaring_type is not None and not isinstance(declaring_type, str):
        declaring_type = None
    if signature is not None and not isinstance(signature, str):
        signature = None
    return PatchedMethod(declaring_type=declaring_type, name=name, signature=signature)


def _parse_stage(
    method: PatchedMethod,
    patches: Mapping[str, object],
    stage: PatchStage,
) -> tuple[RawPatch, ...]:
    """Validate one stage list."""
    items = patches.get(stage.value, [])
    if not isinstance(items, list):
        raise MalformedRecordError(method.key, f"'{stage.value}' must be a list")
    return tuple(_parse_patch(method, stage, item) for item in items)


def _parse_patch(method: PatchedMethod, stage: PatchStage, item: object) -> RawPatch:
    """Validate one patch entry."""
    if not isinstance(item, dict):
        raise MalformedRecordError(method.key, f"{stage.value} entry must be an object")

    priority = item.get("priority", 0)
    index = item.get("index")
    # bool is an int subclass; reject it explicitly
    if not isinstance(priority, int) or isinstance(priority, bool):
        raise MalformedRecordError(method.key, f"{stage.value} priority must be an integer")
    if not isinstance(index, int) or isinstance(index, bool) or index < 0:
        raise MalformedRecordError(
            method.key, f"{stage.value} index must be a non-negative integer"
        )

    owner = item.get("owner")
    if owner is not None and not isinstance(owner, str):
        raise MalformedRecordError(method.key, f"{stage.value} owner must be a string")

    return RawPatch(
        owner=owner,
        priority=priority,
        index=index,
        handler=_parse_handler(method, item.get("handler")),
    )


def _parse_handler(method: PatchedMethod, raw: object) -> HandlerRef | None:
    """Handler identity. Missing fields stay None."""
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise MalformedRecordError(method.key, "handler must be an object")

    fields: dict[str, str | None] = {}
    for name in _HANDLER_FIELDS:
        value = raw.get(name)
        if value is not None and not isinstance(value, str):
            raise MalformedRecordError(method.key, f"handler {name} must be a string")
        fields[name] = value or None
    return HandlerRef(**fields)
