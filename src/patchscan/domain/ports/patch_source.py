"""Patch source protocol: read-only view of a live patch registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable

    from patchscan.domain.model.raw_patch import MethodPatches, PatchedMethod


class PatchSourceProtocol(Protocol):
    """Contract for patch registries.

    The registry is a snapshot for the duration of a scan.
    Implementations raise SourceUnavailableError when nothing can be read,
    and MalformedRecordError when one method's data is invalid.
    """

    def get_all_patched_methods(self) -> Iterable[PatchedMethod]:
        """Enumerate every method that currently has patches."""
        ...

    def get_patch_info(self, method: PatchedMethod) -> MethodPatches | None:
        """Patches attached to method, per stage. None if none are known."""
        ...
