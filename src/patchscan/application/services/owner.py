"""Owner resolution: which mod installed a patch.

Fallback chain:
    1. '<mod folder> (<module>)' from the handler module's location
    2. '<module>' if the location gives no folder
    3. raw registry owner id
    4. 'Unknown'
"""

from __future__ import annotations

import logging
from pathlib import PurePath
from typing import TYPE_CHECKING

from patchscan.domain.model.raw_patch import UNKNOWN

if TYPE_CHECKING:
    from patchscan.domain.model.raw_patch import RawPatch

logger = logging.getLogger(__name__)

# Mod modules live at <mods>/<ModFolder>/bin/<platform>/<module file>
_FOLDER_DEPTH = 2


def resolve_owner(patch: RawPatch) -> str:
    """Resolve a human-readable owner name for a patch.

    Never raises: any failure falls back to the raw owner id.

    Args:
        patch: Patch as registered.

    Returns:
        Owner name, 'Unknown' as last resort.
    """
    try:
        handler = patch.handler
        if handler is not None and handler.declaring_type and handler.module:
            if handler.module_location:
                folder = mod_folder(handler.module_location)
                if folder:
                    return f"{folder} ({handler.module})"
            return handler.module
    except (AttributeError, TypeError, ValueError) as exc:
        logger.debug(f"Owner resolution failed for {patch.owner!r}: {exc}")

    return patch.owner or UNKNOWN


def mod_folder(module_location: str) -> str | None:
    """Name of the directory three levels above the module file.

    Args:
        module_location: Module file path (POSIX or Windows separators).

    Returns:
        Folder name, None if the path is too shallow.
    """
    parents = PurePath(module_location.replace("\\", "/")).parents
    if len(parents) <= _FOLDER_DEPTH:
        return None
    return parents[_FOLDER_DEPTH].name or None
