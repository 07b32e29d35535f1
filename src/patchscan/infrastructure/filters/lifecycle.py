"""Lifecycle filters.

Decide whether a target method or a patch handler is a common lifecycle
hook that should be left out of analysis.
Exact, case-sensitive name match. No patterns.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from patchscan.domain.model.lifecycle import COMMON_LIFECYCLE_METHODS

if TYPE_CHECKING:
    from collections.abc import Set


def should_exclude_target(
    name: str,
    filter_enabled: bool,
    names: Set[str] = COMMON_LIFECYCLE_METHODS,
) -> bool:
    """Check if a patched target method is a lifecycle hook to skip.

    Args:
        name: Target method name (without declaring type).
        filter_enabled: Lifecycle filter setting. False = never exclude.
        names: Lifecycle hook names.

    Returns:
        True if the whole target must be dropped.
    """
    if not filter_enabled:
        return False
    return name in names


def should_exclude_handler(
    name: str,
    filter_enabled: bool,
    names: Set[str] = COMMON_LIFECYCLE_METHODS,
) -> bool:
    """Check if a patch handler is itself named like a lifecycle hook.

    Args:
        name: Handler function name (without declaring type).
        filter_enabled: Lifecycle filter setting. False = never exclude.
        names: Lifecycle hook names.

    Returns:
        True if this single record must be dropped.
    """
    if not filter_enabled:
        return False
    return name in names
