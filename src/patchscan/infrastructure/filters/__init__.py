"""Infrastructure layer: stateless name filters.

Usage:
    from patchscan.infrastructure.filters import should_exclude_target

    if should_exclude_target(method.name, settings.exclude_common_lifecycle_methods):
        continue
"""

from patchscan.infrastructure.filters.lifecycle import should_exclude_handler, should_exclude_target

__all__ = [
    "should_exclude_handler",
    "should_exclude_target",
]
