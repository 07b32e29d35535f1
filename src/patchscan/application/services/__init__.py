"""Application services: aggregation, ordering, classification.

PatchScanner lives in patchscan.application.services.scanner and is not
re-exported here: it depends on the reporters, which depend on these services.
"""

from patchscan.application.services.aggregator import collect_patches
from patchscan.application.services.classifier import assess, classify
from patchscan.application.services.conflicts import detect_conflicts, find_conflicts
from patchscan.application.services.execution_order import order_for_execution
from patchscan.application.services.owner import resolve_owner

__all__ = [
    "assess",
    "classify",
    "collect_patches",
    "detect_conflicts",
    "find_conflicts",
    "order_for_execution",
    "resolve_owner",
]
