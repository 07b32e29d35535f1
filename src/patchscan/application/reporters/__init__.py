"""Reporters for scan results.

Plain text reporters produce the report files.
ConsoleSummaryReporter renders a rich table for terminals.
"""

from patchscan.application.reporters._base import BaseReporter
from patchscan.application.reporters.conflict import CONFLICT_FILENAME, ConflictReporter
from patchscan.application.reporters.console import ConsoleConfig, ConsoleSummaryReporter
from patchscan.application.reporters.inventory import INVENTORY_FILENAME, InventoryReporter

__all__ = [
    "BaseReporter",
    "CONFLICT_FILENAME",
    "ConflictReporter",
    "ConsoleConfig",
    "ConsoleSummaryReporter",
    "INVENTORY_FILENAME",
    "InventoryReporter",
]
