"""Notifier protocol: user-visible scan outcome messages."""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class NoticeLevel(Enum):
    """Severity of a user notification. Drives display colour."""

    INFO = "info"
    SUCCESS = "success"  # nothing to worry about
    WARNING = "warning"
    ERROR = "error"


class NotifierProtocol(Protocol):
    """Contract for showing a one-line message to the user."""

    def notify(self, message: str, level: NoticeLevel = NoticeLevel.INFO) -> None:
        """Show message at the given level."""
        ...
