"""Rich notifier: scan outcome messages on the terminal."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from patchscan.domain.ports.notifier import NoticeLevel

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_STYLES: Mapping[NoticeLevel, str] = {
    NoticeLevel.INFO: "",
    NoticeLevel.SUCCESS: "green",
    NoticeLevel.WARNING: "yellow",
    NoticeLevel.ERROR: "bold red",
}


class RichNotifier:
    """Prints notifications with a colour per level.

    Satisfies NotifierProtocol. Markup in messages is not interpreted.
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        styles: Mapping[NoticeLevel, str] | None = None,
    ) -> None:
        """Initialize notifier.

        Args:
            console: Target console (default: stderr console).
            styles: Rich style per level (default: DEFAULT_STYLES).
        """
        self._console = console or Console(stderr=True)
        self._styles = styles or DEFAULT_STYLES

    def notify(self, message: str, level: NoticeLevel = NoticeLevel.INFO) -> None:
        """Print message styled by level."""
        style = self._styles.get(level) or None
        self._console.print(
            message, style=style, markup=False, highlight=False, soft_wrap=True
        )
