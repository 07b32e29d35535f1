"""Console reporter: ConflictScanResult → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text

from patchscan.domain.model.stage import RiskLevel

if TYPE_CHECKING:
    from patchscan.domain.model.scan_result import ConflictScanResult

RISK_STYLES: dict[RiskLevel, str] = {
    RiskLevel.HIGH: "bold red",
    RiskLevel.MEDIUM: "yellow",
    RiskLevel.LOW: "green",
}


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        max_rows: Max conflicts in the table. None = unlimited.
        width: Console width in characters.
        color: Emit ANSI styles.
    """

    max_rows: int | None = None
    width: int = 120
    color: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_rows is not None and self.max_rows < 1:
            raise ValueError(f"max_rows must be >= 1, got {self.max_rows}")
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleSummaryReporter:
    """Conflict summary table for terminals.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: ConflictScanResult) -> str:
        """Format conflicts as a rich table.

        Args:
            result: Scan plus conflicts.

        Returns:
            Formatted string.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        console.rule("[bold]PATCH CONFLICTS[/bold]")
        console.print(
            f"[bold]Targets:[/bold] {len(result.scan.patches_by_target)}  "
            f"[bold]Conflicts:[/bold] {result.conflict_count} "
            f"([bold red]{result.high_count} high[/bold red], "
            f"[yellow]{result.medium_count} medium[/yellow], "
            f"[green]{result.low_count} low[/green])"
        )

        if result.scan.errors:
            console.print(f"[bold red]Errors:[/bold red] {len(result.scan.errors)}")

        if result.conflicts:
            console.print(self._build_table(result))

        return output.getvalue()

    def _build_table(self, result: ConflictScanResult) -> Table:
        """One row per conflict, report order."""
        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("Risk")
        table.add_column("Target", style="cyan")
        table.add_column("Patches", justify="right")
        table.add_column("Mods", justify="right")

        conflicts = result.conflicts
        if self._config.max_rows is not None:
            conflicts = conflicts[: self._config.max_rows]

        for conflict in conflicts:
            level = conflict.risk_level
            table.add_row(
                Text(level.name, style=RISK_STYLES[level]),
                Text(conflict.target),
                str(conflict.patch_count),
                str(conflict.owner_count),
            )

        hidden = result.conflict_count - len(conflicts)
        if hidden > 0:
            table.add_row("", f"... {hidden} more", "", "")

        return table
