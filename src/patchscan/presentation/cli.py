"""Command line entry point.

Usage:
    patchscan inventory snapshot.json
    patchscan conflicts snapshot.json --output-dir logs
    patchscan all snapshot.json --include-lifecycle -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console

from patchscan import __version__
from patchscan.application.reporters.console import ConsoleConfig, ConsoleSummaryReporter
from patchscan.application.services.scanner import PatchScanner
from patchscan.domain.exceptions import InvalidSettingsError
from patchscan.domain.model.scan_result import ConflictScanResult
from patchscan.domain.ports.notifier import NoticeLevel
from patchscan.infrastructure.adapters.file_sink import FileReportSink
from patchscan.infrastructure.adapters.json_source import JsonSnapshotSource
from patchscan.infrastructure.adapters.rich_notifier import RichNotifier
from patchscan.infrastructure.adapters.settings_file import load_settings

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = Path("patchscan.json")


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the patchscan command."""
    parser = argparse.ArgumentParser(
        prog="patchscan",
        description="Inventory method patches and report conflicts between mods",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log more (-v info, -vv debug)",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=DEFAULT_SETTINGS_FILE,
        help="Settings JSON file (default: %(default)s, defaults if missing)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for report files (overrides settings)",
    )
    parser.add_argument(
        "--include-lifecycle",
        action="store_true",
        help="Do not exclude common lifecycle method patches",
    )
    parser.add_argument(
        "command",
        choices=("inventory", "conflicts", "all"),
        help="Report to produce",
    )
    parser.add_argument("snapshot", type=Path, help="Patch registry snapshot (JSON)")
    return parser


def configure_logging(verbosity: int) -> None:
    """Root logging for CLI runs. Library code never configures handlers."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        0 if every requested scan completed, 1 otherwise, 2 on bad settings.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    notifier = RichNotifier(Console(stderr=True))

    try:
        settings = load_settings(args.settings)
    except InvalidSettingsError as exc:
        notifier.notify(str(exc), level=NoticeLevel.ERROR)
        return 2

    settings = settings.with_overrides(
        exclude_common_lifecycle_methods=False if args.include_lifecycle else None,
        output_dir=args.output_dir,
    )
    logger.debug(f"Settings: {settings}")

    scanner = PatchScanner(
        JsonSnapshotSource(args.snapshot),
        FileReportSink(settings.output_dir),
        notifier,
        settings=settings,
    )

    ok = True
    if args.command in ("inventory", "all"):
        ok = scanner.scan_and_log() is not None and ok
    if args.command in ("conflicts", "all"):
        outcome = scanner.find_duplicate_patches()
        ok = outcome is not None and ok
        if outcome is not None and isinstance(outcome.result, ConflictScanResult):
            config = ConsoleConfig(color=sys.stdout.isatty())
            print(ConsoleSummaryReporter(config).report(outcome.result), end="")

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
