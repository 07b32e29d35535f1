#!/usr/bin/env python3
"""Benchmark script for patchscan performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from patchscan.infrastructure.adapters.memory_source import InMemoryPatchSource

STAGES_PER_MOD = 4


def benchmark_import_time() -> float:
    """Measure import time of patchscan package."""
    start = time.perf_counter()
    import patchscan  # noqa: F401

    return time.perf_counter() - start


def build_registry(methods: int, mods: int) -> InMemoryPatchSource:
    """Synthetic registry: every mod patches every method once per stage."""
    from patchscan.domain.model.raw_patch import HandlerRef, PatchedMethod
    from patchscan.domain.model.stage import COLLECTION_ORDER
    from patchscan.infrastructure.adapters.memory_source import InMemoryPatchSource

    source = InMemoryPatchSource()
    for m in range(methods):
        method = PatchedMethod(declaring_type=f"Game.Type{m % 50}", name=f"Method{m}")
        for mod in range(mods):
            handler = HandlerRef(
                declaring_type=f"Mod{mod}.Patches",
                name=f"Patch{m}",
                module=f"Mod{mod}",
                module_location=f"Modules/Mod{mod}/bin/Win64/Mod{mod}.dll",
            )
            for stage in COLLECTION_ORDER:
                source.register(
                    method, stage, owner=f"mod{mod}", priority=(mod % 3) * 200, handler=handler
                )
    return source


def benchmark_aggregation(source: InMemoryPatchSource) -> float:
    """Measure collect_patches over the registry."""
    from patchscan.application.services.aggregator import collect_patches

    start = time.perf_counter()
    collect_patches(source)
    return time.perf_counter() - start


def benchmark_conflict_report(source: InMemoryPatchSource) -> float:
    """Measure conflict detection plus report rendering."""
    from patchscan.application.reporters.conflict import ConflictReporter
    from patchscan.application.services.aggregator import collect_patches
    from patchscan.application.services.conflicts import detect_conflicts

    scan = collect_patches(source)
    start = time.perf_counter()
    ConflictReporter().report(detect_conflicts(scan))
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run patchscan benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument("--methods", type=int, default=2000, help="Patched methods")
    parser.add_argument("--mods", type=int, default=5, help="Mods patching each method")
    args = parser.parse_args()

    patch_count = args.methods * args.mods * STAGES_PER_MOD
    results = [
        {"name": "Import Time", "unit": "seconds", "value": benchmark_import_time()},
    ]

    source = build_registry(args.methods, args.mods)
    results.append(
        {
            "name": f"Aggregation ({patch_count} patches)",
            "unit": "seconds",
            "value": benchmark_aggregation(source),
        }
    )
    results.append(
        {
            "name": f"Conflict Report ({args.methods} targets)",
            "unit": "seconds",
            "value": benchmark_conflict_report(source),
        }
    )

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
