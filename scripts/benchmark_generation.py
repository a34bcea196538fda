#!/usr/bin/env python3
"""Board Generation Benchmark Script.

Measures how long board generation takes across grid sizes and how often
each generation strategy is used. Grid sizes mirror the game's level table.

Usage:
    python benchmark_generation.py [--runs N] [--output FILE]
"""

import argparse
import json
import logging
import sys
import time
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple, Optional

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from tilelink.core.generator import BoardGenerator
from tilelink.utils.helpers import validate_board

# (width, height, tile types) per level
LEVEL_SIZES: List[Tuple[int, int, int]] = [
    (4, 4, 4),
    (6, 4, 6),
    (6, 6, 8),
    (8, 6, 10),
    (8, 8, 12),
    (10, 8, 13),
    (10, 10, 14),
    (12, 10, 15),
]


@dataclass
class SizeResult:
    """Benchmark result for one grid size."""
    width: int
    height: int
    tile_types: int
    runs: int
    avg_time_ms: float
    max_time_ms: float
    avg_attempts: float
    outcomes: Dict[str, int] = field(default_factory=dict)
    invalid_boards: int = 0


def benchmark_size(generator: BoardGenerator, width: int, height: int, tile_types: int, runs: int) -> SizeResult:
    """Generate ``runs`` boards of one size and collect timings."""
    times = []
    attempts = []
    outcomes: Dict[str, int] = {}
    invalid = 0

    for _ in range(runs):
        start = time.perf_counter()
        result = generator.generate(width, height, tile_types)
        times.append((time.perf_counter() - start) * 1000)
        attempts.append(result.attempts)
        outcomes[result.outcome.value] = outcomes.get(result.outcome.value, 0) + 1

        is_valid, _ = validate_board(result.board)
        if not is_valid:
            invalid += 1

    return SizeResult(
        width=width,
        height=height,
        tile_types=tile_types,
        runs=runs,
        avg_time_ms=sum(times) / len(times),
        max_time_ms=max(times),
        avg_attempts=sum(attempts) / len(attempts),
        outcomes=outcomes,
        invalid_boards=invalid,
    )


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Benchmark board generation")
    parser.add_argument("--runs", "-r", type=int, default=10,
                        help="Boards generated per grid size (default: 10)")
    parser.add_argument("--output", "-o", type=str, default=None,
                        help="Write results as JSON to this file")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Show generator log output")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    generator = BoardGenerator()
    results = []

    print(f"\n{'='*60}")
    print("Board Generation Benchmark")
    print(f"{'='*60}")

    for width, height, tile_types in LEVEL_SIZES:
        print(f"{width:2d}x{height:<2d} ({tile_types:2d} types)...", end=" ", flush=True)
        result = benchmark_size(generator, width, height, tile_types, args.runs)
        results.append(result)
        print(
            f"avg {result.avg_time_ms:8.1f}ms, max {result.max_time_ms:8.1f}ms, "
            f"attempts {result.avg_attempts:5.1f}, outcomes {result.outcomes}"
        )
        if result.invalid_boards:
            print(f"  WARNING: {result.invalid_boards} boards failed validation")

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(json.dumps([asdict(r) for r in results], indent=2))
        print(f"\nResults saved to: {output_path}")


if __name__ == "__main__":
    main()
