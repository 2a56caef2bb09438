"""Wall-clock timing of the pipeline on the stress case and random lines."""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from typing import Optional, Sequence

from comma_sort.cases import STRESS_CASE, random_line
from comma_sort.config import CAPACITY, DEFAULT_REPEATS
from comma_sort.logging_config import setup_logging
from comma_sort.pipeline import sort_line

logger = logging.getLogger(__name__)


def time_pipeline(line: str, repeats: int = DEFAULT_REPEATS) -> float:
    start = time.perf_counter()
    for _ in range(repeats):
        sort_line(line)
    return time.perf_counter() - start


def benchmark(repeats: int = DEFAULT_REPEATS, seed: Optional[int] = None) -> None:
    """Print one timing row per case."""
    rng = random.Random(seed)
    cases = [
        ("stress", STRESS_CASE),
        ("random full", random_line(rng, CAPACITY)),
        ("random over", random_line(rng, CAPACITY * 4)),
        ("reversed", ",".join(str(v) for v in range(CAPACITY, 0, -1))),
    ]

    print(f"\n=== Pipeline timing ({repeats:,} runs per case) ===")
    for name, line in cases:
        logger.debug("Timing %s: %r", name, line)
        elapsed = time_pipeline(line, repeats)
        print(f"{name:<12}  →  total = {elapsed:.6f} s  per run = {elapsed / repeats * 1e6:.2f} µs")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="comma-sort pipeline timing")
    parser.add_argument("--repeats", type=int, default=DEFAULT_REPEATS, help="Runs per case.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level.")
    parser.add_argument("--log-file", default=None, help="Also write log records to this file.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)
    if args.repeats < 1:
        logger.error("--repeats must be at least 1")
        return 2
    benchmark(args.repeats, args.seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
