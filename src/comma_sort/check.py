"""
Batch check of the pipeline against the oracle using multiprocessing.

Run with something like:
    comma-sort-check --processes 4 --random 1000 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import multiprocessing as mp
import sys
import time
from typing import Iterable, List, NamedTuple, Optional, Sequence

from comma_sort.cases import TEST_CASES, random_lines
from comma_sort.config import DEFAULT_PROCESSES, DEFAULT_RANDOM_LINES
from comma_sort.logging_config import setup_logging
from comma_sort.oracle import expected_output
from comma_sort.pipeline import sort_line

logger = logging.getLogger(__name__)


class VerificationError(AssertionError):
    """Pipeline output differs from the oracle for some line."""


class CheckResult(NamedTuple):
    line: str
    got: str
    expected: str

    @property
    def ok(self) -> bool:
        return self.got == self.expected


def check_line(line: str) -> CheckResult:
    return CheckResult(line, sort_line(line), expected_output(line))


def check_lines(lines: Iterable[str]) -> List[CheckResult]:
    return [check_line(line) for line in lines]


# Strategy: split the lines into chunks, check each chunk in a separate
# process, then concatenate. pool.map keeps input order.
def parallel_check(lines: Sequence[str], processes: int = DEFAULT_PROCESSES) -> List[CheckResult]:
    if not lines:
        return []

    n = len(lines)
    chunk_size = (n + processes - 1) // processes  # ceil division
    chunks = [list(lines[i:i + chunk_size]) for i in range(0, n, chunk_size)]
    logger.debug("Checking %d lines in %d chunks", n, len(chunks))

    with mp.Pool(processes=processes) as pool:
        checked_chunks = pool.map(check_lines, chunks)

    return [r for chunk in checked_chunks for r in chunk]


def verify(results: Iterable[CheckResult]) -> int:
    """Raise VerificationError on the first mismatch; return the count checked."""
    count = 0
    for r in results:
        if not r.ok:
            raise VerificationError(
                f"Mismatch for {r.line!r}: got {r.got!r}, expected {r.expected!r}"
            )
        count += 1
    return count


def collect_lines(random_count: int, seed: Optional[int]) -> List[str]:
    return list(TEST_CASES) + random_lines(random_count, seed)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Check comma-sort output against a reference sort")
    parser.add_argument("--processes", type=int, default=DEFAULT_PROCESSES, help="Worker processes.")
    parser.add_argument("--random", type=int, default=DEFAULT_RANDOM_LINES, help="Random lines to add to the sample corpus.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level.")
    parser.add_argument("--log-file", default=None, help="Also write log records to this file.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)
    if args.processes < 1:
        logger.error("--processes must be at least 1")
        return 2

    lines = collect_lines(args.random, args.seed)
    t0 = time.time()
    results = parallel_check(lines, processes=args.processes)
    t1 = time.time()

    try:
        count = verify(results)
    except VerificationError as exc:
        logger.error("%s", exc)
        return 1

    print(f"Checked {count:,} lines with {args.processes} processes in {t1 - t0:.3f} s.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
