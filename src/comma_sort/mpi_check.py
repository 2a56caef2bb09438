"""
MPI batch check using mpi4py.

Run with something like:
    mpiexec -n 4 comma-sort-mpi-check --random 1000 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import List, Optional, Sequence

from mpi4py import MPI

from comma_sort.check import CheckResult, VerificationError, check_lines, collect_lines, verify
from comma_sort.config import DEFAULT_RANDOM_LINES
from comma_sort.logging_config import setup_logging

logger = logging.getLogger(__name__)


def chunkify(data: Sequence[str], chunks: int) -> List[List[str]]:
    """Split data into exactly ``chunks`` nearly equal parts (some may be empty)."""
    n = len(data)
    size = (n + chunks - 1) // chunks if n else 0
    parts = [list(data[i * size:(i + 1) * size]) for i in range(chunks)]
    return parts


def mpi_check(lines: Optional[Sequence[str]], comm: MPI.Comm = MPI.COMM_WORLD) -> Optional[List[CheckResult]]:
    """Scatter lines from rank 0, check locally, gather results back on rank 0."""
    rank = comm.Get_rank()
    size = comm.Get_size()

    chunks = chunkify(lines or [], size) if rank == 0 else None
    local_lines: List[str] = comm.scatter(chunks, root=0)

    local_results = check_lines(local_lines)
    logger.debug("Rank %d checked %d lines", rank, len(local_results))

    gathered = comm.gather(local_results, root=0)
    if rank != 0:
        return None

    return [r for part in gathered for r in part]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="MPI check of comma-sort output")
    parser.add_argument("--random", type=int, default=DEFAULT_RANDOM_LINES, help="Random lines to add (root generates).")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level.")
    parser.add_argument("--log-file", default=None, help="Also write log records to this file.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    comm = MPI.COMM_WORLD
    rank = comm.Get_rank()
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)

    lines: Optional[List[str]]
    lines = collect_lines(args.random, args.seed) if rank == 0 else None

    comm.barrier()
    t0 = time.time()
    results = mpi_check(lines, comm=comm)
    comm.barrier()
    t1 = time.time()

    status = 0
    if rank == 0:
        try:
            count = verify(results or [])
        except VerificationError as exc:
            logger.error("%s", exc)
            status = 1
        else:
            print(f"Checked {count:,} lines across {comm.Get_size()} ranks in {t1 - t0:.3f} s.")
    return comm.bcast(status, root=0)


if __name__ == "__main__":
    sys.exit(main())
