"""
Sample inputs used by the check and bench harnesses.

The stress case carries 18 values, two more than the buffer holds.
"""

from __future__ import annotations

import random
from typing import List

from comma_sort.config import CAPACITY

STRESS_CASE: str = "34,5,1,95,-4, 5 , 21, -1234, 5, 99999, 1,0,5,3,9,1,1,1"

TEST_CASES: List[str] = [
    "5,3  ,9,1",
    "1",
    "1,2,3,4,5",
    "4,3,2,1",
    "   2,1   ",
    "11, 22, 33, 44, 55, 66",
    "-1, -2, -3, -4",
    "9876    ,    9867,1234,5,4,3,2,1",
    STRESS_CASE,
]


def random_line(rng: random.Random, count: int = CAPACITY, low: int = -10**6, high: int = 10**6) -> str:
    """Comma-separated random integers, each padded with 0-2 spaces on either side."""
    fields = []
    for _ in range(count):
        pad_left = " " * rng.randint(0, 2)
        pad_right = " " * rng.randint(0, 2)
        fields.append(f"{pad_left}{rng.randint(low, high)}{pad_right}")
    return ",".join(fields)


def random_lines(n: int, seed=None) -> List[str]:
    rng = random.Random(seed)
    # Vary the count around capacity so truncation gets exercised too
    return [random_line(rng, rng.randint(0, CAPACITY + 4)) for _ in range(n)]
