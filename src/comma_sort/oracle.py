"""
Reference results for the check harnesses.

Uses a regex conversion and built-in ``sorted()`` so it shares no code with
the parser or the sorter it is judging.
"""

from __future__ import annotations

import re
from typing import List

from comma_sort.config import CAPACITY, INT_MAX, INT_MIN, SEPARATOR

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def expected_numbers(line: str) -> List[int]:
    values = []
    if not line.strip(" \t\n\v\f\r"):
        return values
    for field in line.split(","):
        if not field:
            continue
        if len(values) == CAPACITY:
            break
        m = _INT_PREFIX.match(field)
        v = int(m.group(1)) if m else 0
        values.append(max(INT_MIN, min(INT_MAX, v)))
    return sorted(values)


def expected_output(line: str) -> str:
    return SEPARATOR.join(map(str, expected_numbers(line))) + "\n"
