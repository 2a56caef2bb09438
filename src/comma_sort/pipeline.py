"""
Parse, sort and format one line.

Every call builds its own ``NumberBuffer``; nothing is shared between calls,
so worker processes and MPI ranks can run it side by side.
"""

from __future__ import annotations

from typing import List

from comma_sort.formatter import format_numbers
from comma_sort.parser import parse_line
from comma_sort.sorter import bubble_sort


def sort_numbers(line: str) -> List[int]:
    numbers = parse_line(line)
    bubble_sort(numbers, len(numbers))
    return numbers.to_list()


def sort_line(line: str) -> str:
    """Return the output line (newline included) for one input line."""
    return format_numbers(sort_numbers(line)) + "\n"
