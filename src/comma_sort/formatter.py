from typing import Iterable

from comma_sort.config import SEPARATOR


def format_numbers(values: Iterable[int]) -> str:
    """Render values as ``"a, b, c"``; no trailing separator, no newline."""
    return SEPARATOR.join(str(v) for v in values)
