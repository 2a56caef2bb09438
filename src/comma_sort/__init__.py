"""Sort one line of comma-separated integers."""

from comma_sort.buffer import NumberBuffer
from comma_sort.config import CAPACITY, LINE_LIMIT
from comma_sort.formatter import format_numbers
from comma_sort.parser import iter_tokens, parse_int_or_default, parse_line
from comma_sort.pipeline import sort_line, sort_numbers
from comma_sort.sorter import bubble_sort

__all__ = [
    "CAPACITY",
    "LINE_LIMIT",
    "NumberBuffer",
    "bubble_sort",
    "format_numbers",
    "iter_tokens",
    "parse_int_or_default",
    "parse_line",
    "sort_line",
    "sort_numbers",
]
