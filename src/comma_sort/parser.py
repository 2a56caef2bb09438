"""
Comma-separated integer parser.

Splits one line on ``,`` and converts every token with a best-effort,
never-raising integer conversion. At most ``CAPACITY`` values are kept; the
rest of the line is dropped without an error.

Precondition (not validated here): the line is at most ``LINE_LIMIT``
characters. Truncating longer input is the line reader's job.

Known limitation: values outside the signed 64-bit range saturate to
``INT_MIN`` / ``INT_MAX``.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from comma_sort.buffer import NumberBuffer
from comma_sort.config import DELIMITER, INT_MAX, INT_MIN

logger = logging.getLogger(__name__)

# C isspace() set
_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def iter_tokens(line: str, delimiter: str = DELIMITER) -> Iterator[str]:
    """Lazily yield the substrings of ``line`` between delimiters."""
    start = 0
    while True:
        end = line.find(delimiter, start)
        if end == -1:
            yield line[start:]
            return
        yield line[start:end]
        start = end + len(delimiter)


def parse_int_or_default(token: str, default: int = 0) -> int:
    """Parse the longest valid base-10 integer prefix of ``token``.

    Leading whitespace and one sign character are accepted; anything after
    the digits is ignored. A token with no digits gives ``default``.
    """
    i = 0
    n = len(token)
    while i < n and token[i] in _WHITESPACE:
        i += 1

    negative = False
    if i < n and token[i] in "+-":
        negative = token[i] == "-"
        i += 1

    start = i
    while i < n and token[i] in _DIGITS:
        i += 1
    if i == start:
        return default

    value = int(token[start:i], 10)
    if negative:
        value = -value
    return max(INT_MIN, min(INT_MAX, value))


def parse_line(line: str, buffer: Optional[NumberBuffer] = None) -> NumberBuffer:
    """Fill ``buffer`` (a fresh one by default) from a comma-separated line."""
    numbers = NumberBuffer() if buffer is None else buffer

    # A blank line (or a bare line terminator) holds no tokens at all
    if not line.strip(_WHITESPACE):
        return numbers

    # strtok semantics: only zero-length fields are skipped
    for token in iter_tokens(line):
        if not token:
            continue
        if numbers.is_full():
            logger.debug("Capacity %d reached, discarding rest of line", numbers.capacity)
            break
        value = parse_int_or_default(token)
        if value == 0 and not any(c in _DIGITS for c in token):
            logger.debug("Token %r has no digits, using 0", token)
        numbers.append(value)

    return numbers
