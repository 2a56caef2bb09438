"""
Single-line reader with a fixed character limit.

Reads at most ``LINE_LIMIT`` characters, stopping early after a line
terminator. Whatever is left of an over-long line stays in the stream.
"""

from __future__ import annotations

import logging
from typing import Optional, TextIO

from comma_sort.config import LINE_LIMIT

logger = logging.getLogger(__name__)


def read_line(stream: TextIO, limit: int = LINE_LIMIT) -> Optional[str]:
    """Return the first line of ``stream``, or None on end-of-input or read error."""
    try:
        line = stream.readline(limit)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Read failed: %s", exc)
        return None

    if not line:
        logger.debug("No input")
        return None
    if len(line) == limit and not line.endswith("\n"):
        logger.debug("Input line truncated to %d characters", limit)
    return line
