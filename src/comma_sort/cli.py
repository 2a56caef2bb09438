"""
Command-line entry point: one line in on stdin, the sorted line out on stdout.

Takes no flags. Exits 0 whether or not a line could be read.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from comma_sort.logging_config import setup_logging
from comma_sort.pipeline import sort_line
from comma_sort.reader import read_line


def run(stdin: TextIO, stdout: TextIO) -> int:
    line = read_line(stdin)
    if line is None:
        return 0
    stdout.write(sort_line(line))
    stdout.flush()
    return 0


def main(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    setup_logging(logging.WARNING)
    return run(sys.stdin if stdin is None else stdin, sys.stdout if stdout is None else stdout)


if __name__ == "__main__":
    sys.exit(main())
