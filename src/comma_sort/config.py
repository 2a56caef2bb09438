"""
Fixed limits and defaults shared by the pipeline and the harness scripts.

None of these are overridable at run time; the main CLI takes no flags.
"""

# Parser / buffer limits
CAPACITY: int = 16
LINE_LIMIT: int = 255

DELIMITER: str = ","
SEPARATOR: str = ", "

# Saturation bounds for a single parsed value (signed 64-bit)
INT_MAX: int = 2**63 - 1
INT_MIN: int = -(2**63)

# Harness defaults
DEFAULT_PROCESSES: int = 4
DEFAULT_REPEATS: int = 10
DEFAULT_RANDOM_LINES: int = 100
