"""
Logging Configuration
Sets up the package logger. Records go to stderr; stdout carries the data.
"""
import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Configures the logger for the 'comma_sort' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.WARNING)
        log_file: Optional path to save logs to a file.
    """
    logger = logging.getLogger("comma_sort")
    logger.setLevel(level)

    # Avoid duplicate handlers when a CLI entry point is called twice in one process
    if logger.hasHandlers():
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
