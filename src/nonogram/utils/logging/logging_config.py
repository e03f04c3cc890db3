"""
Centralized logging configuration.

The grid is drawn on stdout with cursor addressing, so log records must never
go there: they are sent to stderr or to a file.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "nonogram"

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"


def setup_logging(
    verbose: bool = False, log_file: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        verbose: Log DEBUG records instead of only warnings and errors
        log_file: Write records to this file instead of stderr

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()

    if log_file is not None:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False

    return logger
