"""Logging setup for the shouldbe package and the CLI."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def _handler(handler: logging.Handler) -> logging.Handler:
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logger(
    debug_file: Path | None = None, verbose: bool = False, logger_name: str = "shouldbe"
) -> logging.Logger:
    """Route assertion and config records from *logger_name* and its children.

    With neither *debug_file* nor *verbose* the logger only passes WARNING and
    above on to the root logger. Otherwise it records DEBUG to the file, to
    stderr, or to both, and stops propagating so records are not duplicated
    by a root handler.
    """
    logger = logging.getLogger(logger_name)

    for existing in logger.handlers:
        existing.close()
    logger.handlers.clear()
    logger.disabled = False

    if debug_file is None and not verbose:
        logger.setLevel(logging.WARNING)
        logger.propagate = True
        return logger

    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_handler(logging.FileHandler(debug_file, mode="a")))
    if verbose:
        logger.addHandler(_handler(logging.StreamHandler(sys.stderr)))

    return logger
