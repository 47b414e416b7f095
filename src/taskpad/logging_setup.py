"""Logging configuration for taskpad.

Diagnostics go to stderr through the standard library logger named
``taskpad``; the interactive session itself writes to stdout through rich,
so the two never interleave on the same stream.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "taskpad"

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int | str = logging.WARNING, stream: TextIO | None = None) -> None:
    """Configure the ``taskpad`` logger.

    Safe to call more than once: handlers installed by earlier calls are
    removed first.

    Args:
        level: Logging level, as an int or a name such as ``"DEBUG"``
        stream: Destination stream (defaults to stderr)
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
