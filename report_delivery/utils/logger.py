"""Logging configuration and utilities."""

import logging
import sys
from typing import TextIO

from report_delivery.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str | None = None,
    level: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Set up and return a configured logger.

    :param name: Logger name; defaults to this module's name.
    :param level: Level name such as ``"DEBUG"``; defaults to ``settings.log_level``.
        Unknown names fall back to WARNING.
    :param stream: Handler stream; defaults to stderr, since stdout carries the
        report and delivery text.
    """
    logger = logging.getLogger(name or __name__)
    level_name = (level or settings.log_level).upper()
    logger.setLevel(getattr(logging, level_name, logging.WARNING))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr if stream is None else stream)
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        # root handlers would print every record twice
        logger.propagate = False

    return logger


# Default logger instance
logger = setup_logger("report_delivery")
