"""Opt-in log output for the layout modules.

Layout modules report fallbacks (empty inputs, degenerate ranges, dropped
values) at debug level on loggers under `chartlayout`. Only a NullHandler is
attached on import; `setup_logging` wires real handlers for applications and
debugging sessions.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "chartlayout"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _handler(handler: logging.Handler, *, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """Route `chartlayout` records to stdout and, optionally, a file.

    Calling this again replaces the handlers installed by the previous call.

    Args:
        level: Threshold for the package logger and its handlers.
        log_file: Path of a log file to overwrite; None keeps console only.

    Returns:
        The `chartlayout` logger.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()

    logger.addHandler(_handler(logging.StreamHandler(sys.stdout), level=level))
    if log_file:
        logger.addHandler(_handler(logging.FileHandler(log_file, mode="w", encoding="utf-8"), level=level))

    logger.debug("Layout logging enabled at %s.", logging.getLevelName(level))
    return logger
