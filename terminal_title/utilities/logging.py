"""Logging setup for the terminal title service."""

import logging
import sys

from terminal_title.config import get_log_level

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
LOGGERS = ("template_string", "terminal_title")


def setup_logging(level: int | None = None) -> None:
    """Attach a stderr handler to the package loggers.

    Args:
        level: Log level; defaults to TERMINAL_TITLE_LOG_LEVEL
    """
    if level is None:
        level = get_log_level()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    for name in LOGGERS:
        pkg_logger = logging.getLogger(name)
        pkg_logger.setLevel(level)
        pkg_logger.handlers = [handler]
        pkg_logger.propagate = False
