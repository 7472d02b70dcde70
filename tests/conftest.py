"""Shared fixtures for the test suite."""

import logging

import pytest

PACKAGE_LOGGERS = ("template_string", "terminal_title")


@pytest.fixture(autouse=True)
def restore_package_loggers():
    """Undo setup_logging() changes made by a test (including via create_app)."""
    saved = {}
    for name in PACKAGE_LOGGERS:
        pkg_logger = logging.getLogger(name)
        saved[name] = (pkg_logger.level, list(pkg_logger.handlers), pkg_logger.propagate)

    yield

    for name, (level, handlers, propagate) in saved.items():
        pkg_logger = logging.getLogger(name)
        pkg_logger.setLevel(level)
        pkg_logger.handlers = handlers
        pkg_logger.propagate = propagate
