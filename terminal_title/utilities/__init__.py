"""Utilities - logging."""

from terminal_title.utilities.logging import setup_logging

__all__ = ["setup_logging"]
