"""Concrete field formatters for terminal titles."""

from terminal_title.formatters.icon import IconFormatter
from terminal_title.formatters.mapping import MappingFieldFormatter
from terminal_title.formatters.terminal import (
    EXTRATERM_FIELDS,
    TERM_FIELDS,
    TerminalContext,
    build_terminal_title,
)

__all__ = [
    "EXTRATERM_FIELDS",
    "IconFormatter",
    "MappingFieldFormatter",
    "TERM_FIELDS",
    "TerminalContext",
    "build_terminal_title",
]
