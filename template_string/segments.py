"""Segment types produced by the template parser.

Columns are half-open offsets into the source template, measured in source
characters (an escaped dollar `\\$` spans two columns).
"""

from dataclasses import dataclass
from typing import ClassVar, Literal


@dataclass
class TextSegment:
    """Literal text with escapes decoded."""

    type: ClassVar[Literal["text"]] = "text"

    text: str
    start_column: int = 0
    end_column: int = 0


@dataclass
class FieldSegment:
    """A well-formed `${namespace:key}` field."""

    type: ClassVar[Literal["field"]] = "field"

    namespace: str
    key: str
    start_column: int = 0
    end_column: int = 0


@dataclass
class ErrorSegment:
    """A malformed field-like run that could not be parsed."""

    type: ClassVar[Literal["error"]] = "error"

    text: str
    error: str = ""  # message slot, left empty by the parser
    start_column: int = 0
    end_column: int = 0


Segment = TextSegment | FieldSegment | ErrorSegment
