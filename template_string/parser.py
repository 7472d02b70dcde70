"""Segment parser.

Turns the lexer's tokens into text, field and error segments. Text runs and
field runs alternate; any `${...}` that is not exactly `${symbol:symbol}`
becomes an ErrorSegment and parsing carries on after it.
"""

import logging

from template_string.lexer import Token, TokenType, lex
from template_string.segments import ErrorSegment, FieldSegment, Segment, TextSegment

logger = logging.getLogger(__name__)

TEXT_TOKENS = (TokenType.STRING, TokenType.ESCAPE_DOLLAR)
NON_FIELD_TOKENS = (TokenType.STRING, TokenType.ESCAPE_DOLLAR, TokenType.EOF)
FIELD_PATTERN = (
    TokenType.OPEN_BRACKET,
    TokenType.SYMBOL,
    TokenType.COLON,
    TokenType.SYMBOL,
    TokenType.CLOSE_BRACKET,
)


class _TokenCursor:
    """Forward cursor over a token list, local to one parse."""

    def __init__(self, tokens: list[Token]):
        self._tokens = tokens
        self._index = 0

    def peek_type(self, offset: int = 0) -> TokenType:
        index = self._index + offset
        if index >= len(self._tokens):
            return TokenType.EOF
        return self._tokens[index].type

    def peek_types(self, count: int) -> tuple[TokenType, ...]:
        return tuple(self.peek_type(i) for i in range(count))

    def take(self) -> Token:
        token = self._tokens[self._index]
        self._index += 1
        return token

    def at_end(self) -> bool:
        return self.peek_type() == TokenType.EOF


def parse(template: str) -> list[Segment]:
    """Parse a template string into segments with absolute columns.

    Raises:
        LexError: If the template cannot be tokenized
    """
    cursor = _TokenCursor(lex(template))

    segments: list[Segment] = []
    while not cursor.at_end():
        text_segment = _parse_text(cursor)
        if text_segment is not None:
            segments.append(text_segment)
        if not cursor.at_end():
            segments.append(_parse_field(cursor))

    _assign_columns(segments)
    logger.debug("[PARSER] Parsed %d segments from %d characters", len(segments), len(template))
    return segments


def _parse_text(cursor: _TokenCursor) -> TextSegment | None:
    parts: list[str] = []
    width = 0
    while cursor.peek_type() in TEXT_TOKENS:
        token = cursor.take()
        if token.type == TokenType.ESCAPE_DOLLAR:
            parts.append("$")
        else:
            parts.append(token.text)
        width += len(token.text)

    text = "".join(parts)
    if not text:
        return None
    return TextSegment(text=text, end_column=width)


def _parse_field(cursor: _TokenCursor) -> Segment:
    if cursor.peek_types(len(FIELD_PATTERN)) == FIELD_PATTERN:
        cursor.take()  # ${
        namespace = cursor.take().text
        cursor.take()  # :
        key = cursor.take().text
        cursor.take()  # }
        width = len("${") + len(namespace) + len(":") + len(key) + len("}")
        return FieldSegment(namespace=namespace, key=key, end_column=width)

    parts: list[str] = []
    while cursor.peek_type() not in NON_FIELD_TOKENS:
        parts.append(cursor.take().text)
    bad_input = "".join(parts)
    logger.debug("[PARSER] Malformed field %r", bad_input)
    return ErrorSegment(text=bad_input, end_column=len(bad_input))


def _assign_columns(segments: list[Segment]) -> None:
    """Convert widths stored in end_column into absolute [start, end) offsets."""
    column = 0
    for segment in segments:
        segment.start_column = column
        column += segment.end_column
        segment.end_column = column
