"""Two-state lexer for template strings.

Splits a raw template into tokens. In the NORMAL state the lexer produces
literal text runs, escaped dollars and the `${` opener. In the FIELD state it
produces symbols, colons and the closing `}` that returns to NORMAL.

Rules are tried in order and the first match wins.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum, auto

from template_string.exceptions import LexError

logger = logging.getLogger(__name__)


class LexerState(Enum):
    NORMAL = auto()
    FIELD = auto()


class TokenType(Enum):
    STRING = auto()
    ESCAPE_DOLLAR = auto()
    OPEN_BRACKET = auto()
    SYMBOL = auto()
    COLON = auto()
    CLOSE_BRACKET = auto()
    EOF = auto()  # reported by cursors when input is exhausted, never emitted


@dataclass(frozen=True)
class Token:
    """A single lexed token."""

    type: TokenType
    text: str


@dataclass(frozen=True)
class LexRule:
    """Pattern, resulting token type and the state to switch to."""

    pattern: re.Pattern
    type: TokenType
    new_state: LexerState


NORMAL_RULES = [
    LexRule(re.compile(r"\$\{"), TokenType.OPEN_BRACKET, LexerState.FIELD),
    LexRule(re.compile(r"\\\$"), TokenType.ESCAPE_DOLLAR, LexerState.NORMAL),
    LexRule(re.compile(r"[^$\\]+"), TokenType.STRING, LexerState.NORMAL),
    LexRule(re.compile(r"\$"), TokenType.STRING, LexerState.NORMAL),
    LexRule(re.compile(r"\\"), TokenType.STRING, LexerState.NORMAL),
]

FIELD_RULES = [
    LexRule(re.compile(r"[^:}]+"), TokenType.SYMBOL, LexerState.FIELD),
    LexRule(re.compile(r":"), TokenType.COLON, LexerState.FIELD),
    LexRule(re.compile(r"\}"), TokenType.CLOSE_BRACKET, LexerState.NORMAL),
]

STATE_RULES: dict[LexerState, list[LexRule]] = {
    LexerState.NORMAL: NORMAL_RULES,
    LexerState.FIELD: FIELD_RULES,
}


def lex(text: str) -> list[Token]:
    """Tokenize a template string.

    Args:
        text: Raw template string

    Returns:
        Tokens in source order. No EOF token is appended.

    Raises:
        LexError: If no rule of the current state matches at some position
    """
    tokens: list[Token] = []
    position = 0
    state = LexerState.NORMAL

    while position < len(text):
        for rule in STATE_RULES[state]:
            match = rule.pattern.match(text, position)
            if match:
                tokens.append(Token(rule.type, match.group(0)))
                position = match.end()
                state = rule.new_state
                break
        else:
            logger.error("[LEXER] No rule matched in state %s at position %d", state.name, position)
            raise LexError(position, text)

    return tokens
