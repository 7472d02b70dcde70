"""Template string engine.

Parses `${namespace:key}` templates into segments and renders them to HTML
through formatters registered per namespace.

Usage:
    from template_string import TemplateString

    template = TemplateString()
    template.add_formatter("term", formatter)
    template.set_template_string("${term:title}")
    template.format_html()
"""

from template_string.exceptions import LexError, TemplateStringError
from template_string.formatter import FieldFormatter
from template_string.lexer import Token, TokenType, lex
from template_string.parser import parse
from template_string.segments import ErrorSegment, FieldSegment, Segment, TextSegment
from template_string.template import TemplateString, normalize_namespace

__all__ = [
    # Main API
    "TemplateString",
    "FieldFormatter",
    "parse",
    "lex",
    "normalize_namespace",
    # Types
    "Token",
    "TokenType",
    "Segment",
    "TextSegment",
    "FieldSegment",
    "ErrorSegment",
    # Errors
    "TemplateStringError",
    "LexError",
]
