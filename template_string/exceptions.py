"""Exceptions raised by the template string engine."""


class TemplateStringError(Exception):
    """Base class for template string errors."""


class LexError(TemplateStringError):
    """Raised when no lexer rule matches the remaining template input."""

    def __init__(self, position: int, text: str = ""):
        self.position = position
        self.text = text
        super().__init__(f"Unable to parse template at position {position}")
