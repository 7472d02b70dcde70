"""Field formatter interface.

A formatter is registered on a TemplateString for one namespace and resolves
the keys of `${namespace:key}` fields in that namespace.
"""

from abc import ABC, abstractmethod


class FieldFormatter(ABC):
    """Resolves field keys for a single namespace."""

    @abstractmethod
    def format_html(self, key: str) -> str:
        """Return HTML for the key. The result is inserted without escaping."""

    @abstractmethod
    def get_error_message(self, key: str) -> str | None:
        """Return a human-readable error for an invalid key, or None."""
