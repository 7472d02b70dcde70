"""Mapping-backed field formatter.

Resolves keys from a dict of key -> value, where a value is either a plain
string or a zero-argument callable evaluated at render time. Values are
HTML-escaped before being returned.
"""

import html
from collections.abc import Callable, Mapping

from template_string import FieldFormatter

# Value source: literal string or a getter evaluated per render
FieldValue = str | Callable[[], str]


class MappingFieldFormatter(FieldFormatter):
    """Formatter over a fixed set of keys."""

    def __init__(
        self,
        values: Mapping[str, FieldValue],
        *,
        name: str = "",
        descriptions: Mapping[str, str] | None = None,
    ):
        self.name = name
        self._values = dict(values)
        self._descriptions = dict(descriptions or {})

    def keys(self) -> list[str]:
        """Supported keys, sorted."""
        return sorted(self._values)

    def describe(self) -> dict[str, str]:
        """Key -> description for every supported key."""
        return {key: self._descriptions.get(key, "") for key in self.keys()}

    def get_value(self, key: str) -> str | None:
        """Raw (unescaped) value for a key, or None if the key is unknown."""
        value = self._values.get(key)
        if value is None:
            return None
        if callable(value):
            value = value()
        return "" if value is None else str(value)

    def format_html(self, key: str) -> str:
        value = self.get_value(key)
        if value is None:
            return ""
        return html.escape(value)

    def get_error_message(self, key: str) -> str | None:
        if key in self._values:
            return None
        return f"Unknown key '{key}'"
