"""TemplateString: parsed template plus per-namespace formatters.

Usage:
    template = TemplateString()
    template.add_formatter("term", TermFormatter())
    template.set_template_string("${term:title} \\$")
    html = template.format_html()

The formatter map is independent of the template text, so formatters may be
registered before or after the template is set.
"""

import html
import logging
from dataclasses import replace

from template_string.formatter import FieldFormatter
from template_string.parser import parse
from template_string.segments import ErrorSegment, FieldSegment, Segment, TextSegment

logger = logging.getLogger(__name__)


def normalize_namespace(namespace: str) -> str:
    """Namespace key used for registration and lookup."""
    return namespace.lower()


class TemplateString:
    """A template string and the formatters used to render it."""

    def __init__(self):
        self._template: str | None = None
        self._segments: list[Segment] = []
        self._formatters: dict[str, FieldFormatter] = {}

    def get_template_string(self) -> str | None:
        """Get the last template string set, or None."""
        return self._template

    def set_template_string(self, template: str) -> None:
        """Parse and store a template string.

        Raises:
            LexError: If the template cannot be tokenized. The previous
                template and segments are kept.
        """
        segments = parse(template)
        self._template = template
        self._segments = segments

    @property
    def segments(self) -> tuple[Segment, ...]:
        """Copies of the current segments in source order."""
        return tuple(replace(segment) for segment in self._segments)

    def add_formatter(self, namespace: str, formatter: FieldFormatter) -> None:
        """Register a formatter for a namespace, replacing any existing one."""
        key = normalize_namespace(namespace)
        if key in self._formatters:
            logger.warning("[TEMPLATE] Formatter for namespace '%s' already registered, overwriting", key)
        self._formatters[key] = formatter
        logger.debug("[TEMPLATE] Registered formatter: %s (%s)", key, type(formatter).__name__)

    def get_formatter(self, namespace: str) -> FieldFormatter | None:
        """Get the formatter for a namespace (case-insensitive)."""
        return self._formatters.get(normalize_namespace(namespace))

    def namespaces(self) -> list[str]:
        """Registered namespaces, sorted."""
        return sorted(self._formatters)

    def format_html(self) -> str:
        """Render the template to HTML.

        Unknown namespaces and malformed fields render as nothing.
        """
        return "".join(self._format_segment(segment) for segment in self._segments)

    def format_diagnostic_html(self) -> str:
        """Render the template with every segment wrapped in a labelled span.

        Unknown namespaces, field errors and malformed fields are shown as
        `segment_error` spans instead of being dropped.
        """
        return "".join(self._format_diagnostic_segment(segment) for segment in self._segments)

    def _format_segment(self, segment: Segment) -> str:
        if isinstance(segment, TextSegment):
            return html.escape(segment.text)

        if isinstance(segment, FieldSegment):
            formatter = self.get_formatter(segment.namespace)
            if formatter is None:
                logger.debug("[TEMPLATE] No formatter for namespace '%s'", segment.namespace)
                return ""
            return formatter.format_html(segment.key)

        return ""

    def _format_diagnostic_segment(self, segment: Segment) -> str:
        if isinstance(segment, TextSegment):
            return _span("segment_text", html.escape(segment.text))

        if isinstance(segment, FieldSegment):
            formatter = self.get_formatter(segment.namespace)
            if formatter is None:
                return _span("segment_error", f"Unknown '{html.escape(segment.namespace)}'")
            error_message = formatter.get_error_message(segment.key)
            if error_message is not None:
                return _span("segment_error", html.escape(error_message))
            return _span("segment_field", formatter.format_html(segment.key))

        if isinstance(segment, ErrorSegment):
            return _span("segment_error", f"Unknown '{html.escape(segment.text)}'")

        return ""


def _span(css_class: str, content: str) -> str:
    return f'<span class="{css_class}">{content}</span>'
