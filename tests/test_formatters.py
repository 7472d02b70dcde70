"""Tests for terminal title formatters."""

from terminal_title.formatters import (
    IconFormatter,
    MappingFieldFormatter,
    TerminalContext,
    build_terminal_title,
)


class TestMappingFieldFormatter:
    """Mapping-backed formatter."""

    def test_string_value_is_escaped(self):
        formatter = MappingFieldFormatter({"title": "a <b> & c"})
        assert formatter.format_html("title") == "a &lt;b&gt; &amp; c"

    def test_callable_value_evaluated_each_render(self):
        values = ["first"]
        formatter = MappingFieldFormatter({"title": lambda: values[0]})
        assert formatter.format_html("title") == "first"
        values[0] = "second"
        assert formatter.format_html("title") == "second"

    def test_unknown_key(self):
        formatter = MappingFieldFormatter({"title": "x"})
        assert formatter.format_html("nope") == ""
        assert formatter.get_error_message("nope") == "Unknown key 'nope'"
        assert formatter.get_error_message("title") is None

    def test_describe(self):
        formatter = MappingFieldFormatter(
            {"b": "1", "a": "2"},
            descriptions={"a": "The a field"},
        )
        assert formatter.keys() == ["a", "b"]
        assert formatter.describe() == {"a": "The a field", "b": ""}


class TestIconFormatter:
    """Icon class formatter."""

    def test_renders_icon_element(self):
        assert IconFormatter().format_html("fas fa-pen") == '<i class="fas fa-pen"></i>'

    def test_collapses_whitespace(self):
        assert IconFormatter().format_html("  fas   fa-pen ") == '<i class="fas fa-pen"></i>'

    def test_rejects_markup(self):
        formatter = IconFormatter()
        assert formatter.format_html('x" onclick="y') == ""
        assert formatter.get_error_message('x" onclick="y') == "Invalid icon 'x\" onclick=\"y'"

    def test_valid_icon_has_no_error(self):
        assert IconFormatter().get_error_message("fab fa-linux") is None


class TestBuildTerminalTitle:
    """Terminal title assembly."""

    def test_namespaces_registered(self):
        title = build_terminal_title(None)
        assert title.namespaces() == ["extraterm", "icon", "term"]
        assert title.get_template_string() is None

    def test_renders_terminal_values(self):
        ctx = TerminalContext(title="vim", current_directory="/home/user", rows=24, columns=80)
        title = build_terminal_title(
            "${icon:fas fa-keyboard} ${term:title} in ${extraterm:currentDirectory} (${term:columns}x${term:rows})",
            ctx,
        )
        assert title.format_html() == '<i class="fas fa-keyboard"></i> vim in /home/user (80x24)'

    def test_context_changes_are_picked_up(self):
        ctx = TerminalContext(title="bash")
        title = build_terminal_title("${Term:title}", ctx)
        assert title.format_html() == "bash"
        ctx.title = "top"
        assert title.format_html() == "top"

    def test_unknown_key_in_diagnostics(self):
        title = build_terminal_title("${term:nope}")
        assert title.format_html() == ""
        assert title.format_diagnostic_html() == "<span class=\"segment_error\">Unknown key &#x27;nope&#x27;</span>"
