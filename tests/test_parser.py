"""Tests for segment parsing and column assignment."""

from template_string import ErrorSegment, FieldSegment, TextSegment, parse


def _assert_columns_cover(template: str, segments) -> None:
    column = 0
    for segment in segments:
        assert segment.start_column == column
        assert segment.end_column >= segment.start_column
        column = segment.end_column
    assert column == len(template)


class TestTextSegments:
    """Literal text parsing."""

    def test_empty_template(self):
        assert parse("") == []

    def test_plain_text_single_segment(self):
        segments = parse("just some text")
        assert segments == [TextSegment(text="just some text", start_column=0, end_column=14)]

    def test_escaped_dollar_decodes_with_width_two(self):
        segments = parse("\\$5")
        assert segments == [TextSegment(text="$5", start_column=0, end_column=3)]

    def test_lone_dollar_and_backslash_are_text(self):
        segments = parse("a $ b \\ c")
        assert segments == [TextSegment(text="a $ b \\ c", start_column=0, end_column=9)]


class TestFieldSegments:
    """Well-formed fields."""

    def test_single_field(self):
        segments = parse("${term:title}")
        assert segments == [FieldSegment(namespace="term", key="title", start_column=0, end_column=13)]

    def test_field_keeps_raw_symbols(self):
        segments = parse("${Icon:fas fa-pen}")
        assert segments[0].namespace == "Icon"
        assert segments[0].key == "fas fa-pen"

    def test_adjacent_fields(self):
        segments = parse("${a:b}${c:d}")
        assert segments == [
            FieldSegment(namespace="a", key="b", start_column=0, end_column=6),
            FieldSegment(namespace="c", key="d", start_column=6, end_column=12),
        ]

    def test_mixed_example(self):
        template = "Hello ${user:name}, balance: \\$${acct:bal}"
        segments = parse(template)
        assert segments == [
            TextSegment(text="Hello ", start_column=0, end_column=6),
            FieldSegment(namespace="user", key="name", start_column=6, end_column=18),
            TextSegment(text=", balance: $", start_column=18, end_column=31),
            FieldSegment(namespace="acct", key="bal", start_column=31, end_column=42),
        ]
        _assert_columns_cover(template, segments)


class TestErrorSegments:
    """Malformed fields degrade to error segments."""

    def test_unterminated_field(self):
        segments = parse("${ns:key")
        assert segments == [ErrorSegment(text="${ns:key", start_column=0, end_column=8)]

    def test_error_left_empty_by_parser(self):
        assert parse("${ns}")[0].error == ""

    def test_missing_key(self):
        assert parse("${ns}") == [ErrorSegment(text="${ns}", start_column=0, end_column=5)]

    def test_too_many_colons(self):
        segments = parse("${a:b:c} tail")
        assert segments == [
            ErrorSegment(text="${a:b:c}", start_column=0, end_column=8),
            TextSegment(text=" tail", start_column=8, end_column=13),
        ]

    def test_empty_field(self):
        assert parse("x${}") == [
            TextSegment(text="x", start_column=0, end_column=1),
            ErrorSegment(text="${}", start_column=1, end_column=4),
        ]

    def test_error_absorbs_following_open_bracket(self):
        # Error runs stop only at text tokens
        segments = parse("${}${a:b}")
        assert segments == [ErrorSegment(text="${}${a:b}", start_column=0, end_column=9)]

    def test_parsing_continues_after_error(self):
        template = "${bad} ok ${term:title}"
        segments = parse(template)
        assert [s.type for s in segments] == ["error", "text", "field"]
        _assert_columns_cover(template, segments)


class TestColumns:
    """Column ranges cover the template in order."""

    def test_columns_cover_varied_templates(self):
        templates = [
            "plain",
            "\\$\\$\\$",
            "${a:b}",
            "pre ${a:b} mid \\$ ${c:d post",
            "$ \\ ${x:y}${}\\${z}",
            "${:}",
        ]
        for template in templates:
            _assert_columns_cover(template, parse(template))
