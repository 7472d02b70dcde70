"""Formatters for the values a terminal tab title can show.

Namespaces:
- term: title, rows, columns
- extraterm: currentDirectory
- icon: any icon class list, e.g. `${icon:fas fa-keyboard}`
"""

from dataclasses import dataclass

from template_string import TemplateString
from terminal_title.formatters.icon import IconFormatter
from terminal_title.formatters.mapping import MappingFieldFormatter

TERM_FIELDS = {
    "title": "Title reported by the terminal (e.g., 'vim README.md')",
    "rows": "Number of rows in the terminal",
    "columns": "Number of columns in the terminal",
}

EXTRATERM_FIELDS = {
    "currentDirectory": "Current working directory of the shell",
}


@dataclass
class TerminalContext:
    """Values available to a terminal title template."""

    title: str = ""
    current_directory: str = ""
    rows: int = 0
    columns: int = 0


def term_formatter(ctx: TerminalContext) -> MappingFieldFormatter:
    return MappingFieldFormatter(
        {
            "title": lambda: ctx.title,
            "rows": lambda: str(ctx.rows),
            "columns": lambda: str(ctx.columns),
        },
        name="term",
        descriptions=TERM_FIELDS,
    )


def extraterm_formatter(ctx: TerminalContext) -> MappingFieldFormatter:
    return MappingFieldFormatter(
        {"currentDirectory": lambda: ctx.current_directory},
        name="extraterm",
        descriptions=EXTRATERM_FIELDS,
    )


def build_terminal_title(template: str | None, ctx: TerminalContext | None = None) -> TemplateString:
    """Create a TemplateString with the terminal namespaces registered.

    Formatters read from ctx at render time, so updating the context and
    rendering again picks up the new values.

    Raises:
        LexError: If the template cannot be tokenized
    """
    ctx = ctx or TerminalContext()
    template_string = TemplateString()
    template_string.add_formatter("term", term_formatter(ctx))
    template_string.add_formatter("extraterm", extraterm_formatter(ctx))
    template_string.add_formatter("icon", IconFormatter())
    if template is not None:
        template_string.set_template_string(template)
    return template_string
