"""Icon formatter: `${icon:fas fa-terminal}` -> `<i class="fas fa-terminal"></i>`."""

import re

from template_string import FieldFormatter

# One or more space-separated CSS class names
ICON_CLASSES_RE = re.compile(r"^\s*[A-Za-z_][\w-]*(\s+[A-Za-z_][\w-]*)*\s*$")


class IconFormatter(FieldFormatter):
    """Renders the key as the class list of an icon element."""

    def is_valid(self, key: str) -> bool:
        return bool(ICON_CLASSES_RE.match(key))

    def format_html(self, key: str) -> str:
        if not self.is_valid(key):
            return ""
        return f'<i class="{" ".join(key.split())}"></i>'

    def get_error_message(self, key: str) -> str | None:
        if self.is_valid(key):
            return None
        return f"Invalid icon '{key}'"
