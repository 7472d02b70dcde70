"""Application configuration.

Settings come from environment variables and are read on every call, so
tests can override them with monkeypatch.setenv.
"""

import logging
import os

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_API_PREFIX = "/api"
DEFAULT_TEMPLATE = "${icon:fas fa-keyboard} ${term:title}"


def get_log_level() -> int:
    """Logging level from TERMINAL_TITLE_LOG_LEVEL (name or number)."""
    value = os.environ.get("TERMINAL_TITLE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else logging.INFO


def get_api_prefix() -> str:
    """URL prefix for the API router, without a trailing slash."""
    prefix = os.environ.get("TERMINAL_TITLE_API_PREFIX", DEFAULT_API_PREFIX).strip().strip("/")
    if not prefix:
        return ""
    return "/" + prefix


def get_default_template() -> str:
    """Template used when a preview request does not supply one."""
    return os.environ.get("TERMINAL_TITLE_DEFAULT_TEMPLATE", DEFAULT_TEMPLATE)
