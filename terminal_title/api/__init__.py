"""HTTP API for title templates."""

from terminal_title.api.routes import router

__all__ = ["router"]
