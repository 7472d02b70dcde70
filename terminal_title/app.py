"""FastAPI application factory."""

from fastapi import FastAPI

from terminal_title.api import router
from terminal_title.config import get_api_prefix
from terminal_title.utilities import setup_logging


def create_app() -> FastAPI:
    """Create the app with logging configured and the title router mounted."""
    setup_logging()
    app = FastAPI(title="Terminal Title")
    app.include_router(router, prefix=get_api_prefix())
    return app
