"""Greeter API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to {"error": message}
    - Logging initialized on startup via lifespan context manager
    - No shared state between requests

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - run() wraps uvicorn so the listening address comes from Settings
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from greeter_api import __version__
from greeter_api.api.error_handlers import register_error_handlers
from greeter_api.api.routes import calculate, greet, health, root, users
from greeter_api.config import get_settings
from greeter_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Greeter API started")
    yield
    logger.info("Greeter API shutting down")


# Only the declared routes exist; everything else falls through to 404
app = FastAPI(
    title="Greeter API", version=__version__, lifespan=lifespan,
    docs_url=None, redoc_url=None, openapi_url=None,
    redirect_slashes=False,
)

app.include_router(root.router)
app.include_router(greet.router)
app.include_router(users.router)
app.include_router(calculate.router)
app.include_router(health.router)

register_error_handlers(app)


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
