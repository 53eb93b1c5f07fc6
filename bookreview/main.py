"""FastAPI application entry point with lifespan management.

Startup: configure JSON logging and announce the listening port.
``create_app`` is the composition root: settings are built once here (or
passed in) and handed to the pieces that need them.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from bookreview import __version__
from bookreview.config.settings import AppSettings
from bookreview.logging_config import configure_logging
from bookreview.middleware.cors import add_cors_middleware
from bookreview.middleware.error_handler import (
    ErrorNormalizerMiddleware,
    register_error_handlers,
)
from bookreview.middleware.request_id import RequestIdMiddleware
from bookreview.middleware.security_headers import SecurityHeadersMiddleware
from bookreview.routers.root import create_root_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown logic."""
    settings: AppSettings = app.state.settings

    configure_logging(settings.log_level)
    logger.info("Server starting at port %d", settings.port)

    yield

    logger.info("Server shut down")


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or AppSettings()

    app = FastAPI(
        title="Book Review API",
        version=__version__,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_error_handlers(app)

    # Middleware (outermost first: security headers → CORS → request_id → errors)
    # Note: Starlette applies middleware in reverse order of add_middleware calls
    app.add_middleware(ErrorNormalizerMiddleware)
    app.add_middleware(RequestIdMiddleware)
    add_cors_middleware(app, settings)
    app.add_middleware(SecurityHeadersMiddleware)

    app.include_router(create_root_router())

    return app


def run(settings: AppSettings | None = None) -> None:
    """Serve the application with uvicorn on the configured host and port."""
    settings = settings or AppSettings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


app = create_app()


if __name__ == "__main__":
    run()
