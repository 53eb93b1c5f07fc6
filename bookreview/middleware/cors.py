"""CORS policy.

Only allow-listed origins receive ``Access-Control-Allow-*`` headers, and
only they may send cookies cross-origin. Preflights from other origins are
rejected by Starlette with a 400.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookreview.config.settings import AppSettings

ALLOWED_METHODS: list[str] = ["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"]


def add_cors_middleware(app: FastAPI, settings: AppSettings) -> None:
    """Install the CORS policy for the configured origins."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=ALLOWED_METHODS,
        allow_headers=["*"],
        allow_credentials=True,
    )
