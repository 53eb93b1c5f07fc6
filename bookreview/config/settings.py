"""Pydantic Settings for the book review API.

Variables are read from the environment (and an optional ``.env`` file)
without a prefix, e.g. ``PORT=4000``, ``NODE_ENV=production``.
The resulting object is frozen and passed explicitly to whatever needs it.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """Service configuration validated from environment variables."""

    # Service
    node_env: str = "development"
    host: str = "0.0.0.0"
    port: int = Field(default=4000, ge=1, le=65535)
    log_level: str = "INFO"

    # Auth
    jwt_secret: str = ""  # Reserved for future auth routes

    # CORS
    cors_origins: list[str] = ["http://your-frontend-url.com"]

    model_config = {
        "env_file": ".env",
        "env_ignore_empty": True,
        "extra": "ignore",
        "frozen": True,
    }

    @property
    def is_production(self) -> bool:
        return self.node_env == "production"
