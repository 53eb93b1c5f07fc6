"""Shared test fixtures for the API test suite."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from bookreview.config.settings import AppSettings
from bookreview.main import create_app


# ---------------------------------------------------------------------------
# Keep the developer's environment out of AppSettings
# ---------------------------------------------------------------------------

_SETTINGS_ENV = ("NODE_ENV", "PORT", "HOST", "JWT_SECRET", "CORS_ORIGINS", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Unset settings variables and run from a directory with no ``.env``."""
    for key in _SETTINGS_ENV:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# App fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def allowed_origin() -> str:
    return "http://books.example.com"


@pytest.fixture
def settings(allowed_origin: str) -> AppSettings:
    """Test settings with a known CORS allow-list."""
    return AppSettings(cors_origins=[allowed_origin], jwt_secret="test-secret")


@pytest.fixture
def app(settings: AppSettings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)
