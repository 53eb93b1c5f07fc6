"""Property tests for request ID uniqueness and propagation."""

from __future__ import annotations

import uuid

from fastapi import FastAPI, Request
from fastapi.testclient import TestClient
from hypothesis import given, settings
from hypothesis import strategies as st

from bookreview.middleware.request_id import RequestIdMiddleware


# ---------------------------------------------------------------------------
# Minimal test app with RequestIdMiddleware
# ---------------------------------------------------------------------------

def _create_test_app() -> FastAPI:
    app = FastAPI()

    @app.get("/ping")
    async def ping(request: Request) -> dict:
        return {"request_id": request.state.request_id}

    app.add_middleware(RequestIdMiddleware)
    return app


_app = _create_test_app()
_client = TestClient(_app, raise_server_exceptions=False)


# ---------------------------------------------------------------------------
# Uniqueness
# ---------------------------------------------------------------------------


@settings(max_examples=50)
@given(n=st.integers(min_value=2, max_value=20))
def test_request_ids_are_unique_uuids(n: int) -> None:
    collected_ids: list[str] = []

    for _ in range(n):
        resp = _client.get("/ping")
        rid = resp.headers.get("X-Request-ID")
        assert rid is not None, "X-Request-ID header must be present"

        parsed = uuid.UUID(rid, version=4)
        assert str(parsed) == rid
        # The handler sees the same ID the client gets back.
        assert resp.json()["request_id"] == rid

        collected_ids.append(rid)

    assert len(set(collected_ids)) == len(collected_ids), "Request IDs must be unique"


# ---------------------------------------------------------------------------
# Propagation
# ---------------------------------------------------------------------------


@settings(max_examples=50)
@given(rid=st.from_regex(r"[A-Za-z0-9-]{1,40}", fullmatch=True))
def test_caller_request_id_is_reused(rid: str) -> None:
    resp = _client.get("/ping", headers={"X-Request-ID": rid})

    assert resp.headers["X-Request-ID"] == rid
    assert resp.json()["request_id"] == rid
