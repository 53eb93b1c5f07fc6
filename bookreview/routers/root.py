"""Root endpoint.

- GET /: static welcome payload
"""

from __future__ import annotations

from fastapi import APIRouter

from bookreview.models.responses import ApiResponse

WELCOME_MESSAGE = "Welcome to Book Review App"


def create_root_router() -> APIRouter:
    """Factory that creates the root router."""

    root_router = APIRouter(tags=["root"])

    @root_router.get("/")
    async def welcome() -> dict:
        """Welcome payload; independent of request headers and cookies."""
        return ApiResponse.ok(WELCOME_MESSAGE).to_content()

    return root_router
