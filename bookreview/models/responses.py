"""Generic API response envelope model.

Every response, success or error, is wrapped in this envelope:
{ message: str, data: T | None, isSuccess: bool }
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """JSON envelope for all API responses."""

    message: str
    data: T | None = None
    is_success: bool = Field(alias="isSuccess")

    model_config = {"populate_by_name": True, "frozen": True}

    @classmethod
    def ok(cls, message: str, data: T | None = None) -> "ApiResponse[T]":
        return cls(message=message, data=data, is_success=True)

    @classmethod
    def fail(cls, message: str) -> "ApiResponse[None]":
        # Error envelopes never carry data.
        return cls(message=message, data=None, is_success=False)

    def to_content(self) -> dict:
        """Serialize with wire field names (``isSuccess``)."""
        return self.model_dump(mode="json", by_alias=True)
