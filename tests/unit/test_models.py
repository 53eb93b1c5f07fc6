"""Unit tests for the ApiResponse envelope model."""

from __future__ import annotations

import pydantic
import pytest

from bookreview.models.responses import ApiResponse


class TestApiResponse:
    def test_ok_envelope(self):
        resp = ApiResponse.ok("Welcome to Book Review App")
        assert resp.to_content() == {
            "message": "Welcome to Book Review App",
            "data": None,
            "isSuccess": True,
        }

    def test_ok_envelope_with_data(self):
        resp = ApiResponse.ok("Book fetched", data={"id": 1, "title": "Dune"})
        assert resp.to_content()["data"] == {"id": 1, "title": "Dune"}
        assert resp.is_success is True

    def test_fail_envelope_has_no_data(self):
        resp = ApiResponse.fail("Book not found")
        assert resp.to_content() == {
            "message": "Book not found",
            "data": None,
            "isSuccess": False,
        }

    def test_field_order_on_the_wire(self):
        assert list(ApiResponse.fail("x").to_content()) == ["message", "data", "isSuccess"]

    def test_accepts_wire_alias(self):
        resp = ApiResponse.model_validate({"message": "hi", "data": None, "isSuccess": True})
        assert resp.is_success is True

    def test_is_immutable(self):
        resp = ApiResponse.fail("Book not found")
        with pytest.raises(pydantic.ValidationError):
            resp.message = "changed"  # type: ignore[misc]
