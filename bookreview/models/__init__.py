"""Public models for the book review API."""

from bookreview.models.responses import ApiResponse

__all__ = ["ApiResponse"]
