"""Global error hierarchy and FastAPI exception handlers.

Application code raises ``APIError`` (or a subclass) with an HTTP status and
a message; that pair is returned to the client verbatim. Anything else is an
unrecognized failure and collapses to a generic 500 so no internal detail
leaks. Either way the client receives the envelope
{ message, data: null, isSuccess: false } and the error is logged first.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from bookreview.models.responses import ApiResponse

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong on the server"
VALIDATION_ERROR_MESSAGE = "Validation error"


# ---------------------------------------------------------------------------
# Error hierarchy
# ---------------------------------------------------------------------------


class ErrorKind(str, enum.Enum):
    """Tag deciding how the normalizer treats a raised value."""

    APPLICATION = "application"
    UNKNOWN = "unknown"


class APIError(Exception):
    """Base error for failures the application raises on purpose."""

    kind: ErrorKind = ErrorKind.APPLICATION
    status: int = 500
    message: str = GENERIC_ERROR_MESSAGE

    def __init__(self, message: str | None = None, status: int | None = None) -> None:
        self.message = message if message is not None else self.__class__.message
        self.status = status if status is not None else self.__class__.status
        super().__init__(self.message)


class BadRequestError(APIError):
    status = 400
    message = "Bad request"


class UnauthorizedError(APIError):
    status = 401
    message = "Unauthorized"


class ForbiddenError(APIError):
    status = 403
    message = "Forbidden"


class NotFoundError(APIError):
    status = 404
    message = "Resource not found"


class ConflictError(APIError):
    status = 409
    message = "Conflict"


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NormalizedError:
    kind: ErrorKind
    status: int
    message: str


def normalize_error(exc: BaseException) -> NormalizedError:
    """Classify *exc* by its kind tag and resolve the status and message."""
    kind = getattr(exc, "kind", ErrorKind.UNKNOWN)
    if kind is ErrorKind.APPLICATION:
        return NormalizedError(kind, exc.status, exc.message)  # type: ignore[attr-defined]
    return NormalizedError(ErrorKind.UNKNOWN, 500, GENERIC_ERROR_MESSAGE)


def _log_error(request: Request, exc: BaseException, normalized: NormalizedError) -> None:
    extra = {
        "request_id": getattr(request.state, "request_id", None),
        "path": request.url.path,
        "method": request.method,
        "status_code": normalized.status,
    }
    if normalized.kind is ErrorKind.APPLICATION:
        logger.warning("Application error: %s", exc, extra=extra)
    else:
        logger.error(
            "Unhandled exception: %r",
            exc,
            exc_info=(type(exc), exc, exc.__traceback__),
            extra=extra,
        )


def error_response(normalized: NormalizedError) -> JSONResponse:
    """Build the JSON envelope error response."""
    return JSONResponse(
        status_code=normalized.status,
        content=ApiResponse.fail(normalized.message).to_content(),
    )


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------


async def _api_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Terminal handler for application errors and unrecognized failures."""
    normalized = normalize_error(exc)
    _log_error(request, exc, normalized)
    return error_response(normalized)


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Framework HTTP errors (unknown route, wrong method) keep their status."""
    normalized = NormalizedError(ErrorKind.APPLICATION, exc.status_code, str(exc.detail))
    _log_error(request, exc, normalized)
    response = error_response(normalized)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed JSON bodies and invalid parameters (422)."""
    normalized = NormalizedError(ErrorKind.APPLICATION, 422, VALIDATION_ERROR_MESSAGE)
    _log_error(request, exc, normalized)
    return error_response(normalized)


# ---------------------------------------------------------------------------
# Terminal middleware
# ---------------------------------------------------------------------------


class ErrorNormalizerMiddleware(BaseHTTPMiddleware):
    """Innermost middleware that turns unrecognized failures into envelopes.

    Handlers keyed on ``Exception`` only run in Starlette's outermost
    server-error layer, which skips the other middleware and re-raises.
    Catching here keeps security, CORS and request ID headers on 500
    responses too.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return await _api_error_handler(request, exc)


# ---------------------------------------------------------------------------
# Registration helper
# ---------------------------------------------------------------------------


def register_error_handlers(app: FastAPI) -> None:
    """Wire up all exception handlers on the FastAPI application."""
    app.add_exception_handler(APIError, _api_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _api_error_handler)
