"""Middleware package: error hierarchy, security headers, CORS and request ID."""

from bookreview.middleware.cors import ALLOWED_METHODS, add_cors_middleware
from bookreview.middleware.error_handler import (
    GENERIC_ERROR_MESSAGE,
    APIError,
    BadRequestError,
    ConflictError,
    ErrorKind,
    ErrorNormalizerMiddleware,
    ForbiddenError,
    NormalizedError,
    NotFoundError,
    UnauthorizedError,
    normalize_error,
    register_error_handlers,
)
from bookreview.middleware.request_id import RequestIdMiddleware
from bookreview.middleware.security_headers import SECURE_HEADERS, SecurityHeadersMiddleware

__all__ = [
    "ALLOWED_METHODS",
    "APIError",
    "BadRequestError",
    "ConflictError",
    "ErrorKind",
    "ErrorNormalizerMiddleware",
    "ForbiddenError",
    "GENERIC_ERROR_MESSAGE",
    "NormalizedError",
    "NotFoundError",
    "RequestIdMiddleware",
    "SECURE_HEADERS",
    "SecurityHeadersMiddleware",
    "UnauthorizedError",
    "add_cors_middleware",
    "normalize_error",
    "register_error_handlers",
]
