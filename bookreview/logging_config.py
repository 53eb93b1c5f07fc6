"""JSON log output for the book review API.

One JSON object per line. The error handlers attach the request context
(request_id, path, method, status_code); those keys appear only when set,
except request_id, which is always present so entries can be grouped.
Values that look like ``jwt_secret=...`` or ``token: ...`` are masked.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone

REDACTED = "[REDACTED]"

_SECRET_ASSIGNMENT = re.compile(
    r"(jwt.secret|secret|password|token|authorization|cookie)\s*[=:]\s*\S+",
    re.IGNORECASE,
)

# Request context attached by bookreview.middleware.error_handler
CONTEXT_FIELDS = ("path", "method", "status_code")


def redact(text: str) -> str:
    return _SECRET_ASSIGNMENT.sub(REDACTED, text)


class JsonFormatter(logging.Formatter):
    """Render a record as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": redact(record.getMessage()),
            "request_id": getattr(record, "request_id", None),
        }
        payload.update(
            (name, getattr(record, name))
            for name in CONTEXT_FIELDS
            if hasattr(record, name)
        )
        if record.exc_info and record.exc_info[1] is not None:
            payload["exception"] = redact(self.formatException(record.exc_info))
        return json.dumps(payload, default=str)


def configure_logging(level: str = "INFO") -> None:
    """Send all records through one JSON stderr handler at *level*.

    Unknown level names fall back to INFO.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.handlers[:] = [handler]
    resolved = getattr(logging, level.upper(), None)
    root.setLevel(resolved if isinstance(resolved, int) else logging.INFO)
