"""
Notes App Backend — Request Logging Middleware
================================================

What:  One access-log line per note API request: method, path, status, duration.
Why:   uvicorn's access log has no request id and no timing.
How:   Times call_next and logs at a level chosen by `level_for_status`.

Request bodies are never logged; note content stays out of the logs.
"""

import logging
import time
from typing import Any, Dict

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from notes_app.middleware.request_id import request_id_var

logger = logging.getLogger("notes_app.access")

# Liveness checks hit "/" constantly
SKIPPED_PATHS = {"/"}


def level_for_status(status: int) -> int:
    """5xx → ERROR, 4xx → WARNING, anything else → INFO."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Writes an access line for every request outside SKIPPED_PATHS."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in SKIPPED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

        fields: Dict[str, Any] = {
            "request_id": request_id_var.get(""),
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "duration_ms": elapsed_ms,
        }
        logger.log(
            level_for_status(response.status_code),
            "%(method)s %(path)s -> %(status)d in %(duration_ms).1fms [%(request_id)s]",
            fields,
            extra=fields,
        )
        return response
