"""
NoteKeeper Backend: Request Context Middleware
================================================

What:  Gives each request an ID and writes one access-log line for it.
How:   Reuses the client's X-Request-ID header or generates a short UUID,
       publishes it through `request_id_var` for the duration of the call,
       times the downstream app and echoes the ID in the response header.

Log line (the ID comes from RequestIDLogFilter, not the message):
    2026-10-19T12:00:00 [INFO] notekeeper.access [a1b2c3d4]: PUT /notes/todo 200 0.4ms from 127.0.0.1

Request bodies are never logged; note text is user content.
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from notekeeper.middleware.request_id import request_id_var

logger = logging.getLogger("notekeeper.access")

REQUEST_ID_HEADER = "X-Request-ID"


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Request ID assignment plus access logging in one pass."""

    # Polled by orchestrators every few seconds; still gets an ID, no log line
    QUIET_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        # Each request runs in its own task context, so no reset is needed and
        # the outermost 500 handler still sees the ID
        request_id_var.set(rid)
        request.state.request_id = rid
        start_time = time.perf_counter()

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid

        if request.url.path not in self.QUIET_PATHS:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.log(
                _level_for(response.status_code),
                "%s %s %d %.1fms from %s",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
                request.client.host if request.client else "unknown",
            )
        return response
