"""
NoteKeeper Backend: Request ID Context
========================================

What:  The current request's ID, and a logging filter that stamps it on
       every log record.
Why:   A create/update/delete line logged by NoteStore can then be matched
       to the access-log line and error body of the request that caused it.
How:   RequestContextMiddleware (middleware/logging.py) sets the ContextVar;
       RequestIDLogFilter, attached to the root handler by setup_logging(),
       copies it onto each record as `request_id`.
"""

import logging
from contextvars import ContextVar

# Coroutine-local storage for the current request ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# Shown for records logged outside any request (startup, shutdown, tests)
NO_REQUEST = "-"


class RequestIDLogFilter(logging.Filter):
    """Adds `record.request_id` so formats can use %(request_id)s."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            record.request_id = request_id_var.get() or NO_REQUEST
        return True
