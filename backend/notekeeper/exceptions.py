"""
NoteKeeper Backend: Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the three failure kinds of the
       note store.
Why:   Lets NoteStore stay free of HTTP details while the router still maps
       every failure to the right status code.
How:   Each exception carries a message and optional context dict. Global
       exception handlers (registered in main.py) catch these and return
       structured JSON error responses.
Who:   Raised by NoteStore and the route handlers; caught by global handlers.

Exception Hierarchy:
    NoteKeeperError (base)
    ├── ValidationError   → 400 Bad Request (missing name or text)
    ├── ConflictError     → 400 Bad Request (name already taken)
    └── NotFoundError     → 404 Not Found

    Conflict answers 400, not 409, to keep the status codes clients of
    the service already rely on.
"""

from typing import Any, Dict, Optional


class NoteKeeperError(Exception):
    """
    Base exception for all NoteKeeper application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional info about the failed call
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NoteKeeperError):
    """
    Raised when client input fails validation.

    When:    Note name or text missing/empty on create, or an update body
             that is not valid UTF-8 text.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class ConflictError(NoteKeeperError):
    """
    Raised when creating a resource whose name is already taken.

    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The {resource} already exists"
        if resource_id:
            message = f"{resource} '{resource_id}' already exists"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class NotFoundError(NoteKeeperError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PUT/DELETE /notes/{name} for a name never created (or
             already deleted).
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
