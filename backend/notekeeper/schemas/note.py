"""
NoteKeeper Backend: Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract of the notes service.
Why:   Raw form fields and request bodies are validated into typed models at
       the router boundary, so NoteStore only ever sees checked strings.
How:   Routes build request models from form/body data and return response
       models; FastAPI serializes them and documents them in OpenAPI.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models: What clients send
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    What:  Validated payload of POST /write.
    How:   Built from the `note_name` and `note` form fields. Both must be
           present and non-empty; a missing field surfaces as a Pydantic
           error which the route converts to a 400 ValidationError.
    """
    name: str = Field(min_length=1, description="Unique note name")
    text: str = Field(min_length=1, description="Note content")


class NoteUpdate(BaseModel):
    """
    What:  Validated payload of PUT /notes/{name}.
    Why no min_length: Update replaces the text with any string, including
           the empty string. Only create insists on content.
    """
    text: str = Field(description="Full replacement text")


# ══════════════════════════════════════════════════════════════════════════
# Response Models: What the API returns
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    What:  A note as `{name, text}`.
    Who:   Returned by PUT /notes/{name} and, as array items, by GET /notes.
    """
    name: str = Field(description="Unique note name")
    text: str = Field(description="Note content")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code ("validation_error", "conflict", "not_found")
        message: Human-readable description
        details: Optional extra context (e.g., which field failed validation)
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response: service status, note count and uptime."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    notes: int = Field(description="Number of notes currently stored")
    uptime_seconds: float = Field(description="Seconds since service started")
