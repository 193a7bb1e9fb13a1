"""
NoteKeeper Backend: Write Route Handler
=========================================

What:  POST /write, the only way to create a note.
Why:   Target of the upload form; also usable by scripts posting JSON.
How:   Reads `note_name` and `note` from the body, validates them into a
       NoteCreate model, delegates to NoteStore.create().

Request bodies (fields `note_name` = name, `note` = text):
    application/x-www-form-urlencoded
    multipart/form-data
    application/json            {"note_name": "...", "note": "..."}

Responses:
    201 "Created"   note stored
    400             field missing/empty (ValidationError) or name taken (ConflictError)
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError as PydanticValidationError

from notekeeper.exceptions import ValidationError
from notekeeper.schemas.note import ErrorResponse, NoteCreate
from notekeeper.services.note_store import NoteStore, get_note_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Write"])

# Body field name → NoteCreate attribute
FIELDS = {"note_name": "name", "note": "text"}

_FIELDS_SCHEMA = {
    "type": "object",
    "properties": {
        "note_name": {"type": "string", "description": "Unique note name"},
        "note": {"type": "string", "description": "Note text"},
    },
    "required": ["note_name", "note"],
}


async def _read_fields(request: Request) -> Dict[str, Any]:
    """
    Collect note fields from a JSON or form body.

    Anything that is not JSON goes through request.form(), which yields an
    empty form for bodies it cannot parse, so absent fields become None.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            raise ValidationError(message="Request body is not valid JSON", field="body")
        if not isinstance(body, dict):
            body = {}
    else:
        body = await request.form()

    return {attr: body.get(field) for field, attr in FIELDS.items()}


@router.post(
    "/write",
    status_code=201,
    response_class=PlainTextResponse,
    responses={
        201: {"description": "Note created", "content": {"text/plain": {"example": "Created"}}},
        400: {"description": "Missing field or note already exists", "model": ErrorResponse},
    },
    summary="Create a new note",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/x-www-form-urlencoded": {"schema": _FIELDS_SCHEMA},
                "multipart/form-data": {"schema": _FIELDS_SCHEMA},
                "application/json": {"schema": _FIELDS_SCHEMA},
            },
        }
    },
)
async def write_note(
    request: Request,
    store: NoteStore = Depends(get_note_store),
) -> PlainTextResponse:
    try:
        payload = NoteCreate(**await _read_fields(request))
    except PydanticValidationError as e:
        attrs = {err["loc"][0] for err in e.errors()}
        fields = sorted(field for field, attr in FIELDS.items() if attr in attrs)
        raise ValidationError(
            message="Note name and text are required",
            context={"fields": fields},
        )

    store.create(payload.name, payload.text)
    return PlainTextResponse("Created", status_code=201)
