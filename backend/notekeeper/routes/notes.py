"""
NoteKeeper Backend: Notes Route Handlers
==========================================

What:  GET/PUT/DELETE /notes/{name} and GET /notes.
Why:   Read, replace, remove and list notes by name.
How:   Extracts the name and body, delegates to NoteStore, shapes the response.
       NoteStore errors propagate to the global handlers in main.py
       (NotFoundError → 404).

Response bodies:
    GET    /notes/{name}  → text/plain, the note text
    PUT    /notes/{name}  → JSON {name, text}
    DELETE /notes/{name}  → 204, empty
    GET    /notes         → JSON [{name, text}, ...]

Names may contain "/" (anything /write accepts), so the routes use the
`path` convertor: `/notes/a/b` and `/notes/a%2Fb` both address note "a/b".
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import PlainTextResponse

from notekeeper.exceptions import ValidationError
from notekeeper.schemas.note import ErrorResponse, NoteResponse, NoteUpdate
from notekeeper.services.note_store import NoteStore, get_note_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Notes"])


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    summary="List all notes",
    description="Returns every stored note as an array of {name, text} objects.",
)
async def list_notes(
    store: NoteStore = Depends(get_note_store),
) -> List[NoteResponse]:
    return [NoteResponse.model_validate(note) for note in store.list()]


@router.get(
    "/notes/{name:path}",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "Note text", "content": {"text/plain": {}}},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Get the text of a note",
)
async def get_note(
    name: str,
    store: NoteStore = Depends(get_note_store),
) -> PlainTextResponse:
    note = store.get(name)
    return PlainTextResponse(note.text)


@router.put(
    "/notes/{name:path}",
    response_model=NoteResponse,
    responses={
        200: {"description": "Note updated", "model": NoteResponse},
        400: {"description": "Body is not UTF-8 text", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Replace the text of an existing note",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"text/plain": {"schema": {"type": "string"}}},
        }
    },
)
async def update_note(
    name: str,
    request: Request,
    store: NoteStore = Depends(get_note_store),
) -> NoteResponse:
    """
    Replace a note's text with the raw request body.

    Why read the body by hand: the body is plain text, not JSON, and an
    empty body is a legitimate update (it clears the note's text).
    """
    raw = await request.body()
    try:
        payload = NoteUpdate(text=raw.decode("utf-8"))
    except UnicodeDecodeError:
        raise ValidationError(message="Note text must be UTF-8 encoded", field="body")

    note = store.update(name, payload.text)
    return NoteResponse.model_validate(note)


@router.delete(
    "/notes/{name:path}",
    status_code=204,
    response_class=Response,
    responses={
        204: {"description": "Note deleted"},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Delete a note",
)
async def delete_note(
    name: str,
    store: NoteStore = Depends(get_note_store),
) -> Response:
    store.delete(name)
    return Response(status_code=204)
