"""
NoteKeeper Backend: Note Store (Business Logic)
=================================================

What:  In-memory registry of notes keyed by name with create, get, update,
       delete and list operations.
Why:   Holds every rule of the service (name uniqueness, existence checks,
       create-time validation) independent of HTTP concerns.
How:   A dict owned by a NoteStore instance, guarded by one exclusive lock.
Who:   Called by route handlers through the `get_note_store` dependency.
When:  For every note operation.

Concurrency:
    Every operation, reads included, runs under a single threading.Lock.
    FastAPI may execute handlers on the event loop or in its worker thread
    pool; either way each call sees a consistent snapshot and at most one
    mutation is in flight. Calls never block on I/O, so the lock is only
    held for a few dict operations.

Ownership:
    The dict never leaves this class. Every returned Note is a copy, so a
    caller mutating a result cannot change stored state.
"""

import logging
import threading
from typing import Dict, List

from fastapi import Request

from notekeeper.exceptions import ConflictError, NotFoundError, ValidationError
from notekeeper.models.note import Note

logger = logging.getLogger(__name__)


class NoteStore:
    """
    Authoritative in-memory collection of notes.

    Responsibilities:
        - create(): insert a new note, rejecting empty input and duplicates
        - get(): look a note up by name
        - update(): replace the text of an existing note
        - delete(): remove an existing note
        - list(): every note, in insertion order

    Error Handling Strategy:
        Each method either returns a value or raises one of ValidationError,
        ConflictError or NotFoundError. Nothing is retried and nothing is
        partially applied.
    """

    def __init__(self) -> None:
        # Insertion-ordered; list() relies on it for deterministic output
        self._notes: Dict[str, Note] = {}
        self._lock = threading.Lock()

    def create(self, name: str, text: str) -> Note:
        """
        Insert a new note.

        Args:
            name: Unique, non-empty note name
            text: Non-empty note content

        Returns:
            The created note

        Raises:
            ValidationError: name or text missing/empty (→ 400)
            ConflictError: a note with this name already exists (→ 400)
        """
        if not name:
            raise ValidationError("Note name and text are required", field="note_name")
        if not text:
            raise ValidationError("Note name and text are required", field="note")

        with self._lock:
            if name in self._notes:
                logger.debug("Rejected create of existing note %r", name)
                raise ConflictError(resource="note", resource_id=name)
            note = Note(name=name, text=text)
            self._notes[name] = note
            created = note.copy()

        logger.info("Note %r created (%d chars)", name, len(text))
        return created

    def get(self, name: str) -> Note:
        """
        Look up a note by name.

        Raises:
            NotFoundError: no note with this name (→ 404)
        """
        with self._lock:
            note = self._notes.get(name)
            if note is None:
                raise NotFoundError(resource="note", resource_id=name)
            return note.copy()

    def update(self, name: str, text: str) -> Note:
        """
        Replace the text of an existing note.

        Any string is accepted as the new text, the empty string included.
        The name never changes.

        Raises:
            NotFoundError: no note with this name (→ 404)
        """
        with self._lock:
            note = self._notes.get(name)
            if note is None:
                logger.debug("Rejected update of missing note %r", name)
                raise NotFoundError(resource="note", resource_id=name)
            note.text = text
            updated = note.copy()

        logger.info("Note %r updated (%d chars)", name, len(text))
        return updated

    def delete(self, name: str) -> None:
        """
        Remove a note.

        Raises:
            NotFoundError: no note with this name (→ 404)
        """
        with self._lock:
            if self._notes.pop(name, None) is None:
                logger.debug("Rejected delete of missing note %r", name)
                raise NotFoundError(resource="note", resource_id=name)

        logger.info("Note %r deleted", name)

    def list(self) -> List[Note]:
        """Every stored note, oldest first. Never fails."""
        with self._lock:
            return [note.copy() for note in self._notes.values()]

    def count(self) -> int:
        with self._lock:
            return len(self._notes)

    def clear(self) -> None:
        """Drop every note."""
        with self._lock:
            removed = len(self._notes)
            self._notes.clear()
        if removed:
            logger.info("Cleared %d notes", removed)


def get_note_store(request: Request) -> NoteStore:
    """
    FastAPI dependency returning the application's NoteStore.

    Why app.state: each app built by create_app() owns exactly one store,
    so tests get a fresh, isolated store per app instead of a shared global.
    """
    return request.app.state.note_store
