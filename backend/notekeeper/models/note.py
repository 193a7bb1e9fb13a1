"""
NoteKeeper Backend: Note Domain Model
=======================================

What:  The Note entity held by NoteStore.
Why:   A plain dataclass is enough for an in-memory record; the API contract
       lives separately in schemas/note.py.
Who:   Created and mutated only by NoteStore. Everything outside the store
       receives copies made with `Note.copy()`.

Fields:
    name: Unique, non-empty identifier. Never changes after creation.
    text: Note content. Replaced wholesale on update.
"""

from dataclasses import dataclass, replace


@dataclass
class Note:
    name: str
    text: str

    def copy(self) -> "Note":
        """Detached copy, safe to hand outside the store."""
        return replace(self)

    def __repr__(self) -> str:
        return f"<Note(name={self.name!r}, chars={len(self.text)})>"
