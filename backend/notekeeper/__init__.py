"""
NoteKeeper Backend: Application Package Initializer
=====================================================

What: Marks the `notekeeper` directory as a Python package.
Why:  Enables module imports like `from notekeeper.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest,
      uvicorn and the `notekeeper` console script.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Services (NoteStore logic)     │  ← uniqueness, existence, locking
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Note dataclass + Pydantic
    └─────────────────────────────────────┘

    There is no persistence layer: notes live in process memory and are
    gone when the process exits.
"""

__version__ = "1.0.0"
