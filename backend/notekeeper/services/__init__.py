# Services package init
"""
NoteKeeper Backend: Services Layer
====================================

What:  Business logic layer sitting between routes (HTTP) and note data.
Why:   Separation of concerns: routes handle HTTP, services handle rules.

Service Inventory:
    - NoteStore: in-memory note registry enforcing uniqueness and existence

Why services are separate from routes:
    1. Testability: NoteStore can be unit-tested without HTTP overhead
    2. Reusability: the same store can back other front ends
"""
