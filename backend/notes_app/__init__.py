"""
Notes App Backend — Application Package Initializer
=====================================================

What: Marks the `notes_app` directory as a Python package.
Why:  Enables module imports like `from notes_app.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    This backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← ids, timestamps, normalisation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Note value object + Pydantic
    ├─────────────────────────────────────┤
    │      Repositories (Note Store)      │  ← Thread-safe in-memory store
    └─────────────────────────────────────┘

    Routes never touch the store directly; the NoteService is the only
    caller of the repository.
"""

__version__ = "1.0.0"
