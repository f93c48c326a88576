"""
Notes App Backend — Repositories Package
==========================================

What:  The note store: the only code allowed to hold or mutate note data.

Repository Inventory:
    - base.py:    NoteRepository (abstract interface)
    - memory.py:  InMemoryNoteRepository (thread-safe, process lifetime)
"""

from notes_app.repositories.base import NoteRepository
from notes_app.repositories.memory import InMemoryNoteRepository

__all__ = [
    "NoteRepository",
    "InMemoryNoteRepository",
]
