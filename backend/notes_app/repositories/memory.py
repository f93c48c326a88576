"""
Notes App Backend — In-Memory Note Repository
===============================================

What:  Thread-safe note store backed by a plain dict.
Why:   The service keeps no durable state; notes live for the process lifetime.
How:   One coarse `threading.Lock` guards the dict. Every public method holds
       it for its whole body, which makes each operation atomic and gives
       list() a consistent snapshot. Work under the lock is pure in-memory
       (O(1) lookups, O(n log n) for the sorted listing), so contention is short.

Thread Safety:
    Safe for concurrent use from async handlers and from worker threads.
    The lock is never held across an await.
"""

import logging
import threading
import uuid
from dataclasses import replace
from datetime import timedelta
from typing import Dict, List, Optional

from notes_app.exceptions import ConflictError
from notes_app.models.note import Note, utc_now
from notes_app.repositories.base import NoteRepository

logger = logging.getLogger(__name__)


class InMemoryNoteRepository(NoteRepository):
    """In-memory note store. Intended for development and testing."""

    def __init__(self) -> None:
        # Insertion-ordered; list() relies on this to break updated_at ties
        self._notes: Dict[uuid.UUID, Note] = {}
        self._lock = threading.Lock()

    def list(self) -> List[Note]:
        with self._lock:
            snapshot = list(self._notes.values())
        # sorted() is stable, so equal updated_at values keep insertion order
        return sorted(snapshot, key=lambda n: n.updated_at, reverse=True)

    def get(self, note_id: uuid.UUID) -> Optional[Note]:
        with self._lock:
            return self._notes.get(note_id)

    def create(self, note: Note) -> None:
        with self._lock:
            if note.id in self._notes:
                raise ConflictError(resource="note", resource_id=str(note.id))
            self._notes[note.id] = note

    def update(self, note: Note) -> bool:
        with self._lock:
            existing = self._notes.get(note.id)
            if existing is None:
                return False
            if note.created_at != existing.created_at:
                note = replace(note, created_at=existing.created_at)
            # Reassigning an existing key keeps its insertion position
            self._notes[note.id] = note
            return True

    def delete(self, note_id: uuid.UUID) -> bool:
        with self._lock:
            return self._notes.pop(note_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._notes)

    def seed_if_empty(self) -> int:
        """
        Insert example notes for development convenience.

        Only runs against an empty store; the emptiness check and the inserts
        happen under one lock acquisition. Returns the number of notes inserted.
        """
        with self._lock:
            if self._notes:
                return 0

            now = utc_now()
            examples = [
                Note(
                    id=uuid.uuid4(),
                    title="Welcome to Notes",
                    content="This is your first note. Feel free to edit or delete it.",
                    created_at=now - timedelta(minutes=30),
                    updated_at=now - timedelta(minutes=30),
                ),
                Note(
                    id=uuid.uuid4(),
                    title="Things to do",
                    content="- Add a new note\n- Update this list\n- Explore the API at /docs",
                    created_at=now - timedelta(minutes=20),
                    updated_at=now - timedelta(minutes=10),
                ),
            ]
            for note in examples:
                self._notes[note.id] = note

        logger.info("Seeded %d example notes", len(examples))
        return len(examples)
