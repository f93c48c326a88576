"""
Notes App Backend — Abstract Note Repository
==============================================

What:  Abstract base class defining the contract for note stores.
Why:   NoteService depends only on this interface, so a persistent store can
       replace the in-memory one without touching the service or the routes.
How:   Concrete stores inherit from NoteRepository and implement every method.

Contract (every implementation):
    - Each operation is atomic with respect to every other operation, even
      when called concurrently from many threads or tasks.
    - Absence is a return value (None / False), never an exception.
    - The only exception a store raises is ConflictError from create().
    - Notes are stored and returned as immutable Note values.
"""

import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from notes_app.models.note import Note


class NoteRepository(ABC):
    """
    Abstract interface for note storage.

    Implementations:
        - InMemoryNoteRepository: process-lifetime dict guarded by a lock
    """

    @abstractmethod
    def list(self) -> List[Note]:
        """
        Return a snapshot of all notes, most recently updated first.

        The snapshot reflects a single instant: no note appears twice and none
        is skipped because of a concurrent write. Returns [] for an empty store.
        """

    @abstractmethod
    def get(self, note_id: uuid.UUID) -> Optional[Note]:
        """Return the note with this id, or None if there is none."""

    @abstractmethod
    def create(self, note: Note) -> None:
        """
        Insert a fully-formed note (id already assigned).

        Raises:
            ConflictError: a note with the same id is already stored
        """

    @abstractmethod
    def update(self, note: Note) -> bool:
        """
        Replace the stored note that has the same id.

        Returns:
            True if the note existed and was replaced, False otherwise.
            The stored created_at is kept regardless of the value passed in.
        """

    @abstractmethod
    def delete(self, note_id: uuid.UUID) -> bool:
        """Remove the note. Returns False (not an error) when it was already gone."""

    @abstractmethod
    def count(self) -> int:
        """Number of notes currently stored."""
