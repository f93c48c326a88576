"""
Notes App Backend — Note Service (Business Logic)
===================================================

What:  Turns validated requests into note store operations.
Why:   Keeps id/timestamp assignment, normalisation and not-found handling
       out of the route handlers and out of the store.
How:   Wraps a NoteRepository passed in at construction time. The store
       reports absence with None / False; this layer converts that into
       NotFoundError so the global handler can answer 404.
Who:   Called by route handlers (via app.state.note_service).

Ownership of ids and timestamps:
    A note's id, created_at and updated_at are assigned here, in one step,
    before the note is handed to the store. The store only ever sees
    fully-formed notes, so a note becomes visible complete or not at all.
"""

import logging
import uuid
from dataclasses import replace
from datetime import timedelta
from typing import List, Optional

from notes_app.exceptions import NotFoundError
from notes_app.models.note import Note, normalize_content, normalize_title, utc_now
from notes_app.repositories.base import NoteRepository

logger = logging.getLogger(__name__)


def _parse_note_id(note_id: str) -> uuid.UUID:
    """
    Parse a path id. A string that is not a UUID cannot name a stored note,
    so it is reported as not found rather than as a validation error.
    """
    try:
        return uuid.UUID(str(note_id))
    except (ValueError, AttributeError, TypeError):
        raise NotFoundError(resource="note", resource_id=str(note_id))


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - list_notes():   snapshot of all notes, most recently updated first
        - get_note():     single note or NotFoundError
        - create_note():  normalise, assign id + timestamps, insert
        - update_note():  normalise, replace title/content, refresh updated_at
        - delete_note():  remove or NotFoundError
        - seed_example_notes(): development-only pre-population
    """

    def __init__(self, repository: NoteRepository):
        self.repository = repository

    async def list_notes(self) -> List[Note]:
        return self.repository.list()

    async def get_note(self, note_id: str) -> Note:
        """
        Raises:
            NotFoundError: unknown or malformed id (→ 404)
        """
        nid = _parse_note_id(note_id)
        note = self.repository.get(nid)
        if note is None:
            raise NotFoundError(resource="note", resource_id=str(nid))
        return note

    async def create_note(self, title: Optional[str], content: Optional[str] = None) -> Note:
        """
        Create and store a new note.

        The returned note has a fresh UUID4 id, created_at == updated_at,
        a trimmed title, and content None when blank.

        Raises:
            ValidationError: title missing, blank or too long (→ 400)
            ConflictError:   id collision in the store (→ 409, not expected in practice)
        """
        now = utc_now()
        note = Note(
            id=uuid.uuid4(),
            title=normalize_title(title),
            content=normalize_content(content),
            created_at=now,
            updated_at=now,
        )
        self.repository.create(note)
        logger.info("Note created: %s", note.id)
        return note

    async def update_note(
        self,
        note_id: str,
        title: Optional[str],
        content: Optional[str] = None,
    ) -> Note:
        """
        Replace a note's title and content.

        updated_at always moves forward: if the clock has not advanced past
        the previous value, it is bumped by one microsecond.

        Raises:
            ValidationError: title missing, blank or too long (→ 400)
            NotFoundError:   unknown or malformed id, or deleted concurrently (→ 404)
        """
        new_title = normalize_title(title)
        new_content = normalize_content(content)
        existing = await self.get_note(note_id)

        now = utc_now()
        if now <= existing.updated_at:
            now = existing.updated_at + timedelta(microseconds=1)

        updated = replace(existing, title=new_title, content=new_content, updated_at=now)
        if not self.repository.update(updated):
            # Deleted between the lookup and the write
            raise NotFoundError(resource="note", resource_id=str(existing.id))

        logger.info("Note updated: %s", updated.id)
        return updated

    async def delete_note(self, note_id: str) -> None:
        """
        Raises:
            NotFoundError: nothing was removed (→ 404); deleting twice is safe
        """
        nid = _parse_note_id(note_id)
        if not self.repository.delete(nid):
            raise NotFoundError(resource="note", resource_id=str(nid))
        logger.info("Note deleted: %s", nid)

    async def seed_example_notes(self) -> int:
        seed = getattr(self.repository, "seed_if_empty", None)
        if seed is None:
            logger.info("Repository %s has no example data; skipping seed",
                        type(self.repository).__name__)
            return 0
        return seed()
