"""
Notes App Backend — Note Model
================================

What:  The Note value object held by the note store, plus the rules that
       normalise raw title/content input into valid field values.
Why:   Every layer (store, service, schemas) agrees on one definition of a
       valid note. The schemas call the same normalisers the service uses,
       so HTTP and non-HTTP callers get identical validation.
How:   Frozen dataclass: instances cannot be mutated after construction.
       Changes are made with `dataclasses.replace`, which returns a new
       object, so a note handed out by the store can never be altered
       behind the store's back.

Field Rules:
    - id:          UUID4, assigned once by NoteService, never changes
    - title:       trimmed, 1..200 characters
    - content:     None when missing, empty or whitespace-only; otherwise stored verbatim
    - created_at:  UTC, set once
    - updated_at:  UTC, >= created_at, the listing sort key
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from notes_app.exceptions import ValidationError

TITLE_MAX_LENGTH = 200


def utc_now() -> datetime:
    """Timezone-aware current time in UTC (never use naive datetimes)."""
    return datetime.now(timezone.utc)


def normalize_title(value: Optional[str]) -> str:
    """
    Trim a raw title and enforce the title constraints.

    Raises:
        ValidationError: title missing, blank, or longer than 200 characters
    """
    if value is None:
        raise ValidationError(message="Title is required.", field="title")
    title = value.strip()
    if not title:
        raise ValidationError(message="Title is required.", field="title")
    if len(title) > TITLE_MAX_LENGTH:
        raise ValidationError(
            message=f"Title must be at most {TITLE_MAX_LENGTH} characters.",
            field="title",
            context={"length": len(title)},
        )
    return title


def normalize_content(value: Optional[str]) -> Optional[str]:
    """Blank content means "no content": return None instead of an empty string."""
    if value is None or not value.strip():
        return None
    return value


@dataclass(frozen=True)
class Note:
    """
    A short text note.

    Lifecycle:
        1. Built by NoteService.create_note (id and both timestamps assigned together)
        2. Replaced wholesale on update (title/content/updated_at change)
        3. Removed on delete; there is no soft delete
    """

    id: uuid.UUID
    title: str
    content: Optional[str]
    created_at: datetime
    updated_at: datetime

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return (
            f"<Note(id={self.id}, title='{self.title[:20]}', "
            f"updated_at='{self.updated_at.isoformat()}')>"
        )
