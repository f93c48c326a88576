"""
Notes App Backend — Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the HTTP contract of the notes API.
Why:   Input validation, JSON serialization and OpenAPI doc generation.
How:   FastAPI validates request bodies against NoteCreate/NoteUpdate and
       serializes Note values through NoteResponse (camelCase keys).

Design Decision:
    Schemas are separate from the Note model because the wire format
    (camelCase, string ids, `content: null`) is an API concern, while the
    model is what the store holds. Title/content rules are not duplicated
    here: the validators call the model's normalisers.
"""

import uuid
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from notes_app.exceptions import ValidationError
from notes_app.models.note import TITLE_MAX_LENGTH, Note, normalize_content, normalize_title


# ══════════════════════════════════════════════════════════════════════════
# Request Models: what the client sends
# ══════════════════════════════════════════════════════════════════════════


class NoteWrite(BaseModel):
    """
    Body shared by POST /api/notes and PUT /api/notes/{id}.

    Both fields arrive already normalised: title trimmed, blank content
    turned into None.
    """

    title: str = Field(
        description=f"Note title (required, 1-{TITLE_MAX_LENGTH} characters after trimming)",
        examples=["Buy milk"],
    )
    content: Optional[str] = Field(
        default=None,
        description="Optional note body; empty or whitespace-only content is stored as null",
    )

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        try:
            return normalize_title(v)
        except ValidationError as e:
            raise ValueError(e.message) from e

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: Optional[str]) -> Optional[str]:
        return normalize_content(v)


class NoteCreate(NoteWrite):
    """Request schema for POST /api/notes."""


class NoteUpdate(NoteWrite):
    """Request schema for PUT /api/notes/{id} (full replacement of title/content)."""


# ══════════════════════════════════════════════════════════════════════════
# Response Models: what the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    What:  JSON representation of a note.
    Who:   Returned by every notes endpoint that produces a body.

    Serialized with camelCase keys: id, title, content, createdAt, updatedAt.
    Timestamps are ISO 8601 in UTC.
    """

    id: uuid.UUID = Field(description="Unique note identifier (UUID)")
    title: str = Field(description="Note title")
    content: Optional[str] = Field(default=None, description="Note body, null when absent")
    created_at: datetime = Field(description="When the note was created (UTC ISO 8601)")
    updated_at: datetime = Field(description="When the note was last modified (UTC ISO 8601)")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @classmethod
    def from_note(cls, note: Note) -> "NoteResponse":
        return cls(
            id=note.id,
            title=note.title,
            content=note.content,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )


# ══════════════════════════════════════════════════════════════════════════
# Misc Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error response format for non-validation API errors.

    Example:
        {
            "error": "not_found",
            "message": "note with ID '...' was not found",
            "request_id": "a1b2c3d4"
        }
    """

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class ValidationErrorResponse(ErrorResponse):
    """400 body: ErrorResponse plus a mapping from field name to messages."""

    errors: Dict[str, List[str]] = Field(
        description="Validation messages keyed by request field name",
        examples=[{"title": ["Title is required."]}],
    )


class HealthResponse(BaseModel):
    """Returned by GET / for liveness probes."""

    message: str = Field(default="Healthy", description="Always 'Healthy' while the process serves requests")
