"""
Notes App Backend — Notes Route Handlers
==========================================

What:  CRUD endpoints under /api/notes.
How:   Pydantic validates the body, the handler calls one NoteService method,
       and the result is serialized through NoteResponse. NotFoundError and
       ValidationError raised by the service are turned into 404/400 by the
       global handlers in main.py.

Endpoints:
    GET    /api/notes         → 200 list (most recently updated first)
    GET    /api/notes/{id}    → 200 note | 404
    POST   /api/notes         → 201 note + Location | 400
    PUT    /api/notes/{id}    → 200 note | 400 | 404
    DELETE /api/notes/{id}    → 204 | 404

Path ids are taken as plain strings so that a malformed id answers 404
(it cannot name a note) instead of FastAPI's default 422.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from notes_app.routes.deps import get_note_service
from notes_app.schemas.note import (
    ErrorResponse,
    NoteCreate,
    NoteResponse,
    NoteUpdate,
    ValidationErrorResponse,
)
from notes_app.services.note_service import NoteService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Notes"])

_NOT_FOUND = {404: {"description": "Note not found", "model": ErrorResponse}}
_INVALID = {400: {"description": "Validation error", "model": ValidationErrorResponse}}


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    summary="List all notes",
    description="Returns every note, most recently updated first.",
)
async def list_notes(
    service: NoteService = Depends(get_note_service),
) -> List[NoteResponse]:
    notes = await service.list_notes()
    return [NoteResponse.from_note(note) for note in notes]


@router.get(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses=_NOT_FOUND,
    summary="Get a note by id",
)
async def get_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    note = await service.get_note(note_id)
    return NoteResponse.from_note(note)


@router.post(
    "/notes",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_INVALID,
    summary="Create a note",
    description=(
        "Creates a note from a title (required, at most 200 characters after "
        "trimming) and optional content. The Location header points at the new note."
    ),
)
async def create_note(
    payload: NoteCreate,
    request: Request,
    response: Response,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    note = await service.create_note(title=payload.title, content=payload.content)
    response.headers["Location"] = str(request.url_for("get_note", note_id=str(note.id)))
    return NoteResponse.from_note(note)


@router.put(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses={**_INVALID, **_NOT_FOUND},
    summary="Update a note",
    description="Replaces the title and content of an existing note and refreshes updatedAt.",
)
async def update_note(
    note_id: str,
    payload: NoteUpdate,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    note = await service.update_note(note_id, title=payload.title, content=payload.content)
    return NoteResponse.from_note(note)


@router.delete(
    "/notes/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> Response:
    await service.delete_note(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
