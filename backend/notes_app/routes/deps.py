"""
Notes App Backend — Route Dependencies
========================================

What:  Gives route handlers the NoteService built by create_app().
Why:   The service (and the store inside it) is constructed explicitly at
       startup and attached to app.state, so each app instance, including
       each test app, has its own store. There is no module-level singleton.
"""

from fastapi import Request

from notes_app.services.note_service import NoteService


def get_note_service(request: Request) -> NoteService:
    return request.app.state.note_service
