"""
Notes App Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Every test gets its own store, service and app, so no state leaks
       between tests even though the store is process memory.

Fixtures (all function-scoped):
    ├── repository:   fresh InMemoryNoteRepository
    ├── note_service: NoteService over that repository
    ├── make_note:    factory for fully-formed Note values with chosen timestamps
    ├── test_app:     FastAPI app wired to the same repository (environment=test)
    └── test_client:  HTTPX AsyncClient talking to test_app over ASGI
"""

import os
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Override settings BEFORE any app imports
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"

from notes_app.config import Settings  # noqa: E402
from notes_app.main import create_app  # noqa: E402
from notes_app.models.note import Note  # noqa: E402
from notes_app.repositories import InMemoryNoteRepository  # noqa: E402
from notes_app.services.note_service import NoteService  # noqa: E402

BASE_TIME = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def repository():
    return InMemoryNoteRepository()


@pytest.fixture
def note_service(repository):
    return NoteService(repository)


@pytest.fixture
def make_note():
    """
    Build a Note directly, bypassing the service.

    Usage:
        note = make_note("Groceries", minutes=5)   # updated 5 minutes after BASE_TIME
    """

    def _make(
        title: str = "Sample note",
        content: Optional[str] = None,
        minutes: int = 0,
        created_minutes: Optional[int] = None,
    ) -> Note:
        updated_at = BASE_TIME + timedelta(minutes=minutes)
        created_at = BASE_TIME + timedelta(
            minutes=minutes if created_minutes is None else created_minutes
        )
        return Note(
            id=uuid.uuid4(),
            title=title,
            content=content,
            created_at=created_at,
            updated_at=updated_at,
        )

    return _make


@pytest.fixture
def test_settings():
    return Settings(environment="test", log_level="WARNING")


@pytest.fixture
def test_app(test_settings, repository):
    return create_app(app_settings=test_settings, repository=repository)


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    HTTPX AsyncClient configured to talk to the FastAPI app without a server.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
