"""
Notes App Backend — Note Model Unit Tests
===========================================

What:  Tests for the title/content normalisers and the Note value object.
Why:   The schemas and the service both rely on these rules; a regression
       here changes what every endpoint accepts.
"""

import dataclasses
import uuid

import pytest

from notes_app.exceptions import ValidationError
from notes_app.models.note import Note, normalize_content, normalize_title, utc_now


class TestNormalizeTitle:

    def test_trims_whitespace(self):
        assert normalize_title("  Buy milk \n") == "Buy milk"

    def test_missing_title_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            normalize_title(None)
        assert exc_info.value.errors == {"title": ["Title is required."]}

    @pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
    def test_blank_title_rejected(self, raw):
        with pytest.raises(ValidationError, match="required"):
            normalize_title(raw)

    def test_max_length_is_measured_after_trimming(self):
        title = "x" * 200
        assert normalize_title(f"   {title}   ") == title

    def test_too_long_title_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            normalize_title("x" * 201)
        assert exc_info.value.field == "title"
        assert "200" in exc_info.value.message


class TestNormalizeContent:

    @pytest.mark.parametrize("raw", [None, "", "   ", "\n\t"])
    def test_blank_content_becomes_none(self, raw):
        assert normalize_content(raw) is None

    def test_content_is_kept_verbatim(self):
        assert normalize_content("  indented\nbody  ") == "  indented\nbody  "


class TestNoteValue:

    def test_note_is_immutable(self):
        now = utc_now()
        note = Note(id=uuid.uuid4(), title="t", content=None, created_at=now, updated_at=now)
        with pytest.raises(dataclasses.FrozenInstanceError):
            note.title = "changed"

    def test_utc_now_is_timezone_aware(self):
        assert utc_now().utcoffset().total_seconds() == 0
