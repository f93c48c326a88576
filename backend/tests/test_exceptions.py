"""
Notes App Backend — Exception Tests
=====================================

What we test:
    ✅ Context dicts passed in by callers are copied, never mutated
    ✅ Default field-keyed errors on ValidationError
"""

from notes_app.exceptions import ConflictError, NotFoundError, ValidationError


class TestContextIsolation:

    def test_validation_error_copies_context(self):
        context = {"length": 250}
        exc = ValidationError(message="Too long", field="title", context=context)
        assert context == {"length": 250}
        assert exc.context == {"length": 250, "field": "title"}

    def test_not_found_error_copies_context(self):
        context = {"caller": "get_note"}
        exc = NotFoundError(resource="note", resource_id="abc", context=context)
        assert context == {"caller": "get_note"}
        assert exc.context["resource_id"] == "abc"

    def test_conflict_error_copies_context(self):
        context = {}
        exc = ConflictError(resource_id="abc", context=context)
        assert context == {}
        assert exc.context == {"resource": "note", "resource_id": "abc"}

    def test_shared_context_does_not_leak_between_errors(self):
        shared = {"op": "create"}
        first = NotFoundError(resource="note", resource_id="one", context=shared)
        second = NotFoundError(resource="note", context=shared)
        assert first.context["resource_id"] == "one"
        assert "resource_id" not in second.context


class TestValidationErrorDefaults:

    def test_errors_keyed_by_field(self):
        exc = ValidationError(message="Title is required.", field="title")
        assert exc.errors == {"title": ["Title is required."]}

    def test_errors_keyed_by_body_without_field(self):
        assert ValidationError(message="Bad").errors == {"body": ["Bad"]}
