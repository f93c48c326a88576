"""
Notes App Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the expected, recoverable error cases.
Why:   Global exception handlers (registered in main.py) map each type to an
       HTTP status and a structured JSON body, so routes never build error
       responses by hand and internal details never reach the client.
How:   Each exception carries a user-facing message and an optional context
       dict. The context is logged server-side only.

Exception Hierarchy:
    NotesAppError (base)    → 500 Internal Server Error
    ├── ValidationError     → 400 Bad Request (field-keyed messages)
    ├── NotFoundError       → 404 Not Found
    └── ConflictError       → 409 Conflict (duplicate note id)
"""

from typing import Any, Dict, List, Optional


class NotesAppError(Exception):
    """
    Base exception for all Notes App errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotesAppError):
    """
    Raised when client input fails validation.

    What:    The title is missing, blank, or longer than 200 characters.
    HTTP:    400 Bad Request

    `errors` maps each offending field to a list of messages, matching the
    body produced for FastAPI's own request validation errors:

        {
            "error": "validation_error",
            "message": "One or more validation errors occurred.",
            "errors": {"title": ["Title is required."]}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        errors: Optional[Dict[str, List[str]]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field
        if errors is None:
            errors = {field or "body": [message]}
        self.errors = errors


class NotFoundError(NotesAppError):
    """
    Raised when an operation targets a note that does not exist.

    The store signals absence with None / False; the service converts that
    into this exception so the handler can answer 404. Malformed ids are
    reported the same way as unknown ones.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = dict(context or {})
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class ConflictError(NotesAppError):
    """
    Raised by the store when a note is created under an id that already exists.

    Ids are freshly generated UUID4s, so this should never surface in normal
    use; the store still refuses to overwrite a different note silently.
    HTTP: 409 Conflict
    """

    def __init__(
        self,
        resource: str = "note",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"A {resource} with this ID already exists"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' already exists"
        ctx = dict(context or {})
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
