"""
MemoNotes Backend — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions raised by the Note Store and routes.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching status code.
Who:   Raised by NoteStore and route handlers; caught by global handlers.

Exception Hierarchy:
    MemoNotesError (base)       → 500 Internal Server Error
    ├── ValidationError         → 400 Bad Request (missing/empty input)
    ├── AlreadyExistsError      → 400 Bad Request (duplicate note name)
    └── NotFoundError           → 404 Not Found

The store reports every failure by raising; callers that only want a presence
check use NoteStore.contains() or NoteStore.try_get() instead of catching.
"""

from typing import Any, Dict, Optional


class MemoNotesError(Exception):
    """
    Base exception for all MemoNotes application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (returned as `details` for 4xx errors)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(MemoNotesError):
    """
    Raised when client input fails validation.

    When:    Note name or text missing/empty on creation, undecodable body.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Both note_name and note are required",
            "details": {"fields": ["note"]}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class AlreadyExistsError(MemoNotesError):
    """
    Raised when a note is created under a name that is already taken.

    HTTP:    400 Bad Request
    The stored note is left untouched.
    """

    def __init__(
        self,
        resource: str = "note",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The {resource} already exists"
        if resource_id:
            message = f"{resource} '{resource_id}' already exists"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class NotFoundError(MemoNotesError):
    """
    Raised when a requested note does not exist.

    When:    GET/PUT/DELETE /notes/{name} with a name that is not stored.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
