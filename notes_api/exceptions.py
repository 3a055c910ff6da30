"""
Notes API — Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions for the failure modes a request can hit.
How:   Each exception carries a message and an optional context dict.
       Global handlers (registered in main.py) turn them into JSON responses
       with the right status code, so routes and services never build error
       responses by hand.
Who:   Raised by NoteService and the request-validation handler.

Exception Hierarchy:
    NotesAPIError (base)
    ├── ValidationError        → 400 Bad Request, field → messages mapping
    ├── MalformedRequestError  → 400 Bad Request, unparseable body or id
    └── NotFoundError          → 404 Not Found

The store itself raises nothing: it has no I/O, and an absent key is
reported through its return value, which the service converts into
NotFoundError.
"""

from typing import Any, Dict, List, Optional


class NotesAPIError(Exception):
    """
    Base exception for all Notes API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, not returned verbatim)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotesAPIError):
    """
    Raised when a note payload fails validation.

    What:    Missing, blank or oversized title/content.
    HTTP:    400 Bad Request

    `errors` maps each offending field to the list of its messages:

        {"title": ["The title field is required."]}

    The client can always recover by resubmitting corrected input.
    """

    def __init__(
        self,
        errors: Dict[str, List[str]],
        message: str = "One or more validation errors occurred.",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["fields"] = sorted(errors)
        super().__init__(message=message, context=ctx)
        self.errors = errors


class MalformedRequestError(NotesAPIError):
    """
    Raised when a request cannot be interpreted at all.

    What:    Body is not JSON, fields have the wrong type, or the path id
             is not a UUID.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "The request could not be parsed.",
        details: Optional[List[Dict[str, Any]]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.details = details or []


class NotFoundError(NotesAPIError):
    """
    Raised when a request references a note id that is not in the store.

    HTTP:    404 Not Found, body {"error": "Note not found"}
    """

    def __init__(
        self,
        resource: str = "Note",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id
