"""
Notes API — Pydantic Request/Response Schemas
==============================================

What:  The JSON contract between clients and the service.
How:   FastAPI parses request bodies into these models, serializes responses
       from them and builds the OpenAPI document at /docs out of them.

Naming:
    Responses use camelCase (createdAt, updatedAt). Request bodies carry only
    title and content; unknown keys (including a body "id") are ignored, so
    the id in the URL path is the only one that counts.

Request fields are Optional on purpose: a missing title must reach
NoteService.validate() and come back as a 400 field error, not as a schema
error.
"""

import uuid
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from notes_api.models.note import Note


_camel_config = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
)


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteWriteRequest(BaseModel):
    """Body of POST /notes/ and PUT /notes/{id}."""

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = Field(
        default=None,
        description="Note title; trimmed, 1-200 characters",
        examples=["Groceries"],
    )
    content: Optional[str] = Field(
        default=None,
        description="Note body; trimmed, must not be blank",
        examples=["Milk, eggs, bread"],
    )


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """Full representation of a note, as returned by every notes endpoint."""

    model_config = _camel_config

    id: uuid.UUID = Field(description="Unique note identifier (UUID)")
    title: str = Field(description="Trimmed note title")
    content: str = Field(description="Trimmed note content")
    created_at: datetime = Field(description="When the note was created (UTC ISO 8601)")
    updated_at: datetime = Field(description="When the note was last updated (UTC ISO 8601)")

    @classmethod
    def from_note(cls, note: Note) -> "NoteResponse":
        return cls(
            id=note.id,
            title=note.title,
            content=note.content,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )


class MessageResponse(BaseModel):
    message: str = Field(description="Human-readable status message", examples=["Healthy"])


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring probes."""

    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    notes: int = Field(description="Number of notes currently held in memory")
    uptime_seconds: float = Field(description="Seconds since the application was created")


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models
# ══════════════════════════════════════════════════════════════════════════


class NotFoundResponse(BaseModel):
    error: str = Field(description="Always 'Note not found'", examples=["Note not found"])
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class ValidationErrorResponse(BaseModel):
    """
    Field-level validation failure.

    Example:
        {
            "error": "validation_error",
            "message": "One or more validation errors occurred.",
            "errors": {"title": ["The title field is required."]},
            "request_id": "1a2b3c4d"
        }
    """

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    errors: Dict[str, List[str]] = Field(description="Offending field → messages")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class ErrorResponse(BaseModel):
    """Generic error format (malformed requests, unexpected failures)."""

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[list] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")
