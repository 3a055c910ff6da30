"""
Notes API — Notes Route Handlers
=================================

What:  CRUD endpoints under /notes.
How:   Each handler reads the path/body, calls NoteService and wraps the
       resulting Note in NoteResponse. Errors are raised, never returned;
       main.register_exception_handlers() shapes them.

Route Inventory:
    POST   /notes/        → 201 + note, Location: /notes/{id}
    GET    /notes/        → 200 + notes, most recently updated first
    GET    /notes/{id}    → 200 + note | 404
    PUT    /notes/{id}    → 200 + note | 400 | 404
    DELETE /notes/{id}    → 204        | 404

Handlers are plain `def`: FastAPI runs each call on its worker thread pool,
one thread per in-flight request, and the store's locks do the rest.

`note_id: UUID` makes FastAPI reject malformed ids before the handler runs;
that RequestValidationError is answered with 400 by main.py.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from notes_api.dependencies import get_note_service
from notes_api.schemas.note import (
    ErrorResponse,
    NoteResponse,
    NoteWriteRequest,
    NotFoundResponse,
    ValidationErrorResponse,
)
from notes_api.services.note_service import NoteService

router = APIRouter(prefix="/notes", tags=["Notes"])

_not_found = {404: {"description": "Note not found", "model": NotFoundResponse}}
_malformed = {400: {"description": "Validation error or malformed request", "model": ValidationErrorResponse}}
_bad_id = {400: {"description": "Malformed note id", "model": ErrorResponse}}


@router.post(
    "/",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**_malformed},
    summary="Create note",
    description="Creates a new note with title and content. Returns the created note.",
    operation_id="create_note",
)
def create_note(
    payload: NoteWriteRequest,
    response: Response,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    note = service.create_note(title=payload.title, content=payload.content)
    response.headers["Location"] = f"/notes/{note.id}"
    return NoteResponse.from_note(note)


@router.get(
    "/",
    response_model=List[NoteResponse],
    summary="List notes",
    description="Returns all notes ordered by most recently updated first.",
    operation_id="list_notes",
)
def list_notes(service: NoteService = Depends(get_note_service)) -> List[NoteResponse]:
    return [NoteResponse.from_note(note) for note in service.list_notes()]


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    responses={**_not_found, **_bad_id},
    summary="Get note",
    description="Returns a single note by its unique ID.",
    operation_id="get_note",
)
def get_note(
    note_id: UUID,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return NoteResponse.from_note(service.get_note(note_id))


@router.put(
    "/{note_id}",
    response_model=NoteResponse,
    responses={**_not_found, **_malformed},
    summary="Update note",
    description="Updates title and content of an existing note. Updates the updatedAt timestamp.",
    operation_id="update_note",
)
def update_note(
    note_id: UUID,
    payload: NoteWriteRequest,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    # Any "id" in the body was dropped by the schema; the path id is used.
    note = service.update_note(note_id, title=payload.title, content=payload.content)
    return NoteResponse.from_note(note)


@router.delete(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_not_found, **_bad_id},
    summary="Delete note",
    description="Deletes a note by its ID.",
    operation_id="delete_note",
)
def delete_note(
    note_id: UUID,
    service: NoteService = Depends(get_note_service),
) -> Response:
    service.delete_note(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
