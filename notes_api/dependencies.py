"""
Notes API — FastAPI Dependencies
=================================

What:  Hands the per-application NoteService and NoteStore to route handlers.
How:   create_app() stores both on app.state; these functions read them back
       from the request, so there is no module-level store and two apps (for
       example, two tests) never share notes.
"""

from fastapi import Request

from notes_api.services.note_service import NoteService
from notes_api.storage.note_store import NoteStore


def get_note_service(request: Request) -> NoteService:
    return request.app.state.note_service


def get_note_store(request: Request) -> NoteStore:
    return request.app.state.note_store
