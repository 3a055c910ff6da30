"""
Notes API — Note Service (Business Logic)
==========================================

What:  Validation, id and timestamp assignment, and existence checks for notes.
How:   Wraps an injected NoteStore. Store outcomes (None, False) become
       NotFoundError; bad payloads become ValidationError. The global
       exception handlers in main.py map both to HTTP responses.
Who:   Called by the route handlers in routes/notes.py.

Order of work inside one call:

    validate ──▶ store read/mutation ──▶ return Note

Update validates before looking the note up, so an invalid payload for a
missing id answers 400, not 404.

Time comes from the injected clock (UTC), never from the client.
"""

import logging
import uuid
from datetime import datetime
from typing import Callable, Dict, List, Optional, Tuple

from notes_api.exceptions import NotFoundError, ValidationError
from notes_api.models.note import TITLE_MAX_LENGTH, Note, utc_now
from notes_api.storage.note_store import NoteStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class NoteService:
    """
    Business logic layer for note operations.

    Args:
        store: Backend holding the notes (shared by every request).
        clock: Returns the current UTC time; replaced by a fake in tests.
    """

    def __init__(self, store: NoteStore, clock: Optional[Clock] = None):
        self.store = store
        self.clock = clock or utc_now

    # ── Validation ────────────────────────────────────────────────────────

    @staticmethod
    def validate(title: Optional[str], content: Optional[str]) -> Tuple[str, str]:
        """
        Trim and check a title/content pair.

        Returns:
            (title, content) trimmed.

        Raises:
            ValidationError: with every failing field listed, e.g.
                {"title": [...], "content": [...]}
        """
        errors: Dict[str, List[str]] = {}

        clean_title = title.strip() if title is not None else ""
        clean_content = content.strip() if content is not None else ""

        if not clean_title:
            errors.setdefault("title", []).append("The title field is required.")
        elif len(clean_title) > TITLE_MAX_LENGTH:
            errors.setdefault("title", []).append(
                f"The field title must be a string with a maximum length of {TITLE_MAX_LENGTH}."
            )

        if not clean_content:
            errors.setdefault("content", []).append("The content field is required.")

        if errors:
            raise ValidationError(errors=errors)

        return clean_title, clean_content

    # ── Operations ────────────────────────────────────────────────────────

    def create_note(self, title: Optional[str], content: Optional[str]) -> Note:
        clean_title, clean_content = self.validate(title, content)

        now = self.clock()
        note = Note(
            id=uuid.uuid4(),
            title=clean_title,
            content=clean_content,
            created_at=now,
            updated_at=now,
        )
        self.store.create(note)
        logger.info("Note created: %s", note.id)
        return note

    def list_notes(self) -> List[Note]:
        notes = self.store.get_all()
        logger.debug("Listing %d notes", len(notes))
        return notes

    def get_note(self, note_id: uuid.UUID) -> Note:
        note = self.store.get_by_id(note_id)
        if note is None:
            raise NotFoundError(resource="Note", resource_id=str(note_id))
        return note

    def update_note(
        self,
        note_id: uuid.UUID,
        title: Optional[str],
        content: Optional[str],
    ) -> Note:
        """
        Replace title and content of an existing note.

        id and created_at are carried over from the stored note. updated_at
        is the clock's current time, clamped so it never precedes created_at
        if the wall clock steps backwards.

        Raises:
            ValidationError: invalid payload (checked first)
            NotFoundError: no such note, including a note deleted between the
                lookup and the write
        """
        clean_title, clean_content = self.validate(title, content)

        existing = self.get_note(note_id)
        updated = existing.with_changes(
            title=clean_title,
            content=clean_content,
            updated_at=max(self.clock(), existing.created_at),
        )

        if not self.store.update(updated):
            raise NotFoundError(resource="Note", resource_id=str(note_id))

        logger.info("Note updated: %s", note_id)
        return updated

    def delete_note(self, note_id: uuid.UUID) -> None:
        if not self.store.delete(note_id):
            raise NotFoundError(resource="Note", resource_id=str(note_id))
        logger.info("Note deleted: %s", note_id)
