"""
Notes API — Note Domain Model
==============================

What:  The one entity the service manages.
How:   A frozen dataclass. An update never edits a stored Note in place; the
       service builds a replacement with dataclasses.replace() and hands it
       to the store, so a Note seen by one request cannot change under it.

Field rules:
    - id: uuid4, assigned by NoteService on create, never changed
    - title: trimmed, 1..200 characters
    - content: trimmed, at least 1 character
    - created_at: UTC, set once
    - updated_at: UTC, set on create and on every update; never < created_at
"""

import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone

TITLE_MAX_LENGTH = 200


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Note:
    id: uuid.UUID
    title: str
    content: str
    created_at: datetime
    updated_at: datetime

    def with_changes(self, title: str, content: str, updated_at: datetime) -> "Note":
        """Return a copy carrying new text and timestamp; id and created_at are kept."""
        return replace(self, title=title, content=content, updated_at=updated_at)
