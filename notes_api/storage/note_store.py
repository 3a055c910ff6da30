"""
Notes API — Note Store
=======================

What:  Process-local keyed storage for notes, safe to call from many request
       threads at once.
How:   NoteStore is the abstract capability set the service depends on;
       InMemoryNoteStore is the only backend. A persistent backend would
       subclass NoteStore and be passed to create_app() instead.
Who:   Constructed once by main.create_app() and injected into NoteService.

Concurrency model (InMemoryNoteStore):
    Mutations take one lock from a fixed pool of striped locks, picked by
    hashing the note id:

        note.id ──hash──▶ stripe k ──▶ locks[k] guards create/update/delete

    - same key:       create/update/delete serialize, last writer wins
    - different keys: usually different stripes, so they do not contend
    - reads:          no lock; a single dict lookup or dict.copy() is atomic
                      and Note values are frozen, so readers never observe a
                      half-written note

    get_all() sorts a copy of the map, so it reflects one point in time for
    each note but takes no cross-note transaction.
"""

import logging
import threading
import uuid
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from notes_api.models.note import Note

logger = logging.getLogger(__name__)

DEFAULT_LOCK_STRIPES = 64


class NoteStore(ABC):
    """
    Abstract interface for note storage backends.

    Contract:
        - create() always succeeds; the caller guarantees a fresh id
        - get_all() returns notes most recently updated first
        - update() and delete() report a missing id by returning False,
          never by raising
    """

    @abstractmethod
    def create(self, note: Note) -> Note:
        ...

    @abstractmethod
    def get_all(self) -> List[Note]:
        ...

    @abstractmethod
    def get_by_id(self, note_id: uuid.UUID) -> Optional[Note]:
        ...

    @abstractmethod
    def update(self, note: Note) -> bool:
        ...

    @abstractmethod
    def delete(self, note_id: uuid.UUID) -> bool:
        ...

    @abstractmethod
    def count(self) -> int:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...


def _ordering_key(note: Note):
    return (note.updated_at, note.created_at, note.id)


class InMemoryNoteStore(NoteStore):
    """
    Thread-safe in-memory note storage. Suitable for demos and ephemeral sessions.

    Args:
        lock_stripes: Size of the lock pool (>= 1). One stripe gives a single
                      global writer lock; more stripes spread writers out.
    """

    def __init__(self, lock_stripes: int = DEFAULT_LOCK_STRIPES):
        if lock_stripes < 1:
            raise ValueError("lock_stripes must be at least 1")
        self._notes: Dict[uuid.UUID, Note] = {}
        self._locks = [threading.Lock() for _ in range(lock_stripes)]

    def _lock_for(self, note_id: uuid.UUID) -> threading.Lock:
        return self._locks[hash(note_id) % len(self._locks)]

    def create(self, note: Note) -> Note:
        with self._lock_for(note.id):
            self._notes[note.id] = note
        return note

    def get_all(self) -> List[Note]:
        snapshot = self._notes.copy()
        return sorted(snapshot.values(), key=_ordering_key, reverse=True)

    def get_by_id(self, note_id: uuid.UUID) -> Optional[Note]:
        return self._notes.get(note_id)

    def update(self, note: Note) -> bool:
        with self._lock_for(note.id):
            if note.id not in self._notes:
                return False
            self._notes[note.id] = note
        return True

    def delete(self, note_id: uuid.UUID) -> bool:
        with self._lock_for(note_id):
            return self._notes.pop(note_id, None) is not None

    def count(self) -> int:
        return len(self._notes)

    def clear(self) -> None:
        # Take every stripe in index order so no writer is mid-operation.
        for lock in self._locks:
            lock.acquire()
        try:
            dropped = len(self._notes)
            self._notes.clear()
        finally:
            for lock in reversed(self._locks):
                lock.release()
        logger.debug("Cleared %d notes from the store", dropped)
