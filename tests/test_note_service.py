"""
Notes API — Note Service Unit Tests
====================================

What:  Tests for NoteService validation, timestamping and not-found handling.
How:   Real InMemoryNoteStore with the deterministic fake clock from
       conftest; a MagicMock store where a race has to be simulated.

What we test:
    ✅ Validation messages per field, trimming, 200-char title limit
    ✅ create assigns fresh ids and equal timestamps
    ✅ update keeps id/created_at and advances updated_at
    ✅ delete makes later get/update/delete raise NotFoundError
    ✅ rejected payloads persist nothing
"""

import uuid
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from notes_api.exceptions import NotFoundError, ValidationError
from notes_api.models.note import Note
from notes_api.services.note_service import NoteService


class TestNoteServiceValidation:
    """Tests for NoteService.validate()."""

    def test_trims_both_fields(self):
        assert NoteService.validate("  X  ", "\n body \t") == ("X", "body")

    def test_missing_title(self):
        with pytest.raises(ValidationError) as exc_info:
            NoteService.validate(None, "content")
        assert exc_info.value.errors == {"title": ["The title field is required."]}

    def test_blank_title(self):
        with pytest.raises(ValidationError) as exc_info:
            NoteService.validate("   ", "content")
        assert list(exc_info.value.errors) == ["title"]

    def test_title_at_limit_is_accepted(self):
        title, _ = NoteService.validate("a" * 200, "content")
        assert len(title) == 200

    def test_title_over_limit_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            NoteService.validate("a" * 201, "content")
        assert "maximum length of 200" in exc_info.value.errors["title"][0]

    def test_length_is_checked_after_trimming(self):
        title, _ = NoteService.validate("  " + "a" * 200 + "  ", "content")
        assert title == "a" * 200

    def test_blank_content(self):
        with pytest.raises(ValidationError) as exc_info:
            NoteService.validate("title", "   ")
        assert exc_info.value.errors == {"content": ["The content field is required."]}

    def test_reports_every_failing_field(self):
        with pytest.raises(ValidationError) as exc_info:
            NoteService.validate("", None)
        assert set(exc_info.value.errors) == {"title", "content"}


class TestNoteServiceCreate:
    def test_create_assigns_id_and_equal_timestamps(self, note_service):
        note = note_service.create_note("A", "B")

        assert isinstance(note.id, uuid.UUID)
        assert note.title == "A"
        assert note.content == "B"
        assert note.created_at == note.updated_at
        assert note.created_at.tzinfo is not None

    def test_create_trims_before_storing(self, note_service, note_store):
        note = note_service.create_note("  X  ", "  Y  ")
        stored = note_store.get_by_id(note.id)
        assert stored.title == "X"
        assert stored.content == "Y"

    def test_ids_are_unique(self, note_service):
        ids = {note_service.create_note(f"t{i}", "c").id for i in range(100)}
        assert len(ids) == 100

    def test_invalid_create_persists_nothing(self, note_service, note_store):
        with pytest.raises(ValidationError):
            note_service.create_note("", "content")
        with pytest.raises(ValidationError):
            note_service.create_note("title", "")
        assert note_store.count() == 0

    def test_round_trip(self, note_service):
        created = note_service.create_note("A", "B")
        assert note_service.get_note(created.id) == created


class TestNoteServiceUpdate:
    def test_update_keeps_identity_and_advances_timestamp(self, note_service):
        created = note_service.create_note("A", "B")
        updated = note_service.update_note(created.id, " C ", " D ")

        assert updated.id == created.id
        assert updated.created_at == created.created_at
        assert updated.title == "C"
        assert updated.content == "D"
        assert updated.updated_at > created.updated_at
        assert note_service.get_note(created.id) == updated

    def test_successive_updates_strictly_increase(self, note_service):
        note = note_service.create_note("A", "B")
        stamps = [note.updated_at]
        for i in range(3):
            note = note_service.update_note(note.id, f"t{i}", "c")
            stamps.append(note.updated_at)
        assert stamps == sorted(stamps)
        assert len(set(stamps)) == len(stamps)

    def test_update_missing_raises_not_found(self, note_service):
        with pytest.raises(NotFoundError):
            note_service.update_note(uuid.uuid4(), "A", "B")

    def test_validation_runs_before_lookup(self, note_service):
        with pytest.raises(ValidationError):
            note_service.update_note(uuid.uuid4(), "", "B")

    def test_invalid_update_leaves_note_unchanged(self, note_service):
        created = note_service.create_note("A", "B")
        with pytest.raises(ValidationError):
            note_service.update_note(created.id, "x" * 201, "B")
        assert note_service.get_note(created.id) == created

    def test_update_never_precedes_creation(self, note_store):
        start = datetime(2026, 1, 1, tzinfo=timezone.utc)
        readings = iter([start, start - timedelta(hours=1)])
        service = NoteService(note_store, clock=lambda: next(readings))

        created = service.create_note("A", "B")
        updated = service.update_note(created.id, "C", "D")
        assert updated.updated_at == created.created_at

    def test_note_deleted_between_lookup_and_write(self):
        now = datetime(2026, 1, 1, tzinfo=timezone.utc)
        existing = Note(id=uuid.uuid4(), title="A", content="B", created_at=now, updated_at=now)
        store = MagicMock()
        store.get_by_id.return_value = existing
        store.update.return_value = False

        service = NoteService(store, clock=lambda: now)
        with pytest.raises(NotFoundError):
            service.update_note(existing.id, "C", "D")
        store.update.assert_called_once()


class TestNoteServiceListAndDelete:
    def test_list_orders_by_most_recent_update(self, note_service):
        first = note_service.create_note("1", "c")
        second = note_service.create_note("2", "c")
        third = note_service.create_note("3", "c")
        assert [n.id for n in note_service.list_notes()] == [third.id, second.id, first.id]

        note_service.update_note(first.id, "1b", "c")
        assert [n.id for n in note_service.list_notes()] == [first.id, third.id, second.id]

    def test_list_empty(self, note_service):
        assert note_service.list_notes() == []

    def test_delete_then_everything_is_not_found(self, note_service):
        note = note_service.create_note("A", "B")
        note_service.delete_note(note.id)

        with pytest.raises(NotFoundError):
            note_service.get_note(note.id)
        with pytest.raises(NotFoundError):
            note_service.update_note(note.id, "C", "D")
        with pytest.raises(NotFoundError):
            note_service.delete_note(note.id)

    def test_not_found_message(self, note_service):
        with pytest.raises(NotFoundError) as exc_info:
            note_service.get_note(uuid.uuid4())
        assert exc_info.value.message == "Note not found"
