"""
Notes API — Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the whole suite.
How:   pytest auto-discovers this file. Every fixture is function-scoped, so
       each test starts with an empty store.

Fixtures:
    ├── fake_clock:    deterministic UTC clock, one second per reading
    ├── note_store:    fresh InMemoryNoteStore
    ├── note_service:  NoteService over note_store and fake_clock
    ├── test_settings: Settings with quiet logging
    └── test_client:   HTTPX AsyncClient bound to a fresh app via ASGITransport
"""

import os
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ["LOG_LEVEL"] = "WARNING"

from notes_api.config import Settings  # noqa: E402
from notes_api.main import create_app  # noqa: E402
from notes_api.services.note_service import NoteService  # noqa: E402
from notes_api.storage.note_store import InMemoryNoteStore  # noqa: E402


class FakeClock:
    """Returns start, start+1s, start+2s, ... on successive calls."""

    def __init__(self, start: datetime = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)):
        self.current = start
        self.step = timedelta(seconds=1)

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current + self.step
        return now


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def note_store():
    return InMemoryNoteStore()


@pytest.fixture
def note_service(note_store, fake_clock):
    return NoteService(note_store, clock=fake_clock)


@pytest.fixture
def test_settings():
    return Settings(log_level="WARNING", cors_origins="*")


@pytest.fixture
def app(test_settings, note_store, fake_clock):
    return create_app(settings=test_settings, store=note_store, clock=fake_clock)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Usage:
        async def test_list(test_client):
            response = await test_client.get("/notes/")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
