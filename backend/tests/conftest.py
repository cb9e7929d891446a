"""
MemoNotes Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── note_store:   Empty NoteStore
    ├── test_settings: Settings with fixed host/port/cache
    ├── test_app:     FastAPI app wired to note_store
    └── test_client:  HTTPX AsyncClient talking to test_app in-process
"""

import os

# Read by Settings() whenever create_app() is called without explicit settings
os.environ["MEMONOTES_LOG_LEVEL"] = "WARNING"
os.environ["MEMONOTES_CACHE"] = "./test-cache"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from memonotes.config import Settings
from memonotes.main import create_app
from memonotes.services.note_store import NoteStore


@pytest.fixture
def note_store():
    """A fresh, empty NoteStore."""
    return NoteStore()


@pytest.fixture
def test_settings():
    return Settings(host="127.0.0.1", port=8123, cache="/tmp/memonotes-cache", log_level="WARNING")


@pytest.fixture
def test_app(test_settings, note_store):
    """
    A FastAPI app serving `note_store`.

    Tests can seed or inspect the store directly through the note_store fixture.
    """
    return create_app(settings=test_settings, store=note_store)


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
