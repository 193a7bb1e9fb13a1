"""
NoteKeeper Backend: Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures (function-scoped, fresh for each test):
    ├── note_store: Empty NoteStore for unit tests
    ├── test_settings: Settings pointing the cache at a temp directory
    ├── test_app: Application built from test_settings
    └── test_client: HTTPX AsyncClient talking to test_app
"""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Override settings for testing BEFORE any app imports
os.environ["NOTEKEEPER_LOG_LEVEL"] = "WARNING"


@pytest.fixture
def note_store():
    """A fresh, empty NoteStore."""
    from notekeeper.services.note_store import NoteStore
    return NoteStore()


@pytest.fixture
def test_settings(tmp_path):
    """Settings isolated from the developer's environment and file system."""
    from notekeeper.config import Settings
    return Settings(
        host="127.0.0.1",
        port=8081,
        cache_dir=str(tmp_path / "cache"),
        log_level="WARNING",
    )


@pytest.fixture
def test_app(test_settings):
    """A new application, and therefore a new empty note store, per test."""
    from notekeeper.main import create_app
    return create_app(test_settings)


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    HTTPX AsyncClient routed straight into the ASGI app (no server needed).

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/notes")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
