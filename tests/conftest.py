# =============================================================================
# Shared Fixtures
# =============================================================================
# Each test gets its own app on a fresh in-memory SQLite database, entered
# as a context manager so the lifespan creates the users table.
# =============================================================================

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app

API_KEY = "kyoubou"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        api_key=API_KEY,
        database_url="sqlite+aiosqlite://",
        create_tables=True,
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth() -> dict[str, str]:
    """Query params carrying the valid API key."""
    return {"api_key": API_KEY}
