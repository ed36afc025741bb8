"""
Shared fixtures for API tests.

The real app is built with create_app(); authentication and the database
session are overridden so routers can be exercised against mocked services.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from backend.api.deps import get_current_user_id
from backend.api.main import create_app
from backend.boundary.db import get_async_db


@pytest.fixture
def current_user_id() -> UUID:
    return uuid4()


@pytest.fixture
def app():
    app = create_app()
    app.dependency_overrides[get_async_db] = lambda: AsyncMock()
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app, current_user_id):
    app.dependency_overrides[get_current_user_id] = lambda: current_user_id
    return TestClient(app)


@pytest.fixture
def anonymous_client(app):
    return TestClient(app)


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def translation_dict(now):
    def _make(**overrides) -> dict:
        data = {
            "id": uuid4(),
            "source_text": "Good morning",
            "target_text": "Bonjour",
            "source_lang": "en",
            "target_lang": "fr",
            "input_type": "TEXT",
            "is_favorite": False,
            "is_saved": False,
            "tags": None,
            "created_at": now,
        }
        data.update(overrides)
        return data

    return _make
