from unittest.mock import AsyncMock

import pytest

from backend.api.deps import get_user_service
from backend.core.exceptions import ValidationError


@pytest.fixture
def mock_user_service(app):
    service = AsyncMock()
    app.dependency_overrides[get_user_service] = lambda: service
    return service


@pytest.fixture
def profile(current_user_id, now):
    return {
        "id": current_user_id,
        "username": "alice",
        "email": "alice@example.com",
        "created_at": now,
        "last_login": None,
        "preferences": {"preferred_source_lang": "en", "preferred_target_lang": "ja"},
        "settings": None,
    }


def test_get_me(client, mock_user_service, profile, current_user_id):
    mock_user_service.get_profile.return_value = profile

    response = client.get("/api/user/me")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == str(current_user_id)
    assert data["lastLogin"] is None
    assert data["preferences"] == {"preferredSourceLang": "en", "preferredTargetLang": "ja"}
    mock_user_service.get_profile.assert_awaited_once_with(current_user_id)


def test_update_me(client, mock_user_service, profile, current_user_id):
    profile["settings"] = '{"theme": "dark"}'
    mock_user_service.update_profile.return_value = profile

    response = client.put(
        "/api/user/me",
        json={
            "preferences": {"preferredSourceLang": "en", "preferredTargetLang": "ja"},
            "settings": '{"theme": "dark"}',
        },
    )

    assert response.status_code == 200
    assert response.json()["settings"] == '{"theme": "dark"}'
    mock_user_service.update_profile.assert_awaited_once_with(
        current_user_id,
        preferences={"preferred_source_lang": "en", "preferred_target_lang": "ja"},
        settings='{"theme": "dark"}',
    )


def test_update_me_invalid_settings(client, mock_user_service):
    mock_user_service.update_profile.side_effect = ValidationError(
        "Settings must be a valid JSON string.", field="settings"
    )

    response = client.put("/api/user/me", json={"settings": "{oops"})

    assert response.status_code == 400
    assert response.json()["message"] == "Settings must be a valid JSON string."
