from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from backend.api.deps import get_translation_service
from backend.boundary.db.models.enums import InputType
from backend.core.exceptions import PermissionDeniedError, ResourceNotFoundError


@pytest.fixture
def mock_translation_service(app):
    service = AsyncMock()
    app.dependency_overrides[get_translation_service] = lambda: service
    return service


def test_create_translation(client, mock_translation_service, translation_dict, current_user_id):
    translation = translation_dict(input_type="SPEECH")
    mock_translation_service.create_translation.return_value = translation

    response = client.post(
        "/api/translations",
        json={
            "sourceText": "Good morning",
            "targetText": "Bonjour",
            "sourceLang": "en",
            "targetLang": "fr",
            "inputType": "SPEECH",
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["id"] == str(translation["id"])
    assert data["inputType"] == "SPEECH"
    assert data["isFavorite"] is False
    assert data["isSaved"] is False
    mock_translation_service.create_translation.assert_awaited_once_with(
        user_id=current_user_id,
        source_text="Good morning",
        target_text="Bonjour",
        source_lang="en",
        target_lang="fr",
        input_type=InputType.SPEECH,
    )


def test_create_translation_rejects_unknown_input_type(client, mock_translation_service):
    response = client.post(
        "/api/translations",
        json={
            "sourceText": "a",
            "targetText": "b",
            "sourceLang": "en",
            "targetLang": "fr",
            "inputType": "TELEPATHY",
        },
    )

    assert response.status_code == 422


def test_list_translations(client, mock_translation_service, translation_dict, current_user_id):
    mock_translation_service.list_translations.return_value = {
        "content": [translation_dict(is_saved=True)],
        "page": 1,
        "size": 1,
        "total_elements": 3,
        "total_pages": 3,
        "first": False,
        "last": False,
    }

    response = client.get("/api/translations", params={"page": 1, "size": 1})

    assert response.status_code == 200
    data = response.json()
    assert data["totalElements"] == 3
    assert data["totalPages"] == 3
    assert data["content"][0]["isSaved"] is True
    mock_translation_service.list_translations.assert_awaited_once_with(
        current_user_id, page=1, size=1
    )


def test_list_translations_negative_page(client, mock_translation_service):
    response = client.get("/api/translations", params={"page": -1})

    assert response.status_code == 422


def test_get_translation_not_found(client, mock_translation_service):
    translation_id = uuid4()
    mock_translation_service.get_translation.side_effect = ResourceNotFoundError(
        "Translation", translation_id
    )

    response = client.get(f"/api/translations/{translation_id}")

    assert response.status_code == 404
    assert response.json()["success"] is False


def test_delete_translation(client, mock_translation_service, current_user_id):
    translation_id = uuid4()

    response = client.delete(f"/api/translations/{translation_id}")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Translation deleted successfully.",
        "data": None,
    }
    mock_translation_service.delete_translation.assert_awaited_once_with(
        current_user_id, translation_id
    )


def test_delete_foreign_translation(client, mock_translation_service):
    mock_translation_service.delete_translation.side_effect = PermissionDeniedError(
        "You do not have permission to access this translation."
    )

    response = client.delete(f"/api/translations/{uuid4()}")

    assert response.status_code == 403
    assert response.json()["message"] == "You do not have permission to access this translation."


def test_toggle_favorite(client, mock_translation_service, translation_dict):
    translation = translation_dict(is_favorite=True)
    mock_translation_service.toggle_favorite.return_value = translation

    response = client.patch(f"/api/translations/{translation['id']}/favorite")

    assert response.status_code == 200
    assert response.json()["isFavorite"] is True


def test_unexpected_error_is_500(client, mock_translation_service):
    mock_translation_service.list_translations.side_effect = RuntimeError("boom")

    response = client.get("/api/translations")

    assert response.status_code == 500
    assert response.json()["success"] is False
    assert response.json()["message"] == "An internal error occurred."
