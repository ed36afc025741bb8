"""
Tests for FolderService tree rules.
"""

import uuid

import pytest

from backend.application.services.folder_service import (
    DUPLICATE_NAME,
    HAS_SAVED_ITEMS,
    HAS_SUBFOLDERS,
    FolderService,
)
from backend.boundary.db.CRUD.folder_crud import folder_crud
from backend.boundary.db.CRUD.saved_item_crud import saved_item_crud
from backend.boundary.db.models.enums import SavedItemCategory
from backend.core.exceptions import (
    DuplicateResourceError,
    FolderNotEmptyError,
    PermissionDeniedError,
    ResourceNotFoundError,
)


@pytest.fixture
def service(test_async_db) -> FolderService:
    return FolderService(test_async_db)


class TestCreateFolder:
    """Test suite for FolderService.create_folder()."""

    async def test_create_root_and_child(self, service, make_user) -> None:
        user = await make_user()

        root = await service.create_folder(user.id, "Travel")
        child = await service.create_folder(user.id, "Japan", root["id"])

        assert root["parent_folder_id"] is None
        assert child["parent_folder_id"] == root["id"]

    async def test_duplicate_root_name_rejected(self, service, make_user) -> None:
        user = await make_user()
        await service.create_folder(user.id, "Travel")

        with pytest.raises(DuplicateResourceError, match=DUPLICATE_NAME):
            await service.create_folder(user.id, "Travel")

    async def test_same_name_in_other_parent_allowed(self, service, make_user) -> None:
        user = await make_user()
        a = await service.create_folder(user.id, "A")
        b = await service.create_folder(user.id, "B")

        await service.create_folder(user.id, "Notes", a["id"])
        created = await service.create_folder(user.id, "Notes", b["id"])

        assert created["name"] == "Notes"

    async def test_missing_parent(self, service, make_user) -> None:
        user = await make_user()

        with pytest.raises(ResourceNotFoundError, match="Parent folder"):
            await service.create_folder(user.id, "X", uuid.uuid4())

    async def test_foreign_parent_denied(self, service, make_user) -> None:
        alice = await make_user("alice")
        bob = await make_user("bob")
        parent = await service.create_folder(alice.id, "Alice's")

        with pytest.raises(PermissionDeniedError):
            await service.create_folder(bob.id, "Sneaky", parent["id"])


class TestListAndRename:
    """Test suite for list_folders() and rename_folder()."""

    async def test_list_children_of_foreign_parent_denied(self, service, make_user) -> None:
        alice = await make_user("alice")
        bob = await make_user("bob")
        parent = await service.create_folder(alice.id, "Alice's")

        with pytest.raises(PermissionDeniedError):
            await service.list_folders(bob.id, parent["id"])

    async def test_list_roots(self, service, make_user) -> None:
        user = await make_user()
        root = await service.create_folder(user.id, "Travel")
        await service.create_folder(user.id, "Japan", root["id"])

        roots = await service.list_folders(user.id)

        assert [f["name"] for f in roots] == ["Travel"]

    async def test_rename_to_own_name_allowed(self, service, make_user) -> None:
        user = await make_user()
        folder = await service.create_folder(user.id, "Travel")

        renamed = await service.rename_folder(user.id, folder["id"], "Travel")

        assert renamed["name"] == "Travel"

    async def test_rename_to_sibling_name_rejected(self, service, make_user) -> None:
        user = await make_user()
        await service.create_folder(user.id, "Travel")
        food = await service.create_folder(user.id, "Food")

        with pytest.raises(DuplicateResourceError):
            await service.rename_folder(user.id, food["id"], "Travel")

    async def test_rename_changes_name(self, service, make_user) -> None:
        user = await make_user()
        folder = await service.create_folder(user.id, "Travel")

        renamed = await service.rename_folder(user.id, folder["id"], "Trips")

        assert renamed["name"] == "Trips"


class TestDeleteFolder:
    """Test suite for FolderService.delete_folder()."""

    async def test_delete_empty_folder(self, test_async_db, service, make_user) -> None:
        user = await make_user()
        folder = await service.create_folder(user.id, "Temp")

        await service.delete_folder(user.id, folder["id"])

        assert await folder_crud.get_by_id(test_async_db, folder["id"]) is None

    async def test_folder_with_subfolders_kept(self, service, make_user) -> None:
        user = await make_user()
        parent = await service.create_folder(user.id, "Parent")
        await service.create_folder(user.id, "Child", parent["id"])

        with pytest.raises(FolderNotEmptyError, match=HAS_SUBFOLDERS):
            await service.delete_folder(user.id, parent["id"])

    async def test_folder_with_saved_items_kept(
        self, test_async_db, service, make_user, make_translation
    ) -> None:
        # Arrange
        user = await make_user()
        folder = await service.create_folder(user.id, "Words")
        translation = await make_translation(user.id)
        await saved_item_crud.create(
            test_async_db,
            user_id=user.id,
            translation_id=translation.id,
            category=SavedItemCategory.WORD,
            folder_id=folder["id"],
        )

        # Act / Assert
        with pytest.raises(FolderNotEmptyError, match=HAS_SAVED_ITEMS):
            await service.delete_folder(user.id, folder["id"])

    async def test_delete_foreign_folder_denied(self, service, make_user) -> None:
        alice = await make_user("alice")
        bob = await make_user("bob")
        folder = await service.create_folder(alice.id, "Alice's")

        with pytest.raises(PermissionDeniedError):
            await service.delete_folder(bob.id, folder["id"])
