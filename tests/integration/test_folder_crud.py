"""
Tests for FolderCRUD tree queries.

Root folders have a NULL parent, so sibling lookups must treat "no
parent" as a location of its own.
"""

from datetime import datetime, timedelta, timezone

import pytest

from backend.boundary.db.CRUD.folder_crud import folder_crud


@pytest.fixture
def make_folder(test_async_db):
    async def _make(user_id, name, parent_folder_id=None, minutes_ago=0):
        return await folder_crud.create(
            test_async_db,
            user_id=user_id,
            name=name,
            parent_folder_id=parent_folder_id,
            created_at=datetime.now(timezone.utc) - timedelta(minutes=minutes_ago),
        )

    return _make


class TestFolderCRUDChildren:
    """Test suite for FolderCRUD.get_children()."""

    async def test_root_listing_excludes_subfolders_and_other_users(
        self, test_async_db, make_user, make_folder
    ) -> None:
        # Arrange
        alice = await make_user("alice")
        bob = await make_user("bob")
        travel = await make_folder(alice.id, "Travel", minutes_ago=10)
        await make_folder(alice.id, "Food", minutes_ago=5)
        await make_folder(alice.id, "Japan", parent_folder_id=travel.id)
        await make_folder(bob.id, "Bob's")

        # Act
        roots = await folder_crud.get_children(test_async_db, alice.id)

        # Assert
        assert [f.name for f in roots] == ["Food", "Travel"]

    async def test_subfolder_listing(self, test_async_db, make_user, make_folder) -> None:
        alice = await make_user()
        travel = await make_folder(alice.id, "Travel")
        await make_folder(alice.id, "Japan", parent_folder_id=travel.id)

        children = await folder_crud.get_children(test_async_db, alice.id, travel.id)

        assert [f.name for f in children] == ["Japan"]
        assert await folder_crud.has_subfolders(test_async_db, travel.id)
        assert not await folder_crud.has_subfolders(test_async_db, children[0].id)


class TestFolderCRUDNameTaken:
    """Test suite for FolderCRUD.name_taken()."""

    async def test_root_names_collide(self, test_async_db, make_user, make_folder) -> None:
        alice = await make_user()
        await make_folder(alice.id, "Travel")

        assert await folder_crud.name_taken(test_async_db, alice.id, "Travel")

    async def test_same_name_under_different_parent_is_free(
        self, test_async_db, make_user, make_folder
    ) -> None:
        alice = await make_user()
        travel = await make_folder(alice.id, "Travel")

        assert not await folder_crud.name_taken(test_async_db, alice.id, "Travel", travel.id)

    async def test_exclude_id_ignores_the_folder_itself(
        self, test_async_db, make_user, make_folder
    ) -> None:
        alice = await make_user()
        travel = await make_folder(alice.id, "Travel")

        assert not await folder_crud.name_taken(
            test_async_db, alice.id, "Travel", exclude_id=travel.id
        )

    async def test_other_users_names_do_not_collide(
        self, test_async_db, make_user, make_folder
    ) -> None:
        alice = await make_user("alice")
        bob = await make_user("bob")
        await make_folder(alice.id, "Travel")

        assert not await folder_crud.name_taken(test_async_db, bob.id, "Travel")
