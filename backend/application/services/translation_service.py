"""
Translation history service.

Persists translations a user chooses to keep and answers history
queries. Every lookup is scoped to the requesting user.

Dependencies: backend.boundary.db.CRUD, backend.boundary.db.models
System role: Translation history use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.services.common import ensure_owner, normalize_page, page_dict
from backend.boundary.db.CRUD.saved_item_crud import saved_item_crud
from backend.boundary.db.CRUD.translation_crud import translation_crud
from backend.boundary.db.models.enums import InputType
from backend.boundary.db.models.translation_model import TranslationModel
from backend.core.exceptions import ResourceNotFoundError

logger = logging.getLogger(__name__)


def translation_to_dict(translation: TranslationModel, is_saved: bool) -> dict:
    """Serialize a translation row plus its saved flag."""
    return {
        "id": translation.id,
        "source_text": translation.source_text,
        "target_text": translation.target_text,
        "source_lang": translation.source_lang,
        "target_lang": translation.target_lang,
        "input_type": translation.input_type,
        "is_favorite": translation.is_favorite,
        "is_saved": is_saved,
        "tags": translation.tags,
        "created_at": translation.created_at,
    }


class TranslationService:
    """Translation history orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize translation service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _get_owned(self, user_id: UUID, translation_id: UUID) -> TranslationModel:
        translation = await translation_crud.get_by_id(self.db, translation_id)
        if translation is None:
            raise ResourceNotFoundError("Translation", translation_id)
        ensure_owner(
            translation.user_id,
            user_id,
            "You do not have permission to access this translation.",
        )
        return translation

    async def create_translation(
        self,
        user_id: UUID,
        source_text: str,
        target_text: str,
        source_lang: str,
        target_lang: str,
        input_type: InputType,
    ) -> dict:
        """
        Save a translation to the user's history.

        Returns:
            dict: The stored translation (is_saved is False for a new row)
        """
        translation = await translation_crud.create(
            self.db,
            user_id=user_id,
            source_text=source_text,
            target_text=target_text,
            source_lang=source_lang,
            target_lang=target_lang,
            input_type=input_type,
            is_favorite=False,
        )
        logger.info(
            "Translation saved to history",
            extra={
                "translation_id": str(translation.id),
                "user_id": str(user_id),
                "input_type": input_type.value,
            },
        )
        return translation_to_dict(translation, is_saved=False)

    async def get_translation(self, user_id: UUID, translation_id: UUID) -> dict:
        """
        Get one of the user's translations.

        Raises:
            ResourceNotFoundError: If the translation does not exist
            PermissionDeniedError: If it belongs to another user
        """
        translation = await self._get_owned(user_id, translation_id)
        is_saved = await saved_item_crud.is_saved(self.db, user_id, translation.id)
        return translation_to_dict(translation, is_saved)

    async def list_translations(self, user_id: UUID, page: int = 0, size: int = 20) -> dict:
        """
        Get one page of the user's history, newest first.

        Args:
            user_id: User UUID
            page: Zero-based page index
            size: Page size (clamped to 1..100)

        Returns:
            dict: Page envelope of translation dicts
        """
        page, size = normalize_page(page, size)
        translations, total = await translation_crud.get_page_for_user(
            self.db, user_id, limit=size, offset=page * size
        )
        saved_ids = await saved_item_crud.get_saved_translation_ids(
            self.db, user_id, (t.id for t in translations)
        )
        content = [translation_to_dict(t, t.id in saved_ids) for t in translations]
        return page_dict(content, page, size, total)

    async def delete_translation(self, user_id: UUID, translation_id: UUID) -> None:
        """
        Delete a translation and every saved item that references it.

        Raises:
            ResourceNotFoundError: If the translation does not exist
            PermissionDeniedError: If it belongs to another user
        """
        translation = await self._get_owned(user_id, translation_id)

        removed = await saved_item_crud.delete_by_translation(self.db, translation.id)
        await translation_crud.delete_by_id(self.db, translation.id)

        logger.info(
            "Translation deleted",
            extra={
                "translation_id": str(translation_id),
                "user_id": str(user_id),
                "saved_items_removed": removed,
            },
        )

    async def toggle_favorite(self, user_id: UUID, translation_id: UUID) -> dict:
        """
        Flip the favorite flag of a translation.

        Returns:
            dict: The updated translation

        Raises:
            ResourceNotFoundError: If the translation does not exist
            PermissionDeniedError: If it belongs to another user
        """
        translation = await self._get_owned(user_id, translation_id)
        updated = await translation_crud.update_by_id(
            self.db, translation.id, is_favorite=not translation.is_favorite
        )
        is_saved = await saved_item_crud.is_saved(self.db, user_id, translation.id)

        logger.info(
            "Translation favorite toggled",
            extra={"translation_id": str(translation_id), "is_favorite": updated.is_favorite},
        )
        return translation_to_dict(updated, is_saved)
