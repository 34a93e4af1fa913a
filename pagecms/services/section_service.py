"""
Section Service for pagecms.

Creates, updates, reorders and deletes page sections. Placement and
content are checked by the SectionPolicy before anything is written;
committed content updates are published to the ContentUpdateManager.
"""

import logging
import uuid
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from pagecms.models.page import Page
from pagecms.models.section import Section, SectionTranslation, SectionType
from pagecms.services.content_notifier import ContentUpdateManager
from pagecms.services.exceptions import NotFoundError
from pagecms.services.language_service import LanguageService
from pagecms.services.section_policy import SectionPolicy

logger = logging.getLogger(__name__)


class SectionService:
    """Section operations over one database session."""

    def __init__(
        self,
        db: AsyncSession,
        policy: SectionPolicy,
        update_manager: ContentUpdateManager,
        languages: LanguageService | None = None,
    ):
        self.db = db
        self.policy = policy
        self.update_manager = update_manager
        self.languages = languages or LanguageService()

    def _with_translations(self, language: str):
        return (
            select(Section)
            .options(selectinload(Section.translations.and_(SectionTranslation.language == language)))
            .execution_options(populate_existing=True)
        )

    async def get_section(self, section_id: uuid.UUID, language: str) -> Section:
        self.languages.require(language)
        result = await self.db.execute(self._with_translations(language).where(Section.id == section_id))
        section = result.scalar_one_or_none()
        if section is None:
            raise NotFoundError(f"Section not found: {section_id}")
        return section

    async def get_all_sections(self, page_id: uuid.UUID, language: str) -> list[Section]:
        self.languages.require(language)
        result = await self.db.execute(
            self._with_translations(language)
            .where(Section.page_id == page_id)
            .order_by(Section.order_index)
        )
        return list(result.scalars().all())

    async def _existing_sections(self, page_id: uuid.UUID) -> list[Section]:
        result = await self.db.execute(select(Section).where(Section.page_id == page_id))
        return list(result.scalars().all())

    async def create_section(
        self,
        page_id: uuid.UUID,
        section_type: SectionType,
        order_index: int = 0,
    ) -> Section:
        """
        Add a section to a page.

        The page row is locked so concurrent creates on the same page are
        serialized between the existing-sections read and the insert.

        Raises:
            NotFoundError: No such page
            SectionValidationError: Placement rejected by the policy
        """
        result = await self.db.execute(select(Page).where(Page.id == page_id).with_for_update())
        page = result.scalar_one_or_none()
        if page is None:
            raise NotFoundError("Page not found")
        # Read before commit; a rollback expires the row
        page_type = page.page_type

        existing = await self._existing_sections(page_id)
        self.policy.authorize_create(page_type, section_type, existing)

        section = Section(page_id=page_id, type=section_type.value, order_index=order_index)
        self.db.add(section)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            # Lost a race with another writer; report it as a duplicate
            self.policy.authorize_create(page_type, section_type, await self._existing_sections(page_id))
            raise

        await self.db.refresh(section)
        logger.info(f"Created section {section.id} ({section.type}) on page {page_type.value}")
        return section

    async def update_section_translation(
        self,
        section_id: uuid.UUID,
        language: str,
        content: Any,
    ) -> SectionTranslation:
        """
        Validate and store a section's content for one language.

        Subscribers are notified after the commit; a failing subscriber
        never affects the stored content.

        Raises:
            UnsupportedLanguageError: Unknown language
            NotFoundError: No such section
            ContentValidationError: Content does not match the section's schema
        """
        self.languages.require(language)
        section = await self.db.get(Section, section_id)
        if section is None:
            raise NotFoundError("Section not found")

        section_type = section.section_type
        cleaned = self.policy.authorize_content_write(section_type, content)
        stored = {**cleaned, "_type": section_type.value}

        result = await self.db.execute(
            select(SectionTranslation).where(
                SectionTranslation.section_id == section_id,
                SectionTranslation.language == language,
            )
        )
        translation = result.scalar_one_or_none()
        if translation is None:
            translation = SectionTranslation(section_id=section_id, language=language)
            self.db.add(translation)
        translation.content = stored

        await self.db.commit()
        await self.db.refresh(translation)

        self.update_manager.notify_content_update(section_id, language, stored)
        return translation

    async def update_section_order(self, section_id: uuid.UUID, order_index: int) -> Section:
        section = await self.db.get(Section, section_id)
        if section is None:
            raise NotFoundError(f"Section not found: {section_id}")
        section.order_index = order_index
        await self.db.commit()
        await self.db.refresh(section)
        return section

    async def delete_section(self, section_id: uuid.UUID) -> None:
        """Delete a section; its translations go with it."""
        result = await self.db.execute(
            select(Section).options(selectinload(Section.translations)).where(Section.id == section_id)
        )
        section = result.scalar_one_or_none()
        if section is None:
            raise NotFoundError(f"Section not found: {section_id}")

        translation_count = len(section.translations)
        await self.db.delete(section)
        await self.db.commit()
        logger.info(f"Deleted section {section_id} with {translation_count} translations")
