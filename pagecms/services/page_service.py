"""
Page Service for pagecms.

Fixed page bootstrap, page content lookup, alias management and SEO data.
"""

import logging
import re
import uuid
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from pagecms.core.config import get_settings
from pagecms.models.page import Page, PageTranslation, PageType
from pagecms.models.section import Section, SectionTranslation
from pagecms.schemas.section import SectionInit
from pagecms.services.exceptions import AliasConflictError, AliasError, NotFoundError
from pagecms.services.language_service import LanguageService
from pagecms.services.section_policy import SectionPolicy

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_ALIAS_DISALLOWED = re.compile(r"[^a-z0-9\-_]")


def home_placeholder_alias(language: str) -> str:
    """HOME aliases are managed by the frontend; the stored value is never exposed."""
    return f"home-{language}-placeholder"


def sanitize_alias(alias: str | None, max_length: int | None = None) -> str:
    """
    Normalize a page alias.

    Trims, replaces whitespace runs with "-", lowercases and drops every
    character outside [a-z0-9-_].

    Raises:
        AliasError: If the alias is empty, too long or has nothing usable
    """
    if max_length is None:
        max_length = get_settings().max_page_alias_length
    if not alias:
        raise AliasError("Alias is required")

    sanitized = _WHITESPACE.sub("-", alias.strip()).lower()
    sanitized = _ALIAS_DISALLOWED.sub("", sanitized)

    if len(sanitized) > max_length:
        raise AliasError(f"Page alias cannot exceed {max_length} characters")
    if not sanitized:
        raise AliasError("Alias must contain at least one alphanumeric character")
    return sanitized


class PageService:
    """Page operations over one database session."""

    def __init__(
        self,
        db: AsyncSession,
        languages: LanguageService | None = None,
        policy: SectionPolicy | None = None,
    ):
        self.db = db
        self.languages = languages or LanguageService()
        self.policy = policy

    sanitize_alias = staticmethod(sanitize_alias)

    async def initialize_fixed_pages(self) -> list[PageType]:
        """
        Create one page per page type. Existing pages are left untouched.

        Returns:
            Page types created by this call
        """
        result = await self.db.execute(select(Page.type))
        existing = set(result.scalars().all())

        created = []
        for page_type in PageType:
            if page_type.value in existing:
                continue
            self.db.add(Page(type=page_type.value))
            created.append(page_type)
            logger.info(f"Created fixed page: {page_type.value}")

        if created:
            await self.db.commit()
        return created

    def _content_query(self, language: str):
        return select(Page).options(
            selectinload(Page.translations.and_(PageTranslation.language == language)),
            selectinload(Page.sections).selectinload(
                Section.translations.and_(SectionTranslation.language == language)
            ),
        ).execution_options(populate_existing=True)

    async def get_page_content(self, page_type: PageType, language: str) -> Page:
        """Page with its translation and ordered sections in `language`."""
        self.languages.require(language)
        result = await self.db.execute(self._content_query(language).where(Page.type == page_type.value))
        page = result.scalar_one_or_none()
        if page is None:
            raise NotFoundError(f"Page not found: {page_type.value}")
        return page

    async def get_page_by_type(self, page_type: PageType) -> Page | None:
        """Page with translations and sections in every language."""
        result = await self.db.execute(
            select(Page)
            .options(
                selectinload(Page.translations),
                selectinload(Page.sections).selectinload(Section.translations),
            )
            .where(Page.type == page_type.value)
        )
        return result.scalar_one_or_none()

    async def get_page(self, page_id: uuid.UUID) -> Page:
        page = await self.db.get(Page, page_id)
        if page is None:
            raise NotFoundError("Page not found")
        return page

    async def is_alias_unique(
        self,
        alias: str,
        page_id: uuid.UUID | None = None,
        language: str | None = None,
    ) -> bool:
        """
        Check an alias against other pages' translations (case-insensitive).

        The check is scoped to `language` when given, and ignores the
        translation being updated and HOME placeholders.
        """
        query = (
            select(PageTranslation.id)
            .join(Page, Page.id == PageTranslation.page_id)
            .where(
                func.lower(PageTranslation.alias) == alias.lower(),
                Page.type != PageType.HOME.value,
            )
        )
        if language is not None:
            query = query.where(PageTranslation.language == language)
        if page_id is not None:
            query = query.where(PageTranslation.page_id != page_id)

        result = await self.db.execute(query.limit(1))
        conflict = result.scalar_one_or_none()
        logger.debug(f"Alias '{alias}' is {'not unique' if conflict else 'unique'}")
        return conflict is None

    async def _checked_alias(self, alias: str | None, page_id: uuid.UUID, language: str) -> str:
        sanitized = self.sanitize_alias(alias)
        if not await self.is_alias_unique(sanitized, page_id, language):
            raise AliasConflictError(sanitized)
        return sanitized

    async def _get_translation(self, page_id: uuid.UUID, language: str) -> PageTranslation | None:
        result = await self.db.execute(
            select(PageTranslation).where(
                PageTranslation.page_id == page_id,
                PageTranslation.language == language,
            )
        )
        return result.scalar_one_or_none()

    async def _upsert_translation(
        self,
        translation: PageTranslation | None,
        page_id: uuid.UUID,
        language: str,
        alias: str,
        seo_data: dict[str, Any] | None,
    ) -> PageTranslation:
        if translation is None:
            translation = PageTranslation(page_id=page_id, language=language)
            self.db.add(translation)
        translation.alias = alias
        translation.seo_data = seo_data

        await self.db.commit()
        await self.db.refresh(translation)
        return translation

    async def update_page_translation(
        self,
        page_id: uuid.UUID,
        language: str,
        alias: str | None,
        seo_data: dict[str, Any] | None,
    ) -> PageTranslation:
        """
        Create or replace a page's translation.

        Raises:
            UnsupportedLanguageError: Unknown language
            NotFoundError: No such page
            AliasError / AliasConflictError: Alias rejected (not for HOME)
        """
        self.languages.require(language)
        page = await self.get_page(page_id)

        if page.page_type is PageType.HOME:
            alias = home_placeholder_alias(language)
            logger.debug(f"Using placeholder alias for HOME page: {alias}")
        else:
            alias = await self._checked_alias(alias, page_id, language)

        existing = await self._get_translation(page_id, language)
        return await self._upsert_translation(existing, page_id, language, alias, seo_data)

    async def update_page_seo(
        self,
        page_id: uuid.UUID,
        language: str,
        seo_data: dict[str, Any],
        alias: str | None = None,
    ) -> PageTranslation:
        """
        Replace SEO data; the alias changes only when one is given.

        A new non-HOME translation without an alias gets "{type}-{language}",
        checked for uniqueness like any other alias.

        Raises:
            AliasConflictError: Given or generated alias already in use
        """
        self.languages.require(language)
        page = await self.get_page(page_id)
        existing = await self._get_translation(page_id, language)

        if page.page_type is PageType.HOME:
            new_alias = home_placeholder_alias(language)
        elif alias:
            new_alias = await self._checked_alias(alias, page_id, language)
        elif existing is not None:
            new_alias = existing.alias
        else:
            new_alias = await self._checked_alias(f"{page.type.lower()}-{language}", page_id, language)

        return await self._upsert_translation(existing, page_id, language, new_alias, seo_data)

    async def get_page_seo(self, page_id: uuid.UUID, language: str) -> dict[str, Any]:
        """SEO data plus the public alias (None for HOME)."""
        self.languages.require(language)
        page = await self.get_page(page_id)
        translation = await self._get_translation(page_id, language)
        if translation is None:
            raise NotFoundError("Page translation not found")

        alias = None if page.page_type is PageType.HOME else translation.alias
        return {**(translation.seo_data or {}), "alias": alias}

    async def get_page_by_alias(self, alias: str, language: str) -> Page | None:
        self.languages.require(language)
        logger.debug(f"Looking up page with alias '{alias}' in language '{language}'")

        result = await self.db.execute(
            select(PageTranslation.page_id)
            .join(Page, Page.id == PageTranslation.page_id)
            .where(
                func.lower(PageTranslation.alias) == alias.lower(),
                PageTranslation.language == language,
                Page.type != PageType.HOME.value,
            )
            .limit(1)
        )
        page_id = result.scalar_one_or_none()
        if page_id is None:
            return None

        result = await self.db.execute(self._content_query(language).where(Page.id == page_id))
        return result.scalar_one_or_none()

    async def _alias_rows(self, *order_by):
        result = await self.db.execute(
            select(PageTranslation.alias, PageTranslation.language, PageTranslation.page_id, Page.type)
            .join(Page, Page.id == PageTranslation.page_id)
            .where(Page.type != PageType.HOME.value)
            .order_by(*order_by)
        )
        return result.all()

    async def get_all_aliases(self) -> list[dict[str, Any]]:
        """All public aliases; HOME is excluded."""
        rows = await self._alias_rows(PageTranslation.language)
        return [
            {
                "alias": row.alias,
                "page_type": row.type,
                "language": row.language,
                "page_id": str(row.page_id),
            }
            for row in rows
        ]

    async def get_grouped_aliases(self) -> list[dict[str, Any]]:
        """Public aliases grouped per page; HOME is excluded."""
        rows = await self._alias_rows(PageTranslation.page_id, PageTranslation.language)

        grouped: dict[str, dict[str, Any]] = {}
        for row in rows:
            page_id = str(row.page_id)
            entry = grouped.setdefault(
                page_id,
                {"page_id": page_id, "page_type": row.type, "translations": []},
            )
            entry["translations"].append({"language": row.language, "alias": row.alias})
        return list(grouped.values())

    async def initialize_page_sections(self, page_id: uuid.UUID, sections: list[SectionInit]) -> list[Section]:
        """
        Add several sections to a page in one transaction.

        The whole batch is checked before anything is inserted.
        """
        if self.policy is None:
            raise RuntimeError("PageService needs a SectionPolicy to create sections")

        result = await self.db.execute(select(Page).where(Page.id == page_id).with_for_update())
        page = result.scalar_one_or_none()
        if page is None:
            raise NotFoundError("Page not found")

        existing = await self.db.execute(select(Section).where(Section.page_id == page_id))
        self.policy.authorize_batch(
            page.page_type,
            [s.type for s in sections],
            existing.scalars().all(),
        )

        created = [
            Section(page_id=page_id, type=s.type.value, order_index=s.order_index)
            for s in sections
        ]
        self.db.add_all(created)
        await self.db.commit()
        logger.info(f"Initialized {len(created)} sections on page {page.type}")
        return created
