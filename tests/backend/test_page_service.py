"""
Tests for the page service: aliases, SEO data and page bootstrap.
"""

import uuid
from collections import namedtuple

import pytest
from fastapi import status

from pagecms.models.page import PageTranslation, PageType
from pagecms.models.section import SectionType
from pagecms.schemas.section import SectionInit
from pagecms.services.exceptions import (
    AliasConflictError,
    AliasError,
    NotFoundError,
    UnsupportedLanguageError,
)
from pagecms.services.language_service import LanguageService
from pagecms.services.page_service import PageService, home_placeholder_alias, sanitize_alias
from pagecms.services.section_errors import DuplicateSectionError, SectionsNotAllowedError

from helpers import make_page, make_result, make_section, make_session

AliasRow = namedtuple("AliasRow", "alias language page_id type")

SEO = {"basics": {"title": "About", "description": "About us"}}


class TestSanitizeAlias:
    """Alias normalization rules."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("about", "about"),
            ("  About Us  ", "about-us"),
            ("How   it\tWorks", "how-it-works"),
            ("chi_siamo!", "chi_siamo"),
            ("Über uns", "ber-uns"),
        ],
    )
    def test_sanitized(self, raw, expected):
        assert sanitize_alias(raw) == expected

    @pytest.mark.parametrize(
        "raw, message",
        [
            ("", "Alias is required"),
            (None, "Alias is required"),
            ("!!!", "Alias must contain at least one alphanumeric character"),
            ("a" * 51, "Page alias cannot exceed 50 characters"),
        ],
    )
    def test_rejected(self, raw, message):
        with pytest.raises(AliasError) as exc_info:
            sanitize_alias(raw)

        assert exc_info.value.message == message
        assert exc_info.value.status_code == status.HTTP_400_BAD_REQUEST

    def test_max_length_allowed(self):
        assert sanitize_alias("a" * 50) == "a" * 50

    def test_home_placeholder(self):
        assert home_placeholder_alias("it") == "home-it-placeholder"


class TestPageTranslation:
    """Translation upserts with alias rules."""

    async def test_home_uses_placeholder_without_uniqueness_check(self):
        page = make_page(PageType.HOME)
        session = make_session(make_result(scalar=None), get=page)
        service = PageService(session)

        translation = await service.update_page_translation(page.id, "en", "whatever", SEO)

        assert translation.alias == "home-en-placeholder"
        assert translation.seo_data == SEO
        # Only the existing-translation lookup ran
        assert session.execute.await_count == 1
        session.add.assert_called_once_with(translation)
        session.commit.assert_awaited_once()

    async def test_alias_sanitized_and_stored(self):
        page = make_page(PageType.ABOUT)
        existing = PageTranslation(page_id=page.id, language="en", alias="old")
        session = make_session(
            make_result(scalar=None),  # uniqueness
            make_result(scalar=existing),  # current translation
            get=page,
        )
        service = PageService(session)

        translation = await service.update_page_translation(page.id, "en", "About Us", SEO)

        assert translation is existing
        assert existing.alias == "about-us"
        session.add.assert_not_called()

    async def test_alias_conflict(self):
        page = make_page(PageType.ABOUT)
        session = make_session(make_result(scalar=uuid.uuid4()), get=page)
        service = PageService(session)

        with pytest.raises(AliasConflictError) as exc_info:
            await service.update_page_translation(page.id, "en", "contact", SEO)

        assert exc_info.value.status_code == status.HTTP_409_CONFLICT
        assert exc_info.value.message == (
            'Page alias "contact" already exists. Each page must have a unique alias.'
        )
        session.commit.assert_not_awaited()

    async def test_unsupported_language(self):
        service = PageService(make_session())

        with pytest.raises(UnsupportedLanguageError) as exc_info:
            await service.update_page_translation(uuid.uuid4(), "fr", "about", SEO)

        assert exc_info.value.message == "Unsupported language: fr"

    async def test_missing_page(self):
        service = PageService(make_session(get=None))

        with pytest.raises(NotFoundError):
            await service.update_page_translation(uuid.uuid4(), "en", "about", SEO)

    async def test_custom_languages(self):
        service = PageService(make_session(get=None), languages=LanguageService(["de"], "de"))

        with pytest.raises(UnsupportedLanguageError):
            await service.update_page_translation(uuid.uuid4(), "en", "about", SEO)


class TestPageSEO:
    """SEO reads and writes."""

    async def test_update_seo_keeps_existing_alias(self):
        page = make_page(PageType.ABOUT)
        existing = PageTranslation(page_id=page.id, language="en", alias="about-us")
        session = make_session(make_result(scalar=existing), get=page)
        service = PageService(session)

        translation = await service.update_page_seo(page.id, "en", SEO)

        assert translation.alias == "about-us"
        assert translation.seo_data == SEO

    async def test_update_seo_default_alias(self):
        page = make_page(PageType.HOW_IT_WORKS)
        session = make_session(
            make_result(scalar=None),  # current translation
            make_result(scalar=None),  # uniqueness
            get=page,
        )
        service = PageService(session)

        translation = await service.update_page_seo(page.id, "es", SEO)

        assert translation.alias == "how_it_works-es"

    async def test_update_seo_default_alias_must_be_unique(self):
        page = make_page(PageType.ABOUT)
        session = make_session(
            make_result(scalar=None),  # current translation
            make_result(scalar=uuid.uuid4()),  # CONTACT already uses "about-en"
            get=page,
        )
        service = PageService(session)

        with pytest.raises(AliasConflictError) as exc_info:
            await service.update_page_seo(page.id, "en", SEO)

        assert exc_info.value.alias == "about-en"
        session.add.assert_not_called()
        session.commit.assert_not_awaited()

    async def test_update_seo_home_skips_uniqueness(self):
        page = make_page(PageType.HOME)
        session = make_session(make_result(scalar=None), get=page)

        translation = await PageService(session).update_page_seo(page.id, "pt", SEO)

        assert translation.alias == "home-pt-placeholder"
        assert session.execute.await_count == 1

    async def test_get_seo_hides_home_alias(self):
        page = make_page(PageType.HOME)
        translation = PageTranslation(page_id=page.id, language="en", alias="home-en-placeholder", seo_data=SEO)
        service = PageService(make_session(make_result(scalar=translation), get=page))

        seo = await service.get_page_seo(page.id, "en")

        assert seo == {**SEO, "alias": None}

    async def test_get_seo_includes_alias(self):
        page = make_page(PageType.FAQ)
        translation = PageTranslation(page_id=page.id, language="en", alias="faq", seo_data=SEO)
        service = PageService(make_session(make_result(scalar=translation), get=page))

        seo = await service.get_page_seo(page.id, "en")

        assert seo["alias"] == "faq"

    async def test_get_seo_missing_translation(self):
        page = make_page(PageType.FAQ)
        service = PageService(make_session(make_result(scalar=None), get=page))

        with pytest.raises(NotFoundError) as exc_info:
            await service.get_page_seo(page.id, "en")

        assert exc_info.value.message == "Page translation not found"


class TestPageLookup:
    """Bootstrap, content and alias listings."""

    async def test_initialize_fixed_pages_is_idempotent(self):
        session = make_session(make_result(scalars=["HOME", "ABOUT"]))
        service = PageService(session)

        created = await service.initialize_fixed_pages()

        assert PageType.HOME not in created and PageType.ABOUT not in created
        assert len(created) == len(PageType) - 2
        assert session.add.call_count == len(created)
        session.commit.assert_awaited_once()

    async def test_initialize_fixed_pages_nothing_to_do(self):
        session = make_session(make_result(scalars=[p.value for p in PageType]))

        assert await PageService(session).initialize_fixed_pages() == []
        session.commit.assert_not_awaited()

    async def test_get_page_content_not_found(self):
        service = PageService(make_session(make_result(scalar=None)))

        with pytest.raises(NotFoundError) as exc_info:
            await service.get_page_content(PageType.ABOUT, "en")

        assert exc_info.value.message == "Page not found: ABOUT"

    async def test_get_page_by_alias_missing(self):
        service = PageService(make_session(make_result(scalar=None)))

        assert await service.get_page_by_alias("nope", "en") is None

    async def test_get_page_by_alias_ignores_home(self):
        session = make_session(make_result(scalar=None))

        assert await PageService(session).get_page_by_alias("home-en-placeholder", "en") is None

        query = str(session.execute.await_args.args[0])
        assert "pages.type != " in query

    async def test_get_page_by_type(self):
        page = make_page(PageType.FAQ)
        service = PageService(make_session(make_result(scalar=page), make_result(scalar=None)))

        assert await service.get_page_by_type(PageType.FAQ) is page
        assert await service.get_page_by_type(PageType.NEWS) is None

    async def test_all_aliases(self):
        page_id = uuid.uuid4()
        rows = [AliasRow("chi-siamo", "it", page_id, "ABOUT")]
        service = PageService(make_session(make_result(rows=rows)))

        aliases = await service.get_all_aliases()

        assert aliases == [
            {"alias": "chi-siamo", "page_type": "ABOUT", "language": "it", "page_id": str(page_id)}
        ]

    async def test_grouped_aliases(self):
        about, faq = uuid.uuid4(), uuid.uuid4()
        rows = [
            AliasRow("about", "en", about, "ABOUT"),
            AliasRow("chi-siamo", "it", about, "ABOUT"),
            AliasRow("faq", "en", faq, "FAQ"),
        ]
        service = PageService(make_session(make_result(rows=rows)))

        grouped = await service.get_grouped_aliases()

        assert grouped == [
            {
                "page_id": str(about),
                "page_type": "ABOUT",
                "translations": [
                    {"language": "en", "alias": "about"},
                    {"language": "it", "alias": "chi-siamo"},
                ],
            },
            {"page_id": str(faq), "page_type": "FAQ", "translations": [{"language": "en", "alias": "faq"}]},
        ]


class TestInitializePageSections:
    """Batch section creation."""

    async def test_creates_batch(self, policy):
        page = make_page(PageType.ABOUT)
        session = make_session(make_result(scalar=page), make_result(scalars=[]))
        service = PageService(session, policy=policy)

        created = await service.initialize_page_sections(
            page.id,
            [SectionInit(type=SectionType.HERO, order_index=0), SectionInit(type=SectionType.TEAM, order_index=1)],
        )

        assert [s.type for s in created] == ["HERO", "TEAM"]
        session.add_all.assert_called_once_with(created)
        session.commit.assert_awaited_once()

    async def test_rejects_duplicate_with_existing(self, policy):
        page = make_page(PageType.ABOUT)
        existing = make_section(SectionType.HERO, page.id)
        session = make_session(make_result(scalar=page), make_result(scalars=[existing]))
        service = PageService(session, policy=policy)

        with pytest.raises(DuplicateSectionError):
            await service.initialize_page_sections(page.id, [SectionInit(type=SectionType.HERO)])

        session.add_all.assert_not_called()

    async def test_rejects_home(self, policy):
        page = make_page(PageType.HOME)
        session = make_session(make_result(scalar=page), make_result(scalars=[]))
        service = PageService(session, policy=policy)

        with pytest.raises(SectionsNotAllowedError):
            await service.initialize_page_sections(page.id, [SectionInit(type=SectionType.HERO)])
