"""
Page API Endpoints.

Provides:
- Public page content lookup by type or alias
- Alias listings for routing
- Editor endpoints for translations, SEO data and section bootstrap
"""

import uuid
from typing import Any

from fastapi import APIRouter, HTTPException, Request, status

from pagecms.core.dependencies import EditorUser, PageServiceDep, RequestLanguage
from pagecms.middleware.security import rate_limit_write
from pagecms.models.page import Page, PageType
from pagecms.schemas.page import PageSEOUpdate, PageTranslationUpdate
from pagecms.schemas.section import SectionInit

router = APIRouter()


def page_payload(page: Page) -> dict[str, Any]:
    return {
        **page.to_dict(),
        "translations": [t.to_dict() for t in page.translations],
        "sections": [s.to_dict() for s in page.sections],
    }


# ============== Public Endpoints ==============


@router.get(
    "/pages/aliases",
    summary="List Page Aliases",
    description="All public page aliases with their page type and language. HOME is excluded.",
)
async def list_aliases(pages: PageServiceDep) -> list[dict[str, Any]]:
    return await pages.get_all_aliases()


@router.get(
    "/pages/aliases/grouped",
    summary="List Page Aliases Grouped By Page",
)
async def list_grouped_aliases(pages: PageServiceDep) -> list[dict[str, Any]]:
    return await pages.get_grouped_aliases()


@router.get(
    "/pages/alias/{alias}",
    summary="Get Page By Alias",
)
async def get_page_by_alias(alias: str, language: RequestLanguage, pages: PageServiceDep) -> dict[str, Any]:
    page = await pages.get_page_by_alias(alias, language)
    if page is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Page with alias '{alias}' not found",
        )
    return page_payload(page)


@router.get(
    "/pages/{page_type}",
    summary="Get Page Content",
    description="Page with its translation and ordered sections in the request language.",
)
async def get_page_content(page_type: PageType, language: RequestLanguage, pages: PageServiceDep) -> dict[str, Any]:
    page = await pages.get_page_content(page_type, language)
    return page_payload(page)


@router.get(
    "/pages/{page_type}/all-languages",
    summary="Get Page In All Languages",
    description="Editor view of a page with every translation and section translation.",
)
async def get_page_all_languages(page_type: PageType, editor: EditorUser, pages: PageServiceDep) -> dict[str, Any]:
    page = await pages.get_page_by_type(page_type)
    if page is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Page not found: {page_type.value}",
        )
    return page_payload(page)


@router.get(
    "/pages/{page_id}/seo/{language}",
    summary="Get Page SEO Data",
)
async def get_page_seo(page_id: uuid.UUID, language: str, pages: PageServiceDep) -> dict[str, Any]:
    return await pages.get_page_seo(page_id, language)


# ============== Editor Endpoints ==============


@router.put(
    "/pages/{page_id}/translations/{language}",
    summary="Update Page Translation",
)
@rate_limit_write()
async def update_page_translation(
    request: Request,
    page_id: uuid.UUID,
    language: str,
    body: PageTranslationUpdate,
    editor: EditorUser,
    pages: PageServiceDep,
) -> dict[str, Any]:
    translation = await pages.update_page_translation(
        page_id, language, body.alias, body.seo_data.model_dump()
    )
    return translation.to_dict()


@router.put(
    "/pages/{page_id}/seo/{language}",
    summary="Update Page SEO Data",
    description="Replace SEO data; the alias changes only when one is given.",
)
@rate_limit_write()
async def update_page_seo(
    request: Request,
    page_id: uuid.UUID,
    language: str,
    body: PageSEOUpdate,
    editor: EditorUser,
    pages: PageServiceDep,
) -> dict[str, Any]:
    translation = await pages.update_page_seo(
        page_id, language, body.seo_data.model_dump(), body.alias
    )
    return translation.to_dict()


@router.post(
    "/pages/{page_id}/sections",
    status_code=status.HTTP_201_CREATED,
    summary="Initialize Page Sections",
    description="Create several sections at once; the whole batch is checked first.",
)
@rate_limit_write()
async def initialize_page_sections(
    request: Request,
    page_id: uuid.UUID,
    body: list[SectionInit],
    editor: EditorUser,
    pages: PageServiceDep,
) -> list[dict[str, Any]]:
    sections = await pages.initialize_page_sections(page_id, body)
    return [s.to_dict(include_translations=False) for s in sections]
