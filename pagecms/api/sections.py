"""
Section API Endpoints.

Provides:
- Section schema help (description, fields, example) per section type
- Section reads in the request language
- Editor endpoints for create, content, order, delete and update subscriptions
"""

import uuid
from typing import Any

from fastapi import APIRouter, Request, status

from pagecms.core.dependencies import (
    EditorUser,
    Registry,
    RequestLanguage,
    SectionServiceDep,
    UpdateManager,
)
from pagecms.middleware.security import rate_limit_write
from pagecms.models.section import SectionType
from pagecms.schemas.section import SectionCreate, SectionOrderUpdate, SectionTranslationUpdate

router = APIRouter()


# ============== Public Endpoints ==============


@router.get(
    "/sections/schemas/{section_type}",
    summary="Get Section Schema",
    description="Description, required and optional fields, and an example payload for a section type.",
)
async def get_section_schema(section_type: SectionType, registry: Registry) -> dict[str, Any]:
    schema = registry.schema_or_default(section_type)
    fields = list(schema.model_fields)
    return {
        "section_type": section_type.value,
        "description": registry.description_for(section_type),
        "required_fields": [n for n, f in schema.model_fields.items() if f.is_required()],
        "optional_fields": [n for n, f in schema.model_fields.items() if not f.is_required()],
        "field_descriptions": registry.field_descriptions_for(section_type, fields),
        "example": registry.example_for(section_type),
        "example_explanation": registry.example_explanation_for(section_type),
        "json_schema": schema.model_json_schema(),
    }


@router.get(
    "/sections/page/{page_id}",
    summary="List Page Sections",
)
async def list_page_sections(
    page_id: uuid.UUID,
    language: RequestLanguage,
    sections: SectionServiceDep,
) -> list[dict[str, Any]]:
    return [s.to_dict() for s in await sections.get_all_sections(page_id, language)]


@router.get(
    "/sections/{section_id}",
    summary="Get Section",
)
async def get_section(
    section_id: uuid.UUID,
    language: RequestLanguage,
    sections: SectionServiceDep,
) -> dict[str, Any]:
    section = await sections.get_section(section_id, language)
    return section.to_dict()


# ============== Editor Endpoints ==============


@router.post(
    "/sections/subscriptions",
    summary="Subscribe To Content Updates",
)
async def subscribe(editor: EditorUser, manager: UpdateManager) -> dict[str, bool]:
    return {"subscribed": manager.subscribe_user(editor)}


@router.delete(
    "/sections/subscriptions",
    summary="Unsubscribe From Content Updates",
)
async def unsubscribe(editor: EditorUser, manager: UpdateManager) -> dict[str, bool]:
    return {"unsubscribed": manager.unsubscribe_user(editor)}


@router.post(
    "/sections",
    status_code=status.HTTP_201_CREATED,
    summary="Create Section",
)
@rate_limit_write()
async def create_section(
    request: Request,
    body: SectionCreate,
    editor: EditorUser,
    sections: SectionServiceDep,
) -> dict[str, Any]:
    section = await sections.create_section(body.page_id, body.type, body.order_index)
    return section.to_dict(include_translations=False)


@router.put(
    "/sections/{section_id}/translations/{language}",
    summary="Update Section Content",
    description="Validate and store section content for one language.",
)
@rate_limit_write()
async def update_section_translation(
    request: Request,
    section_id: uuid.UUID,
    language: str,
    body: SectionTranslationUpdate,
    editor: EditorUser,
    sections: SectionServiceDep,
) -> dict[str, Any]:
    translation = await sections.update_section_translation(section_id, language, body.content)
    return translation.to_dict()


@router.patch(
    "/sections/{section_id}/order",
    summary="Update Section Order",
)
async def update_section_order(
    section_id: uuid.UUID,
    body: SectionOrderUpdate,
    editor: EditorUser,
    sections: SectionServiceDep,
) -> dict[str, Any]:
    section = await sections.update_section_order(section_id, body.order_index)
    return section.to_dict(include_translations=False)


@router.delete(
    "/sections/{section_id}",
    summary="Delete Section",
)
async def delete_section(
    section_id: uuid.UUID,
    editor: EditorUser,
    sections: SectionServiceDep,
) -> dict[str, str]:
    await sections.delete_section(section_id)
    return {"message": "Section deleted successfully", "deleted_id": str(section_id)}

