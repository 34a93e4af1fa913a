"""
Request schemas for section endpoints.

Content is accepted as an untyped object here; its shape is checked
against the section type's schema by the policy engine.
"""

import uuid
from typing import Any

from pydantic import BaseModel, Field

from pagecms.models.section import SectionType


class SectionCreate(BaseModel):
    page_id: uuid.UUID
    type: SectionType
    order_index: int = Field(default=0, ge=0)


class SectionInit(BaseModel):
    type: SectionType
    order_index: int = Field(default=0, ge=0)


class SectionTranslationUpdate(BaseModel):
    content: Any


class SectionOrderUpdate(BaseModel):
    order_index: int = Field(..., ge=0)
