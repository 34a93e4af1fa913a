"""
Session and model builders shared by the service tests.
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

from pagecms.models.page import Page, PageType
from pagecms.models.section import Section, SectionType


def make_result(scalar=None, scalars=None, rows=None) -> MagicMock:
    """Stand-in for an SQLAlchemy Result."""
    result = MagicMock()
    result.scalar_one_or_none.return_value = scalar
    result.scalars.return_value.all.return_value = list(scalars or [])
    result.all.return_value = list(rows or [])
    return result


def make_session(*results, get=None) -> MagicMock:
    """AsyncSession mock whose execute() returns `results` in order."""
    session = MagicMock()
    session.execute = AsyncMock(side_effect=list(results))
    session.get = AsyncMock(return_value=get)
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.refresh = AsyncMock()
    session.delete = AsyncMock()
    return session


def make_page(page_type: PageType) -> Page:
    return Page(id=uuid.uuid4(), type=page_type.value)


def make_section(section_type: SectionType, page_id: uuid.UUID | None = None) -> Section:
    return Section(id=uuid.uuid4(), page_id=page_id or uuid.uuid4(), type=section_type.value, order_index=0)
