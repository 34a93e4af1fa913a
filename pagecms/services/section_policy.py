"""
Page-Section Policy Engine.

Decides whether a section may be placed on a page (fixed section list per
page type, one instance per type unless the pair is repeatable) and
whether content may be written to a section (delegates to the content
validator).
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, NamedTuple

from pagecms.models.page import PageType
from pagecms.models.section import SectionType
from pagecms.services.section_errors import (
    ContentValidationError,
    DuplicateSectionError,
    InvalidSectionTypeError,
    SectionsNotAllowedError,
)
from pagecms.services.section_validator import SectionContentValidator

logger = logging.getLogger(__name__)

# Page type -> sections it may hold, in display order. None: SEO data only.
FIXED_SECTIONS: dict[PageType, list[SectionType] | None] = {
    PageType.ABOUT: [
        SectionType.HERO,
        SectionType.HISTORY,
        SectionType.BORN,
        SectionType.OUR_STRENGTHS,
        SectionType.SPORTS_CARD,
        SectionType.DISCOVER,
        SectionType.TEAM,
        SectionType.MISSION,
        SectionType.FUTURE,
        SectionType.FAQ,
    ],
    PageType.HOW_IT_WORKS: [
        SectionType.HERO,
        SectionType.SCORETREND_WHAT,
        SectionType.GRAPH_HOW,
        SectionType.GRAPH_EXAMPLE,
        SectionType.TREND_OVERVIEW,
        SectionType.GOAL_TREND,
        SectionType.TEAM_TREND,
        SectionType.TABS_UNDER_GAMES,
        SectionType.EVENTS,
        SectionType.STATS_LIVE,
        SectionType.LINEUP,
        SectionType.STANDINGS,
        SectionType.EXPAND_EVENT,
    ],
    PageType.HOME: None,
    PageType.CONTACT: [SectionType.CONTACT],
    PageType.FAQ: [SectionType.FAQ],
    PageType.NEWS: [SectionType.TIMELINE],
    PageType.PRIVACY_POLICY: [SectionType.CONTENT],
    PageType.COOKIE_POLICY: [SectionType.CONTENT],
    PageType.SYSTEM: [SectionType.FOOTER],
}

REPEATABLE_SECTIONS: frozenset[tuple[PageType, SectionType]] = frozenset(
    {
        (PageType.HOW_IT_WORKS, SectionType.STANDINGS),
        (PageType.NEWS, SectionType.TIMELINE),
    }
)


class ExistingSection(NamedTuple):
    """Minimal view of a section already on a page."""

    type: SectionType
    id: str


def _as_existing(sections: Iterable[Any]) -> list[ExistingSection]:
    # Accepts ORM Section rows (type stored as str) or ExistingSection tuples
    return [ExistingSection(SectionType(s.type), str(s.id)) for s in sections]


class SectionPolicy:
    """Placement and content-write rules for page sections."""

    def __init__(
        self,
        validator: SectionContentValidator,
        fixed_sections: Mapping[PageType, list[SectionType] | None] = FIXED_SECTIONS,
        repeatable: Iterable[tuple[PageType, SectionType]] = REPEATABLE_SECTIONS,
    ) -> None:
        self._validator = validator
        self._fixed_sections = dict(fixed_sections)
        self._repeatable = frozenset(repeatable)

    @property
    def validator(self) -> SectionContentValidator:
        return self._validator

    def allowed_sections(self, page_type: PageType) -> list[SectionType] | None:
        allowed = self._fixed_sections.get(page_type)
        return list(allowed) if allowed is not None else None

    def is_repeatable(self, page_type: PageType, section_type: SectionType) -> bool:
        return (page_type, section_type) in self._repeatable

    def authorize_create(
        self,
        page_type: PageType,
        section_type: SectionType,
        existing_sections: Iterable[Any],
    ) -> None:
        """
        Check that a section of `section_type` may be added to the page.

        Args:
            page_type: Type of the target page
            section_type: Type of the section to add
            existing_sections: Sections already on the page (objects with .type and .id)

        Raises:
            SectionsNotAllowedError: If the page type carries no sections
            InvalidSectionTypeError: If the type is not in the page's fixed list
            DuplicateSectionError: If a non-repeatable section of that type exists
        """
        allowed = self.allowed_sections(page_type)
        if allowed is None:
            logger.warning(f"Rejected {section_type.value} on {page_type.value}: page has no sections")
            raise SectionsNotAllowedError(page_type)

        existing = _as_existing(existing_sections)
        current = [s.type for s in existing]
        available = [
            t for t in allowed if t not in current or self.is_repeatable(page_type, t)
        ]

        if section_type not in allowed:
            logger.warning(f"Rejected {section_type.value} on {page_type.value}: type not allowed")
            raise InvalidSectionTypeError(page_type, section_type, allowed, available, current)

        if not self.is_repeatable(page_type, section_type):
            duplicate = next((s for s in existing if s.type == section_type), None)
            if duplicate is not None:
                logger.warning(
                    f"Rejected {section_type.value} on {page_type.value}: "
                    f"already exists as {duplicate.id}"
                )
                raise DuplicateSectionError(page_type, section_type, duplicate.id, available, current)

    def authorize_batch(
        self,
        page_type: PageType,
        requested: Iterable[SectionType],
        existing_sections: Iterable[Any],
    ) -> None:
        """Check a list of sections to add at once; earlier entries count as existing."""
        existing = _as_existing(existing_sections)
        for position, section_type in enumerate(requested):
            self.authorize_create(page_type, section_type, existing)
            existing.append(ExistingSection(section_type, f"pending-{position}"))

    def authorize_content_write(self, section_type: SectionType, content: Any) -> dict[str, Any]:
        """
        Check content before it is stored on a section.

        Returns:
            The content limited to the fields the section type declares

        Raises:
            ContentValidationError: Carrying the validator's report unchanged
        """
        result = self._validator.validate(section_type, content)
        if not result.is_valid:
            logger.warning(f"Rejected content for {section_type.value}: {result.report.summary}")
            raise ContentValidationError(result.report)
        return result.content
