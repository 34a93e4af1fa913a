"""
Section models for pagecms.

A section is a typed content block on a page. Its per-language content
lives in SectionTranslation as a JSON document tagged with `_type`.
"""

import uuid
from enum import Enum
from typing import TYPE_CHECKING, Any

from sqlalchemy import ForeignKey, Index, Integer, String, UniqueConstraint, text
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pagecms.models.base import Base

if TYPE_CHECKING:
    from pagecms.models.page import Page


class SectionType(str, Enum):
    """Content block categories."""

    HERO = "HERO"
    CONTENT = "CONTENT"
    HISTORY = "HISTORY"
    TEAM = "TEAM"
    TIMELINE = "TIMELINE"
    SPORTS_CARD = "SPORTS_CARD"
    MISSION = "MISSION"
    GRAPH_HOW = "GRAPH_HOW"
    GRAPH_EXAMPLE = "GRAPH_EXAMPLE"
    EVENTS = "EVENTS"
    STATS_LIVE = "STATS_LIVE"
    STANDINGS = "STANDINGS"
    LINEUP = "LINEUP"
    FAQ = "FAQ"
    CONTACT = "CONTACT"
    FOOTER = "FOOTER"
    BORN = "BORN"
    OUR_STRENGTHS = "OUR_STRENGTHS"
    FUTURE = "FUTURE"
    DISCOVER = "DISCOVER"
    SCORETREND_WHAT = "SCORETREND_WHAT"
    TREND_OVERVIEW = "TREND_OVERVIEW"
    GOAL_TREND = "GOAL_TREND"
    TEAM_TREND = "TEAM_TREND"
    TABS_UNDER_GAMES = "TABS_UNDER_GAMES"
    EXPAND_EVENT = "EXPAND_EVENT"


class Section(Base):
    """A typed, ordered content block belonging to one page."""

    __tablename__ = "sections"
    __table_args__ = (
        # One row per (page, type); STANDINGS and TIMELINE are the repeatable types
        Index(
            "uq_section_page_type",
            "page_id",
            "type",
            unique=True,
            postgresql_where=text("type NOT IN ('STANDINGS', 'TIMELINE')"),
        ),
    )

    page_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("pages.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type: Mapped[str] = mapped_column(
        String(30),
        nullable=False,
        comment="SectionType value",
    )
    order_index: Mapped[int] = mapped_column(
        Integer,
        default=0,
        nullable=False,
        comment="Sort order (lower values appear first)",
    )

    # Relationships
    page: Mapped["Page"] = relationship(
        "Page",
        back_populates="sections",
    )
    translations: Mapped[list["SectionTranslation"]] = relationship(
        "SectionTranslation",
        back_populates="section",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def section_type(self) -> SectionType:
        return SectionType(self.type)

    def to_dict(self, include_translations: bool = True) -> dict:
        """Convert section to dictionary for API responses."""
        data = {
            "id": str(self.id),
            "page_id": str(self.page_id),
            "type": self.type,
            "order_index": self.order_index,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
        if include_translations:
            data["translations"] = [t.to_dict() for t in self.translations]
        return data

    def __repr__(self) -> str:
        return f"<Section(id={self.id}, type='{self.type}', order={self.order_index})>"


class SectionTranslation(Base):
    """Per-language content payload for a section."""

    __tablename__ = "section_translations"
    __table_args__ = (
        UniqueConstraint("section_id", "language", name="uq_section_translation_language"),
    )

    section_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("sections.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    language: Mapped[str] = mapped_column(
        String(2),
        nullable=False,
    )
    content: Mapped[dict[str, Any]] = mapped_column(
        JSONB,
        nullable=False,
        default=dict,
        comment="Section content shaped by the section type, tagged with _type",
    )

    section: Mapped["Section"] = relationship(
        "Section",
        back_populates="translations",
    )

    def to_dict(self) -> dict:
        """Convert translation to dictionary for API responses."""
        return {
            "id": str(self.id),
            "section_id": str(self.section_id),
            "language": self.language,
            "content": self.content,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self) -> str:
        return f"<SectionTranslation(section_id={self.section_id}, language='{self.language}')>"
