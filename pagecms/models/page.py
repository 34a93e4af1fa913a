"""
Page models for pagecms.

Pages are fixed: one row per PageType, created at startup. Each page has
one translation per supported language holding its alias and SEO data.
"""

import uuid
from enum import Enum
from typing import TYPE_CHECKING, Any

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pagecms.models.base import Base

if TYPE_CHECKING:
    from pagecms.models.section import Section


class PageType(str, Enum):
    """Fixed page identities."""

    HOME = "HOME"
    ABOUT = "ABOUT"
    HOW_IT_WORKS = "HOW_IT_WORKS"
    CONTACT = "CONTACT"
    FAQ = "FAQ"
    NEWS = "NEWS"
    PRIVACY_POLICY = "PRIVACY_POLICY"
    COOKIE_POLICY = "COOKIE_POLICY"
    SYSTEM = "SYSTEM"


class Page(Base):
    """A fixed site page."""

    __tablename__ = "pages"

    type: Mapped[str] = mapped_column(
        String(30),
        unique=True,
        index=True,
        nullable=False,
        comment="PageType value",
    )

    # Relationships
    translations: Mapped[list["PageTranslation"]] = relationship(
        "PageTranslation",
        back_populates="page",
        cascade="all, delete-orphan",
    )
    sections: Mapped[list["Section"]] = relationship(
        "Section",
        back_populates="page",
        cascade="all, delete-orphan",
        order_by="Section.order_index",
    )

    @property
    def page_type(self) -> PageType:
        return PageType(self.type)

    def to_dict(self) -> dict:
        """Convert page to dictionary for API responses."""
        return {
            "id": str(self.id),
            "type": self.type,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self) -> str:
        return f"<Page(id={self.id}, type='{self.type}')>"


class PageTranslation(Base):
    """Per-language alias and SEO metadata for a page."""

    __tablename__ = "page_translations"
    __table_args__ = (
        UniqueConstraint("page_id", "language", name="uq_page_translation_language"),
    )

    page_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("pages.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    language: Mapped[str] = mapped_column(
        String(2),
        nullable=False,
    )
    alias: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
        comment="URL slug, unique per language (case-insensitive)",
    )
    seo_data: Mapped[dict[str, Any] | None] = mapped_column(
        JSONB,
        nullable=True,
    )

    page: Mapped["Page"] = relationship(
        "Page",
        back_populates="translations",
    )

    def to_dict(self) -> dict:
        """Convert translation to dictionary for API responses."""
        return {
            "id": str(self.id),
            "page_id": str(self.page_id),
            "language": self.language,
            "alias": self.alias,
            "seo_data": self.seo_data,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self) -> str:
        return f"<PageTranslation(page_id={self.page_id}, language='{self.language}', alias='{self.alias}')>"
