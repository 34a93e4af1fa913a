"""
Blog models for pagecms.

Categories and posts carry per-language translations; comments belong to
a post and may reply to another comment.
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

from sqlalchemy import DateTime, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pagecms.models.base import Base

if TYPE_CHECKING:
    from pagecms.models.user import User


class BlogStatus(str, Enum):
    """Blog post status."""

    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"


class CommentStatus(str, Enum):
    """Comment moderation status."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class BlogCategory(Base):
    """Blog category."""

    __tablename__ = "blog_categories"

    translations: Mapped[list["BlogCategoryTranslation"]] = relationship(
        "BlogCategoryTranslation",
        back_populates="category",
        cascade="all, delete-orphan",
    )
    posts: Mapped[list["BlogPost"]] = relationship(
        "BlogPost",
        back_populates="category",
    )


class BlogCategoryTranslation(Base):
    """Per-language name and alias of a category."""

    __tablename__ = "blog_category_translations"
    __table_args__ = (
        UniqueConstraint("category_id", "language", name="uq_blog_category_translation_language"),
        UniqueConstraint("alias", "language", name="uq_blog_category_alias_language"),
    )

    category_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("blog_categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    language: Mapped[str] = mapped_column(String(2), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    alias: Mapped[str] = mapped_column(String(100), nullable=False)

    category: Mapped["BlogCategory"] = relationship(
        "BlogCategory",
        back_populates="translations",
    )


class BlogPost(Base):
    """Blog post."""

    __tablename__ = "blog_posts"

    category_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("blog_categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    author_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    status: Mapped[str] = mapped_column(
        String(20),
        default=BlogStatus.DRAFT.value,
        nullable=False,
        comment="DRAFT or PUBLISHED",
    )
    published_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    featured_image: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
    )

    category: Mapped["BlogCategory | None"] = relationship(
        "BlogCategory",
        back_populates="posts",
    )
    author: Mapped["User"] = relationship(
        "User",
        back_populates="posts",
    )
    translations: Mapped[list["BlogPostTranslation"]] = relationship(
        "BlogPostTranslation",
        back_populates="post",
        cascade="all, delete-orphan",
    )
    comments: Mapped[list["Comment"]] = relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
    )


class BlogPostTranslation(Base):
    """Per-language title, alias, body and SEO data of a post."""

    __tablename__ = "blog_post_translations"
    __table_args__ = (
        UniqueConstraint("post_id", "language", name="uq_blog_post_translation_language"),
        UniqueConstraint("alias", "language", name="uq_blog_post_alias_language"),
    )

    post_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("blog_posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    language: Mapped[str] = mapped_column(String(2), nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    alias: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    seo_data: Mapped[dict[str, Any] | None] = mapped_column(JSONB, nullable=True)

    post: Mapped["BlogPost"] = relationship(
        "BlogPost",
        back_populates="translations",
    )


class Comment(Base):
    """Comment on a blog post; `parent_id` links replies."""

    __tablename__ = "comments"

    post_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("blog_posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    parent_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    )
    author_name: Mapped[str] = mapped_column(String(100), nullable=False)
    author_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20),
        default=CommentStatus.PENDING.value,
        nullable=False,
        comment="PENDING, APPROVED or REJECTED",
    )

    post: Mapped["BlogPost"] = relationship(
        "BlogPost",
        back_populates="comments",
    )
    replies: Mapped[list["Comment"]] = relationship(
        "Comment",
        cascade="all, delete-orphan",
    )
