"""
pagecms Models Package

All SQLAlchemy models for pagecms.
"""

from pagecms.models.base import Base
from pagecms.models.blog import (
    BlogCategory,
    BlogCategoryTranslation,
    BlogPost,
    BlogPostTranslation,
    BlogStatus,
    Comment,
    CommentStatus,
)
from pagecms.models.page import Page, PageTranslation, PageType
from pagecms.models.section import Section, SectionTranslation, SectionType
from pagecms.models.user import User, UserRole

__all__ = [
    # Base
    "Base",
    # Users
    "User",
    "UserRole",
    # Pages
    "Page",
    "PageTranslation",
    "PageType",
    # Sections
    "Section",
    "SectionTranslation",
    "SectionType",
    # Blog
    "BlogCategory",
    "BlogCategoryTranslation",
    "BlogPost",
    "BlogPostTranslation",
    "BlogStatus",
    "Comment",
    "CommentStatus",
]
