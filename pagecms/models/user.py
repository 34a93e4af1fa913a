"""
User model for pagecms.

Users are CMS staff: administrators and blog authors.
"""

from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pagecms.models.base import Base

if TYPE_CHECKING:
    from pagecms.models.blog import BlogPost


class UserRole(str, Enum):
    """User role enumeration."""

    ADMIN = "ADMIN"
    AUTHOR = "AUTHOR"


class User(Base):
    """CMS user."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    role: Mapped[str] = mapped_column(
        String(20),
        default=UserRole.AUTHOR.value,
        nullable=False,
        comment="ADMIN or AUTHOR",
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
    )

    posts: Mapped[list["BlogPost"]] = relationship(
        "BlogPost",
        back_populates="author",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
