"""
FastAPI Dependencies for pagecms.

Database sessions, editor authentication, request language and the
service objects used by the CMS routers.
"""

from functools import lru_cache
from typing import Annotated, Any, AsyncGenerator

from fastapi import Depends, HTTPException, Query, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pagecms.core.config import get_settings
from pagecms.core.database import get_db
from pagecms.models.user import User, UserRole
from pagecms.services.content_notifier import ContentUpdateManager
from pagecms.services.language_service import LanguageService
from pagecms.services.page_service import PageService
from pagecms.services.section_policy import SectionPolicy
from pagecms.services.section_registry import SectionSchemaRegistry, build_default_registry
from pagecms.services.section_service import SectionService
from pagecms.services.section_validator import SectionContentValidator

# Security scheme for API documentation
security = HTTPBearer(auto_error=False)

EDITOR_ROLES = (UserRole.ADMIN.value, UserRole.AUTHOR.value)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for getting database sessions."""
    async for session in get_db():
        yield session


DbSession = Annotated[AsyncSession, Depends(get_db_session)]


# ============== Process-wide components ==============


@lru_cache
def get_section_registry() -> SectionSchemaRegistry:
    return build_default_registry()


@lru_cache
def get_section_policy() -> SectionPolicy:
    return SectionPolicy(SectionContentValidator(get_section_registry()))


@lru_cache
def get_update_manager() -> ContentUpdateManager:
    return ContentUpdateManager()


@lru_cache
def get_language_service() -> LanguageService:
    return LanguageService()


Registry = Annotated[SectionSchemaRegistry, Depends(get_section_registry)]
Policy = Annotated[SectionPolicy, Depends(get_section_policy)]
UpdateManager = Annotated[ContentUpdateManager, Depends(get_update_manager)]
Languages = Annotated[LanguageService, Depends(get_language_service)]


# ============== Authentication ==============


def decode_token(token: str) -> dict[str, Any]:
    """
    Decode and verify a JWT bearer token.

    Raises:
        HTTPException: If the token is invalid or expired
    """
    settings = get_settings()
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_current_user(
    session: DbSession,
    authorization: Annotated[HTTPAuthorizationCredentials | None, Depends(security)] = None,
) -> User:
    """
    Get the user identified by the bearer token.

    Raises:
        HTTPException: If authentication fails
    """
    if not authorization or not authorization.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_token(authorization.credentials)
    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
        )

    result = await session.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )
    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is disabled",
        )
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


async def require_editor(user: CurrentUser) -> User:
    """Require an ADMIN or AUTHOR user."""
    if user.role not in EDITOR_ROLES:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Editor access required",
        )
    return user


EditorUser = Annotated[User, Depends(require_editor)]


# ============== Request language ==============


async def get_request_language(
    request: Request,
    languages: Languages,
    lang: Annotated[str | None, Query(description="Language code, e.g. 'en'")] = None,
) -> str:
    """Query parameter first, then Accept-Language, then the default language."""
    return languages.resolve(lang, request.headers.get("accept-language"))


RequestLanguage = Annotated[str, Depends(get_request_language)]


# ============== Services ==============


async def get_page_service(session: DbSession, languages: Languages, policy: Policy) -> PageService:
    return PageService(session, languages, policy)


async def get_section_service(
    session: DbSession,
    languages: Languages,
    policy: Policy,
    update_manager: UpdateManager,
) -> SectionService:
    return SectionService(session, policy, update_manager, languages)


PageServiceDep = Annotated[PageService, Depends(get_page_service)]
SectionServiceDep = Annotated[SectionService, Depends(get_section_service)]
