"""
Service-level errors for pagecms.

Each error carries a message and the HTTP status the API layer should
answer with.
"""

from fastapi import status


class ContentServiceError(Exception):
    """Base error raised by page and section services."""

    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(ContentServiceError):
    def __init__(self, message: str):
        super().__init__(message, status.HTTP_404_NOT_FOUND)


class UnsupportedLanguageError(ContentServiceError):
    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Unsupported language: {language}")


class AliasError(ContentServiceError):
    """Alias is empty, too long or has no usable characters."""


class AliasConflictError(ContentServiceError):
    def __init__(self, alias: str):
        self.alias = alias
        super().__init__(
            f'Page alias "{alias}" already exists. Each page must have a unique alias.',
            status.HTTP_409_CONFLICT,
        )
