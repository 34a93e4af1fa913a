"""
Language Service for pagecms.

Supported language codes, validation and request language detection.
"""

import logging

from pagecms.core.config import get_settings
from pagecms.services.exceptions import UnsupportedLanguageError

logger = logging.getLogger(__name__)


class LanguageService:
    """Supported languages with a single fallback language."""

    def __init__(self, supported: list[str] | None = None, default: str | None = None):
        settings = get_settings()
        self._supported = list(supported or settings.supported_languages)
        self._default = default or settings.default_language

    def supported_languages(self) -> list[str]:
        return list(self._supported)

    def default_language(self) -> str:
        return self._default

    def is_valid_language(self, code: str | None) -> bool:
        return code in self._supported

    def require(self, code: str) -> str:
        """Return `code` if supported, else raise UnsupportedLanguageError."""
        if not self.is_valid_language(code):
            raise UnsupportedLanguageError(code)
        return code

    @staticmethod
    def parse_accept_language(header: str) -> list[str]:
        """
        Primary language tags from an Accept-Language header, best first.

        "it-IT,it;q=0.9,en;q=0.8" -> ["it", "it", "en"]
        """
        weighted = []
        for position, part in enumerate(header.split(",")):
            tag, _, params = part.strip().partition(";")
            tag = tag.strip().split("-")[0].lower()
            if not tag or tag == "*":
                continue
            quality = 1.0
            params = params.strip()
            if params.startswith("q="):
                try:
                    quality = float(params[2:])
                except ValueError:
                    continue
            if quality > 0:
                weighted.append((-quality, position, tag))
        return [tag for _, _, tag in sorted(weighted)]

    def resolve(self, requested: str | None = None, accept_language: str | None = None) -> str:
        """
        Pick the request language.

        Priority: explicit query parameter, then Accept-Language header,
        then the default language. Unsupported values are skipped.
        """
        if self.is_valid_language(requested):
            return requested
        if accept_language:
            for tag in self.parse_accept_language(accept_language):
                if self.is_valid_language(tag):
                    return tag
        if requested:
            logger.debug(f"Ignoring unsupported language '{requested}'")
        return self._default
