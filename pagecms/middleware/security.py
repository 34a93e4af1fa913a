"""
Security Middleware for pagecms.

Implements rate limiting, request logging and security headers.
"""

import logging
import time
from collections.abc import Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.middleware.base import BaseHTTPMiddleware

from pagecms.core.config import get_settings

logger = logging.getLogger(__name__)

# ============== Rate Limiting ==============

limiter = Limiter(key_func=get_remote_address)


# ============== Request Logging ==============


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of every request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms:.1f} ms)"
        )
        return response


# ============== Security Headers ==============


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Security Headers Middleware.

    Adds HSTS, X-Frame-Options, X-Content-Type-Options and
    Referrer-Policy to all responses.
    """

    def __init__(
        self,
        app: FastAPI,
        hsts_max_age: int = 31536000,  # 1 year
        hsts_include_subdomains: bool = True,
    ):
        super().__init__(app)
        self.hsts_max_age = hsts_max_age
        self.hsts_include_subdomains = hsts_include_subdomains

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        hsts_value = f"max-age={self.hsts_max_age}"
        if self.hsts_include_subdomains:
            hsts_value += "; includeSubDomains"
        response.headers["Strict-Transport-Security"] = hsts_value
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        return response


# ============== Rate Limit Exception Handler ==============


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Custom handler for rate limit exceeded errors."""
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={
            "detail": "Rate limit exceeded. Please try again later.",
            "retry_after": exc.description if hasattr(exc, "description") else None,
        },
        headers={"Retry-After": str(exc.description) if hasattr(exc, "description") else "60"},
    )


# ============== Setup Function ==============


def setup_security_middleware(app: FastAPI) -> None:
    """
    Setup all security middleware for the FastAPI application.

    Call after creating the app and before adding routes.
    """
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # First added is innermost
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)


# ============== Decorators for Rate Limiting ==============


def rate_limit_write() -> Callable:
    """Rate limit decorator for content writes (configured requests per window)."""
    settings = get_settings()
    return limiter.limit(f"{settings.rate_limit_requests} per {settings.rate_limit_window} seconds")
