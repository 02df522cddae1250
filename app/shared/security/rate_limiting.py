"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client default limit on every catalog
endpoint (applied globally by SlowAPIMiddleware).
Protects against denial-of-service and resource abuse.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import settings


def build_limiter(default_limit: str, enabled: bool = True) -> Limiter:
    """Create a limiter keyed on the client address.

    Args:
        default_limit: slowapi limit string, e.g. ``"60/minute"``.
        enabled: When False every request is let through.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[default_limit],
        enabled=enabled,
    )


limiter = build_limiter(settings.rate_limit_default, settings.rate_limit_enabled)


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
