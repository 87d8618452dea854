"""
Rate limiting configuration using SlowAPI.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from symptom_engine.config import get_settings


def _get_rate_limit_key(request: Request) -> str:
    """
    Get rate limit key based on API key or IP address.

    This allows rate limiting per API key when authenticated.
    """
    api_key = request.headers.get("X-API-Key")
    if api_key:
        return f"api_key:{api_key[:8]}..."

    return get_remote_address(request)


def get_rate_limit_string() -> str:
    """Get the rate limit string from settings."""
    settings = get_settings()
    return f"{settings.RATE_LIMIT_REQUESTS}/{settings.RATE_LIMIT_WINDOW} seconds"


limiter = Limiter(
    key_func=_get_rate_limit_key,
    default_limits=[get_rate_limit_string()]
)
