"""Rate limiting configuration for the application."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from .config import get_global_settings


def default_rate_limit() -> str:
    """Per-client limit applied to the public endpoints, e.g. ``60/minute``."""
    return get_global_settings().rate_limit


# key_func determines the key for rate limiting (client IP)
limiter = Limiter(key_func=get_remote_address)
