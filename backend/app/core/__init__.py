"""Core infrastructure module.

This module exports core utilities used across features.
Never imports from features - only from external libraries.
"""

from .config import Settings, get_settings, get_global_settings
from .exceptions import (
    ServiceException,
    ValidationError,
    NotFoundError,
    ExternalServiceError,
)
from .validation import (
    validate_pagination,
    validate_puuid,
    validate_riot_id,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "get_global_settings",
    # Exceptions
    "ServiceException",
    "ValidationError",
    "NotFoundError",
    "ExternalServiceError",
    # Validation
    "validate_pagination",
    "validate_puuid",
    "validate_riot_id",
]
