"""Validation helpers for request path and query parameters."""

import structlog

from .exceptions import ValidationError

logger = structlog.get_logger(__name__)

MAX_PAGINATION_COUNT = 100


def is_valid_summoner_name(summoner_name: str | None) -> bool:
    """Summoner names are 3-16 letters, digits, spaces or underscores."""
    if not summoner_name or not summoner_name.strip():
        return False
    if not 3 <= len(summoner_name) <= 16:
        return False
    return all(c.isalnum() or c in (" ", "_") for c in summoner_name)


def is_valid_tagline(tagline: str | None) -> bool:
    """Taglines are 2-10 alphanumeric characters."""
    if not tagline or not tagline.strip():
        return False
    if not 2 <= len(tagline) <= 10:
        return False
    return all(c.isalnum() for c in tagline)


def is_valid_puuid(puuid: str | None) -> bool:
    """PUUIDs are long strings of letters, digits, hyphens and underscores."""
    if not puuid or not puuid.strip():
        return False
    return len(puuid) > 50 and all(c.isalnum() or c in ("-", "_") for c in puuid)


def is_valid_pagination_start(start: int) -> bool:
    return start >= 0


def is_valid_pagination_count(count: int, max_count: int = MAX_PAGINATION_COUNT) -> bool:
    return 1 <= count <= max_count


def validate_pagination(
    start: int, count: int, max_count: int = MAX_PAGINATION_COUNT
) -> None:
    """
    Validate pagination parameters.

    :raises ValidationError: If start is negative or count is out of range
    """
    if not is_valid_pagination_start(start):
        raise ValidationError("Start index cannot be negative", field="start", value=start)
    if not is_valid_pagination_count(count, max_count):
        raise ValidationError(
            f"Count must be between 1 and {max_count}", field="count", value=count
        )


def validate_puuid(puuid: str) -> None:
    """
    Validate PUUID format.

    :raises ValidationError: If the PUUID is malformed
    """
    if not is_valid_puuid(puuid):
        logger.debug("Rejected malformed PUUID", puuid_length=len(puuid or ""))
        raise ValidationError("Invalid PUUID format", field="puuid")


def validate_riot_id(summoner_name: str, tagline: str) -> None:
    """
    Validate a Riot ID split into name and tagline.

    :raises ValidationError: If either part is malformed
    """
    if not is_valid_summoner_name(summoner_name):
        raise ValidationError(
            "Invalid summoner name format", field="summoner_name", value=summoner_name
        )
    if not is_valid_tagline(tagline):
        raise ValidationError("Invalid tagline format", field="tagline", value=tagline)


def sanitize_input(value: str | None) -> str:
    """Strip control characters and surrounding whitespace."""
    if not value or not value.strip():
        return ""
    return "".join(c for c in value if c.isprintable()).strip()
