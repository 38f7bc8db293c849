"""Pure helpers that derive summary fields from raw match values."""

from datetime import datetime, timezone
from typing import Optional

from app.core.riot_api.constants import DEFAULT_GAME_MODE_LABEL, GAME_MODE_LABELS

UNKNOWN_PLAYER = "Unknown Player"
UNKNOWN_TAGLINE = "Unknown Tagline"
UNKNOWN_POSITION = "Unknown"

# Stand-in for matches without a start timestamp; not a real game date
UNSET_GAME_DATE = datetime.min


def pick(primary: Optional[str], secondary: Optional[str], default: str) -> str:
    """Return the first non-empty of ``primary`` and ``secondary``, else ``default``.

    Example:
        >>> pick("", "LegacyName", "Unknown Player")
        'LegacyName'
    """
    if primary:
        return primary
    if secondary:
        return secondary
    return default


def calculate_kda_ratio(kills: int, deaths: int, assists: int) -> float:
    """(kills + assists) / deaths rounded to 2 places; kills + assists when deathless."""
    if deaths > 0:
        return round((kills + assists) / deaths, 2)
    return float(kills + assists)


def format_ratio(ratio: float) -> str:
    """Drop the decimal part of whole ratios (``7.0`` -> ``"7"``)."""
    if ratio == int(ratio):
        return str(int(ratio))
    return str(ratio)


def format_kda(kills: int, deaths: int, assists: int) -> str:
    """
    Format the KDA line shown in the client.

    Example:
        >>> format_kda(10, 2, 5)
        '10/2/5 (7.5:1 KDA)'
    """
    ratio = calculate_kda_ratio(kills, deaths, assists)
    return f"{kills}/{deaths}/{assists} ({format_ratio(ratio)}:1 KDA)"


def game_mode_label(queue_id: Optional[int]) -> str:
    """Client label for a queue id; unmapped or missing ids are custom games."""
    if queue_id is None:
        return DEFAULT_GAME_MODE_LABEL
    for queue_type, label in GAME_MODE_LABELS.items():
        if queue_type.value == queue_id:
            return label
    return DEFAULT_GAME_MODE_LABEL


def duration_minutes(duration_seconds: Optional[int]) -> int:
    """Whole minutes using round-half-to-even, 0 when the duration is missing."""
    if duration_seconds is None:
        return 0
    return round(duration_seconds / 60)


def game_start_datetime(start_timestamp_ms: Optional[int]) -> datetime:
    """Naive UTC datetime from epoch milliseconds.

    ``UNSET_GAME_DATE`` when the timestamp is missing or outside the range a
    ``datetime`` can represent.
    """
    if start_timestamp_ms is None:
        return UNSET_GAME_DATE
    try:
        moment = datetime.fromtimestamp(start_timestamp_ms / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return UNSET_GAME_DATE
    return moment.replace(tzinfo=None)
