"""
Riot API client package for League of Legends API integration.

This package provides the HTTP client for the account, summoner, match,
league and champion-mastery endpoints, plus the DTOs used to decode them.
"""

from .client import RiotAPIClient
from .errors import (
    RiotAPIError,
    RateLimitError,
    AuthenticationError,
    ForbiddenError,
    NotFoundError,
    BadRequestError,
    ServiceUnavailableError,
)
from .models import (
    AccountDTO,
    SummonerDTO,
    MatchDTO,
    ParticipantDTO,
    LeagueEntryDTO,
    ChampionMasteryDTO,
)
from .endpoints import RiotAPIEndpoints

__all__ = [
    "RiotAPIClient",
    "RiotAPIError",
    "RateLimitError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "BadRequestError",
    "ServiceUnavailableError",
    "AccountDTO",
    "SummonerDTO",
    "MatchDTO",
    "ParticipantDTO",
    "LeagueEntryDTO",
    "ChampionMasteryDTO",
    "RiotAPIEndpoints",
]
