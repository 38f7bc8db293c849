"""Matches feature module.

Builds per-player match summaries from Riot match documents, resolving
champion, spell and item icons through the static game data catalog.
"""

from .router import router as matches_router
from .assembler import MatchSummaryAssembler
from .service import MatchService
from .schemas import (
    MatchHistoryResult,
    MatchHistoryStatus,
    MatchSummary,
    PlayerPerformance,
)
from .dependencies import get_match_service, MatchServiceDep

__all__ = [
    # Router
    "matches_router",
    # Assembly
    "MatchSummaryAssembler",
    "MatchService",
    # Schemas
    "MatchHistoryResult",
    "MatchHistoryStatus",
    "MatchSummary",
    "PlayerPerformance",
    # Dependencies
    "get_match_service",
    "MatchServiceDep",
]
