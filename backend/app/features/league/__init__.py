"""League feature module.

Ranked standing per queue and champion mastery, the latter enriched with
champion names and icons from the static game data catalog.
"""

from .router import router as league_router
from .service import LeagueService
from .schemas import MasteryInfoResponse, RankedInfoResponse
from .dependencies import get_league_service, LeagueServiceDep

__all__ = [
    "league_router",
    "LeagueService",
    "MasteryInfoResponse",
    "RankedInfoResponse",
    "get_league_service",
    "LeagueServiceDep",
]
