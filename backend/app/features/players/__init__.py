"""Players feature module.

Summoner profile lookup by Riot ID.
"""

from .router import router as players_router
from .service import PlayerService
from .schemas import SummonerResponse
from .dependencies import get_player_service, PlayerServiceDep

__all__ = [
    "players_router",
    "PlayerService",
    "SummonerResponse",
    "get_player_service",
    "PlayerServiceDep",
]
