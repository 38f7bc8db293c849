"""Dependencies for the players feature."""

from typing import Annotated

from fastapi import Depends

from app.core.dependencies import RiotClientDep
from app.features.game_data.dependencies import GameDataServiceDep

from .service import PlayerService


async def get_player_service(
    riot_client: RiotClientDep,
    game_data: GameDataServiceDep,
) -> PlayerService:
    """Get player service instance.

    :param riot_client: Request-scoped Riot API client
    :param game_data: Static game data catalog
    :returns: Player service
    """
    return PlayerService(riot_client, game_data)


PlayerServiceDep = Annotated[PlayerService, Depends(get_player_service)]

__all__ = ["get_player_service", "PlayerServiceDep"]
