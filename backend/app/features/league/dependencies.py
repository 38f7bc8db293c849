"""Dependencies for the league feature."""

from typing import Annotated

from fastapi import Depends

from app.core.dependencies import RiotClientDep
from app.features.game_data.dependencies import GameDataServiceDep

from .service import LeagueService


async def get_league_service(
    riot_client: RiotClientDep,
    game_data: GameDataServiceDep,
) -> LeagueService:
    """Get league service instance."""
    return LeagueService(riot_client, game_data)


LeagueServiceDep = Annotated[LeagueService, Depends(get_league_service)]

__all__ = ["get_league_service", "LeagueServiceDep"]
