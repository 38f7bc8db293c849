"""Dependencies for the matches feature."""

from typing import Annotated

from fastapi import Depends

from app.core.dependencies import RiotClientDep
from app.features.game_data.dependencies import GameDataServiceDep

from .assembler import MatchSummaryAssembler
from .service import MatchService


def get_match_summary_assembler(
    game_data: GameDataServiceDep,
) -> MatchSummaryAssembler:
    """Get a match summary assembler backed by the shared catalog.

    :param game_data: Static game data catalog
    :returns: Assembler resolving icons through ``game_data``
    """
    return MatchSummaryAssembler(game_data)


async def get_match_service(
    riot_client: RiotClientDep,
    assembler: Annotated[MatchSummaryAssembler, Depends(get_match_summary_assembler)],
) -> MatchService:
    """Get match service instance.

    :param riot_client: Request-scoped Riot API client
    :param assembler: Match summary assembler
    :returns: Match service
    """
    return MatchService(riot_client, assembler)


MatchServiceDep = Annotated[MatchService, Depends(get_match_service)]

__all__ = ["get_match_summary_assembler", "get_match_service", "MatchServiceDep"]
