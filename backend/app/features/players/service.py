"""Summoner profile lookup.

A Riot ID resolves to an account (and its PUUID) on the regional host; the
summoner record itself lives on the platform host.
"""

import structlog

from app.core.exceptions import NotFoundError
from app.core.riot_api.client import RiotAPIClient
from app.core.riot_api.constants import PLATFORM_LABELS, Platform
from app.core.riot_api.models import AccountDTO, SummonerDTO
from app.features.game_data.service import GameDataService

from .schemas import SummonerResponse

logger = structlog.get_logger(__name__)


def platform_label(platform: Platform | str) -> str:
    """Short display label for a platform (``euw1`` -> ``EUW``)."""
    try:
        return PLATFORM_LABELS[Platform(platform)]
    except (KeyError, ValueError):
        return str(platform).upper()


class PlayerService:
    """Builds summoner profiles from the account and summoner endpoints."""

    def __init__(self, riot_client: RiotAPIClient, game_data: GameDataService):
        self.riot_client = riot_client
        self.game_data = game_data

    async def get_summoner(self, game_name: str, tag_line: str) -> SummonerResponse:
        """
        Look up a summoner profile by Riot ID.

        :param game_name: Riot ID name part
        :param tag_line: Riot ID tag part
        :returns: Profile with level, platform label and profile icon URL
        :raises NotFoundError: If the account has no PUUID
        """
        raw_account = await self.riot_client.fetch_account_by_riot_id(
            game_name, tag_line
        )
        account = AccountDTO.model_validate_json(raw_account)
        if not account.puuid:
            raise NotFoundError(
                "Summoner not found.",
                service="PlayerService",
                operation="get_summoner",
                context={"game_name": game_name, "tag_line": tag_line},
            )

        raw_summoner = await self.riot_client.fetch_summoner_by_puuid(account.puuid)
        summoner = SummonerDTO.model_validate_json(raw_summoner)
        profile_icon_url = await self.game_data.get_profile_icon_url(
            summoner.profile_icon_id
        )

        logger.debug(
            "Summoner profile resolved",
            puuid=account.puuid,
            level=summoner.summoner_level,
            profile_icon_id=summoner.profile_icon_id,
        )
        return SummonerResponse(
            summoner_name=account.game_name or game_name,
            tagline=tag_line,
            puuid=account.puuid,
            level=summoner.summoner_level,
            region=platform_label(self.riot_client.platform),
            profile_icon_url=profile_icon_url,
        )
