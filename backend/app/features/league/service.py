"""Ranked standing and champion mastery lookups."""

from typing import List

import structlog
from pydantic import TypeAdapter

from app.core.riot_api.client import RiotAPIClient
from app.core.riot_api.models import ChampionMasteryDTO, LeagueEntryDTO
from app.features.game_data.service import GameDataService

from .schemas import MasteryInfoResponse, RankedInfoResponse

logger = structlog.get_logger(__name__)

_league_entries = TypeAdapter(List[LeagueEntryDTO])
_masteries = TypeAdapter(List[ChampionMasteryDTO])


class LeagueService:
    """Reads league entries and champion masteries for a player."""

    def __init__(self, riot_client: RiotAPIClient, game_data: GameDataService):
        self.riot_client = riot_client
        self.game_data = game_data

    async def get_ranked_info(self, puuid: str) -> List[RankedInfoResponse]:
        """Ranked entries for every queue the player is placed in; may be empty."""
        raw_entries = await self.riot_client.fetch_league_entries_by_puuid(puuid)
        if not raw_entries or not raw_entries.strip():
            return []

        entries = _league_entries.validate_json(raw_entries)
        return [
            RankedInfoResponse(
                queue_type=entry.queue_type,
                tier=entry.tier,
                rank=entry.rank,
                league_points=entry.league_points,
                wins=entry.wins,
                losses=entry.losses,
                hot_streak=entry.hot_streak,
                veteran=entry.veteran,
                fresh_blood=entry.fresh_blood,
                inactive=entry.inactive,
            )
            for entry in entries
        ]

    async def get_mastery_info(self, puuid: str) -> List[MasteryInfoResponse]:
        """
        Champion masteries, each with champion name and icon from the catalog.

        The catalog version is resolved once for the whole list.
        """
        raw_masteries = await self.riot_client.fetch_masteries_by_puuid(puuid)
        if not raw_masteries or not raw_masteries.strip():
            return []

        masteries = _masteries.validate_json(raw_masteries)
        if not masteries:
            return []

        version = await self.game_data.get_current_version()
        results: List[MasteryInfoResponse] = []
        for mastery in masteries:
            name, icon_url = await self.game_data.get_champion_display(
                mastery.champion_id, version
            )
            results.append(
                MasteryInfoResponse(
                    puuid=mastery.puuid,
                    champion_id=mastery.champion_id,
                    champion_level=mastery.champion_level,
                    champion_points=mastery.champion_points,
                    last_play_time=mastery.last_play_time,
                    champion_points_since_last_level=mastery.champion_points_since_last_level,
                    champion_points_until_next_level=mastery.champion_points_until_next_level,
                    chest_granted=mastery.chest_granted,
                    tokens_earned=mastery.tokens_earned,
                    champion_name=name,
                    champion_icon_url=icon_url,
                )
            )

        logger.debug(
            "Mastery entries resolved", puuid=puuid, count=len(results), version=version
        )
        return results
