"""Builds a match summary from a raw Riot match document.

The summary is centred on one player (the "main player") but carries a
performance line for every participant, with champion, spell and item
icons resolved through the static game data catalog.
"""

import asyncio
from typing import List, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError

from app.core.riot_api.models import MatchDTO, ParticipantDTO
from app.protocols import CatalogResolver
from .schemas import MatchSummary, PlayerPerformance
from .transformers import (
    UNKNOWN_PLAYER,
    UNKNOWN_POSITION,
    UNKNOWN_TAGLINE,
    duration_minutes,
    format_kda,
    game_mode_label,
    game_start_datetime,
    pick,
)

logger = structlog.get_logger(__name__)

UNKNOWN_MATCH_ID = "Unknown"
UNKNOWN_CHAMPION = "Unknown"


class MatchSummaryAssembler:
    """Turns raw match JSON plus a target PUUID into a ``MatchSummary``."""

    def __init__(self, catalog: CatalogResolver):
        """
        Initialize the assembler.

        :param catalog: Resolver used for champion, spell and item icon URLs
        """
        self.catalog = catalog

    @staticmethod
    def decode(raw_match: str) -> Optional[MatchDTO]:
        """Decode raw match JSON, returning None for empty or malformed input."""
        if not raw_match or not raw_match.strip():
            return None
        try:
            return MatchDTO.model_validate_json(raw_match)
        except PydanticValidationError as e:
            logger.warning(
                "Malformed match document", error_count=e.error_count()
            )
            return None

    async def assemble(self, raw_match: str, puuid: str) -> Optional[MatchSummary]:
        """
        Build the summary of ``raw_match`` for the player ``puuid``.

        :param raw_match: Match document as returned by the match-v5 API
        :param puuid: PUUID of the player the summary is about
        :returns: The summary, or None when the document is empty, malformed,
            has no participants, or does not include ``puuid``
        """
        match = self.decode(raw_match)
        if match is None or match.info is None or not match.info.participants:
            return None

        return await self.assemble_match(match, puuid)

    async def assemble_match(
        self, match: MatchDTO, puuid: str
    ) -> Optional[MatchSummary]:
        """Build the summary from an already decoded match."""
        info = match.info
        if info is None:
            return None

        participants = info.participants
        main_participant = next((p for p in participants if p.puuid == puuid), None)
        if main_participant is None:
            logger.debug(
                "Player not found in match",
                match_id=match.match_id,
                participant_count=len(participants),
            )
            return None

        version = await self.catalog.get_current_version()
        all_players: List[PlayerPerformance] = []
        for participant in participants:
            all_players.append(
                await self.build_performance(participant, puuid, version)
            )

        main_player = next((p for p in all_players if p.is_main_player), None)
        if main_player is None:
            return None

        return MatchSummary(
            match_id=match.match_id or UNKNOWN_MATCH_ID,
            game_mode=game_mode_label(info.queue_id),
            game_date=game_start_datetime(info.game_start_timestamp),
            game_duration_minutes=duration_minutes(info.game_duration),
            victory=main_participant.win,
            main_player=main_player,
            all_players=all_players,
        )

    async def build_performance(
        self, participant: ParticipantDTO, puuid: str, version: str
    ) -> PlayerPerformance:
        """Build one participant's performance line."""
        champion_name = participant.champion_name or UNKNOWN_CHAMPION
        items = participant.items

        # Independent catalog reads, issued together
        champion_url, spell1_url, spell2_url, *item_urls = await asyncio.gather(
            self.catalog.get_champion_icon_url_by_key(champion_name, version),
            self.catalog.get_summoner_spell_icon_url(participant.summoner1_id),
            self.catalog.get_summoner_spell_icon_url(participant.summoner2_id),
            *(self.catalog.get_item_icon_url(item_id) for item_id in items),
        )

        return PlayerPerformance(
            summoner_name=pick(
                participant.riot_id_game_name, participant.summoner_name, UNKNOWN_PLAYER
            ),
            tagline=pick(
                participant.riot_id_tagline,
                participant.summoner_tagline,
                UNKNOWN_TAGLINE,
            ),
            champion_name=champion_name,
            champion_image_url=champion_url,
            kills=participant.kills,
            deaths=participant.deaths,
            assists=participant.assists,
            cs=max(
                participant.total_minions_killed + participant.neutral_minions_killed, 0
            ),
            vision_score=participant.vision_score,
            kda=format_kda(participant.kills, participant.deaths, participant.assists),
            player_augments=participant.augments,
            team_id=participant.team_id,
            team_position=(
                participant.team_position
                if participant.team_position is not None
                else UNKNOWN_POSITION
            ),
            subteam_placement=participant.subteam_placement,
            is_main_player=participant.puuid == puuid,
            summoner1_id=participant.summoner1_id,
            summoner2_id=participant.summoner2_id,
            summoner1_image_url=spell1_url,
            summoner2_image_url=spell2_url,
            item0=items[0],
            item1=items[1],
            item2=items[2],
            item3=items[3],
            item4=items[4],
            item5=items[5],
            item6=items[6],
            item0_image_url=item_urls[0],
            item1_image_url=item_urls[1],
            item2_image_url=item_urls[2],
            item3_image_url=item_urls[3],
            item4_image_url=item_urls[4],
            item5_image_url=item_urls[5],
            item6_image_url=item_urls[6],
        )
