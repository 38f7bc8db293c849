"""Pydantic schemas for match summaries sent to the web client.

Field aliases are the client's wire names and must not change.
"""

from datetime import datetime
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class PlayerPerformance(BaseModel):
    """One participant's line in a match summary."""

    summoner_name: str = Field(..., alias="summonerName")
    tagline: str = Field(..., alias="tagline")
    champion_name: str = Field(..., alias="championName")
    champion_image_url: str = Field(..., alias="championImageUrl")
    kills: int = Field(0, ge=0)
    deaths: int = Field(0, ge=0)
    assists: int = Field(0, ge=0)
    cs: int = Field(0, ge=0, alias="cs", description="Lane plus jungle minions")
    vision_score: int = Field(0, alias="visionScore")
    kda: str = Field(..., alias="kda", description='e.g. "10/2/5 (7.5:1 KDA)"')
    player_augments: List[int] = Field(
        default_factory=list,
        alias="playerAugments",
        description="Arena augment ids, empty in other modes",
    )
    team_id: int = Field(0, alias="teamId")
    team_position: str = Field("", alias="teamPosition")
    subteam_placement: int = Field(
        0, alias="subteamPlacement", description="Arena duo placement, 0 elsewhere"
    )
    is_main_player: bool = Field(False, alias="isMainPlayer")

    summoner1_id: int = Field(0, alias="summoner1Id")
    summoner2_id: int = Field(0, alias="summoner2Id")
    summoner1_image_url: str = Field("", alias="summoner1ImageUrl")
    summoner2_image_url: str = Field("", alias="summoner2ImageUrl")

    item0: int = Field(0, alias="item0")
    item1: int = Field(0, alias="item1")
    item2: int = Field(0, alias="item2")
    item3: int = Field(0, alias="item3")
    item4: int = Field(0, alias="item4")
    item5: int = Field(0, alias="item5")
    item6: int = Field(0, alias="item6")

    item0_image_url: str = Field("", alias="item0ImageUrl")
    item1_image_url: str = Field("", alias="item1ImageUrl")
    item2_image_url: str = Field("", alias="item2ImageUrl")
    item3_image_url: str = Field("", alias="item3ImageUrl")
    item4_image_url: str = Field("", alias="item4ImageUrl")
    item5_image_url: str = Field("", alias="item5ImageUrl")
    item6_image_url: str = Field("", alias="item6ImageUrl")

    model_config = ConfigDict(populate_by_name=True)


class MatchSummary(BaseModel):
    """A single match seen from the requested player's perspective."""

    match_id: str = Field(..., alias="matchId")
    game_mode: str = Field(..., alias="gameMode")
    game_date: datetime = Field(
        ...,
        alias="gameDate",
        description="UTC start time; datetime.min when the match has no start timestamp",
    )
    game_duration_minutes: int = Field(0, ge=0, alias="gameDurationMinutes")
    victory: bool = Field(False, alias="victory")
    main_player: PlayerPerformance = Field(..., alias="mainPlayer")
    all_players: List[PlayerPerformance] = Field(
        default_factory=list,
        alias="allPlayers",
        description="Every participant in document order",
    )

    model_config = ConfigDict(populate_by_name=True)


class MatchHistoryStatus(str, Enum):
    """Outcome of building a player's match history."""

    OK = "ok"
    PLAYER_NOT_FOUND = "player_not_found"
    NO_MATCHES = "no_matches"
    NO_PARSABLE_MATCHES = "no_parsable_matches"


class MatchHistoryResult(BaseModel):
    """Summaries for a player plus the ids that could not be summarized."""

    status: MatchHistoryStatus
    puuid: str | None = None
    summaries: List[MatchSummary] = Field(default_factory=list)
    skipped_match_ids: List[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == MatchHistoryStatus.OK
