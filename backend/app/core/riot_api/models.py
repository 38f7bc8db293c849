"""Pydantic models for Riot API response data.

Only the fields consumed by this service are declared; everything is
optional with an explicit default so a sparse document still decodes.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AccountDTO(BaseModel):
    """Riot Account information."""

    puuid: Optional[str] = None
    game_name: Optional[str] = Field(None, alias="gameName")
    tag_line: Optional[str] = Field(None, alias="tagLine")

    model_config = ConfigDict(populate_by_name=True)


class SummonerDTO(BaseModel):
    """League of Legends Summoner information."""

    id: Optional[str] = None
    puuid: Optional[str] = None
    name: Optional[str] = None
    profile_icon_id: int = Field(0, alias="profileIconId")
    summoner_level: int = Field(0, alias="summonerLevel")

    model_config = ConfigDict(populate_by_name=True)


class ParticipantDTO(BaseModel):
    """Match participant information."""

    puuid: Optional[str] = None

    # Display name sources, Riot ID first then legacy summoner fields
    riot_id_game_name: Optional[str] = Field(None, alias="riotIdGameName")
    summoner_name: Optional[str] = Field(None, alias="summonerName")
    riot_id_tagline: Optional[str] = Field(None, alias="riotIdTagline")
    summoner_tagline: Optional[str] = Field(None, alias="summonerTagline")

    champion_id: int = Field(0, alias="championId")
    champion_name: Optional[str] = Field(None, alias="championName")
    kills: int = Field(0, ge=0)
    deaths: int = Field(0, ge=0)
    assists: int = Field(0, ge=0)
    team_id: int = Field(0, alias="teamId")
    team_position: Optional[str] = Field(None, alias="teamPosition")
    total_minions_killed: int = Field(0, ge=0, alias="totalMinionsKilled")
    neutral_minions_killed: int = Field(0, ge=0, alias="neutralMinionsKilled")
    vision_score: int = Field(0, alias="visionScore")
    win: bool = False

    summoner1_id: int = Field(0, alias="summoner1Id")
    summoner2_id: int = Field(0, alias="summoner2Id")

    item0: int = 0
    item1: int = 0
    item2: int = 0
    item3: int = 0
    item4: int = 0
    item5: int = 0
    item6: int = 0  # trinket slot

    # Arena only
    player_augment1: Optional[int] = Field(None, alias="playerAugment1")
    player_augment2: Optional[int] = Field(None, alias="playerAugment2")
    player_augment3: Optional[int] = Field(None, alias="playerAugment3")
    player_augment4: Optional[int] = Field(None, alias="playerAugment4")
    subteam_placement: int = Field(0, alias="subteamPlacement")

    @property
    def items(self) -> List[int]:
        """Item ids in slot order 0-6."""
        return [
            self.item0,
            self.item1,
            self.item2,
            self.item3,
            self.item4,
            self.item5,
            self.item6,
        ]

    @property
    def augments(self) -> List[int]:
        """Augment ids that are actually set, in slot order."""
        slots = [
            self.player_augment1,
            self.player_augment2,
            self.player_augment3,
            self.player_augment4,
        ]
        return [augment for augment in slots if augment]

    model_config = ConfigDict(populate_by_name=True)


class MatchInfoDTO(BaseModel):
    """Match information."""

    game_start_timestamp: Optional[int] = Field(None, alias="gameStartTimestamp")
    game_duration: Optional[int] = Field(None, ge=0, alias="gameDuration")
    queue_id: Optional[int] = Field(None, alias="queueId")
    game_version: Optional[str] = Field(None, alias="gameVersion")
    participants: List[ParticipantDTO] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class MatchMetadataDTO(BaseModel):
    """Match metadata."""

    match_id: Optional[str] = Field(None, alias="matchId")
    participants: List[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class MatchDTO(BaseModel):
    """Complete match data."""

    metadata: Optional[MatchMetadataDTO] = None
    info: Optional[MatchInfoDTO] = None

    @property
    def match_id(self) -> Optional[str]:
        """Get match ID from metadata."""
        return self.metadata.match_id if self.metadata else None

    model_config = ConfigDict(populate_by_name=True)


class LeagueEntryDTO(BaseModel):
    """League entry information."""

    queue_type: str = Field("", alias="queueType")
    tier: str = ""
    rank: str = ""
    league_points: int = Field(0, alias="leaguePoints")
    wins: int = 0
    losses: int = 0
    hot_streak: bool = Field(False, alias="hotStreak")
    veteran: bool = False
    fresh_blood: bool = Field(False, alias="freshBlood")
    inactive: bool = False

    @property
    def win_rate(self) -> float:
        """Calculate win rate."""
        total_games = self.wins + self.losses
        if total_games == 0:
            return 0
        return (self.wins / total_games) * 100

    model_config = ConfigDict(populate_by_name=True)


class ChampionMasteryDTO(BaseModel):
    """Champion mastery entry."""

    puuid: str = ""
    champion_id: int = Field(0, alias="championId")
    champion_level: int = Field(0, alias="championLevel")
    champion_points: int = Field(0, alias="championPoints")
    last_play_time: int = Field(0, alias="lastPlayTime")
    champion_points_since_last_level: int = Field(
        0, alias="championPointsSinceLastLevel"
    )
    champion_points_until_next_level: int = Field(
        0, alias="championPointsUntilNextLevel"
    )
    chest_granted: bool = Field(False, alias="chestGranted")
    tokens_earned: int = Field(0, alias="tokensEarned")

    model_config = ConfigDict(populate_by_name=True)
