"""Pydantic schemas for ranked standing and champion mastery."""

from pydantic import BaseModel, ConfigDict, Field


class RankedInfoResponse(BaseModel):
    """A player's standing in one ranked queue."""

    queue_type: str = Field(..., alias="queueType", description="e.g. RANKED_SOLO_5x5")
    tier: str = Field("", alias="tier")
    rank: str = Field("", alias="rank")
    league_points: int = Field(0, alias="leaguePoints")
    wins: int = Field(0, ge=0, alias="wins")
    losses: int = Field(0, ge=0, alias="losses")
    hot_streak: bool = Field(False, alias="hotStreak")
    veteran: bool = Field(False, alias="veteran")
    fresh_blood: bool = Field(False, alias="freshBlood")
    inactive: bool = Field(False, alias="inactive")

    model_config = ConfigDict(populate_by_name=True)


class MasteryInfoResponse(BaseModel):
    """Champion mastery entry with the champion's name and icon resolved."""

    puuid: str = Field("", alias="puuid")
    champion_id: int = Field(..., alias="championId")
    champion_level: int = Field(0, alias="championLevel")
    champion_points: int = Field(0, alias="championPoints")
    last_play_time: int = Field(0, alias="lastPlayTime", description="Epoch millis")
    champion_points_since_last_level: int = Field(
        0, alias="championPointsSinceLastLevel"
    )
    champion_points_until_next_level: int = Field(
        0, alias="championPointsUntilNextLevel"
    )
    chest_granted: bool = Field(False, alias="chestGranted")
    tokens_earned: int = Field(0, alias="tokensEarned")
    champion_name: str = Field("Unknown", alias="championName")
    champion_icon_url: str = Field("", alias="championIconUrl")

    model_config = ConfigDict(populate_by_name=True)
