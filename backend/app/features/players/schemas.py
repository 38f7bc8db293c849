"""Pydantic schemas for summoner profiles."""

from pydantic import BaseModel, ConfigDict, Field


class SummonerResponse(BaseModel):
    """Summoner profile shown at the top of the player page."""

    summoner_name: str = Field(..., alias="summonerName")
    tagline: str = Field(..., alias="tagline")
    puuid: str = Field(..., alias="puuid")
    level: int = Field(0, ge=0, alias="level")
    region: str = Field(..., alias="region", description="Platform label, e.g. EUW")
    profile_icon_url: str = Field(..., alias="profileIconUrl")

    model_config = ConfigDict(populate_by_name=True)
