"""Builders for Riot API shaped test documents."""

from typing import Any, Dict, List, Optional

TARGET_PUUID = "p" * 78


def make_participant(
    puuid: str,
    champion_name: str = "Ahri",
    **overrides: Any,
) -> Dict[str, Any]:
    """Participant entry shaped like the match-v5 API."""
    participant = {
        "puuid": puuid,
        "riotIdGameName": f"Player-{puuid[:4]}",
        "riotIdTagline": "EUW",
        "championId": 103,
        "championName": champion_name,
        "kills": 3,
        "deaths": 1,
        "assists": 4,
        "teamId": 100,
        "teamPosition": "MIDDLE",
        "totalMinionsKilled": 150,
        "neutralMinionsKilled": 12,
        "visionScore": 21,
        "win": True,
        "summoner1Id": 4,
        "summoner2Id": 14,
        "item0": 3157,
        "item1": 3020,
        "item2": 0,
        "item3": 0,
        "item4": 0,
        "item5": 0,
        "item6": 3340,
    }
    participant.update(overrides)
    return participant


def make_match(
    match_id: str = "EUW1_7000000001",
    participants: Optional[List[Dict[str, Any]]] = None,
    queue_id: int = 450,
    game_duration: int = 1500,
    game_start_timestamp: int = 1710000000000,
) -> Dict[str, Any]:
    """Match document shaped like the match-v5 API."""
    if participants is None:
        participants = [make_participant(TARGET_PUUID)] + [
            make_participant(f"other-{i}".ljust(78, "x"), win=False, teamId=200)
            for i in range(9)
        ]
    return {
        "metadata": {
            "matchId": match_id,
            "participants": [p.get("puuid") for p in participants],
        },
        "info": {
            "gameStartTimestamp": game_start_timestamp,
            "gameDuration": game_duration,
            "queueId": queue_id,
            "gameVersion": "14.20.555.5555",
            "participants": participants,
        },
    }


CDN = "https://cdn.test"


class FakeCatalog:
    """Deterministic catalog: URLs are derived from the ids and keys."""

    def __init__(self, version: str = "14.21.1"):
        self.version = version
        self.version_calls = 0

    async def get_current_version(self) -> str:
        self.version_calls += 1
        return self.version

    async def get_champion_icon_url_by_key(self, champion_key, version=None) -> str:
        return f"{CDN}/{version or self.version}/champion/{champion_key or 'Unknown'}.png"

    async def get_champion_display(self, champion_id, version=None):
        names = {103: "Ahri", 62: "MonkeyKing"}
        name = names.get(champion_id, "Unknown")
        return name, f"{CDN}/{version or self.version}/champion/{name}.png"

    async def get_summoner_spell_icon_url(self, spell_id: int) -> str:
        return "" if spell_id == 0 else f"{CDN}/spell/{spell_id}.png"

    async def get_item_icon_url(self, item_id: int) -> str:
        return "" if item_id == 0 else f"{CDN}/item/{item_id}.png"

    async def get_profile_icon_url(self, profile_icon_id: int, version=None) -> str:
        return f"{CDN}/{version or self.version}/profileicon/{profile_icon_id}.png"
