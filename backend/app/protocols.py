"""Protocol definitions for the collaborators the match pipeline depends on."""

from abc import abstractmethod
from typing import Protocol, Tuple


class CatalogResolver(Protocol):
    """Resolves static game data ids to names and icon URLs.

    Implementations never raise; unknown ids resolve to fallback values.
    """

    @abstractmethod
    async def get_current_version(self) -> str:
        """Current catalog version token."""
        ...

    @abstractmethod
    async def get_champion_icon_url_by_key(
        self, champion_key: str | None, version: str | None = None
    ) -> str:
        """Icon URL for a champion key."""
        ...

    @abstractmethod
    async def get_champion_display(
        self, champion_id: int, version: str | None = None
    ) -> Tuple[str, str]:
        """Champion name and icon URL for a numeric id."""
        ...

    @abstractmethod
    async def get_summoner_spell_icon_url(self, spell_id: int) -> str:
        """Icon URL for a summoner spell, ``""`` for an empty slot."""
        ...

    @abstractmethod
    async def get_item_icon_url(self, item_id: int) -> str:
        """Icon URL for an item, ``""`` for an empty slot."""
        ...


class MatchSource(Protocol):
    """Upstream calls needed to build a player's match history."""

    @abstractmethod
    async def fetch_match_ids_by_puuid(
        self, puuid: str, start: int = 0, count: int = 10
    ) -> str:
        """Raw JSON array of match ids."""
        ...

    @abstractmethod
    async def fetch_match_by_id(self, match_id: str) -> str:
        """Raw JSON match document."""
        ...

    @abstractmethod
    async def fetch_account_by_riot_id(self, game_name: str, tag_line: str) -> str:
        """Raw JSON account document."""
        ...
