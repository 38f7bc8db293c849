"""Static game data resolution backed by Data Dragon.

Turns champion, item and summoner spell ids into display names and icon
URLs. The current catalog version and every per-version id mapping are
cached with a TTL. Lookups never raise: an unreachable catalog degrades
to the fallback version and to "Unknown" names.
"""

import asyncio
from typing import Any, Callable, Dict, Optional, Tuple

import httpx
import structlog

from app.core.config import get_global_settings
from .cache import TTLCache

logger = structlog.get_logger(__name__)

VERSION_CACHE_KEY = "version"
# Fallback versions are retried sooner than a real version expires
FALLBACK_VERSION_TTL = 60

CHAMPION_KIND = "champion"
ITEM_KIND = "item"
SUMMONER_SPELL_KIND = "summoner"

UNKNOWN_CHAMPION = "Unknown"
UNKNOWN_SPELL = "Unknown"
NO_SPELL = "None"
UNKNOWN_ITEM = "Unknown Item"
EMPTY_ITEM = "Empty"
FALLBACK_SPELL_ICON = "SummonerBarrier"

AUGMENT_ICON_URL = (
    "https://raw.communitydragon.org/latest/plugins/rcp-be-lol-game-data/"
    "global/default/v1/cherry-augments/{augment_id}.png"
)

IdMapping = Dict[int, str]


def _parse_keyed_listing(data: Dict[str, Any]) -> IdMapping:
    """Map numeric ``key`` to the entry name (champion.json, summoner.json)."""
    mapping: IdMapping = {}
    for name, entry in data.items():
        try:
            mapping[int(entry["key"])] = name
        except (KeyError, TypeError, ValueError):
            continue
    return mapping


def _parse_item_listing(data: Dict[str, Any]) -> IdMapping:
    """Map the item id used as the dictionary key to the item name."""
    mapping: IdMapping = {}
    for item_id, entry in data.items():
        try:
            numeric_id = int(item_id)
        except ValueError:
            continue
        name = entry.get("name") if isinstance(entry, dict) else None
        mapping[numeric_id] = name or item_id
    return mapping


_LISTING_PARSERS: Dict[str, Callable[[Dict[str, Any]], IdMapping]] = {
    CHAMPION_KIND: _parse_keyed_listing,
    SUMMONER_SPELL_KIND: _parse_keyed_listing,
    ITEM_KIND: _parse_item_listing,
}


class GameDataService:
    """Versioned Data Dragon catalog with lazy, TTL-cached id mappings."""

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        base_url: Optional[str] = None,
        fallback_version: Optional[str] = None,
        cache_ttl: Optional[int] = None,
        cache: Optional[TTLCache] = None,
    ):
        """
        Initialize the catalog.

        :param http_client: httpx client used for catalog fetches; the caller keeps ownership
        :param base_url: Data Dragon base URL
        :param fallback_version: Version used when the version list is unavailable
        :param cache_ttl: Seconds to keep the version and each mapping
        :param cache: Pre-built cache, mostly useful for tests
        """
        settings = get_global_settings()
        self.base_url = (base_url or settings.ddragon_base_url).rstrip("/")
        self.fallback_version = fallback_version or settings.ddragon_fallback_version
        ttl = cache_ttl or settings.game_data_cache_ttl
        self.cache = cache or TTLCache(maxsize=64, ttl=ttl)

        self._http_client = http_client
        self._owns_client = http_client is None
        self._client_lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._http_client is None or self._http_client.is_closed:
            async with self._client_lock:
                if self._http_client is None or self._http_client.is_closed:
                    self._http_client = httpx.AsyncClient(timeout=httpx.Timeout(10.0))
                    self._owns_client = True
        return self._http_client

    async def close(self) -> None:
        """Close the HTTP client if this service created it."""
        if self._owns_client and self._http_client and not self._http_client.is_closed:
            await self._http_client.aclose()

    async def _fetch_json(self, url: str) -> Any:
        client = await self._get_client()
        response = await client.get(url)
        response.raise_for_status()
        return response.json()

    # Version

    async def get_current_version(self) -> str:
        """
        Return the newest catalog version.

        Served from cache while fresh. On any fetch or decode failure the
        configured fallback version is returned instead of raising.
        """
        cached = self.cache.get(VERSION_CACHE_KEY)
        if cached is not None:
            return cached

        url = f"{self.base_url}/api/versions.json"
        try:
            versions = await self._fetch_json(url)
            if isinstance(versions, list) and versions and isinstance(versions[0], str):
                latest = versions[0]
                self.cache.set(VERSION_CACHE_KEY, latest)
                logger.info("Resolved latest Data Dragon version", version=latest)
                return latest
            logger.warning("Data Dragon version list was empty or malformed", url=url)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(
                "Failed to fetch Data Dragon versions, using fallback",
                fallback_version=self.fallback_version,
                error=str(e),
            )

        self.cache.set(VERSION_CACHE_KEY, self.fallback_version, ttl=FALLBACK_VERSION_TTL)
        return self.fallback_version

    # Mappings

    async def _get_mapping(self, kind: str, version: str) -> IdMapping:
        """
        Return the id mapping of ``kind`` for ``version``.

        A failed fetch yields an empty mapping for this call only; it is not
        cached, so the next lookup tries again.
        """
        key = f"{kind}:{version}"
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        url = f"{self.base_url}/cdn/{version}/data/en_US/{kind}.json"
        try:
            document = await self._fetch_json(url)
            data = document.get("data") if isinstance(document, dict) else None
            if not isinstance(data, dict):
                raise ValueError("listing has no 'data' object")
        except (httpx.HTTPError, ValueError) as e:
            logger.error(
                "Error loading game data mapping",
                kind=kind,
                version=version,
                error=str(e),
            )
            return {}

        mapping = _LISTING_PARSERS[kind](data)
        logger.info(
            "Loaded game data mapping", kind=kind, version=version, count=len(mapping)
        )
        return self.cache.get_or_set(key, mapping)

    def _cdn_image_url(self, version: str, group: str, name: str) -> str:
        return f"{self.base_url}/cdn/{version}/img/{group}/{name}.png"

    # Champions

    async def get_champion_name(
        self, champion_id: int, version: Optional[str] = None
    ) -> str:
        """Champion key (e.g. ``"Ahri"``) for an id, ``"Unknown"`` if missing."""
        version = version or await self.get_current_version()
        mapping = await self._get_mapping(CHAMPION_KIND, version)
        return mapping.get(champion_id, UNKNOWN_CHAMPION)

    async def get_champion_icon_url_by_key(
        self, champion_key: Optional[str], version: Optional[str] = None
    ) -> str:
        """Icon URL for a champion key; missing keys use the ``Unknown`` asset."""
        version = version or await self.get_current_version()
        return self._cdn_image_url(
            version, "champion", champion_key or UNKNOWN_CHAMPION
        )

    async def get_champion_icon_url(
        self, champion_id: int, version: Optional[str] = None
    ) -> str:
        version = version or await self.get_current_version()
        name = await self.get_champion_name(champion_id, version)
        return await self.get_champion_icon_url_by_key(name, version)

    async def get_champion_display(
        self, champion_id: int, version: Optional[str] = None
    ) -> Tuple[str, str]:
        """Champion name and icon URL."""
        version = version or await self.get_current_version()
        name = await self.get_champion_name(champion_id, version)
        return name, await self.get_champion_icon_url_by_key(name, version)

    # Summoner spells

    async def get_summoner_spell_name(self, spell_id: int) -> str:
        if spell_id == 0:
            return NO_SPELL
        version = await self.get_current_version()
        mapping = await self._get_mapping(SUMMONER_SPELL_KIND, version)
        return mapping.get(spell_id, UNKNOWN_SPELL)

    async def get_summoner_spell_icon_url(self, spell_id: int) -> str:
        """Icon URL for a summoner spell; empty slot gives ``""``."""
        if spell_id == 0:
            return ""
        version = await self.get_current_version()
        name = await self.get_summoner_spell_name(spell_id)
        if name in (UNKNOWN_SPELL, NO_SPELL):
            name = FALLBACK_SPELL_ICON
        return self._cdn_image_url(version, "spell", name)

    async def get_summoner_spell_data(self, spell_id: int) -> Tuple[str, str]:
        name = await self.get_summoner_spell_name(spell_id)
        return name, await self.get_summoner_spell_icon_url(spell_id)

    # Items

    async def get_item_name(self, item_id: int) -> str:
        if item_id == 0:
            return EMPTY_ITEM
        version = await self.get_current_version()
        mapping = await self._get_mapping(ITEM_KIND, version)
        return mapping.get(item_id, UNKNOWN_ITEM)

    async def get_item_icon_url(self, item_id: int) -> str:
        """Icon URL for an item; empty slot gives ``""``."""
        if item_id == 0:
            return ""
        version = await self.get_current_version()
        return self._cdn_image_url(version, "item", str(item_id))

    async def get_item_data(self, item_id: int) -> Tuple[str, str]:
        name = await self.get_item_name(item_id)
        return name, await self.get_item_icon_url(item_id)

    # Profile icons and augments

    async def get_profile_icon_url(
        self, profile_icon_id: int, version: Optional[str] = None
    ) -> str:
        version = version or await self.get_current_version()
        icon_id = profile_icon_id if profile_icon_id > 0 else 0
        return self._cdn_image_url(version, "profileicon", str(icon_id))

    @staticmethod
    def get_arena_augment_icon_url(augment_id: int) -> str:
        """Community Dragon icon for an Arena augment; ``""`` for id 0."""
        if augment_id == 0:
            return ""
        return AUGMENT_ICON_URL.format(augment_id=augment_id)
