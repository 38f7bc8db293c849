"""
Tests for the Data Dragon backed game data service.
"""

import json
import time

import httpx
import pytest

from app.features.game_data.service import (
    FALLBACK_VERSION_TTL,
    VERSION_CACHE_KEY,
    GameDataService,
)
from app.features.matches.assembler import MatchSummaryAssembler
from factories import TARGET_PUUID, make_match

BASE_URL = "https://ddragon.test"

CHAMPIONS = {
    "data": {
        "Ahri": {"key": "103", "name": "Ahri"},
        "MonkeyKing": {"key": "62", "name": "Wukong"},
    }
}
SPELLS = {
    "data": {
        "SummonerFlash": {"key": "4"},
        "SummonerDot": {"key": "14"},
    }
}
ITEMS = {"data": {"3157": {"name": "Zhonya's Hourglass"}, "3340": {}}}


class FakeDataDragon:
    """Routes Data Dragon URLs to canned documents and counts requests."""

    def __init__(self, versions=None, fail_paths=()):
        self.versions = versions if versions is not None else ["14.21.1", "14.20.1"]
        self.fail_paths = set(fail_paths)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.requests.append(path)
        if path in self.fail_paths:
            return httpx.Response(500, text="unavailable")
        if path == "/api/versions.json":
            return httpx.Response(200, json=self.versions)
        if path.endswith("/champion.json"):
            return httpx.Response(200, json=CHAMPIONS)
        if path.endswith("/summoner.json"):
            return httpx.Response(200, json=SPELLS)
        if path.endswith("/item.json"):
            return httpx.Response(200, json=ITEMS)
        return httpx.Response(404)


def make_service(ddragon: FakeDataDragon) -> GameDataService:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(ddragon))
    return GameDataService(
        http_client=http_client,
        base_url=BASE_URL,
        fallback_version="14.20.1",
        cache_ttl=3600,
    )


class TestVersion:
    @pytest.mark.asyncio
    async def test_first_entry_of_version_list_is_current(self):
        ddragon = FakeDataDragon()
        service = make_service(ddragon)

        assert await service.get_current_version() == "14.21.1"
        assert await service.get_current_version() == "14.21.1"
        assert ddragon.requests.count("/api/versions.json") == 1

    @pytest.mark.asyncio
    async def test_fetch_failure_returns_fallback(self):
        ddragon = FakeDataDragon(fail_paths={"/api/versions.json"})
        service = make_service(ddragon)

        assert await service.get_current_version() == "14.20.1"

    @pytest.mark.asyncio
    async def test_empty_version_list_returns_fallback(self):
        service = make_service(FakeDataDragon(versions=[]))

        assert await service.get_current_version() == "14.20.1"

    @pytest.mark.asyncio
    async def test_fallback_is_cached_briefly(self):
        ddragon = FakeDataDragon(fail_paths={"/api/versions.json"})
        service = make_service(ddragon)
        await service.get_current_version()

        assert await service.get_current_version() == "14.20.1"
        assert ddragon.requests.count("/api/versions.json") == 1
        _, expiry = service.cache.cache[VERSION_CACHE_KEY]
        assert expiry - time.monotonic() <= FALLBACK_VERSION_TTL


class TestChampions:
    @pytest.mark.asyncio
    async def test_champion_name_by_id(self):
        service = make_service(FakeDataDragon())

        assert await service.get_champion_name(103) == "Ahri"
        assert await service.get_champion_name(62) == "MonkeyKing"

    @pytest.mark.asyncio
    async def test_unknown_champion(self):
        service = make_service(FakeDataDragon())

        assert await service.get_champion_name(99999) == "Unknown"
        assert await service.get_champion_icon_url(99999) == (
            f"{BASE_URL}/cdn/14.21.1/img/champion/Unknown.png"
        )

    @pytest.mark.asyncio
    async def test_icon_url_by_key_uses_given_version(self):
        service = make_service(FakeDataDragon())

        url = await service.get_champion_icon_url_by_key("Ahri", "13.1.1")
        assert url == f"{BASE_URL}/cdn/13.1.1/img/champion/Ahri.png"

    @pytest.mark.asyncio
    async def test_missing_key_uses_unknown_asset(self):
        service = make_service(FakeDataDragon())

        url = await service.get_champion_icon_url_by_key(None, "14.21.1")
        assert url.endswith("/img/champion/Unknown.png")

    @pytest.mark.asyncio
    async def test_display_returns_name_and_icon(self):
        service = make_service(FakeDataDragon())

        name, icon = await service.get_champion_display(103)
        assert name == "Ahri"
        assert icon == f"{BASE_URL}/cdn/14.21.1/img/champion/Ahri.png"

    @pytest.mark.asyncio
    async def test_pinned_version_is_used_for_the_mapping(self):
        ddragon = FakeDataDragon()
        service = make_service(ddragon)

        name, icon = await service.get_champion_display(103, "13.1.1")

        assert name == "Ahri"
        assert icon == f"{BASE_URL}/cdn/13.1.1/img/champion/Ahri.png"
        assert "/cdn/13.1.1/data/en_US/champion.json" in ddragon.requests
        assert "/cdn/14.21.1/data/en_US/champion.json" not in ddragon.requests
        assert "/api/versions.json" not in ddragon.requests

    @pytest.mark.asyncio
    async def test_mapping_is_fetched_once_per_version(self):
        ddragon = FakeDataDragon()
        service = make_service(ddragon)

        await service.get_champion_name(103)
        await service.get_champion_name(62)

        assert ddragon.requests.count("/cdn/14.21.1/data/en_US/champion.json") == 1

    @pytest.mark.asyncio
    async def test_failed_mapping_is_not_cached(self):
        champion_path = "/cdn/14.21.1/data/en_US/champion.json"
        ddragon = FakeDataDragon(fail_paths={champion_path})
        service = make_service(ddragon)

        assert await service.get_champion_name(103) == "Unknown"

        ddragon.fail_paths.clear()
        assert await service.get_champion_name(103) == "Ahri"
        assert ddragon.requests.count(champion_path) == 2


class TestSummonerSpells:
    @pytest.mark.asyncio
    async def test_empty_slot(self):
        service = make_service(FakeDataDragon())

        assert await service.get_summoner_spell_name(0) == "None"
        assert await service.get_summoner_spell_icon_url(0) == ""

    @pytest.mark.asyncio
    async def test_known_spell(self):
        service = make_service(FakeDataDragon())

        name, icon = await service.get_summoner_spell_data(4)
        assert name == "SummonerFlash"
        assert icon == f"{BASE_URL}/cdn/14.21.1/img/spell/SummonerFlash.png"

    @pytest.mark.asyncio
    async def test_unknown_spell_uses_barrier_icon(self):
        service = make_service(FakeDataDragon())

        assert await service.get_summoner_spell_name(12345) == "Unknown"
        icon = await service.get_summoner_spell_icon_url(12345)
        assert icon == f"{BASE_URL}/cdn/14.21.1/img/spell/SummonerBarrier.png"


class TestItems:
    @pytest.mark.asyncio
    async def test_empty_slot(self):
        ddragon = FakeDataDragon()
        service = make_service(ddragon)

        assert await service.get_item_name(0) == "Empty"
        assert await service.get_item_icon_url(0) == ""
        assert ddragon.requests == []

    @pytest.mark.asyncio
    async def test_item_icon_needs_no_mapping(self):
        ddragon = FakeDataDragon()
        service = make_service(ddragon)

        url = await service.get_item_icon_url(3157)

        assert url == f"{BASE_URL}/cdn/14.21.1/img/item/3157.png"
        assert ddragon.requests == ["/api/versions.json"]

    @pytest.mark.asyncio
    async def test_item_names(self):
        service = make_service(FakeDataDragon())

        assert await service.get_item_name(3157) == "Zhonya's Hourglass"
        # Entries without a name fall back to their id
        assert await service.get_item_name(3340) == "3340"
        assert await service.get_item_name(1) == "Unknown Item"

    @pytest.mark.asyncio
    async def test_item_data(self):
        service = make_service(FakeDataDragon())

        name, icon = await service.get_item_data(3157)
        assert name == "Zhonya's Hourglass"
        assert icon.endswith("/img/item/3157.png")


class TestOtherAssets:
    @pytest.mark.asyncio
    async def test_profile_icon(self):
        service = make_service(FakeDataDragon())

        assert await service.get_profile_icon_url(4567) == (
            f"{BASE_URL}/cdn/14.21.1/img/profileicon/4567.png"
        )
        assert (await service.get_profile_icon_url(0)).endswith("/profileicon/0.png")

    def test_arena_augment_icon(self):
        assert GameDataService.get_arena_augment_icon_url(0) == ""
        assert GameDataService.get_arena_augment_icon_url(42).endswith(
            "/cherry-augments/42.png"
        )


@pytest.mark.asyncio
async def test_close_leaves_injected_client_open():
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(FakeDataDragon()))
    service = GameDataService(http_client=http_client, base_url=BASE_URL)

    await service.close()

    assert not http_client.is_closed
    await http_client.aclose()


@pytest.mark.asyncio
async def test_match_summary_when_data_dragon_is_down():
    ddragon = FakeDataDragon(
        fail_paths={
            "/api/versions.json",
            "/cdn/14.20.1/data/en_US/champion.json",
            "/cdn/14.20.1/data/en_US/summoner.json",
            "/cdn/14.20.1/data/en_US/item.json",
        }
    )
    service = make_service(ddragon)
    assembler = MatchSummaryAssembler(service)

    summary = await assembler.assemble(json.dumps(make_match()), TARGET_PUUID)

    player = summary.main_player
    cdn = f"{BASE_URL}/cdn/14.20.1/img"
    assert player.champion_image_url == f"{cdn}/champion/Ahri.png"
    assert player.summoner1_image_url == f"{cdn}/spell/SummonerBarrier.png"
    assert player.summoner2_image_url == f"{cdn}/spell/SummonerBarrier.png"
    assert player.item0_image_url == f"{cdn}/item/3157.png"
    assert player.item2_image_url == ""
    assert len(summary.all_players) == 10
