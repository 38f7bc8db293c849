"""Tests for the summoner profile endpoint."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from app.core.exceptions import NotFoundError
from app.core.riot_api.errors import RateLimitError
from app.features.players.dependencies import get_player_service
from app.features.players.schemas import SummonerResponse
from app.main import app
from factories import TARGET_PUUID


@pytest.fixture
def player_service():
    return AsyncMock()


@pytest.fixture
def client(player_service):
    app.dependency_overrides[get_player_service] = lambda: player_service
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_get_summoner(client, player_service):
    player_service.get_summoner.return_value = SummonerResponse(
        summoner_name="Faker",
        tagline="KR1",
        puuid=TARGET_PUUID,
        level=512,
        region="KR",
        profile_icon_url="https://cdn.test/profileicon/6.png",
    )

    response = client.get("/api/v1/summoner/faker/KR1")

    assert response.status_code == 200
    assert response.json() == {
        "summonerName": "Faker",
        "tagline": "KR1",
        "puuid": TARGET_PUUID,
        "level": 512,
        "region": "KR",
        "profileIconUrl": "https://cdn.test/profileicon/6.png",
    }
    player_service.get_summoner.assert_awaited_once_with("faker", "KR1")


def test_invalid_riot_id(client, player_service):
    response = client.get("/api/v1/summoner/a/KR1")

    assert response.status_code == 400
    player_service.get_summoner.assert_not_called()


def test_unknown_summoner(client, player_service):
    player_service.get_summoner.side_effect = NotFoundError("Summoner not found.")

    response = client.get("/api/v1/summoner/faker/KR1")

    assert response.status_code == 404
    assert response.json()["detail"] == "Summoner not found."


def test_upstream_rate_limit_is_502(client, player_service):
    player_service.get_summoner.side_effect = RateLimitError(
        "Rate limit exceeded", status_code=429, retry_after=5
    )

    response = client.get("/api/v1/summoner/faker/KR1")

    assert response.status_code == 502
