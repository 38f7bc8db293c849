"""Tests for the match summary field helpers."""

from datetime import datetime

import pytest

from app.features.matches.transformers import (
    UNSET_GAME_DATE,
    calculate_kda_ratio,
    duration_minutes,
    format_kda,
    game_mode_label,
    game_start_datetime,
    pick,
)


class TestKda:
    def test_ratio_with_deaths(self):
        assert calculate_kda_ratio(10, 2, 5) == 7.5

    def test_ratio_rounds_to_two_places(self):
        assert calculate_kda_ratio(4, 3, 3) == 2.33

    def test_deathless_ratio_is_kills_plus_assists(self):
        assert calculate_kda_ratio(5, 0, 3) == 8

    @pytest.mark.parametrize(
        "kills,deaths,assists,expected",
        [
            (10, 2, 5, "10/2/5 (7.5:1 KDA)"),
            (3, 1, 4, "3/1/4 (7:1 KDA)"),
            (5, 0, 3, "5/0/3 (8:1 KDA)"),
            (0, 0, 0, "0/0/0 (0:1 KDA)"),
            (4, 3, 3, "4/3/3 (2.33:1 KDA)"),
        ],
    )
    def test_format(self, kills, deaths, assists, expected):
        assert format_kda(kills, deaths, assists) == expected


class TestGameMode:
    @pytest.mark.parametrize(
        "queue_id,label",
        [
            (420, "Ranked Solo/Duo"),
            (440, "Ranked Flex"),
            (450, "ARAM"),
            (400, "Normal Draft"),
            (430, "Normal Blind"),
            (1700, "Arena"),
        ],
    )
    def test_known_queues(self, queue_id, label):
        assert game_mode_label(queue_id) == label

    @pytest.mark.parametrize("queue_id", [0, 900, 99999, None])
    def test_unknown_queues_are_custom(self, queue_id):
        assert game_mode_label(queue_id) == "Custom Game"


class TestDuration:
    @pytest.mark.parametrize(
        "seconds,minutes",
        [(1500, 25), (0, 0), (None, 0), (89, 1), (1830, 30), (90, 2), (150, 2)],
    )
    def test_rounding(self, seconds, minutes):
        assert duration_minutes(seconds) == minutes


class TestGameDate:
    def test_epoch_millis_to_naive_utc(self):
        assert game_start_datetime(1710000000000) == datetime(2024, 3, 9, 16, 0, 0)

    def test_missing_timestamp_uses_sentinel(self):
        assert game_start_datetime(None) is UNSET_GAME_DATE
        assert UNSET_GAME_DATE == datetime.min

    @pytest.mark.parametrize("timestamp", [10**20, -(10**20)])
    def test_out_of_range_timestamp_uses_sentinel(self, timestamp):
        assert game_start_datetime(timestamp) is UNSET_GAME_DATE


class TestPick:
    def test_prefers_primary(self):
        assert pick("RiotName", "LegacyName", "Unknown Player") == "RiotName"

    def test_empty_primary_falls_through(self):
        assert pick("", "LegacyName", "Unknown Player") == "LegacyName"
        assert pick(None, "LegacyName", "Unknown Player") == "LegacyName"

    def test_default_when_both_missing(self):
        assert pick(None, "", "Unknown Tagline") == "Unknown Tagline"
