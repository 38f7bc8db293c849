"""Shared fixtures for the backend test suite."""

import json
from typing import Any, Dict

import pytest

from app.core.rate_limiter import limiter
from factories import TARGET_PUUID, make_match


@pytest.fixture(autouse=True)
def disable_rate_limiting():
    """Route tests hit the same endpoints many times from one address."""
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
def target_puuid() -> str:
    return TARGET_PUUID


@pytest.fixture
def sample_match() -> Dict[str, Any]:
    return make_match()


@pytest.fixture
def sample_match_json(sample_match) -> str:
    return json.dumps(sample_match)
