"""Summoner profile API endpoints."""

from fastapi import APIRouter, Request

from app.core.http_errors import to_http_exception
from app.core.rate_limiter import default_rate_limit, limiter
from app.core.validation import sanitize_input, validate_riot_id

from .dependencies import PlayerServiceDep
from .schemas import SummonerResponse

router = APIRouter(prefix="/summoner", tags=["players"])


@router.get("/{game_name}/{tag_line}", response_model=SummonerResponse)
@limiter.limit(default_rate_limit)
async def get_summoner(
    request: Request,
    game_name: str,
    tag_line: str,
    player_service: PlayerServiceDep,
):
    """
    Get a summoner profile by Riot ID.

    The returned name is the account's current display name, which can
    differ in casing from the one in the path.
    """
    try:
        game_name = sanitize_input(game_name)
        tag_line = sanitize_input(tag_line)
        validate_riot_id(game_name, tag_line)
        return await player_service.get_summoner(game_name, tag_line)
    except Exception as e:
        raise to_http_exception(
            e, "get_summoner", game_name=game_name, tag_line=tag_line
        )
