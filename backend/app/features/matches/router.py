"""Match history API endpoints."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request

from app.core.config import get_global_settings
from app.core.http_errors import to_http_exception
from app.core.rate_limiter import default_rate_limit, limiter
from app.core.validation import (
    sanitize_input,
    validate_pagination,
    validate_puuid,
    validate_riot_id,
)

from .dependencies import MatchServiceDep
from .schemas import MatchHistoryResult, MatchHistoryStatus, MatchSummary

router = APIRouter(prefix="/match", tags=["matches"])

NO_MATCHES_DETAIL = "No matches found for this player."
NO_PARSABLE_MATCHES_DETAIL = (
    "Could not parse any match details for this player's recent matches."
)
PLAYER_NOT_FOUND_DETAIL = "Player not found."


def _resolve_count(count: Optional[int]) -> int:
    return count if count is not None else get_global_settings().default_match_count


def _summaries_or_404(result: MatchHistoryResult) -> list[MatchSummary]:
    if result.status == MatchHistoryStatus.PLAYER_NOT_FOUND:
        raise HTTPException(status_code=404, detail=PLAYER_NOT_FOUND_DETAIL)
    if result.status == MatchHistoryStatus.NO_MATCHES:
        raise HTTPException(status_code=404, detail=NO_MATCHES_DETAIL)
    if result.status == MatchHistoryStatus.NO_PARSABLE_MATCHES:
        raise HTTPException(status_code=404, detail=NO_PARSABLE_MATCHES_DETAIL)
    return result.summaries


@router.get("/{puuid}", response_model=list[MatchSummary])
@limiter.limit(default_rate_limit)
async def get_match_history(
    request: Request,
    puuid: str,
    match_service: MatchServiceDep,
    start: int = Query(0, description="Offset into the match history"),
    count: Optional[int] = Query(None, description="Number of matches to return"),
):
    """
    Get summaries of a player's recent matches.

    Every summary carries all participants of the match, with the requested
    player flagged as ``isMainPlayer``.
    """
    try:
        validate_puuid(puuid)
        count = _resolve_count(count)
        validate_pagination(start, count, get_global_settings().max_match_count)

        result = await match_service.get_match_summaries(puuid, start, count)
        return _summaries_or_404(result)
    except Exception as e:
        raise to_http_exception(e, "get_match_history", puuid=puuid)


@router.get("/summoner/{game_name}/{tag_line}", response_model=list[MatchSummary])
@limiter.limit(default_rate_limit)
async def get_match_history_by_riot_id(
    request: Request,
    game_name: str,
    tag_line: str,
    match_service: MatchServiceDep,
    start: int = Query(0, description="Offset into the match history"),
    count: Optional[int] = Query(None, description="Number of matches to return"),
):
    """Get summaries of a player's recent matches by Riot ID (``name#tag``)."""
    try:
        game_name = sanitize_input(game_name)
        tag_line = sanitize_input(tag_line)
        validate_riot_id(game_name, tag_line)
        count = _resolve_count(count)
        validate_pagination(start, count, get_global_settings().max_match_count)

        result = await match_service.get_match_summaries_by_riot_id(
            game_name, tag_line, start, count
        )
        return _summaries_or_404(result)
    except Exception as e:
        raise to_http_exception(
            e,
            "get_match_history_by_riot_id",
            game_name=game_name,
            tag_line=tag_line,
        )
