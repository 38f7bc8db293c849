"""Ranked and champion mastery API endpoints."""

from fastapi import APIRouter, HTTPException, Request

from app.core.http_errors import to_http_exception
from app.core.rate_limiter import default_rate_limit, limiter
from app.core.validation import validate_puuid

from .dependencies import LeagueServiceDep
from .schemas import MasteryInfoResponse, RankedInfoResponse

router = APIRouter(tags=["league"])


@router.get("/ranked/{puuid}", response_model=list[RankedInfoResponse])
@limiter.limit(default_rate_limit)
async def get_ranked_info(
    request: Request,
    puuid: str,
    league_service: LeagueServiceDep,
):
    """Get a player's ranked standing in every queue they are placed in."""
    try:
        validate_puuid(puuid)
        entries = await league_service.get_ranked_info(puuid)
        if not entries:
            raise HTTPException(status_code=404, detail="Ranked info not found.")
        return entries
    except Exception as e:
        raise to_http_exception(e, "get_ranked_info", puuid=puuid)


@router.get("/mastery/{puuid}", response_model=list[MasteryInfoResponse])
@limiter.limit(default_rate_limit)
async def get_mastery_info(
    request: Request,
    puuid: str,
    league_service: LeagueServiceDep,
):
    """
    Get a player's champion masteries.

    Champion names and icons come from the static game data catalog;
    unknown champions are reported as ``Unknown``.
    """
    try:
        validate_puuid(puuid)
        masteries = await league_service.get_mastery_info(puuid)
        if not masteries:
            raise HTTPException(status_code=404, detail="Mastery info not found.")
        return masteries
    except Exception as e:
        raise to_http_exception(e, "get_mastery_info", puuid=puuid)
