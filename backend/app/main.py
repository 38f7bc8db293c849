"""Main FastAPI application for the match summary backend."""

from contextlib import asynccontextmanager
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app import __version__
from app.core import get_global_settings
from app.core.logging import get_logger, setup_logging
from app.core.rate_limiter import limiter
from app.features.game_data import GameDataService
from app.features.league import league_router
from app.features.matches import matches_router
from app.features.players import players_router

settings = get_global_settings()
setup_logging(settings.log_level)
logger = get_logger(__name__)


def _log_api_key_configuration() -> None:
    """Log whether a usable Riot API key is configured."""
    if not settings.riot_api_key_configured:
        logger.warning(
            "RIOT_API_KEY not configured, Riot-backed endpoints will fail",
            hint="Get your key from https://developer.riotgames.com",
        )
    elif settings.riot_api_key.startswith("RGAPI-"):
        logger.info("Riot API key configured (development key detected)")
        logger.warning("Development API keys expire every 24 hours")
    else:
        logger.info("Riot API key configured")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    The game data catalog is shared by all requests so its version and
    mapping caches survive between them.
    """
    logger.info(
        "Starting up match summary backend",
        region=settings.riot_region,
        platform=settings.riot_platform,
    )
    _log_api_key_configuration()
    app.state.game_data = GameDataService()
    yield
    logger.info("Shutting down match summary backend")
    await app.state.game_data.close()


# OpenAPI tags metadata
tags_metadata = [
    {
        "name": "players",
        "description": "Summoner profile lookup by Riot ID.",
    },
    {
        "name": "matches",
        "description": "Match history summaries with every participant's performance.",
    },
    {
        "name": "league",
        "description": "Ranked standing and champion mastery.",
    },
    {
        "name": "health",
        "description": "Health check and system status endpoints.",
    },
]

app = FastAPI(
    title="Match Summary Backend",
    description="""
    Backend-for-frontend for a League of Legends player page.

    ## Features

    * **Summoner**: Profile lookup by Riot ID
    * **Match History**: Per-match summaries with champion, spell and item icons
    * **Ranked**: Standing in each ranked queue
    * **Mastery**: Champion mastery with champion names and icons

    ## Rate Limiting

    Public endpoints are rate-limited per client address.
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
    debug=settings.debug,
)

# Configure rate limiter for FastAPI app
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(players_router, prefix="/api/v1")
app.include_router(matches_router, prefix="/api/v1")
app.include_router(league_router, prefix="/api/v1")


@app.get("/health", tags=["health"])
async def health_check() -> Dict[str, Any]:
    """
    Health check endpoint.

    Always answers 200 while the process is serving requests; used by
    load balancers as a liveness check.
    """
    return {
        "status": "healthy",
        "message": "Application is running",
        "version": __version__,
        "debug": settings.debug,
    }


@app.get("/health/detailed", tags=["health"])
async def detailed_health_check():
    """
    Readiness check.

    Reports ``Degraded`` with a 503 when no Riot API key is configured,
    since every upstream-backed endpoint would fail.
    """
    current = get_global_settings()
    api_key_ok = current.riot_api_key_configured
    body = {
        "status": "Healthy" if api_key_ok else "Degraded",
        "version": __version__,
        "environment": current.environment,
        "checks": {
            "riot_api_key": "configured" if api_key_ok else "missing",
            "region": current.riot_region,
            "platform": current.riot_platform,
        },
    }
    return JSONResponse(status_code=200 if api_key_ok else 503, content=body)
