"""Dependencies for the game data feature."""

from typing import Annotated

from fastapi import Depends, Request

from .service import GameDataService


def get_game_data_service(request: Request) -> GameDataService:
    """Get the application-wide catalog created in the app lifespan.

    The catalog outlives individual requests so its version and mapping
    caches are shared between them.
    """
    return request.app.state.game_data


GameDataServiceDep = Annotated[GameDataService, Depends(get_game_data_service)]

__all__ = ["get_game_data_service", "GameDataServiceDep"]
