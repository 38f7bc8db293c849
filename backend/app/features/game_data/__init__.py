"""Static game data (Data Dragon) feature."""

from .cache import TTLCache
from .service import GameDataService

__all__ = ["TTLCache", "GameDataService"]
