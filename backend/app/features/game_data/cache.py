"""
TTL-based in-memory cache for static game data (Data Dragon).
"""

import threading
import time
from typing import Any, Dict, Optional, Tuple

import structlog

logger = structlog.get_logger(__name__)


class TTLCache:
    """Simple TTL cache with thread-safe operations.

    The lock only guards the dictionary itself. Callers that miss fetch
    outside of it, so a slow load for one key never blocks another key.
    """

    def __init__(self, maxsize: int = 256, ttl: int = 3600):
        """
        Initialize TTL cache.

        Args:
            maxsize: Maximum number of entries
            ttl: Default time to live in seconds
        """
        self.maxsize = maxsize
        self.ttl = ttl
        self.cache: Dict[str, Tuple[Any, float]] = {}
        self.lock = threading.RLock()
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> Optional[Any]:
        """
        Get value from cache if not expired.

        Args:
            key: Cache key

        Returns:
            Cached value if exists and not expired, None otherwise
        """
        with self.lock:
            if key in self.cache:
                value, expiry = self.cache[key]
                if time.monotonic() < expiry:
                    self._hits += 1
                    return value
                # Remove expired entry
                del self.cache[key]
                logger.debug("Cache expired", key=key)
            self._misses += 1
            return None

    def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        """
        Set value in cache with TTL.

        Args:
            key: Cache key
            value: Value to cache
            ttl: Override of the default time to live for this entry
        """
        with self.lock:
            # Simple eviction: if cache is full, remove oldest entry
            if len(self.cache) >= self.maxsize and key not in self.cache:
                oldest_key = next(iter(self.cache))
                del self.cache[oldest_key]
                logger.debug("Cache eviction", key=oldest_key, reason="full")

            expires_in = self.ttl if ttl is None else ttl
            self.cache[key] = (value, time.monotonic() + expires_in)
            logger.debug("Cache set", key=key, ttl=expires_in)

    def get_or_set(self, key: str, value: Any, ttl: Optional[float] = None) -> Any:
        """Store ``value`` unless a live entry already exists; return the winner."""
        with self.lock:
            existing = self.get(key)
            if existing is not None:
                return existing
            self.set(key, value, ttl)
            return value

    def clear(self) -> None:
        """Clear all entries from cache."""
        with self.lock:
            count = len(self.cache)
            self.cache.clear()
            self._hits = 0
            self._misses = 0
            logger.info("Cache cleared", entries_removed=count)

    def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        with self.lock:
            total = self._hits + self._misses
            return {
                "size": len(self.cache),
                "maxsize": self.maxsize,
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": self._hits / total if total > 0 else 0.0,
            }

    def __len__(self) -> int:
        """Get number of entries in cache."""
        return len(self.cache)
