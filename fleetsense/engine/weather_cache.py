"""
Weather cache — short-lived memo of weather readings per place name.

Entries live for a fixed TTL and are dropped lazily, the next time their
key is read. There is no size bound and no background sweep. Two callers
that miss at the same time both fetch and both write; the later write wins.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Generic, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V")

DEFAULT_TTL_SECONDS = 300.0


class WeatherCache(Generic[V]):
    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock:       Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock      = clock
        self._entries: Dict[str, Tuple[float, V]] = {}

    @staticmethod
    def _normalize(key: str) -> str:
        return key.lower()

    def get(self, key: str) -> Optional[V]:
        """Cached value younger than the TTL, or None on a miss."""
        norm  = self._normalize(key)
        entry = self._entries.get(norm)
        if entry is None:
            logger.debug("Weather cache miss: %s", norm)
            return None

        stored_at, value = entry
        if self._clock() - stored_at < self.ttl_seconds:
            logger.debug("Weather cache hit: %s", norm)
            return value

        del self._entries[norm]
        logger.debug("Weather cache entry expired: %s", norm)
        return None

    def put(self, key: str, value: V) -> None:
        self._entries[self._normalize(key)] = (self._clock(), value)

    def get_or_fetch(self, key: str, fetch: Callable[[str], V]) -> V:
        """Serve from cache, or call fetch(key) and remember the result."""
        value = self.get(key)
        if value is None:
            value = fetch(key)
            if value is not None:
                self.put(key, value)
        return value

    def __len__(self) -> int:
        return len(self._entries)
