# session-scoped cache for sportmonks reference data (types, states, seasons)

import logging
from typing import Any, Awaitable, Callable, Optional

from cachetools import Cache, TTLCache

logger = logging.getLogger(__name__)

REFERENCE_KEYS = ("types", "states", "seasons")


class ReferenceCache:
    """Lazily populated memo for the three reference collections.

    Without a ttl nothing is ever evicted, so each collection is fetched at
    most once per session.
    """

    def __init__(self, ttl: Optional[float] = None):
        maxsize = len(REFERENCE_KEYS)
        self._cache: Cache = (
            Cache(maxsize=maxsize) if ttl is None else TTLCache(maxsize=maxsize, ttl=ttl)
        )

    def __contains__(self, key: str) -> bool:
        return key in self._cache

    def get(self, key: str) -> Any:
        return self._cache.get(key)

    async def get_or_fetch(
        self, key: str, loader: Callable[[], Awaitable[Any]]
    ) -> Any:
        if key not in REFERENCE_KEYS:
            raise KeyError(f"Unknown reference collection: {key}")
        if key in self._cache:
            return self._cache[key]
        logger.debug(f"Reference cache miss for '{key}', fetching")
        value = await loader()
        self._cache[key] = value
        return value

    def clear(self) -> None:
        self._cache.clear()
