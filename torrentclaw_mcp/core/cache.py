"""In-memory response cache with TTL expiry and LRU eviction."""

import logging
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# Constants
CACHE_TTL = 300.0  # 5 min
CACHE_MAX_SIZE = 200


@dataclass(frozen=True)
class CacheEntry:
    data: Any
    expires_at: float


class ResponseCache:
    """
    Bounded key -> value store. Entries expire lazily on read once their TTL
    has elapsed; when full, the least recently used entry is evicted. Both
    `get` hits and `set` count as a use.
    """

    def __init__(self, ttl: float = CACHE_TTL, max_size: int = CACHE_MAX_SIZE):
        self.ttl = ttl
        self.max_size = max_size
        self._store: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> Optional[Any]:
        """Get item from cache if present and not expired."""
        entry = self._store.get(key)
        if entry is None:
            self.misses += 1
            return None

        if time.monotonic() > entry.expires_at:
            del self._store[key]
            self.misses += 1
            logger.debug("cache expired: %s", key)
            return None

        self._store.move_to_end(key)
        self.hits += 1
        return entry.data

    def set(self, key: str, data: Any) -> None:
        """Insert or refresh an item, evicting least recently used entries."""
        self._store.pop(key, None)
        if self.max_size <= 0:
            return

        while self._store and len(self._store) >= self.max_size:
            oldest, _ = self._store.popitem(last=False)
            logger.debug("cache evicted: %s", oldest)

        self._store[key] = CacheEntry(data=data, expires_at=time.monotonic() + self.ttl)

    def clear(self) -> int:
        """Clear cache and return number of cleared items."""
        n = len(self._store)
        self._store.clear()
        return n

    @property
    def size(self) -> int:
        return len(self._store)

    def info(self) -> Dict[str, Any]:
        """Get cache statistics."""
        return {
            "hits": self.hits,
            "misses": self.misses,
            "size": self.size,
            "maxSize": self.max_size,
            "ttlSec": self.ttl,
        }
