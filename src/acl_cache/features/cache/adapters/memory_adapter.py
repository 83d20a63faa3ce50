"""Memory cache backend adapter for acl-cache."""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, Hashable, Optional

from ..entities.protocols import Cache, CacheSerializer
from ....core.exceptions import CacheError

logger = logging.getLogger(__name__)


@dataclass
class MemoryCacheStats:
    """Memory cache counters."""

    hits: int = 0
    misses: int = 0
    puts: int = 0
    evictions: int = 0
    clears: int = 0

    def as_dict(self) -> Dict[str, Any]:
        total_requests = self.hits + self.misses
        hit_rate = (self.hits / total_requests) if total_requests > 0 else 0.0
        return {
            "total_hits": self.hits,
            "total_misses": self.misses,
            "total_puts": self.puts,
            "total_evictions": self.evictions,
            "total_clears": self.clears,
            "total_requests": total_requests,
            "hit_rate": hit_rate,
            "miss_rate": 1.0 - hit_rate,
        }


class MemoryAdapter(Cache):
    """Thread-safe in-process cache keyed by arbitrary hashable values.

    Without a serializer, values are held by reference. With one, every put
    stores bytes and every get returns a freshly deserialized copy, which
    behaves like an out-of-process cache.
    """

    def __init__(self, name: str = "acl", serializer: Optional[CacheSerializer] = None):
        self.name = name
        self.serializer = serializer
        self._store: Dict[Hashable, Any] = {}
        self._lock = threading.RLock()
        self._stats = MemoryCacheStats()

    def get(self, key: Hashable) -> Optional[Any]:
        """Get value by key."""
        with self._lock:
            stored = self._store.get(key)
            if stored is None:
                self._stats.misses += 1
                return None
            self._stats.hits += 1

        if self.serializer is not None:
            return self.serializer.deserialize(stored)
        return stored

    def put(self, key: Hashable, value: Any) -> None:
        """Store value under key."""
        if value is None:
            raise CacheError("Memory cache does not store None values", details={"key": repr(key)})

        stored = self.serializer.serialize(value) if self.serializer is not None else value
        with self._lock:
            self._store[key] = stored
            self._stats.puts += 1

    def evict(self, key: Hashable) -> None:
        """Remove key if present."""
        with self._lock:
            if self._store.pop(key, None) is not None:
                self._stats.evictions += 1

    def clear(self) -> None:
        """Clear all cache entries."""
        with self._lock:
            size = len(self._store)
            self._store.clear()
            self._stats.clears += 1
        logger.debug(f"Memory cache '{self.name}' cleared {size} keys")

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._store

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            result = self._stats.as_dict()
            result["total_entries"] = len(self._store)
        result["name"] = self.name
        result["serialized"] = self.serializer is not None
        return result
