"""Cache feature for acl-cache.

Feature-First architecture with Redis and in-memory cache support:
- entities/: Cache protocols and backend enum
- adapters/: Redis and in-memory cache implementations
- serializers/: Value serialization for byte-oriented backends
"""

from .entities.protocols import Cache, CacheBackend, CacheSerializer
from .adapters.memory_adapter import MemoryAdapter
from .adapters.redis_adapter import RedisAdapter
from .serializers.pickle_serializer import PickleCacheSerializer

__all__ = [
    # Core protocols
    "Cache",
    "CacheBackend",
    "CacheSerializer",

    # Adapters
    "MemoryAdapter",
    "RedisAdapter",

    # Serializers
    "PickleCacheSerializer",
]
