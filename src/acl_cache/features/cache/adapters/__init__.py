"""Cache backend adapters."""

from .memory_adapter import MemoryAdapter, MemoryCacheStats
from .redis_adapter import RedisAdapter

__all__ = [
    "MemoryAdapter",
    "MemoryCacheStats",
    "RedisAdapter",
]
