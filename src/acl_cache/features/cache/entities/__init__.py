"""Cache entities - protocols and backend enum."""

from .protocols import Cache, CacheBackend, CacheSerializer

__all__ = [
    "Cache",
    "CacheBackend",
    "CacheSerializer",
]
