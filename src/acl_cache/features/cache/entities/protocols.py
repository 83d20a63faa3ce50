"""Cache protocols for acl-cache.

Defines the minimal key-value contract the ACL cache sits on top of. Any
implementation that is safe for concurrent per-key use can be plugged in.
"""

from abc import abstractmethod
from enum import Enum
from typing import Any, Hashable, Optional, Protocol, runtime_checkable


class CacheBackend(str, Enum):
    """Supported cache backend types."""
    MEMORY = "memory"
    REDIS = "redis"


@runtime_checkable
class Cache(Protocol):
    """Protocol for the underlying key-value cache."""

    @abstractmethod
    def get(self, key: Hashable) -> Optional[Any]:
        """Get value by key, or None on a miss."""
        ...

    @abstractmethod
    def put(self, key: Hashable, value: Any) -> None:
        """Store value under key, replacing any previous value."""
        ...

    @abstractmethod
    def evict(self, key: Hashable) -> None:
        """Remove key if present."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove every entry."""
        ...


@runtime_checkable
class CacheSerializer(Protocol):
    """Protocol for cache value serialization."""

    @abstractmethod
    def serialize(self, value: Any) -> bytes:
        """Serialize value to bytes."""
        ...

    @abstractmethod
    def deserialize(self, data: bytes) -> Any:
        """Deserialize bytes to value."""
        ...
