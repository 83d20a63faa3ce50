"""Pickle cache serializer.

Turns cache values into bytes and back. Only use with trusted cache
backends: unpickling executes code.
"""

import pickle
from dataclasses import dataclass
from typing import Any

from ....core.exceptions import CacheSerializationError


@dataclass
class PickleSerializerStats:
    """Pickle serializer counters."""

    serialization_count: int = 0
    deserialization_count: int = 0
    total_bytes_serialized: int = 0
    error_count: int = 0


class PickleCacheSerializer:
    """Pickle cache serializer with protocol version control."""

    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL):
        # Out-of-range protocol versions fall back to the highest supported
        if protocol < 0 or protocol > pickle.HIGHEST_PROTOCOL:
            protocol = pickle.HIGHEST_PROTOCOL

        self._protocol = protocol
        self._stats = PickleSerializerStats()

    @property
    def protocol(self) -> int:
        return self._protocol

    @property
    def stats(self) -> PickleSerializerStats:
        return self._stats

    def serialize(self, value: Any) -> bytes:
        """Serialize value to pickle bytes."""
        try:
            data = pickle.dumps(value, protocol=self._protocol)
        except (pickle.PickleError, TypeError, AttributeError, ValueError, RecursionError) as e:
            self._stats.error_count += 1
            raise CacheSerializationError(
                f"Pickle serialization failed: {e}",
                details={"value_type": type(value).__name__},
            ) from e

        self._stats.serialization_count += 1
        self._stats.total_bytes_serialized += len(data)
        return data

    def deserialize(self, data: bytes) -> Any:
        """Deserialize pickle bytes to value."""
        try:
            value = pickle.loads(data)
        except (pickle.UnpicklingError, EOFError, TypeError, AttributeError, ImportError, ValueError, RecursionError) as e:
            self._stats.error_count += 1
            raise CacheSerializationError(
                f"Pickle deserialization failed: {e}",
                details={"size_bytes": len(data) if data else 0},
            ) from e

        self._stats.deserialization_count += 1
        return value
