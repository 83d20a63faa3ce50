"""Redis cache backend adapter for acl-cache."""

import logging
from contextlib import contextmanager
from typing import Any, Hashable, Iterator, List, Optional

import redis
from redis.exceptions import (
    ConnectionError as RedisConnectionError,
    RedisError,
    TimeoutError as RedisTimeoutError,
)

from ..entities.protocols import Cache, CacheSerializer
from ..serializers.pickle_serializer import PickleCacheSerializer
from ....core.exceptions import CacheConnectionError, CacheError
from ....core.value_objects import ObjectIdentity

logger = logging.getLogger(__name__)

CLEAR_BATCH_SIZE = 500


class RedisAdapter(Cache):
    """Redis-backed cache keyed by arbitrary hashable values.

    Keys are rendered into namespaced strings so that object identities and
    primary keys never collide, and values are stored as serialized bytes.
    """

    def __init__(
        self,
        client: redis.Redis,
        key_prefix: str = "acl",
        serializer: Optional[CacheSerializer] = None,
        ttl_seconds: Optional[int] = None,
    ):
        self.client = client
        self.key_prefix = key_prefix
        self.serializer = serializer or PickleCacheSerializer()
        self.ttl_seconds = ttl_seconds

    @classmethod
    def from_url(cls, url: str, **kwargs: Any) -> "RedisAdapter":
        """Create an adapter with a client connected to ``url``."""
        client = redis.Redis.from_url(str(url), decode_responses=False)
        return cls(client, **kwargs)

    def build_key(self, key: Hashable) -> str:
        """Render a cache key as a namespaced Redis key.

        The object type is length-prefixed and the value's Python type is
        recorded, so distinct keys never share a Redis key even when their
        parts contain ``:``. Type names cannot contain ``:``, so everything
        after them is the value.
        """
        if isinstance(key, ObjectIdentity):
            identifier = key.identifier
            return (
                f"{self.key_prefix}:oid:{len(key.type)}:{key.type}:"
                f"{type(identifier).__qualname__}:{identifier}"
            )
        return f"{self.key_prefix}:pk:{type(key).__qualname__}:{key}"

    @contextmanager
    def _redis_errors(self, operation: str, redis_key: Optional[str] = None) -> Iterator[None]:
        try:
            yield
        except (RedisConnectionError, RedisTimeoutError) as e:
            logger.error(f"Redis {operation} failed for {redis_key or self.key_prefix}: {e}")
            raise CacheConnectionError(
                f"Redis {operation} failed: {e}",
                details={"operation": operation, "key": redis_key},
            ) from e
        except RedisError as e:
            logger.error(f"Redis {operation} failed for {redis_key or self.key_prefix}: {e}")
            raise CacheError(
                f"Redis {operation} failed: {e}",
                details={"operation": operation, "key": redis_key},
            ) from e

    def get(self, key: Hashable) -> Optional[Any]:
        """Get value by key."""
        redis_key = self.build_key(key)
        with self._redis_errors("get", redis_key):
            data = self.client.get(redis_key)

        if data is None:
            return None
        return self.serializer.deserialize(data)

    def put(self, key: Hashable, value: Any) -> None:
        """Store value under key with the configured TTL."""
        redis_key = self.build_key(key)
        data = self.serializer.serialize(value)
        with self._redis_errors("set", redis_key):
            self.client.set(redis_key, data, ex=self.ttl_seconds)

    def evict(self, key: Hashable) -> None:
        """Remove key if present."""
        redis_key = self.build_key(key)
        with self._redis_errors("delete", redis_key):
            self.client.delete(redis_key)

    def clear(self) -> None:
        """Remove every key under this adapter's prefix."""
        deleted = 0
        batch: List[bytes] = []
        with self._redis_errors("clear"):
            for redis_key in self.client.scan_iter(match=f"{self.key_prefix}:*", count=CLEAR_BATCH_SIZE):
                batch.append(redis_key)
                if len(batch) >= CLEAR_BATCH_SIZE:
                    deleted += self.client.delete(*batch)
                    batch = []
            if batch:
                deleted += self.client.delete(*batch)

        logger.debug(f"Redis cache '{self.key_prefix}' cleared {deleted} keys")

    def health_check(self) -> bool:
        """Check Redis connectivity."""
        try:
            return bool(self.client.ping())
        except RedisError as e:
            logger.error(f"Redis health check failed: {e}")
            return False
