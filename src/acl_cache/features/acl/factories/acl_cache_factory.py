"""ACL cache factory.

Builds the underlying cache from settings and wraps it in the ACL cache
service. Handles only instantiation; caching logic lives in the service.
"""

import logging
from typing import Optional

from ..entities.protocols import AuthorizationStrategy, PermissionGrantingStrategy
from ..services.acl_cache_service import CacheBackedAclCache
from ...cache.adapters.memory_adapter import MemoryAdapter
from ...cache.adapters.redis_adapter import RedisAdapter
from ...cache.entities.protocols import Cache, CacheBackend
from ...cache.serializers.pickle_serializer import PickleCacheSerializer
from ....config.settings import AclCacheSettings, get_settings
from ....core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class AclCacheFactory:
    """Creates ACL caches from AclCacheSettings."""

    def __init__(self, settings: Optional[AclCacheSettings] = None):
        self.settings = settings or get_settings()

    def create_cache(self) -> Cache:
        """Create the underlying cache for the configured backend.

        Raises:
            ConfigurationError: If the backend is unknown or incompletely configured
        """
        backend = self.settings.backend

        if backend == CacheBackend.MEMORY:
            serializer = PickleCacheSerializer() if self.settings.serialize_in_memory else None
            logger.debug(f"Creating memory ACL cache (serialized={serializer is not None})")
            return MemoryAdapter(name=self.settings.key_prefix, serializer=serializer)

        if backend == CacheBackend.REDIS:
            if self.settings.redis_url is None:
                raise ConfigurationError(
                    "Redis backend requires ACL_CACHE_REDIS_URL",
                    details={"backend": backend.value},
                )
            logger.debug(f"Creating redis ACL cache with prefix '{self.settings.key_prefix}'")
            return RedisAdapter.from_url(
                str(self.settings.redis_url),
                key_prefix=self.settings.key_prefix,
                ttl_seconds=self.settings.ttl_seconds,
            )

        raise ConfigurationError(f"Unsupported cache backend: {backend}")

    def create_acl_cache(
        self,
        permission_granting_strategy: PermissionGrantingStrategy,
        authorization_strategy: AuthorizationStrategy,
        cache: Optional[Cache] = None
    ) -> CacheBackedAclCache:
        """Create the ACL cache, building the underlying cache unless one is given."""
        return CacheBackedAclCache(
            cache if cache is not None else self.create_cache(),
            permission_granting_strategy,
            authorization_strategy,
            max_chain_depth=self.settings.max_chain_depth,
        )


def create_acl_cache(
    permission_granting_strategy: PermissionGrantingStrategy,
    authorization_strategy: AuthorizationStrategy,
    settings: Optional[AclCacheSettings] = None,
    cache: Optional[Cache] = None
) -> CacheBackedAclCache:
    """Create an ACL cache from settings (environment by default)."""
    return AclCacheFactory(settings).create_acl_cache(
        permission_granting_strategy, authorization_strategy, cache=cache
    )
