"""Settings for acl-cache, loaded from ACL_CACHE_* environment variables."""

from functools import lru_cache
from typing import Optional

from pydantic import Field, RedisDsn
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..features.cache.entities.protocols import CacheBackend

DEFAULT_MAX_CHAIN_DEPTH = 256


class AclCacheSettings(BaseSettings):
    """ACL cache settings."""

    model_config = SettingsConfigDict(
        env_prefix="ACL_CACHE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Backend selection
    backend: CacheBackend = Field(default=CacheBackend.MEMORY, description="Underlying cache backend")

    # Redis configuration
    redis_url: Optional[RedisDsn] = Field(default=None, description="Redis connection URL")
    key_prefix: str = Field(default="acl", min_length=1, description="Namespace for cache keys")
    ttl_seconds: Optional[int] = Field(default=None, ge=1, description="Expiry for cached entries")

    # Memory cache configuration
    serialize_in_memory: bool = Field(
        default=False,
        description="Store pickled copies in the memory backend instead of live objects",
    )

    # Parent chain handling. Pickling backends recurse once per parent and
    # hit the interpreter recursion limit at roughly 500 levels, raising
    # CacheSerializationError; keep this below that when serializing.
    max_chain_depth: int = Field(
        default=DEFAULT_MAX_CHAIN_DEPTH,
        ge=1,
        description="Maximum parent chain length walked (pickling backends fail above ~500)",
    )


@lru_cache()
def get_settings() -> AclCacheSettings:
    """Get cached settings instance."""
    return AclCacheSettings()
