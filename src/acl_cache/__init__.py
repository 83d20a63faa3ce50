"""acl-cache - dual-keyed cache for access control list entries.

Stores each ACL entry under its object identity and its primary key, keeps
its parent chain cached with it, and re-attaches the shared authorization and
permission-granting strategies to every entry read back.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import AclCacheSettings, get_settings

from .core.exceptions import (
    AclCacheError,
    ConfigurationError,
    ValidationError,
    InvalidArgumentError,
    AclCycleError,
    AclChainTooDeepError,
    CacheError,
    CacheConnectionError,
    CacheSerializationError,
    create_error_response,
)

from .core.value_objects import ObjectIdentity, PrimaryKey

from .features.acl import (
    AclEntry,
    AccessControlEntry,
    AclCache,
    AuthorizationStrategy,
    PermissionGrantingStrategy,
    RebindableAclEntry,
    CacheBackedAclCache,
    AclCacheFactory,
    create_acl_cache,
)

from .features.cache import (
    Cache,
    CacheBackend,
    CacheSerializer,
    MemoryAdapter,
    RedisAdapter,
    PickleCacheSerializer,
)

__all__ = [
    "__version__",

    # Configuration
    "AclCacheSettings",
    "get_settings",

    # Exceptions
    "AclCacheError",
    "ConfigurationError",
    "ValidationError",
    "InvalidArgumentError",
    "AclCycleError",
    "AclChainTooDeepError",
    "CacheError",
    "CacheConnectionError",
    "CacheSerializationError",
    "create_error_response",

    # Value objects
    "ObjectIdentity",
    "PrimaryKey",

    # ACL feature
    "AclEntry",
    "AccessControlEntry",
    "AclCache",
    "AuthorizationStrategy",
    "PermissionGrantingStrategy",
    "RebindableAclEntry",
    "CacheBackedAclCache",
    "AclCacheFactory",
    "create_acl_cache",

    # Cache feature
    "Cache",
    "CacheBackend",
    "CacheSerializer",
    "MemoryAdapter",
    "RedisAdapter",
    "PickleCacheSerializer",
]
