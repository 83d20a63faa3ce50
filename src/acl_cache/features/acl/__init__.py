"""ACL feature for acl-cache.

Feature-First architecture for cached access control lists:
- entities/: ACL entry domain objects and protocols
- services/: Dual-keyed ACL cache service
- factories/: Settings-driven construction
"""

from .entities import (
    AclEntry,
    AccessControlEntry,
    AclCache,
    AuthorizationStrategy,
    PermissionGrantingStrategy,
    RebindableAclEntry,
)
from .services import CacheBackedAclCache
from .factories import AclCacheFactory, create_acl_cache

__all__ = [
    # Entities
    "AclEntry",
    "AccessControlEntry",

    # Protocols
    "AclCache",
    "AuthorizationStrategy",
    "PermissionGrantingStrategy",
    "RebindableAclEntry",

    # Services
    "CacheBackedAclCache",

    # Factories
    "AclCacheFactory",
    "create_acl_cache",
]
