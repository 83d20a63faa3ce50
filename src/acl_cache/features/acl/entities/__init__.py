"""ACL entities package.

Domain entities and protocols for cached access control lists.
"""

from .acl_entry import AclEntry, AccessControlEntry
from .protocols import (
    AclCache,
    AuthorizationStrategy,
    PermissionGrantingStrategy,
    RebindableAclEntry,
)

__all__ = [
    # Domain entities
    "AclEntry",
    "AccessControlEntry",

    # Protocols
    "AclCache",
    "AuthorizationStrategy",
    "PermissionGrantingStrategy",
    "RebindableAclEntry",
]
