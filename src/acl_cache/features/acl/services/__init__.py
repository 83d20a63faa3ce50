"""ACL services."""

from .acl_cache_service import CacheBackedAclCache

__all__ = ["CacheBackedAclCache"]
