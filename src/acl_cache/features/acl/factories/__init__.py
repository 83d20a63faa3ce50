"""ACL cache factories."""

from .acl_cache_factory import AclCacheFactory, create_acl_cache

__all__ = ["AclCacheFactory", "create_acl_cache"]
