"""Infrastructure exceptions for acl-cache.

Raised by the underlying cache backends. The ACL adapter never catches or
translates these.
"""

from .base import AclCacheError


class CacheError(AclCacheError):
    """Base class for cache-related errors."""
    pass


class CacheConnectionError(CacheError):
    """Raised when cache connection fails."""
    pass


class CacheSerializationError(CacheError):
    """Raised when cache value serialization/deserialization fails."""
    pass
