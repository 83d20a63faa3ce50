"""Domain exceptions for acl-cache.

Raised synchronously, before any cache access, when a caller hands the
adapter something it cannot work with.
"""

from .base import AclCacheError


class ConfigurationError(AclCacheError):
    """Raised when settings cannot produce a working cache."""
    pass


class ValidationError(AclCacheError):
    """Raised when input validation fails."""
    pass


class InvalidArgumentError(ValidationError):
    """Raised when a required entry or identifier is missing."""
    pass


class AclCycleError(InvalidArgumentError):
    """Raised when an ACL parent chain loops back on itself."""
    pass


class AclChainTooDeepError(InvalidArgumentError):
    """Raised when an ACL parent chain exceeds the configured depth."""
    pass
