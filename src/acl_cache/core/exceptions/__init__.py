"""Exception hierarchy for acl-cache."""

from .base import AclCacheError, create_error_response
from .domain import (
    ConfigurationError,
    ValidationError,
    InvalidArgumentError,
    AclCycleError,
    AclChainTooDeepError,
)
from .infrastructure import (
    CacheError,
    CacheConnectionError,
    CacheSerializationError,
)

__all__ = [
    # Base Exception
    "AclCacheError",
    "create_error_response",

    # Configuration Errors
    "ConfigurationError",

    # Argument Errors
    "ValidationError",
    "InvalidArgumentError",
    "AclCycleError",
    "AclChainTooDeepError",

    # Cache Errors
    "CacheError",
    "CacheConnectionError",
    "CacheSerializationError",
]
