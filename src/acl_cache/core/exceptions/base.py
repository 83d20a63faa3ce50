"""Base exceptions for acl-cache.

This module defines the root of the acl-cache exception hierarchy. Every
exception carries an error code and a details mapping for structured logging
and API responses.
"""

from typing import Any, Dict, Optional


class AclCacheError(Exception):
    """Base exception for all acl-cache errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: AclCacheError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The acl-cache exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
