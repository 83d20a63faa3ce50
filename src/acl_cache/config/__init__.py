"""Configuration module for acl-cache."""

from .logging_config import (
    setup_logging,
    LoggingConfig,
    LogLevel,
    LogFormat,
)
from .settings import AclCacheSettings, get_settings, DEFAULT_MAX_CHAIN_DEPTH

__all__ = [
    # Logging
    "setup_logging",
    "LoggingConfig",
    "LogLevel",
    "LogFormat",

    # Settings
    "AclCacheSettings",
    "get_settings",
    "DEFAULT_MAX_CHAIN_DEPTH",
]
