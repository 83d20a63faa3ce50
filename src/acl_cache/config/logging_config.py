"""Centralized logging configuration for acl-cache.

Provides consistent, environment-driven logging for the library loggers
without touching the host application's root logger.
"""

import logging
import logging.config
import os
from enum import Enum


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def get_log_level(value: str) -> str:
    """Normalize a log level name, falling back to WARNING."""
    try:
        return LogLevel(value.upper()).value
    except ValueError:
        return LogLevel.WARNING.value


def get_log_format(value: str) -> LogFormat:
    """Normalize a log format name, falling back to simple."""
    try:
        return LogFormat(value.lower())
    except ValueError:
        return LogFormat.SIMPLE


class LoggingConfig:
    """Logging configuration manager for the acl_cache logger tree."""

    ROOT_LOGGER = "acl_cache"

    # Third-party modules that should only log errors
    ERROR_ONLY_MODULES = [
        "redis",
    ]

    @classmethod
    def build(cls, log_level: str, log_format: LogFormat) -> dict:
        """Build a dictConfig mapping for the given level and format."""
        logging_config = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": FORMAT_STRINGS[log_format],
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                cls.ROOT_LOGGER: {
                    "level": log_level,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }

        for module in cls.ERROR_ONLY_MODULES:
            logging_config["loggers"][module] = {
                "level": "ERROR",
                "handlers": ["console"],
                "propagate": False,
            }

        return logging_config

    @classmethod
    def configure(cls) -> None:
        """Configure logging based on environment variables."""
        log_level = get_log_level(os.getenv("LOG_LEVEL", "WARNING"))
        log_format = get_log_format(os.getenv("LOG_FORMAT", "simple"))

        logging.config.dictConfig(cls.build(log_level, log_format))

        logger = logging.getLogger(__name__)
        if log_level == LogLevel.DEBUG.value:
            logger.debug(f"Logging configured: level={log_level}, format={log_format.value}")


def setup_logging() -> None:
    """Setup logging configuration from environment variables.

    Called once when the package is imported.
    """
    LoggingConfig.configure()
