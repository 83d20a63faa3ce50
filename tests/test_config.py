"""Tests for settings and logging configuration."""

import logging

import pytest
from pydantic import ValidationError

from acl_cache.config import AclCacheSettings, LogFormat, LoggingConfig, get_settings
from acl_cache.core.exceptions import InvalidArgumentError, create_error_response
from acl_cache.features.cache.entities import CacheBackend


class TestAclCacheSettings:
    """Test cases for AclCacheSettings."""

    def test_defaults(self):
        settings = AclCacheSettings()

        assert settings.backend == CacheBackend.MEMORY
        assert settings.redis_url is None
        assert settings.key_prefix == "acl"
        assert settings.ttl_seconds is None
        assert settings.serialize_in_memory is False
        assert settings.max_chain_depth == 256

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("ACL_CACHE_BACKEND", "redis")
        monkeypatch.setenv("ACL_CACHE_REDIS_URL", "redis://cache:6379/1")
        monkeypatch.setenv("ACL_CACHE_TTL_SECONDS", "30")

        settings = AclCacheSettings()

        assert settings.backend == CacheBackend.REDIS
        assert str(settings.redis_url).startswith("redis://cache:6379")
        assert settings.ttl_seconds == 30

    @pytest.mark.parametrize("field, value", [
        ("max_chain_depth", 0),
        ("ttl_seconds", 0),
        ("key_prefix", ""),
    ])
    def test_rejects_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            AclCacheSettings(**{field: value})

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()


class TestLoggingConfig:
    """Test cases for LoggingConfig."""

    @pytest.fixture(autouse=True)
    def restore_logging(self, monkeypatch):
        yield
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        LoggingConfig.configure()

    def test_build_configures_package_logger_only(self):
        config = LoggingConfig.build("INFO", LogFormat.JSON)

        assert "root" not in config
        assert config["loggers"]["acl_cache"]["level"] == "INFO"
        assert config["loggers"]["redis"]["level"] == "ERROR"
        assert config["formatters"]["default"]["format"].startswith('{"time"')

    def test_configure_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "detailed")

        LoggingConfig.configure()

        assert logging.getLogger("acl_cache").level == logging.DEBUG

    def test_unknown_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        LoggingConfig.configure()

        assert logging.getLogger("acl_cache").level == logging.WARNING


class TestErrorResponse:
    """Test cases for structured error responses."""

    def test_create_error_response(self):
        error = InvalidArgumentError("ID required", details={"object_identity": "Document:obj-1"})

        response = create_error_response(error)

        assert response == {
            "error": {
                "code": "InvalidArgumentError",
                "message": "ID required",
                "details": {"object_identity": "Document:obj-1"},
                "type": "InvalidArgumentError",
            }
        }
