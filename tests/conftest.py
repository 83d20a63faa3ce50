"""Pytest configuration and fixtures for acl-cache tests."""

import pytest

from acl_cache.config.settings import get_settings
from acl_cache.core.value_objects import ObjectIdentity
from acl_cache.features.acl.entities import AclEntry, AccessControlEntry
from acl_cache.features.acl.services import CacheBackedAclCache
from acl_cache.features.cache.adapters import MemoryAdapter
from acl_cache.features.cache.serializers import PickleCacheSerializer


class StubAuthorizationStrategy:
    """Authorization strategy that permits every change."""

    def __init__(self, name: str = "auth"):
        self.name = name

    def security_check(self, acl, change_type):
        return None


class StubPermissionGrantingStrategy:
    """Permission granting strategy that grants nothing."""

    def __init__(self, name: str = "granting"):
        self.name = name

    def is_granted(self, acl, permissions, sids, administrative_mode):
        return False


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset cached settings around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def authorization_strategy():
    """Adapter-held authorization strategy (S1)."""
    return StubAuthorizationStrategy("S1")


@pytest.fixture
def permission_granting_strategy():
    """Adapter-held permission granting strategy (S2)."""
    return StubPermissionGrantingStrategy("S2")


@pytest.fixture
def memory_cache():
    """In-memory cache holding live objects."""
    return MemoryAdapter()


@pytest.fixture
def serialized_cache():
    """In-memory cache holding pickled copies."""
    return MemoryAdapter(serializer=PickleCacheSerializer())


@pytest.fixture
def spy_cache(mocker, memory_cache):
    """Memory cache wrapped so that every call is recorded."""
    return mocker.MagicMock(wraps=memory_cache)


@pytest.fixture
def acl_cache(memory_cache, permission_granting_strategy, authorization_strategy):
    """ACL cache over a by-reference memory cache."""
    return CacheBackedAclCache(memory_cache, permission_granting_strategy, authorization_strategy)


@pytest.fixture
def serialized_acl_cache(serialized_cache, permission_granting_strategy, authorization_strategy):
    """ACL cache over a pickling memory cache."""
    return CacheBackedAclCache(serialized_cache, permission_granting_strategy, authorization_strategy)


@pytest.fixture
def entry_a():
    """Root entry A: obj-1 / 100."""
    return AclEntry(
        id=100,
        object_identity=ObjectIdentity("Document", "obj-1"),
        owner="alice",
        entries=[AccessControlEntry(id=1, sid="alice", permission=1)],
    )


@pytest.fixture
def entry_b(entry_a):
    """Child entry B: obj-2 / 200, parent A."""
    return AclEntry(
        id=200,
        object_identity=ObjectIdentity("Document", "obj-2"),
        owner="bob",
        parent=entry_a,
    )


@pytest.fixture
def chain_factory():
    """Build a linear chain of ``depth`` entries and return the leaf."""
    def _build(depth: int) -> AclEntry:
        current = None
        for index in range(depth):
            current = AclEntry(
                id=index,
                object_identity=ObjectIdentity("Folder", f"folder-{index}"),
                parent=current,
            )
        return current
    return _build
