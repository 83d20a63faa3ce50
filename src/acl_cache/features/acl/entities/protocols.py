"""Protocol interfaces for the ACL feature.

The cache service depends on these contracts only: it never inspects the
concrete entry type and never calls into the strategies it attaches.
"""

from abc import abstractmethod
from typing import Any, Optional, Protocol, Sequence, runtime_checkable

from ....core.value_objects import ObjectIdentity, PrimaryKey


@runtime_checkable
class AuthorizationStrategy(Protocol):
    """Decides whether the current principal may administer an ACL."""

    @abstractmethod
    def security_check(self, acl: Any, change_type: int) -> None:
        """Raise if the current principal may not apply ``change_type`` to ``acl``."""
        ...


@runtime_checkable
class PermissionGrantingStrategy(Protocol):
    """Decides whether an ACL grants permissions to a set of security identities."""

    @abstractmethod
    def is_granted(
        self,
        acl: Any,
        permissions: Sequence[int],
        sids: Sequence[str],
        administrative_mode: bool
    ) -> bool:
        """Check if any of ``sids`` holds any of ``permissions`` on ``acl``."""
        ...


@runtime_checkable
class RebindableAclEntry(Protocol):
    """An ACL entry whose shared strategy references can be re-attached."""

    id: PrimaryKey
    object_identity: ObjectIdentity
    parent: Optional[Any]

    @abstractmethod
    def set_strategies(
        self,
        authorization_strategy: AuthorizationStrategy,
        permission_granting_strategy: PermissionGrantingStrategy
    ) -> None:
        """Replace both strategy references."""
        ...


@runtime_checkable
class AclCache(Protocol):
    """Protocol for caches of ACL entries addressable by either key."""

    @abstractmethod
    def get_from_cache(self, key: Any) -> Optional[RebindableAclEntry]:
        """Get entry by object identity or primary key."""
        ...

    @abstractmethod
    def put_in_cache(self, entry: RebindableAclEntry) -> None:
        """Store entry and its ancestors under both of their keys."""
        ...

    @abstractmethod
    def evict_from_cache(self, key: Any) -> None:
        """Remove entry under both of its keys."""
        ...

    @abstractmethod
    def clear_cache(self) -> None:
        """Remove every cached entry."""
        ...
