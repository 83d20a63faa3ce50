"""ACL cache service - dual-keyed cache of ACL entries.

Every stored entry is written under both its object identity and its primary
key, its ancestors are stored with it, and every entry read back gets the
service's own strategy instances attached along its whole parent chain.
"""

import logging
from itertools import takewhile
from typing import Any, Iterator, List, Optional

from ..entities.protocols import (
    AclCache,
    AuthorizationStrategy,
    PermissionGrantingStrategy,
    RebindableAclEntry,
)
from ...cache.entities.protocols import Cache
from ....config.settings import DEFAULT_MAX_CHAIN_DEPTH
from ....core.exceptions import (
    AclChainTooDeepError,
    AclCycleError,
    InvalidArgumentError,
)

logger = logging.getLogger(__name__)


class CacheBackedAclCache(AclCache):
    """ACL cache delegating storage to an underlying key-value cache.

    Assumes every entry shares the same authorization and permission-granting
    strategy instances. Those references do not survive a trip through a
    serializing cache, so they are re-attached on every read.

    Store and evict issue several independent cache calls; a concurrent reader
    may briefly see an entry under one key but not the other.

    ``max_chain_depth`` bounds every chain walk. Over a pickling backend,
    chains deeper than about 500 entries fail with CacheSerializationError
    before that bound is reached.
    """

    def __init__(
        self,
        cache: Cache,
        permission_granting_strategy: PermissionGrantingStrategy,
        authorization_strategy: AuthorizationStrategy,
        max_chain_depth: int = DEFAULT_MAX_CHAIN_DEPTH
    ):
        if cache is None:
            raise InvalidArgumentError("Cache required")
        if permission_granting_strategy is None:
            raise InvalidArgumentError("PermissionGrantingStrategy required")
        if authorization_strategy is None:
            raise InvalidArgumentError("AuthorizationStrategy required")
        if max_chain_depth < 1:
            raise InvalidArgumentError(
                f"max_chain_depth must be positive, got {max_chain_depth}"
            )

        self.cache = cache
        self.permission_granting_strategy = permission_granting_strategy
        self.authorization_strategy = authorization_strategy
        self.max_chain_depth = max_chain_depth

        logger.info(
            f"ACL cache initialized over {type(cache).__name__} "
            f"(max_chain_depth={max_chain_depth})"
        )

    def get_from_cache(self, key: Any) -> Optional[RebindableAclEntry]:
        """Get an entry by object identity or primary key.

        Returns None on a miss.
        """
        if key is None:
            raise InvalidArgumentError("Primary key (identifier) or ObjectIdentity required")

        acl = self.cache.get(key)
        if acl is None:
            logger.debug(f"ACL cache miss for {key!r}")
            return None

        logger.debug(f"ACL cache hit for {key!r}")
        return self._initialize_transient_fields(acl)

    def put_in_cache(self, entry: RebindableAclEntry) -> None:
        """Store an entry and its ancestors under both of their keys.

        The whole chain is validated before the first write. Ancestors are
        written before descendants, so a visible entry always has its parents
        cached. The walk stops at the first parent that cannot be rebound.
        """
        if entry is None:
            raise InvalidArgumentError("Acl required")
        if not isinstance(entry, RebindableAclEntry):
            raise InvalidArgumentError(
                f"Acl must support strategy rebinding, got {type(entry).__name__}"
            )

        chain: List[RebindableAclEntry] = list(
            takewhile(lambda acl: isinstance(acl, RebindableAclEntry), self._walk_chain(entry))
        )
        for acl in chain:
            if acl.object_identity is None:
                raise InvalidArgumentError("ObjectIdentity required", details={"id": acl.id})
            if acl.id is None:
                raise InvalidArgumentError(
                    "ID required", details={"object_identity": str(acl.object_identity)}
                )

        for acl in reversed(chain):
            self.cache.put(acl.object_identity, acl)
            self.cache.put(acl.id, acl)

        logger.debug(f"Cached ACL {entry.id!r} for {entry.object_identity} with {len(chain) - 1} ancestors")

    def evict_from_cache(self, key: Any) -> None:
        """Remove an entry under both of its keys, whichever key is given.

        Ancestors stay cached. A miss is a no-op.
        """
        if key is None:
            raise InvalidArgumentError("Primary key (identifier) or ObjectIdentity required")

        acl = self.get_from_cache(key)
        if acl is None:
            return

        self.cache.evict(acl.id)
        self.cache.evict(acl.object_identity)
        logger.debug(f"Evicted ACL {acl.id!r} for {acl.object_identity}")

    def clear_cache(self) -> None:
        """Remove every entry from the underlying cache."""
        self.cache.clear()
        logger.info("ACL cache cleared")

    def _initialize_transient_fields(self, acl: Any) -> Any:
        for current in self._walk_chain(acl):
            if isinstance(current, RebindableAclEntry):
                current.set_strategies(self.authorization_strategy, self.permission_granting_strategy)
        return acl

    def _walk_chain(self, acl: Any) -> Iterator[Any]:
        """Yield ``acl`` then each ancestor, guarding against cycles and runaway depth."""
        visited = set()
        current = acl
        while current is not None:
            if id(current) in visited:
                raise AclCycleError(
                    "ACL parent chain contains a cycle",
                    details={"id": getattr(acl, "id", None), "repeated_id": getattr(current, "id", None)},
                )
            if len(visited) >= self.max_chain_depth:
                raise AclChainTooDeepError(
                    f"ACL parent chain exceeds {self.max_chain_depth} entries",
                    details={"id": getattr(acl, "id", None)},
                )
            visited.add(id(current))
            yield current
            current = getattr(current, "parent", None)
