"""ACL entry domain entity for acl-cache.

Represents the access control list of one protected object: its owner, the
access control entries it holds, and the parent it inherits from. The two
strategy references are shared, process-wide collaborators; they are not part
of the entry's value and are dropped when the entry is pickled.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from ....config.settings import DEFAULT_MAX_CHAIN_DEPTH
from ....core.exceptions import AclChainTooDeepError, AclCycleError, InvalidArgumentError
from ....core.value_objects import ObjectIdentity, PrimaryKey
from .protocols import AuthorizationStrategy, PermissionGrantingStrategy

TRANSIENT_FIELDS = ("authorization_strategy", "permission_granting_strategy")


@dataclass
class AccessControlEntry:
    """A single permission grant or denial for a security identity."""

    id: Optional[PrimaryKey]
    sid: str
    permission: int
    granting: bool = True
    audit_success: bool = False
    audit_failure: bool = False


@dataclass
class AclEntry:
    """Mutable access control list for one protected domain object."""

    id: Optional[PrimaryKey]
    object_identity: Optional[ObjectIdentity]
    owner: Optional[str] = None
    parent: Optional["AclEntry"] = None
    entries_inheriting: bool = True
    entries: List[AccessControlEntry] = field(default_factory=list)
    loaded_sids: Optional[List[str]] = None
    authorization_strategy: Optional[AuthorizationStrategy] = field(
        default=None, compare=False, repr=False
    )
    permission_granting_strategy: Optional[PermissionGrantingStrategy] = field(
        default=None, compare=False, repr=False
    )

    def set_strategies(
        self,
        authorization_strategy: AuthorizationStrategy,
        permission_granting_strategy: PermissionGrantingStrategy
    ) -> None:
        """Attach the shared strategies, replacing whatever was there."""
        if authorization_strategy is None:
            raise InvalidArgumentError("AuthorizationStrategy required")
        if permission_granting_strategy is None:
            raise InvalidArgumentError("PermissionGrantingStrategy required")

        self.authorization_strategy = authorization_strategy
        self.permission_granting_strategy = permission_granting_strategy

    def set_parent(self, parent: Optional["AclEntry"]) -> None:
        if parent is self:
            raise AclCycleError(
                "An ACL entry cannot be its own parent",
                details={"id": self.id},
            )
        self.parent = parent

    def set_owner(self, owner: str) -> None:
        if not owner:
            raise InvalidArgumentError("Owner required")
        self.owner = owner

    def set_entries_inheriting(self, entries_inheriting: bool) -> None:
        self.entries_inheriting = entries_inheriting

    def insert_entry(self, index: int, entry: AccessControlEntry) -> None:
        """Insert an access control entry at ``index``."""
        if entry is None:
            raise InvalidArgumentError("Access control entry required")
        if index < 0 or index > len(self.entries):
            raise InvalidArgumentError(
                f"Index {index} out of range for {len(self.entries)} entries"
            )
        self.entries.insert(index, entry)

    def delete_entry(self, index: int) -> None:
        """Remove the access control entry at ``index``."""
        if index < 0 or index >= len(self.entries):
            raise InvalidArgumentError(
                f"Index {index} out of range for {len(self.entries)} entries"
            )
        del self.entries[index]

    def is_sid_loaded(self, sids: List[str]) -> bool:
        """Check whether entries for every sid in ``sids`` were loaded.

        For the resolution service deciding whether a cached entry can answer
        a lookup for ``sids``. An entry loaded without a sid filter holds
        entries for all sids.
        """
        if self.loaded_sids is None:
            return True
        return all(sid in self.loaded_sids for sid in sids)

    def ancestors(self, max_chain_depth: int = DEFAULT_MAX_CHAIN_DEPTH) -> Iterator[Any]:
        """Yield the parent chain, nearest parent first.

        For callers inspecting inheritance; the cache service walks chains
        through the RebindableAclEntry protocol instead. ``max_chain_depth``
        counts this entry, as the cache service does.
        """
        visited = {id(self)}
        current = self.parent
        while current is not None:
            if id(current) in visited:
                raise AclCycleError(
                    "ACL parent chain contains a cycle",
                    details={"id": self.id, "repeated_id": getattr(current, "id", None)},
                )
            if len(visited) >= max_chain_depth:
                raise AclChainTooDeepError(
                    f"ACL parent chain exceeds {max_chain_depth} entries",
                    details={"id": self.id},
                )
            visited.add(id(current))
            yield current
            current = getattr(current, "parent", None)

    def __getstate__(self) -> Dict[str, Any]:
        state = self.__dict__.copy()
        for name in TRANSIENT_FIELDS:
            state[name] = None
        return state

    def __setstate__(self, state: Dict[str, Any]) -> None:
        self.__dict__.update(state)
        for name in TRANSIENT_FIELDS:
            self.__dict__.setdefault(name, None)

    def __repr__(self) -> str:
        parent_id = self.parent.id if self.parent is not None else None
        return (
            f"AclEntry(id={self.id!r}, object_identity={self.object_identity!r}, "
            f"owner={self.owner!r}, parent_id={parent_id!r}, "
            f"entries_inheriting={self.entries_inheriting}, entries={len(self.entries)})"
        )
