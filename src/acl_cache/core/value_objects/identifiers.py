"""Value objects for identifiers in acl-cache.

An ACL entry is addressed two ways: by the identity of the domain object it
protects and by its own primary key.
"""

from dataclasses import dataclass
from typing import Any, Hashable

from ..exceptions import InvalidArgumentError

# Opaque identifier of an ACL entry record (int, str, UUID, ...).
PrimaryKey = Hashable


@dataclass(frozen=True)
class ObjectIdentity:
    """Immutable identity of a protected domain object."""

    type: str
    identifier: Any

    def __post_init__(self):
        if not isinstance(self.type, str) or not self.type.strip():
            raise InvalidArgumentError("Object identity type required")
        if self.identifier is None:
            raise InvalidArgumentError("Object identity identifier required")

    @classmethod
    def of(cls, domain_object: Any) -> "ObjectIdentity":
        """Build an identity from a domain object exposing an ``id`` attribute."""
        if domain_object is None:
            raise InvalidArgumentError("Domain object required")

        identifier = getattr(domain_object, "id", None)
        if identifier is None:
            raise InvalidArgumentError(
                f"{type(domain_object).__qualname__} has no id to build an object identity from"
            )
        return cls(type(domain_object).__qualname__, identifier)

    def __str__(self) -> str:
        return f"{self.type}:{self.identifier}"
