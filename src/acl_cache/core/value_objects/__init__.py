"""Value objects for acl-cache."""

from .identifiers import ObjectIdentity, PrimaryKey

__all__ = [
    "ObjectIdentity",
    "PrimaryKey",
]
