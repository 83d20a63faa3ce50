"""Feature packages for acl-cache.

- acl/: ACL entry entities and the dual-keyed ACL cache service
- cache/: underlying key-value cache contract and its backends
"""
