"""Registry: the source-of-truth layer for store records.

The registry provides:
- Identity allocation: a monotonic id counter, never reused
- Ownership: the registering principal is recorded on every store
- Verification state: a one-way ``verified`` flag per store
"""

from storeverify.registry.models import Store
from storeverify.registry.store_registry import Registry

__all__ = ["Registry", "Store"]
