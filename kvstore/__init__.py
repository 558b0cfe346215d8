# kvstore/__init__.py
# This file is part of LogicalClock - Causality Tracking Primitives
#
# Sample key-value store consuming version vectors and dots

"""Sample sibling-keeping key-value store.

Example:
    >>> from kvstore import KVStore
    >>> store = KVStore()
    >>> ctx = store.get("x").context
    >>> _ = store.put("A", ctx, "x", 10)
    >>> _ = store.put("B", ctx, "x", 15)
    >>> len(store.siblings("x"))
    2
"""

from .exceptions import KeyNotFoundError
from .store import KVStore, ReadResult, StoredValue

__all__ = ["KVStore", "ReadResult", "StoredValue", "KeyNotFoundError"]
