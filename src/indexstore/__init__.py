"""indexstore: append-only collections with permanent indices.

Usage:
    from indexstore import IndexedStore

    store = IndexedStore()
    first = store.push("value1")
    second = store.push("value2")

    store.remove(second)
    assert store.get(second) is None
    assert list(store.iter()) == [(first, "value1")]

Optional extras:
    indexstore.serialization  JSON snapshots (pip install indexstore[serde])
    indexstore.config         environment-driven settings (pip install indexstore[config])
"""

__version__ = "0.1.0"

# Core primitives
from indexstore.core import Index

# Stores
from indexstore.store import (
    IndexAllocator,
    IndexedCollection,
    IndexedStore,
    IndexExhaustedError,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Index",
    # Store
    "IndexedStore",
    "IndexedCollection",
    "IndexAllocator",
    "IndexExhaustedError",
]
