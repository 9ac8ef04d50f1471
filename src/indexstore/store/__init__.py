"""Index-stable stores."""

from indexstore.store.allocator import IndexAllocator, IndexExhaustedError
from indexstore.store.indexed import IndexedStore
from indexstore.store.protocol import IndexedCollection

__all__ = [
    "IndexedCollection",
    "IndexedStore",
    "IndexAllocator",
    "IndexExhaustedError",
]
