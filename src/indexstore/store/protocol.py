"""Indexed collection protocol for swappable backends.

The store layer abstracts index-stable collections, enabling:
- Local list-of-slots (default, IndexedStore)
- Sparse or persistent variants (future)

Usage:
    def latest(collection: IndexedCollection[Document]) -> Document | None:
        return collection.last()
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, TypeVar

from indexstore.core.types import Index

T = TypeVar("T")


class IndexedCollection(Protocol[T]):
    """Abstract index-stable collection interface."""

    def push(self, value: T) -> Index:
        """Append value, returning its permanent index."""
        ...

    def insert(self, value: T) -> Index:
        """Alias for push."""
        ...

    def remove(self, index: Index) -> T | None:
        """Remove value at index. Returns None if nothing was there."""
        ...

    def get(self, index: Index) -> T | None:
        """Get value at index, or None."""
        ...

    def first(self) -> T | None:
        """Value at the lowest occupied index."""
        ...

    def last(self) -> T | None:
        """Value at the highest occupied index."""
        ...

    def iter(self) -> Iterator[tuple[Index, T]]:
        """Iterate occupied (index, value) pairs in index order."""
        ...

    def __len__(self) -> int:
        """Count of occupied slots."""
        ...

    def is_empty(self) -> bool:
        """Check if no slot is occupied."""
        ...

    def clear(self) -> None:
        """Empty all slots, keeping the next index."""
        ...

    def reset(self) -> None:
        """Drop all slots and restart numbering at 0."""
        ...

    def next_index(self) -> Index:
        """Index the next insertion will receive."""
        ...
