"""Index-stable in-memory store.

Values are kept in a list of optional slots. Removing a value leaves a hole
(`None`) in place instead of shifting later values, so an index keeps its
meaning for the lifetime of the store.

Usage:
    store = IndexedStore()
    first = store.push("value1")   # 0
    second = store.push("value2")  # 1
    store.remove(second)           # "value2"
    store.get(second)              # None
"""

from __future__ import annotations

import pickle  # nosec B403 - Used only for local snapshots, not untrusted input
import sys
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from indexstore.core.types import Index
from indexstore.store.allocator import IndexAllocator

if TYPE_CHECKING:
    from indexstore.config import StoreSettings

T = TypeVar("T")


class IndexedStore(Generic[T]):
    """Growable collection that assigns every value a permanent index.

    Structure:
        _slots[index] = value, or None once the value has been removed

    `len(_slots)` always equals the allocator's next index. Lookups with an
    unknown or removed index return None rather than raising.

    Args:
        values: Optional initial values, assigned indices 0..n-1 in order.
        max_index: Number of indices available before IndexExhaustedError.
        warn_ratio: Fraction of max_index after which a ResourceWarning is emitted.
    """

    __slots__ = ("_allocator", "_slots", "_count")

    def __init__(
        self,
        values: Iterable[T] = (),
        *,
        max_index: int = sys.maxsize,
        warn_ratio: float = 0.9,
    ):
        """Initialize store, optionally pushing initial values.

        Args:
            values: Values to push in order.
            max_index: Number of indices available (default sys.maxsize).
            warn_ratio: Fraction of max_index after which to warn (default 0.9).
        """
        self._allocator = IndexAllocator(max_index=max_index, warn_ratio=warn_ratio)
        self._slots: list[T | None] = []
        self._count = 0
        for value in values:
            self.push(value)

    @classmethod
    def from_iterable(cls, values: Iterable[T], **kwargs: Any) -> IndexedStore[T]:
        """Create a store holding `values` at indices 0..n-1."""
        return cls(values, **kwargs)

    @classmethod
    def from_settings(cls, settings: StoreSettings, values: Iterable[T] = ()) -> IndexedStore[T]:
        """Create a store configured from StoreSettings.

        Args:
            settings: Loaded settings (see indexstore.config).
            values: Optional initial values.

        Returns:
            Configured IndexedStore instance.
        """
        return cls(values, max_index=settings.max_index, warn_ratio=settings.warn_ratio)

    # Insertion

    def push(self, value: T) -> Index:
        """Append value and return its newly assigned index.

        Args:
            value: Value to store. None is reserved for empty slots.

        Returns:
            The index assigned to value.

        Raises:
            TypeError: If value is None.
            IndexExhaustedError: If the index space is used up.
        """
        if value is None:
            raise TypeError("IndexedStore cannot hold None; None marks an empty slot")
        index = self._allocator.allocate()
        self._slots.append(value)
        self._count += 1
        return index

    def insert(self, value: T) -> Index:
        """Alias for push(). Always appends; there is no positional insert."""
        return self.push(value)

    # Removal

    def remove(self, index: Index) -> T | None:
        """Remove and return the value at index.

        Later values are not shifted. Removing an empty or unknown index
        returns None and changes nothing.
        """
        value = self.get(index)
        if value is not None:
            self._slots[index] = None
            self._count -= 1
        return value

    # Lookup

    def get(self, index: Index) -> T | None:
        """Return the value at index, or None if empty or out of bounds."""
        if 0 <= index < len(self._slots):
            return self._slots[index]
        return None

    def first(self) -> T | None:
        """Return the value with the lowest occupied index."""
        entry = self.first_entry()
        return entry[1] if entry is not None else None

    def last(self) -> T | None:
        """Return the value with the highest occupied index.

        In append-only use (e.g. keeping versions of a document) this is the
        current version.
        """
        entry = self.last_entry()
        return entry[1] if entry is not None else None

    def first_entry(self) -> tuple[Index, T] | None:
        """Return (index, value) for the lowest occupied index, or None."""
        return next(self.iter(), None)

    def last_entry(self) -> tuple[Index, T] | None:
        """Return (index, value) for the highest occupied index, or None."""
        for index in range(len(self._slots) - 1, -1, -1):
            value = self._slots[index]
            if value is not None:
                return index, value
        return None

    # Iteration

    def iter(self) -> Iterator[tuple[Index, T]]:
        """Iterate occupied slots in ascending index order.

        Each call returns an independent generator; holes are skipped.

        Yields:
            (index, value) for each stored value.
        """
        for index, value in enumerate(self._slots):
            if value is not None:
                yield index, value

    def indices(self) -> Iterator[Index]:
        """Iterate occupied indices in ascending order."""
        for index, _ in self.iter():
            yield index

    def values(self) -> Iterator[T]:
        """Iterate stored values in ascending index order."""
        for _, value in self.iter():
            yield value

    def __iter__(self) -> Iterator[tuple[Index, T]]:
        return self.iter()

    # Size

    def len(self) -> int:
        """Number of occupied slots (not the next index)."""
        return self._count

    def __len__(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        """True if no slot currently holds a value, regardless of history."""
        return self._count == 0

    def __bool__(self) -> bool:
        return self._count > 0

    # Bulk clearing

    def clear(self) -> None:
        """Empty every slot. Numbering continues from next_index()."""
        self._slots = [None] * len(self._slots)
        self._count = 0

    def reset(self) -> None:
        """Drop all slots and restart numbering at 0."""
        self._slots = []
        self._count = 0
        self._allocator.reset()

    # Introspection

    def next_index(self) -> Index:
        """Return the index the next push()/insert() will assign."""
        return self._allocator.peek()

    # Container protocol

    def __getitem__(self, index: Index) -> T:
        """Return the value at index.

        Raises:
            KeyError: If the slot is empty or out of bounds. Use get() for
                a None result instead.
        """
        value = self.get(index)
        if value is None:
            raise KeyError(index)
        return value

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.get(index) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexedStore):
            return NotImplemented
        return self._slots == other._slots

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join(f"{index}: {value}\n" for index, value in self.iter())

    def __repr__(self) -> str:
        entries = ", ".join(f"{index!r}: {value!r}" for index, value in self.iter())
        return f"IndexedStore({{{entries}}}, next_index={self.next_index()})"

    def copy(self) -> IndexedStore[T]:
        """Shallow copy preserving slots, holes and next_index."""
        clone: IndexedStore[T] = IndexedStore(
            max_index=self._allocator.max_index, warn_ratio=self._allocator.warn_ratio
        )
        clone._load_slots(list(self._slots))
        return clone

    # Pass-through state encoding

    def state(self) -> tuple[list[T | None], int]:
        """Return (slots, next_index), holes included. The list is a copy."""
        return list(self._slots), self.next_index()

    def load_state(self, slots: list[T | None], next_index: int) -> None:
        """Replace contents with previously saved state.

        Args:
            slots: Slot list as returned by state(), None for holes.
            next_index: Saved next index; must equal len(slots).

        Raises:
            ValueError: If next_index does not match the slot count.
        """
        if next_index != len(slots):
            raise ValueError(
                f"Inconsistent state: next_index {next_index} != slot count {len(slots)}"
            )
        self._load_slots(list(slots))

    def _load_slots(self, slots: list[T | None]) -> None:
        self._allocator.restore(len(slots))
        self._slots = slots
        self._count = sum(1 for value in slots if value is not None)

    def snapshot(self) -> bytes:
        """Pickle slots and next_index.

        Not portable - use indexstore.serialization for a JSON format.

        Returns:
            Pickled bytes of store state.
        """
        slots, next_index = self.state()
        return pickle.dumps({"slots": slots, "next_index": next_index})

    def restore(self, data: bytes) -> None:
        """Restore from snapshot() bytes.

        Args:
            data: Pickled bytes from a previous snapshot() call.
        """
        state = pickle.loads(data)  # nosec B301 - Only for snapshots produced by snapshot()
        self.load_state(state["slots"], state["next_index"])
