"""Pydantic models for encoding IndexedStore state.

The snapshot keeps every slot in index order, holes included, so decoding
never compacts indices.

Usage:
    data = dump_json(store)
    restored = load_json(data, Document)
    assert restored == store
"""

from typing import Any, Generic, Self, TypeVar

try:
    from pydantic import BaseModel, ConfigDict, Field, model_validator
except ImportError as e:
    raise ImportError(
        "pydantic is required for serialization module. "
        "Install with: pip install indexstore[serde]"
    ) from e

from indexstore.store.indexed import IndexedStore

T = TypeVar("T")


class StoreSnapshot(BaseModel, Generic[T]):
    """Full IndexedStore state.

    Attributes:
        slots: Value per index, None for removed or never-filled slots.
        next_index: Index the next insertion receives; equals len(slots).
    """

    model_config = ConfigDict(frozen=True)

    slots: list[T | None] = Field(default_factory=list)
    next_index: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_alignment(self) -> Self:
        if len(self.slots) != self.next_index:
            raise ValueError(
                f"next_index {self.next_index} does not match slot count {len(self.slots)}"
            )
        return self


def to_snapshot(store: IndexedStore[T]) -> StoreSnapshot[Any]:
    """Capture store state as a StoreSnapshot."""
    slots, next_index = store.state()
    return StoreSnapshot(slots=slots, next_index=next_index)


def from_snapshot(snapshot: StoreSnapshot[T], **kwargs: Any) -> IndexedStore[T]:
    """Build a store from a snapshot.

    Args:
        snapshot: Snapshot produced by to_snapshot() or decoded from JSON.
        **kwargs: Forwarded to IndexedStore (max_index, warn_ratio).

    Returns:
        IndexedStore with identical slots and next_index.
    """
    store: IndexedStore[T] = IndexedStore(**kwargs)
    store.load_state(list(snapshot.slots), snapshot.next_index)
    return store


def dump_json(store: IndexedStore[Any]) -> str:
    """Encode store state as JSON.

    Values must be serializable by pydantic (primitives, dataclasses,
    BaseModel instances, containers of those).
    """
    return to_snapshot(store).model_dump_json()


def load_json(data: str | bytes, value_type: Any = Any, **kwargs: Any) -> IndexedStore[Any]:
    """Decode JSON produced by dump_json().

    Args:
        data: JSON document.
        value_type: Type used to validate each stored value.
        **kwargs: Forwarded to IndexedStore (max_index, warn_ratio).

    Returns:
        Restored IndexedStore.

    Raises:
        pydantic.ValidationError: If data is malformed or misaligned.
    """
    snapshot = StoreSnapshot[value_type].model_validate_json(data)  # type: ignore[valid-type]
    return from_snapshot(snapshot, **kwargs)
