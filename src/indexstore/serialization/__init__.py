"""Optional JSON encoding of IndexedStore state (requires the serde extra)."""

from indexstore.serialization.models import (
    StoreSnapshot,
    dump_json,
    from_snapshot,
    load_json,
    to_snapshot,
)

__all__ = [
    "StoreSnapshot",
    "to_snapshot",
    "from_snapshot",
    "dump_json",
    "load_json",
]
