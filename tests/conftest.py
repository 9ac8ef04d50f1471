"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from indexstore import IndexedStore


@pytest.fixture
def store():
    """Fresh IndexedStore instance."""
    return IndexedStore()


@pytest.fixture
def holey_store():
    """Store with values at 0, 2, 4 and holes at 1, 3 (next_index == 5)."""
    store = IndexedStore(["a", "b", "c", "d", "e"])
    store.remove(1)
    store.remove(3)
    return store
