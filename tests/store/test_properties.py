"""Property tests for IndexedStore over random operation sequences.

Each sequence is replayed against a plain dict model of index -> value
plus a counter, which is the simplest structure with the same contract.
"""

from hypothesis import given
from hypothesis import strategies as st

from indexstore import IndexedStore

# Operations: ("push", value) | ("remove", index) | ("clear",) | ("reset",)
operation_strategy = st.one_of(
    st.tuples(st.just("push"), st.integers()),
    st.tuples(st.just("remove"), st.integers(min_value=-2, max_value=40)),
    st.tuples(st.just("clear")),
    st.tuples(st.just("reset")),
)


def _replay(operations):
    store = IndexedStore()
    model: dict[int, int] = {}
    next_index = 0
    for op in operations:
        if op[0] == "push":
            assert store.push(op[1]) == next_index
            model[next_index] = op[1]
            next_index += 1
        elif op[0] == "remove":
            assert store.remove(op[1]) == model.pop(op[1], None)
        elif op[0] == "clear":
            store.clear()
            model.clear()
        else:
            store.reset()
            model.clear()
            next_index = 0
    return store, model, next_index


@given(st.lists(operation_strategy, max_size=60))
def test_store_matches_dict_model(operations):
    """PROPERTY: Every observable result matches the reference model."""
    store, model, next_index = _replay(operations)

    assert store.next_index() == next_index
    assert list(store.iter()) == sorted(model.items())
    assert len(store) == len(model)
    assert store.is_empty() == (not model)
    for index in range(-2, next_index + 2):
        assert store.get(index) == model.get(index)


@given(
    values=st.lists(st.integers(), min_size=1, max_size=30),
    removals=st.lists(st.integers(min_value=0, max_value=29), max_size=30),
)
def test_index_stability(values, removals):
    """PROPERTY: get(i) is only ever the value pushed at i, or None.

    This is the critical guarantee - an index never changes meaning.
    """
    store = IndexedStore()
    assigned = {store.push(value): value for value in values}

    for index in removals:
        store.remove(index)
        store.push(-1)
        for original_index, original_value in assigned.items():
            assert store.get(original_index) in (original_value, None)


@given(st.lists(st.integers(), max_size=30))
def test_indices_are_consecutive(values):
    """PROPERTY: Consecutive pushes return 0, 1, 2, ... on a fresh store."""
    store = IndexedStore()
    assert [store.push(value) for value in values] == list(range(len(values)))


@given(st.lists(st.integers(), min_size=1, max_size=30), st.data())
def test_first_and_last_bracket_iteration(values, data):
    store = IndexedStore(values)
    for index in data.draw(st.lists(st.integers(min_value=0, max_value=len(values) - 1))):
        store.remove(index)

    entries = list(store.iter())
    assert store.first_entry() == (entries[0] if entries else None)
    assert store.last_entry() == (entries[-1] if entries else None)
