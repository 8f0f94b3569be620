import pytest

from algorithms import list_algorithms
from sequence import SequenceStore, InvalidConfiguration, NoSnapshotError


def test_reset_sets_sequence_and_snapshot():
    store = SequenceStore()
    source = [5, 3, 8, 1]
    store.reset(source)
    source.append(99)

    assert store.to_array() == [5, 3, 8, 1]
    assert store.original == (5, 3, 8, 1)
    assert store.length() == 4


def test_reset_rejects_empty_array():
    store = SequenceStore()
    with pytest.raises(InvalidConfiguration):
        store.reset([])
    assert store.original is None


def test_restore_without_snapshot_raises():
    with pytest.raises(NoSnapshotError):
        SequenceStore().restore()


def test_swap_and_overwrite_mutate_only_the_sequence():
    store = SequenceStore()
    store.reset([1, 2, 3])
    store.swap(0, 2)
    store.overwrite(1, 7)

    assert store.to_array() == [3, 7, 1]
    assert store.original == (1, 2, 3)


@pytest.mark.parametrize("i", [-1, 3, 10])
def test_out_of_range_index_is_fatal(i):
    store = SequenceStore()
    store.reset([1, 2, 3])
    with pytest.raises(IndexError):
        store.swap(0, i)
    with pytest.raises(IndexError):
        store.overwrite(i, 0)
    with pytest.raises(IndexError):
        store.get(i)


def test_to_array_and_snapshot_are_copies():
    store = SequenceStore()
    store.reset([4, 2])
    copy = store.to_array()
    copy[0] = 100
    snap = store.snapshot()
    store.swap(0, 1)

    assert store.get(0) == 2
    assert snap == (4, 2)


def test_restore_is_idempotent_after_any_number_of_runs():
    values = [9, 1, 8, 2, 7, 3, 7]
    store = SequenceStore()
    store.reset(values)

    for info in list_algorithms():
        for _ in info.fn(store):
            pass
        assert store.to_array() == sorted(values)
        store.restore()
        assert store.to_array() == values

    # half-finished run
    gen = list_algorithms()[0].fn(store)
    for _ in range(5):
        next(gen)
    store.restore()
    store.restore()
    assert store.to_array() == values
    assert store.original == tuple(values)
