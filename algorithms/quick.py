"""
quick.py — Quick Sort (Lomuto partition)
=========================================
The last element of each range is the pivot.

  - MARK_PIVOT at partition entry, and again after every swap inside the
    partition loop: a swap frame replaces the pivot highlight, so the
    pivot is announced again.
  - The final pivot swap is followed by MARK_SORTED on the pivot's slot.
  - Left sub-range first, then right.  A one-element range is marked
    sorted; an empty range does nothing.
"""

from typing import Generator, Iterator

from sequence import SequenceStore
from algorithms.operation import Operation


def quick_sort(store: SequenceStore) -> Iterator[Operation]:
    yield from _quick(store, 0, store.length() - 1)


def _quick(store: SequenceStore, lo: int, hi: int) -> Iterator[Operation]:
    if lo >= hi:
        if lo == hi:
            yield Operation.mark_sorted(lo, hi)
        return

    p = yield from _partition(store, lo, hi)
    yield from _quick(store, lo, p - 1)
    yield from _quick(store, p + 1, hi)


def _partition(store: SequenceStore, lo: int, hi: int) -> Generator[Operation, None, int]:
    pivot = store.get(hi)
    yield Operation.mark_pivot(hi)
    i = lo - 1

    for j in range(lo, hi):
        yield Operation.compare(j, hi)
        if store.get(j) < pivot:
            i += 1
            store.swap(i, j)
            yield Operation.swap(i, j)
            yield Operation.mark_pivot(hi)

    store.swap(i + 1, hi)
    yield Operation.swap(i + 1, hi)
    yield Operation.mark_sorted(i + 1, i + 1)
    return i + 1
