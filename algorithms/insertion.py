"""
insertion.py — Insertion Sort
==============================
Lift the key at position i, shift every greater element one slot to the
right, then drop the key into the hole.

Each shift is a single-slot copy (arr[j+1] = arr[j]) but is announced as a
SWAP of (j, j+1) so the renderer shows the pair moving.  Every key
comparison that is actually evaluated is announced as COMPARE(j+1, j);
the scan stops at index -1 or at the first element not greater than the
key.  The final placement is an OVERWRITE shown without extra delay.
"""

from typing import Iterator

from sequence import SequenceStore
from algorithms.operation import Operation


def insertion_sort(store: SequenceStore) -> Iterator[Operation]:
    n = store.length()
    for i in range(1, n):
        key = store.get(i)
        j = i - 1
        while j >= 0:
            yield Operation.compare(j + 1, j)
            if store.get(j) <= key:
                break
            store.overwrite(j + 1, store.get(j))
            yield Operation.swap(j, j + 1)
            j -= 1

        store.overwrite(j + 1, key)
        yield Operation.overwrite(j + 1, key, pace=0.0)
