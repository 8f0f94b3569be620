"""
selection.py — Selection Sort
==============================
For each position, scan the suffix for the minimum, then swap it into
place.  At most one swap per position, and none when the minimum is
already there.
"""

from typing import Iterator

from sequence import SequenceStore
from algorithms.operation import Operation


def selection_sort(store: SequenceStore) -> Iterator[Operation]:
    n = store.length()
    for i in range(n):
        smallest = i
        for j in range(i + 1, n):
            yield Operation.compare(smallest, j)
            if store.get(j) < store.get(smallest):
                smallest = j

        if smallest != i:
            store.swap(i, smallest)
            yield Operation.swap(i, smallest)

        yield Operation.mark_sorted(i, i)
