"""
bubble.py — Bubble Sort
========================
Adjacent compare, swap-if-greater.  Each pass pins the largest remaining
value at the end of the unsorted prefix, and that slot is marked sorted.
"""

from typing import Iterator

from sequence import SequenceStore
from algorithms.operation import Operation


def bubble_sort(store: SequenceStore) -> Iterator[Operation]:
    n = store.length()
    for i in range(n - 1):
        for j in range(n - 1 - i):
            yield Operation.compare(j, j + 1)
            if store.get(j) > store.get(j + 1):
                store.swap(j, j + 1)
                yield Operation.swap(j, j + 1)

        # the tail element of this pass is final
        tail = n - 1 - i
        yield Operation.mark_sorted(tail, tail)
