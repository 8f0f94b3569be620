"""
merge.py — Merge Sort (top-down)
=================================
Each merge copies [l, m] and [m+1, r] into temporary buffers and writes
the merged run back into the store one OVERWRITE at a time.

  - `left[i] <= right[j]` takes from the left buffer on ties, which keeps
    the sort stable.
  - Leftovers from either buffer are copied without comparing, at
    LEFTOVER_PACE.
  - One MARK_SORTED(l, r) closes every merge call.
"""

from typing import Iterator

from sequence import SequenceStore
from algorithms.operation import Operation, LEFTOVER_PACE


def merge_sort(store: SequenceStore) -> Iterator[Operation]:
    yield from _sort(store, 0, store.length() - 1)


def _sort(store: SequenceStore, l: int, r: int) -> Iterator[Operation]:
    if l >= r:
        return
    m = (l + r) // 2
    yield from _sort(store, l, m)
    yield from _sort(store, m + 1, r)
    yield from _merge(store, l, m, r)


def _merge(store: SequenceStore, l: int, m: int, r: int) -> Iterator[Operation]:
    left  = store.slice(l, m + 1)
    right = store.slice(m + 1, r + 1)
    i = j = 0
    k = l

    while i < len(left) and j < len(right):
        yield Operation.compare(l + i, m + 1 + j)
        if left[i] <= right[j]:
            value = left[i]
            i += 1
        else:
            value = right[j]
            j += 1
        store.overwrite(k, value)
        yield Operation.overwrite(k, value, pace=0.0)
        k += 1

    for value in left[i:] + right[j:]:
        store.overwrite(k, value)
        yield Operation.overwrite(k, value, pace=LEFTOVER_PACE)
        k += 1

    yield Operation.mark_sorted(l, r)
