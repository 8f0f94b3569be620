"""
store.py — Sequence Store
==========================
Owns the array being sorted plus the snapshot taken when it was generated.

    store = SequenceStore()
    store.reset([5, 3, 8, 1])     # Sequence and Snapshot both = [5, 3, 8, 1]
    store.swap(0, 1)              # Sequence = [3, 5, 8, 1]
    store.restore()               # back to [5, 3, 8, 1]

Design decisions:
  - The Snapshot is a tuple.  Nothing can mutate it; restore() copies out
    of it, never into it.
  - Index checks are strict (negative indices are rejected too).  The
    algorithms compute every index themselves, so a bad one is a bug and
    the IndexError is allowed to propagate.
  - Length never changes between reset() / restore() calls.
"""

from typing import List, Optional, Sequence, Tuple, Union

Number = Union[int, float]


class InvalidConfiguration(ValueError):
    """Raised when the configuration layer hands over an unusable array."""


class NoSnapshotError(LookupError):
    """Raised by restore() when no array was ever generated."""


class SequenceStore:
    """
    Attributes:
        values   : The live, mutable Sequence.
        original : Immutable Snapshot used by restore().
    """

    def __init__(self):
        self.values:    List[Number]                  = []
        self._original: Optional[Tuple[Number, ...]]  = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def reset(self, values: Sequence[Number]) -> None:
        """Replace both the Sequence and the Snapshot with a copy of `values`."""
        copied = list(values)
        if not copied:
            raise InvalidConfiguration("Cannot load an empty array.")
        self.values    = copied
        self._original = tuple(copied)

    def restore(self) -> None:
        """Put the Sequence back to the Snapshot."""
        if self._original is None:
            raise NoSnapshotError("No array has been generated yet.")
        self.values = list(self._original)

    @property
    def original(self) -> Optional[Tuple[Number, ...]]:
        return self._original

    # ------------------------------------------------------------------
    # Mutation (used only by the running algorithm)
    # ------------------------------------------------------------------
    def swap(self, i: int, j: int) -> None:
        self._check(i)
        self._check(j)
        self.values[i], self.values[j] = self.values[j], self.values[i]

    def overwrite(self, i: int, value: Number) -> None:
        self._check(i)
        self.values[i] = value

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    def get(self, i: int) -> Number:
        self._check(i)
        return self.values[i]

    def length(self) -> int:
        return len(self.values)

    def slice(self, lo: int, hi: int) -> List[Number]:
        return self.values[lo:hi]

    def to_array(self) -> List[Number]:
        return list(self.values)

    def snapshot(self) -> Tuple[Number, ...]:
        return tuple(self.values)

    def __len__(self) -> int:
        return len(self.values)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _check(self, i: int) -> None:
        if not 0 <= i < len(self.values):
            raise IndexError(f"Index {i} out of range for length {len(self.values)}")
