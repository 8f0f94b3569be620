"""
operation.py — Algorithm Operation Events
==========================================
Every sorting algorithm is a generator that yields Operation objects.
An Operation names one thing the algorithm just did:

    • COMPARE      – two indices were compared
    • SWAP         – two indices were exchanged (insertion sort shifts too)
    • OVERWRITE    – one index received a new value (merge write-back)
    • MARK_PIVOT   – quick sort's current pivot
    • MARK_SORTED  – a closed index range reached its final position

Design decisions:
  - Operation is a frozen dataclass.  It is a NOTIFICATION, not a command:
    the algorithm has already applied the mutation to the store when the
    Operation is yielded.
  - The renderer derives highlighting from the latest Operation alone;
    only MARK_SORTED is cumulative.
  - `pace` scales the inter-step delay.  1.0 is a full step, 0.0 means
    "show this immediately after the previous frame".
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

Number = Union[int, float]

LEFTOVER_PACE = 1 / 1.5     # merge sort copies its tail 1.5x faster


class OpKind(Enum):
    COMPARE     = "compare"
    SWAP        = "swap"
    OVERWRITE   = "overwrite"
    MARK_PIVOT  = "pivot"
    MARK_SORTED = "sorted"


@dataclass(frozen=True)
class Operation:
    """
    Attributes:
        kind    : What happened.
        indices : (i, j) for COMPARE / SWAP, (i,) for OVERWRITE / MARK_PIVOT,
                  (lo, hi) inclusive for MARK_SORTED.
        value   : The value written by an OVERWRITE.
        pace    : Multiplier applied to the configured delay before the
                  frame is shown.
    """

    kind:    OpKind
    indices: Tuple[int, ...]
    value:   Optional[Number] = None
    pace:    float            = 1.0

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------
    @classmethod
    def compare(cls, i: int, j: int) -> "Operation":
        return cls(OpKind.COMPARE, (i, j))

    @classmethod
    def swap(cls, i: int, j: int) -> "Operation":
        return cls(OpKind.SWAP, (i, j))

    @classmethod
    def overwrite(cls, i: int, value: Number, pace: float = 1.0) -> "Operation":
        return cls(OpKind.OVERWRITE, (i,), value=value, pace=pace)

    @classmethod
    def mark_pivot(cls, i: int) -> "Operation":
        return cls(OpKind.MARK_PIVOT, (i,), pace=0.0)

    @classmethod
    def mark_sorted(cls, lo: int, hi: int) -> "Operation":
        return cls(OpKind.MARK_SORTED, (lo, hi), pace=0.0)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def sorted_indices(self) -> range:
        """Indices covered by a MARK_SORTED, empty for every other kind."""
        if self.kind is not OpKind.MARK_SORTED:
            return range(0)
        lo, hi = self.indices
        return range(lo, hi + 1)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind":    self.kind.value,
            "indices": list(self.indices),
            "value":   self.value,
        }

    def __str__(self) -> str:
        args = ", ".join(str(i) for i in self.indices)
        if self.kind is OpKind.OVERWRITE:
            args += f", {self.value}"
        return f"{self.kind.name}({args})"
