"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sorting algorithm the visualizer knows.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, fn, stable, …),
        …
    }

Every `fn` is a generator taking a SequenceStore and yielding Operations.
The controller and the UI both consume AlgoInfo, so adding an algorithm
means writing the generator and adding one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional

from sequence import SequenceStore
from algorithms.operation import Operation, OpKind

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bubble    import bubble_sort
from algorithms.selection import selection_sort
from algorithms.insertion import insertion_sort
from algorithms.merge     import merge_sort
from algorithms.quick     import quick_sort


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                                            # registry key, e.g. "bubble"
    label:            str                                            # human label, e.g. "Bubble Sort"
    fn:               Callable[[SequenceStore], Iterator[Operation]]  # the generator function
    stable:           bool = False
    in_place:         bool = True
    complexity_time:  str  = ""                                      # e.g. "O(n²)"
    complexity_space: str  = ""                                      # e.g. "O(1)"
    description:      str  = ""                                      # one-liner for the UI card
    tags:             List[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=bubble_sort,
        stable=True, tags=["exchange", "quadratic"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Swaps adjacent out-of-order pairs. The largest value sinks to the end each pass.",
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", fn=selection_sort,
        tags=["selection", "quadratic"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Finds the minimum of the unsorted suffix and swaps it into place. At most n swaps.",
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", fn=insertion_sort,
        stable=True, tags=["insertion", "quadratic", "adaptive"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Shifts larger values right and drops each key into its hole. Fast on nearly-sorted input.",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", fn=merge_sort,
        stable=True, in_place=False, tags=["divide-and-conquer"],
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Sorts both halves, then merges them back through temporary buffers.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=quick_sort,
        tags=["divide-and-conquer", "partition"],
        complexity_time="O(n log n) avg, O(n²) worst", complexity_space="O(log n)",
        description="Lomuto partition around the last element, then recurses left and right.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "Operation",
    "OpKind",
    "get_algorithm",
    "list_algorithms",
]
