"""
frame.py — Live Frame
======================
The Renderer the web UI polls.  The engine writes to it from the event
loop thread; Flask request threads read it.  Every access goes through
one lock and readers get copies.

Visual state kept here:
  • values          – latest snapshot
  • operation       – latest Operation (transient highlight)
  • sorted_indices  – cumulative MARK_SORTED coverage, cleared on reset
                      and at the start of each run
  • step            – operations received this run
"""

import threading
from typing import Any, Dict, Optional, Set, Tuple

from algorithms.operation import Operation
from engine.renderer import Renderer, Number


class LiveFrame(Renderer):

    def __init__(self):
        self._lock = threading.Lock()
        self.values:         Tuple[Number, ...]  = ()
        self.operation:      Optional[Operation] = None
        self.sorted_indices: Set[int]            = set()
        self.step:           int                 = 0
        self.algo_key:       str                 = ""

    # ------------------------------------------------------------------
    # Renderer hooks
    # ------------------------------------------------------------------
    def on_run_start(self, algo_key: str) -> None:
        with self._lock:
            self.algo_key  = algo_key
            self.operation = None
            self.sorted_indices = set()
            self.step = 0

    def on_step(self, operation: Operation, snapshot: Tuple[Number, ...]) -> None:
        with self._lock:
            self.values    = snapshot
            self.operation = operation
            self.sorted_indices.update(operation.sorted_indices())
            self.step += 1

    def on_reset(self, snapshot: Tuple[Number, ...]) -> None:
        with self._lock:
            self.values    = snapshot
            self.operation = None
            self.sorted_indices = set()
            self.step = 0

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------
    def read(self) -> Tuple[Tuple[Number, ...], Optional[Operation], Set[int], int]:
        with self._lock:
            return self.values, self.operation, set(self.sorted_indices), self.step

    def to_dict(self) -> Dict[str, Any]:
        values, op, sorted_indices, step = self.read()
        return {
            "values":    list(values),
            "operation": op.to_dict() if op else None,
            "sorted":    sorted(sorted_indices),
            "step":      step,
        }
