"""
recorder.py — Run Recorder & Analytics
========================================
A Renderer that counts the Operations of a run and, when the run ends,
computes the metrics the Analytics panel shows.  The step log behind
export() is opt-in.

Usage:
    rec = Recorder(keep_log=True)
    controller = RunController(store, config, rec)
    await controller.start()
    rec.metrics.comparisons      # analytics card
    rec.export()                 # serialisable log for replay
"""

import time
from collections import Counter
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Tuple

from algorithms import get_algorithm
from algorithms.operation import Operation, OpKind
from engine.renderer import Renderer, Number


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:     str   = ""
    algo_label:   str   = ""
    array_size:   int   = 0
    comparisons:  int   = 0
    swaps:        int   = 0          # SWAP events, insertion shifts included
    overwrites:   int   = 0
    total_steps:  int   = 0          # every emitted Operation
    wall_time_ms: float = 0.0        # includes the animation delay


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder(Renderer):
    """
    Counts every Operation of a run and, when the run ends, turns the
    counts into RunMetrics.  The full (Operation, snapshot) log is only
    kept when `keep_log` is set; export() needs it.

    Attributes:
        steps   : Every (Operation, snapshot) of the current / last run,
                  empty unless keep_log is set.
        metrics : RunMetrics of the last finished run (None until then).
    """

    def __init__(self, keep_log: bool = False):
        self.keep_log = keep_log
        self.steps:   List[Tuple[Operation, Tuple[Number, ...]]] = []
        self.metrics: Optional[RunMetrics] = None
        self.runs_finished: int = 0
        self.step_count:    int = 0

        self._counts:     Counter = Counter()
        self._array_size: int   = 0
        self._algo_key:   str   = ""
        self._start_time: float = 0.0

    # ------------------------------------------------------------------
    # Renderer hooks
    # ------------------------------------------------------------------
    def on_run_start(self, algo_key: str) -> None:
        self._algo_key   = algo_key
        self._start_time = time.monotonic()
        self._counts     = Counter()
        self._array_size = 0
        self.step_count  = 0
        self.steps       = []
        self.metrics     = None

    def on_step(self, operation: Operation, snapshot: Tuple[Number, ...]) -> None:
        self._counts[operation.kind] += 1
        self._array_size = len(snapshot)
        self.step_count += 1
        if self.keep_log:
            self.steps.append((operation, snapshot))

    def on_run_end(self) -> None:
        wall_ms = (time.monotonic() - self._start_time) * 1000
        self.metrics = self._compute_metrics(wall_ms)
        self.runs_finished += 1

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def operations(self) -> List[Operation]:
        return [op for op, _ in self.steps]

    def count(self, kind: OpKind) -> int:
        return self._counts[kind]

    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_key,
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps": [
                {"operation": op.to_dict(), "values": list(snapshot)}
                for op, snapshot in self.steps
            ],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = get_algorithm(self._algo_key)

        return RunMetrics(
            algo_key=self._algo_key,
            algo_label=info.label if info else "",
            array_size=self._array_size,
            comparisons=self.count(OpKind.COMPARE),
            swaps=self.count(OpKind.SWAP),
            overwrites=self.count(OpKind.OVERWRITE),
            total_steps=self.step_count,
            wall_time_ms=round(wall_ms, 2),
        )
