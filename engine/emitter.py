"""
emitter.py — Step Emitter
==========================
The one suspension point every algorithm step passes through.

    emitter = StepEmitter(store, renderer,
                          delay_ms=lambda: config.delay_ms,
                          is_paused=lambda: controller.is_paused)
    for op in algorithm(store):
        await emitter.emit(op)

emit() does three things, in order:
  1. While paused, sleep POLL_INTERVAL_MS and look again.
  2. Sleep the CURRENT delay (read live, so a speed change lands on the
     very next step) scaled by `op.pace`.
  3. Hand the operation plus a snapshot of the store to the renderer.

Pausing therefore only ever takes effect between operations: the
mutation behind `op` has already happened when emit() is entered.

The poll interval (80 ms) may exceed the fastest delay (40 ms).  That
only adds resume latency; it never changes what the algorithm does.
"""

import asyncio
from typing import Awaitable, Callable

from algorithms.operation import Operation
from sequence import SequenceStore
from engine.renderer import Renderer

MIN_DELAY_MS     = 40
POLL_INTERVAL_MS = 80


# ---------------------------------------------------------------------------
# Speed setting → delay
# ---------------------------------------------------------------------------
def compute_delay(value: int) -> int:
    """Map a speed setting (1..50) to milliseconds: 1 → 834, 50 → 50."""
    return max(MIN_DELAY_MS, round(850 - value * 16))


# ---------------------------------------------------------------------------
# StepEmitter
# ---------------------------------------------------------------------------
class StepEmitter:
    """
    Attributes:
        store            : The SequenceStore snapshotted on every step.
        renderer         : Receives on_step(operation, snapshot).
        poll_interval_ms : How often a paused run re-checks the pause flag.
    """

    def __init__(
        self,
        store: SequenceStore,
        renderer: Renderer,
        delay_ms: Callable[[], int],
        is_paused: Callable[[], bool],
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        poll_interval_ms: int = POLL_INTERVAL_MS,
    ):
        self.store            = store
        self.renderer         = renderer
        self.poll_interval_ms = poll_interval_ms

        self._delay_ms  = delay_ms
        self._is_paused = is_paused
        self._sleep     = sleep

    async def emit(self, op: Operation) -> None:
        while self._is_paused():
            await self._sleep(self.poll_interval_ms / 1000)

        await self._sleep(self._delay_ms() * op.pace / 1000)

        self.renderer.on_step(op, self.store.snapshot())
