"""
controller.py — Run Controller
===============================
The only object the input layer talks to during a run.  It owns the
RunState, gates start / pause / generate / reset, and drives one
algorithm generator through the StepEmitter.

State machine:
    IDLE     →  start()         →  RUNNING
    RUNNING  →  toggle_pause()  →  PAUSED
    PAUSED   →  toggle_pause()  →  RUNNING
    RUNNING  →  (algorithm done) →  IDLE

Misused controls are inert: start() while a run is active, pause while
idle, generate / reset mid-run all return without changing anything.
There is no abort; once started, a run always finishes.

Concurrency:
  start() is a coroutine meant for a single asyncio event loop.  It is
  begin() (check + switch to RUNNING, no await) followed by run(), so
  two start() calls scheduled back to back can never both run.  Callers
  on other threads should submit begin() to the loop and then schedule
  run() there, so they learn whether their start was accepted.
  toggle_pause() is a plain attribute flip and may be called from any
  thread.
"""

import asyncio
import logging
from enum import Enum
from typing import Awaitable, Callable, Optional

from algorithms import AlgoInfo, get_algorithm
from algorithms.operation import Operation
from sequence import SequenceStore, NoSnapshotError, random_array
from engine.config import RunConfig
from engine.emitter import StepEmitter
from engine.renderer import Renderer

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class RunState(Enum):
    IDLE    = "idle"
    RUNNING = "running"
    PAUSED  = "paused"


# ---------------------------------------------------------------------------
# RunController
# ---------------------------------------------------------------------------
class RunController:
    """
    Attributes:
        store    : The SequenceStore every run sorts in place.
        config   : Live RunConfig (speed, size, text, algorithm).
        renderer : Receives every step and the run / reset hooks.
        emitter  : The StepEmitter the algorithm is driven through.
        state    : Current RunState.
    """

    def __init__(
        self,
        store: SequenceStore,
        config: RunConfig,
        renderer: Optional[Renderer] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.store    = store
        self.config   = config
        self.renderer = renderer or Renderer()
        self.state    = RunState.IDLE
        self.emitter  = StepEmitter(
            store,
            self.renderer,
            delay_ms=lambda: self.config.delay_ms,
            is_paused=lambda: self.state is RunState.PAUSED,
            sleep=sleep,
        )

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    async def start(self) -> bool:
        """Sort the store with the selected algorithm.  False if rejected."""
        info = self.begin()
        if info is None:
            return False
        await self.run(info)
        return True

    def begin(self) -> Optional[AlgoInfo]:
        """
        Claim the controller for a run: IDLE → RUNNING, config locked.
        Returns the algorithm to hand to run(), or None if rejected.
        Contains no await, so on the event loop the check and the claim
        cannot interleave with another begin().
        """
        if self.state is not RunState.IDLE:
            log.debug("start ignored: run already %s", self.state.value)
            return None
        if self.store.length() == 0:
            log.debug("start ignored: no array loaded")
            return None

        info = get_algorithm(self.config.algorithm)
        if info is None:
            log.warning("start ignored: unknown algorithm %r", self.config.algorithm)
            return None

        self.state = RunState.RUNNING
        self.config.lock()
        log.info("run started: %s on %d values", info.key, self.store.length())
        self.renderer.on_run_start(info.key)
        return info

    async def run(self, info: AlgoInfo) -> None:
        """Drive a run claimed by begin() to completion."""
        try:
            for op in info.fn(self.store):
                await self.emitter.emit(op)
            # final frame: everything green
            self.renderer.on_step(
                Operation.mark_sorted(0, self.store.length() - 1),
                self.store.snapshot(),
            )
        finally:
            self.state = RunState.IDLE
            self.config.unlock()
            self.renderer.on_run_end()
            log.info("run finished: %s", info.key)

    def toggle_pause(self) -> Optional[RunState]:
        """Flip RUNNING ↔ PAUSED.  Returns the new state, None when idle."""
        if self.state is RunState.IDLE:
            log.debug("pause ignored: no run in progress")
            return None
        if self.state is RunState.RUNNING:
            self.state = RunState.PAUSED
        else:
            self.state = RunState.RUNNING
        log.info("run %s", self.state.value)
        return self.state

    # ------------------------------------------------------------------
    # Array lifecycle
    # ------------------------------------------------------------------
    def generate(self) -> bool:
        """Load a new array from the pending text, or a random one."""
        if self.state is not RunState.IDLE:
            log.debug("generate ignored: run in progress")
            return False
        self.store.reset(self.config.initial_values())
        self.renderer.on_reset(self.store.snapshot())
        return True

    def reset(self) -> bool:
        """Put the last generated array back.  Generates one if there is none."""
        if self.state is not RunState.IDLE:
            log.debug("reset ignored: run in progress")
            return False
        try:
            self.store.restore()
        except NoSnapshotError:
            log.info("nothing to restore, generating a fresh array")
            self.store.reset(random_array(self.config.array_size))
        self.renderer.on_reset(self.store.snapshot())
        return True

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def is_running(self) -> bool:
        return self.state is not RunState.IDLE

    @property
    def is_paused(self) -> bool:
        return self.state is RunState.PAUSED
