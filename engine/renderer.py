"""
renderer.py — Renderer interface
=================================
What the engine calls while a run is in progress.  Subclasses override
the hooks they care about; the defaults do nothing.

    on_step(operation, snapshot)   – once per emitted Operation
    on_run_start(algo_key)         – before the first step
    on_run_end()                   – after the final all-sorted step
    on_reset(snapshot)             – after generate / reset
"""

from typing import Sequence, Tuple, Union

from algorithms.operation import Operation

Number = Union[int, float]


class Renderer:

    def on_step(self, operation: Operation, snapshot: Tuple[Number, ...]) -> None:
        pass

    def on_run_start(self, algo_key: str) -> None:
        pass

    def on_run_end(self) -> None:
        pass

    def on_reset(self, snapshot: Tuple[Number, ...]) -> None:
        pass


class RendererGroup(Renderer):
    """Forwards every hook to each member, in order."""

    def __init__(self, *renderers: Renderer):
        self.renderers: Sequence[Renderer] = list(renderers)

    def on_step(self, operation, snapshot):
        for r in self.renderers:
            r.on_step(operation, snapshot)

    def on_run_start(self, algo_key):
        for r in self.renderers:
            r.on_run_start(algo_key)

    def on_run_end(self):
        for r in self.renderers:
            r.on_run_end()

    def on_reset(self, snapshot):
        for r in self.renderers:
            r.on_reset(snapshot)
