"""
engine/
-------
Run control & playback layer.

    from engine import RunController, RunConfig, Recorder
"""

from engine.renderer   import Renderer, RendererGroup
from engine.emitter    import StepEmitter, compute_delay, MIN_DELAY_MS, POLL_INTERVAL_MS
from engine.config     import RunConfig
from engine.controller import RunController, RunState
from engine.recorder   import Recorder, RunMetrics

__all__ = [
    "Renderer",
    "RendererGroup",
    "StepEmitter",
    "compute_delay",
    "MIN_DELAY_MS",
    "POLL_INTERVAL_MS",
    "RunConfig",
    "RunController",
    "RunState",
    "Recorder",
    "RunMetrics",
]
