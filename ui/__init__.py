"""
ui/
---
Presentation layer.

    from ui import render_bars, LiveFrame
    from ui import run_controls, array_controls, …
"""

from ui.canvas import render_bars, bar_roles, CanvasConfig
from ui.frame  import LiveFrame

from ui.controls import (
    run_controls,
    array_controls,
    speed_control,
    algorithm_selector,
    analytics_panel,
)

__all__ = [
    "render_bars",
    "bar_roles",
    "CanvasConfig",
    "LiveFrame",
    "run_controls",
    "array_controls",
    "speed_control",
    "algorithm_selector",
    "analytics_panel",
]
