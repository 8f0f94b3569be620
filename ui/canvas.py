"""
canvas.py — SVG Bar Renderer
==============================
Pure rendering function: values + latest Operation → SVG string.

The renderer consumes:
  • values          – the sequence snapshot to draw
  • operation       – the latest Operation (or None for a static array)
  • sorted_indices  – indices already marked sorted (cumulative)
  • config          – visual config (canvas size, colors, fonts, …)

Design decisions:
  - NO mutation.  The caller passes in everything and gets back a string.
  - Highlighting comes from the latest Operation only.  Nothing has to be
    cleared between frames; the next Operation simply replaces it.
  - Layout follows the classic bar chart: fixed gap, width shared evenly,
    height scaled to the largest value, each bar labelled with its value.
"""

from typing import Collection, Dict, Optional, Sequence

from algorithms.operation import Operation, OpKind
from sequence.store import Number


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:   int = 900
    height:  int = 520
    bg:      str = "#0d1117"
    padding: int = 18          # left / right inner margin
    headroom: int = 30         # space above the tallest bar for its label

    # bar
    gap:        int = 6
    min_width:  int = 6
    min_height: int = 6

    # bar colors (role → fill)
    bar_colors: Dict[str, str] = {
        "default":   "#30363d",   # medium grey
        "compare":   "#0ea5e9",   # cyan
        "swap":      "#f43f5e",   # rose
        "overwrite": "#f59e0b",   # amber, merge write-back
        "pivot":     "#a855f7",   # purple
        "sorted":    "#10b981",   # emerald
    }

    label_color: str = "#e6edf3"
    label_size:  int = 11


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_bars(
    values: Sequence[Number],
    operation: Optional[Operation] = None,
    sorted_indices: Collection[int] = (),
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an SVG string.

    Args:
        values         : The sequence to draw.
        operation      : Latest Operation; decides which bars are highlighted.
        sorted_indices : Bars already in their final slot.
        config         : Visual config.
    """

    svg_parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    n = len(values)
    if n:
        inner_width = max(200, config.width - config.padding * 2)
        total_gap   = max(0, (n - 1) * config.gap)
        bar_width   = max(config.min_width, (inner_width - total_gap) // max(1, n))
        top         = max(list(values) + [1])
        max_height  = config.height - config.headroom
        roles       = bar_roles(n, operation, sorted_indices)

        for i, v in enumerate(values):
            h = max(config.min_height, round((v / top) * max_height))
            x = config.padding + i * (bar_width + config.gap)
            svg_parts.append(_render_bar(i, v, x, bar_width, h, roles[i], config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


def bar_roles(
    n: int,
    operation: Optional[Operation] = None,
    sorted_indices: Collection[int] = (),
) -> list:
    """Role name for each bar: transient highlight first, then sorted, else default."""
    roles = ["sorted" if i in sorted_indices else "default" for i in range(n)]
    if operation is None:
        return roles

    if operation.kind is OpKind.MARK_SORTED:
        for i in operation.sorted_indices():
            if 0 <= i < n:
                roles[i] = "sorted"
        return roles

    role = {
        OpKind.COMPARE:    "compare",
        OpKind.SWAP:       "swap",
        OpKind.OVERWRITE:  "overwrite",
        OpKind.MARK_PIVOT: "pivot",
    }[operation.kind]
    for i in operation.indices:
        if 0 <= i < n:
            roles[i] = role
    return roles


# ---------------------------------------------------------------------------
# Bar Rendering
# ---------------------------------------------------------------------------
def _render_bar(
    index: int,
    value: Number,
    x: int,
    width: int,
    height: int,
    role: str,
    config: CanvasConfig,
) -> str:
    fill = config.bar_colors.get(role, config.bar_colors["default"])
    y = config.height - height

    return "\n".join([
        f'<g class="bar {role}" data-index="{index}">',
        f'  <rect x="{x}" y="{y}" width="{width}" height="{height}" rx="3" fill="{fill}"/>',
        f'  <text x="{x + width / 2}" y="{y - 4}" text-anchor="middle" '
        f'font-size="{config.label_size}" font-family="\'JetBrains Mono\', monospace" '
        f'fill="{config.label_color}">{value}</text>',
        '</g>',
    ])
