"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • run_controls        – start / pause-resume, run status
  • array_controls      – size slider, custom values, generate / reset
  • speed_control       – 1..50 slider with the derived delay
  • algorithm_selector  – dropdown + complexity card
  • analytics_panel     – comparisons, swaps, writes, wall time

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from html import escape
from typing import List, Optional

from algorithms import AlgoInfo
from engine import RunMetrics, RunState, compute_delay
from engine.config import MIN_SPEED, MAX_SPEED


# ---------------------------------------------------------------------------
# Run Controls
# ---------------------------------------------------------------------------
def run_controls(state: RunState = RunState.IDLE, steps: int = 0) -> str:
    running = state is not RunState.IDLE
    pause_label = "Resume" if state is RunState.PAUSED else "Pause"

    return f"""
    <div class="panel run-controls">
      <h3>⏯ Run</h3>
      <div class="button-row">
        <button id="btn-start" class="btn-primary" {'disabled' if running else ''}>▶ Start</button>
        <button id="btn-pause" {'' if running else 'disabled'}>{pause_label}</button>
      </div>
      <div class="step-info">
        <span id="run-state" class="state-{state.value}">{state.value.upper()}</span>
        · Step <span id="current-step">{steps}</span>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Array Controls
# ---------------------------------------------------------------------------
def array_controls(size: int = 20, text: str = "", locked: bool = False) -> str:
    disabled = 'disabled' if locked else ''
    return f"""
    <div class="panel array-controls">
      <h3>📊 Array</h3>
      <label>Size: <span id="size-val">{size}</span>
        <input type="range" id="array-size" min="5" max="100" value="{size}" {disabled}>
      </label>
      <label>Custom values:
        <input type="text" id="array-text" placeholder="e.g. 5, 3, 8, 1" value="{escape(text)}">
      </label>
      <div class="button-row">
        <button id="btn-generate" class="btn-secondary" {disabled}>Generate</button>
        <button id="btn-reset" class="btn-secondary">Reset</button>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Speed Control
# ---------------------------------------------------------------------------
def speed_control(speed: int = 25) -> str:
    return f"""
    <div class="panel speed-control">
      <h3>⚡ Speed</h3>
      <label>Speed: <span id="speed-val">{speed}</span>
        <input type="range" id="speed" min="{MIN_SPEED}" max="{MAX_SPEED}" value="{speed}">
      </label>
      <p class="hint"><span id="delay-val">{compute_delay(speed)}</span> ms per step</p>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(
    algorithms: List[AlgoInfo],
    selected_key: str = "bubble",
    locked: bool = False,
) -> str:
    options = []
    selected: Optional[AlgoInfo] = None
    for algo in algorithms:
        sel = 'selected' if algo.key == selected_key else ''
        if sel:
            selected = algo
        options.append(
            f'<option value="{algo.key}" {sel}>{algo.label} — {algo.complexity_time}</option>'
        )

    card = ""
    if selected:
        tags = "".join(f'<span class="tag">{escape(t)}</span>' for t in selected.tags)
        card = f"""
        <p class="algo-description">{selected.description}</p>
        <p class="hint">Space {selected.complexity_space} · {'stable' if selected.stable else 'unstable'} · {'in-place' if selected.in_place else 'auxiliary buffer'}</p>
        <div class="algo-tags">{tags}</div>
        """

    return f"""
    <div class="panel algorithm-selector">
      <h3>🧠 Algorithm</h3>
      <select id="algo-selector" {'disabled' if locked else ''}>
        {''.join(options)}
      </select>
      {card}
    </div>
    """


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics:
        return """
        <div class="panel analytics-panel">
          <h3>📈 Analytics</h3>
          <p class="placeholder">Run an algorithm to see metrics.</p>
        </div>
        """

    return f"""
    <div class="panel analytics-panel">
      <h3>📈 Analytics — {metrics.algo_label}</h3>
      <table>
        <tr><td>Array Size:</td><td><strong>{metrics.array_size}</strong></td></tr>
        <tr><td>Comparisons:</td><td><strong>{metrics.comparisons}</strong></td></tr>
        <tr><td>Swaps / Shifts:</td><td><strong>{metrics.swaps}</strong></td></tr>
        <tr><td>Writes:</td><td><strong>{metrics.overwrites}</strong></td></tr>
        <tr><td>Total Steps:</td><td><strong>{metrics.total_steps}</strong></td></tr>
        <tr><td>Wall Time:</td><td><strong>{metrics.wall_time_ms:.0f} ms</strong></td></tr>
      </table>
    </div>
    """
