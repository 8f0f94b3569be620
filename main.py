"""
main.py — Sorting Visualizer Flask App
========================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  GET  /api/state              – current frame + run state (polled by the page)
  POST /api/array/generate     – load the custom values, or a random array
  POST /api/array/reset        – restore the last generated array
  POST /api/run                – start the selected algorithm
  POST /api/run/pause          – toggle pause / resume
  POST /api/config/speed       – speed setting 1..50 (applies mid-run)
  POST /api/config/size        – array size for the next generate
  POST /api/config/content     – custom comma separated values
  POST /api/config/algo        – select the algorithm

State management:
  One run at a time for the whole process.  A single RunController,
  SequenceStore and RunConfig live at module level; the controller's
  coroutine runs on a dedicated asyncio event loop thread and the
  LiveFrame renderer is what request threads read back.
  Misused controls (start while running, pause while idle, generate
  mid-run) are inert: the route answers with the unchanged state.
"""

from flask import Flask, render_template_string, request, jsonify
import asyncio
import logging
import threading
import sys
import os
from typing import Any, Dict, Optional

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from algorithms import get_algorithm, list_algorithms
from engine import RunConfig, RunController, Recorder, RendererGroup
from sequence import SequenceStore
from ui import (
    LiveFrame,
    render_bars,
    run_controls,
    array_controls,
    speed_control,
    algorithm_selector,
    analytics_panel,
)

log = logging.getLogger(__name__)

app = Flask(__name__)

# ---------------------------------------------------------------------------
# Process-wide run state
# ---------------------------------------------------------------------------
config     = RunConfig()
store      = SequenceStore()
frame      = LiveFrame()
recorder   = Recorder()
controller = RunController(store, config, RendererGroup(frame, recorder))
controller.generate()

_loop: Optional[asyncio.AbstractEventLoop] = None
_loop_lock = threading.Lock()


def get_loop() -> asyncio.AbstractEventLoop:
    """The event loop the engine runs on, started on first use."""
    global _loop
    with _loop_lock:
        if _loop is None:
            _loop = asyncio.new_event_loop()
            threading.Thread(target=_loop.run_forever, name="sort-engine", daemon=True).start()
    return _loop


def get_state() -> Dict[str, Any]:
    """Return current app state as a dict."""
    values, op, sorted_indices, step = frame.read()
    return {
        "state":      controller.state.value,
        "step":       step,
        "values":     list(values),
        "operation":  op.to_dict() if op else None,
        "sorted":     sorted(sorted_indices),
        "speed":      config.speed,
        "delay_ms":   config.delay_ms,
        "array_size": config.array_size,
        "array_text": config.array_text,
        "algorithm":  config.algorithm,
        "locked":     config.locked,
        "svg":        render_bars(values, op, sorted_indices),
        "analytics":  analytics_panel(recorder.metrics),
    }


def read_json() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    state = get_state()

    html = render_template_string(INDEX_TEMPLATE,
        svg=state["svg"],
        run=run_controls(controller.state, state["step"]),
        array=array_controls(config.array_size, config.array_text, config.locked),
        speed=speed_control(config.speed),
        algo_selector=algorithm_selector(list_algorithms(), config.algorithm, config.locked),
        analytics=state["analytics"],
    )
    return html


@app.route("/api/state")
def api_state():
    return jsonify(get_state())


# ---------------------------------------------------------------------------
# API: Array
# ---------------------------------------------------------------------------
@app.route("/api/array/generate", methods=["POST"])
def api_array_generate():
    data = read_json()
    if "text" in data:
        config.set_array_content(str(data["text"]))
    accepted = controller.generate()
    return jsonify({"accepted": accepted, **get_state()})


@app.route("/api/array/reset", methods=["POST"])
def api_array_reset():
    accepted = controller.reset()
    return jsonify({"accepted": accepted, **get_state()})


# ---------------------------------------------------------------------------
# API: Run
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    accepted = asyncio.run_coroutine_threadsafe(_launch(), get_loop()).result(timeout=5)
    return jsonify({"accepted": accepted, **get_state()})


async def _launch() -> bool:
    """Runs on the engine loop: claim the controller, then schedule the run."""
    info = controller.begin()
    if info is None:
        return False
    task = asyncio.ensure_future(controller.run(info))
    task.add_done_callback(_report_run)
    return True


def _report_run(task: "asyncio.Future") -> None:
    if not task.cancelled() and task.exception() is not None:
        log.error("run failed", exc_info=task.exception())


@app.route("/api/run/pause", methods=["POST"])
def api_run_pause():
    new_state = controller.toggle_pause()
    return jsonify({"accepted": new_state is not None, **get_state()})


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    try:
        config.set_speed(int(read_json().get("speed", config.speed)))
    except (TypeError, ValueError):
        return jsonify({"error": "speed must be an integer"}), 400
    return jsonify({"speed": config.speed, "delay_ms": config.delay_ms})


@app.route("/api/config/size", methods=["POST"])
def api_config_size():
    try:
        size = int(read_json().get("size", config.array_size))
    except (TypeError, ValueError):
        return jsonify({"error": "size must be an integer"}), 400
    accepted = config.set_array_size(size)
    return jsonify({"accepted": accepted, "array_size": config.array_size})


@app.route("/api/config/content", methods=["POST"])
def api_config_content():
    config.set_array_content(str(read_json().get("text", "")))
    return jsonify({"array_text": config.array_text})


@app.route("/api/config/algo", methods=["POST"])
def api_config_algo():
    algo_key = read_json().get("algo_key", "")
    accepted = config.select_algorithm(algo_key)
    algo_info = get_algorithm(config.algorithm)
    return jsonify({
        "accepted": accepted,
        "algorithm": config.algorithm,
        "label": algo_info.label if algo_info else "",
        "algo_selector": algorithm_selector(list_algorithms(), config.algorithm, config.locked),
    })


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Sorting Visualizer</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500;700&family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --bg-panel-hover: #1c2128;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --text-muted: #484f58;
      --accent-cyan: #0ea5e9;
      --accent-teal: #06b6d4;
      --accent-emerald: #10b981;
      --accent-amber: #f59e0b;
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    /* Sidebar */
    #sidebar {
      width: 340px;
      background: linear-gradient(180deg, var(--bg-dark) 0%, var(--bg-darker) 100%);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    /* Canvas */
    #main {
      flex: 1;
      display: flex;
      align-items: center;
      justify-content: center;
      background: radial-gradient(ellipse at top, rgba(6, 182, 212, 0.05) 0%, transparent 50%),
                  var(--bg-darker);
    }
    #canvas-svg { max-width: 100%; max-height: 100%; }

    /* Panels */
    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
    }
    .panel h3 {
      font-size: 13px;
      font-weight: 700;
      margin-bottom: 14px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
    }

    /* Buttons */
    .button-row { display: flex; gap: 8px; margin-bottom: 12px; }
    button {
      background: linear-gradient(135deg, var(--accent-cyan), var(--accent-teal));
      color: #fff;
      border: none;
      padding: 10px 16px;
      border-radius: 8px;
      cursor: pointer;
      font-size: 13px;
      font-weight: 600;
      font-family: 'DM Sans', sans-serif;
    }
    button:disabled { opacity: 0.4; cursor: not-allowed; }
    .btn-primary { background: linear-gradient(135deg, var(--accent-emerald), #059669); }
    .btn-secondary { background: var(--bg-panel-hover); border: 1px solid var(--border); }

    /* Inputs */
    select, input[type="text"], input[type="range"] {
      width: 100%;
      padding: 10px 12px;
      margin: 6px 0;
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      color: var(--text-primary);
      font-size: 13px;
    }
    label {
      display: block;
      margin: 10px 0 4px;
      font-size: 12px;
      color: var(--text-secondary);
      text-transform: uppercase;
    }

    .step-info {
      font-size: 13px;
      color: var(--text-secondary);
      font-family: 'JetBrains Mono', monospace;
      padding: 8px 12px;
      background: var(--bg-darker);
      border-radius: 6px;
      border-left: 3px solid var(--accent-cyan);
    }
    .state-running { color: var(--accent-emerald); }
    .state-paused  { color: var(--accent-amber); }

    table { width: 100%; font-size: 13px; margin-top: 8px; }
    table td { padding: 6px 4px; }
    table td:last-child { text-align: right; color: var(--accent-cyan); font-family: 'JetBrains Mono', monospace; }

    .hint, .placeholder, .algo-description {
      font-size: 12px;
      color: var(--text-secondary);
      margin-top: 8px;
    }
    .algo-tags { margin-top: 6px; }
    .tag {
      display: inline-block;
      font-size: 11px;
      padding: 2px 6px;
      margin: 0 4px 4px 0;
      border-radius: 4px;
      background: var(--bg-panel-hover);
      color: var(--text-secondary);
    }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="run">{{ run|safe }}</div>
    <div id="algo">{{ algo_selector|safe }}</div>
    <div id="array">{{ array|safe }}</div>
    <div id="speed-panel">{{ speed|safe }}</div>
    <div id="analytics">{{ analytics|safe }}</div>
  </div>

  <div id="main">
    <div id="canvas-svg">{{ svg|safe }}</div>
  </div>

  <script>
    // API helpers
    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    function applyState(data) {
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
      if (data.analytics) document.getElementById('analytics').innerHTML = data.analytics;
      const running = data.state !== 'idle';
      document.getElementById('run-state').textContent = data.state.toUpperCase();
      document.getElementById('run-state').className = 'state-' + data.state;
      document.getElementById('current-step').textContent = data.step;
      document.getElementById('btn-start').disabled = running;
      document.getElementById('btn-pause').disabled = !running;
      document.getElementById('btn-pause').textContent = data.state === 'paused' ? 'Resume' : 'Pause';
      document.getElementById('btn-generate').disabled = running;
      document.getElementById('array-size').disabled = running;
      const algo = document.getElementById('algo-selector');
      if (algo) algo.disabled = running;
    }

    // Poll while a run is in progress
    let polling = null;
    function startPolling() {
      if (polling) return;
      polling = setInterval(async () => {
        const res = await fetch('/api/state');
        const data = await res.json();
        applyState(data);
        if (data.state === 'idle') { clearInterval(polling); polling = null; }
      }, 40);
    }

    document.getElementById('btn-start').addEventListener('click', async () => {
      const data = await post('/api/run');
      applyState(data);
      startPolling();
    });

    document.getElementById('btn-pause').addEventListener('click', async () => {
      applyState(await post('/api/run/pause'));
    });

    document.getElementById('btn-generate').addEventListener('click', async () => {
      const text = document.getElementById('array-text').value;
      applyState(await post('/api/array/generate', {text: text}));
    });

    document.getElementById('btn-reset').addEventListener('click', async () => {
      applyState(await post('/api/array/reset'));
    });

    // Sliders
    document.getElementById('array-size').addEventListener('input', async (e) => {
      document.getElementById('size-val').textContent = e.target.value;
      await post('/api/config/size', {size: +e.target.value});
    });

    document.getElementById('speed').addEventListener('input', async (e) => {
      document.getElementById('speed-val').textContent = e.target.value;
      const data = await post('/api/config/speed', {speed: +e.target.value});
      document.getElementById('delay-val').textContent = data.delay_ms;
    });

    // Algorithm selector
    document.getElementById('algo').addEventListener('change', async (e) => {
      if (e.target.id !== 'algo-selector') return;
      const data = await post('/api/config/algo', {algo_key: e.target.value});
      if (data.algo_selector) document.getElementById('algo').innerHTML = data.algo_selector;
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )
    print("=" * 60)
    print("  Sorting Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(host="127.0.0.1", port=5000, threaded=True)
