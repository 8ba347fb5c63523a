"""
main.py — Pathfinding Visualizer Flask App
==========================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  GET  /api/grid               – current grid (JSON + SVG)
  POST /api/grid/wall          – wall off {row, col}
  POST /api/grid/start         – move Start to {row, col}, or a random cell
  POST /api/grid/finish        – move Finish to {row, col}, or a random cell
  POST /api/grid/reset         – clear the board
  POST /api/run                – run {algo_key, seed} and start its animation
  GET  /api/animation/poll     – render events now due for ?run_id=N
  POST /api/animation/skip     – every remaining event of the current run

State management:
  One Board per app, kept in `app.extensions["board"]` (in-memory; a
  single shared board is enough for a local visualizer).  The browser
  polls for due events; starting a new run bumps the run id so a page
  still polling the old one is told it is stale.
"""

import logging
import random
import time
from dataclasses import asdict

from flask import Blueprint, Flask, current_app, jsonify, render_template_string, request

from config import Config
from grid import GridError
from algorithms import list_algorithms, algorithms_by_kind, get_algorithm, SEARCH
from engine import Board, AnimationInProgress, schedule_grid_snapshot
from ui import render_grid, toolbar, analytics_panel, no_path_banner, pseudocode_viewer

logger = logging.getLogger(__name__)

bp = Blueprint("visualizer", __name__)


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(config_object=Config, clock=time.monotonic) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.config.from_prefixed_env("PATHFINDER")

    app.extensions["board"] = Board.from_config(app.config, clock=clock)
    app.register_blueprint(bp)
    return app


# ---------------------------------------------------------------------------
# State helpers
# ---------------------------------------------------------------------------
def get_board() -> Board:
    return current_app.extensions["board"]


def grid_payload(board: Board) -> dict:
    return {
        "grid":      board.grid.to_dict(),
        "svg":       render_grid(board.grid),
        "snapshot":  [ev.to_dict() for ev in schedule_grid_snapshot(board.grid)],
        "animating": board.animation_in_progress,
    }


def read_coords(data: dict):
    """(row, col) from a JSON body, or None when the body has neither."""
    if "row" not in data and "col" not in data:
        return None
    return int(data["row"]), int(data["col"])


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------
@bp.app_errorhandler(GridError)
def handle_grid_error(exc: GridError):
    logger.warning("rejected grid command: %s", exc)
    return jsonify({"error": str(exc)}), 400


@bp.app_errorhandler(AnimationInProgress)
def handle_animation_in_progress(exc: AnimationInProgress):
    return jsonify({"error": str(exc), "run_id": exc.run_id}), 409


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@bp.route("/")
def index():
    board = get_board()
    algos = list_algorithms()
    search_algo = next(iter(algorithms_by_kind(SEARCH)), None)

    return render_template_string(
        INDEX_TEMPLATE,
        svg=render_grid(board.grid),
        toolbar=toolbar(algos),
        analytics=analytics_panel(board.last_metrics),
        banner=no_path_banner(False),
        pseudocode=pseudocode_viewer(search_algo.pseudocode if search_algo else []),
        poll_ms=current_app.config["POLL_INTERVAL_MS"],
    )


# ---------------------------------------------------------------------------
# API: Grid
# ---------------------------------------------------------------------------
@bp.route("/api/grid", methods=["GET"])
def api_grid():
    return jsonify(grid_payload(get_board()))


@bp.route("/api/grid/wall", methods=["POST"])
def api_grid_wall():
    data = request.get_json(silent=True) or {}
    try:
        row, col = read_coords(data)
    except (KeyError, TypeError, ValueError):
        return jsonify({"error": "row and col are required integers"}), 400

    get_board().toggle_wall(row, col)
    return jsonify({"row": row, "col": col, "state": "wall"})


@bp.route("/api/grid/start", methods=["POST"])
def api_grid_start():
    board = get_board()
    data  = request.get_json(silent=True) or {}
    try:
        coords = read_coords(data)
    except (KeyError, TypeError, ValueError):
        return jsonify({"error": "row and col must be integers"}), 400

    if coords is None:
        board.spawn_start(random.Random())
    else:
        board.relocate_start(*coords)
    return jsonify(grid_payload(board))


@bp.route("/api/grid/finish", methods=["POST"])
def api_grid_finish():
    board = get_board()
    data  = request.get_json(silent=True) or {}
    try:
        coords = read_coords(data)
    except (KeyError, TypeError, ValueError):
        return jsonify({"error": "row and col must be integers"}), 400

    if coords is None:
        board.spawn_finish(random.Random())
    else:
        board.relocate_finish(*coords)
    return jsonify(grid_payload(board))


@bp.route("/api/grid/reset", methods=["POST"])
def api_grid_reset():
    board = get_board()
    board.reset_grid()
    return jsonify(grid_payload(board))


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@bp.route("/api/run", methods=["POST"])
def api_run():
    board = get_board()
    data  = request.get_json(silent=True) or {}

    algo_key = data.get("algo_key", "dijkstra")
    if get_algorithm(algo_key) is None:
        return jsonify({"error": f"Unknown algorithm: {algo_key}"}), 400
    seed = data.get("seed")
    if seed is not None and not isinstance(seed, int):
        return jsonify({"error": "seed must be an integer"}), 400

    outcome = board.run(algo_key, seed=seed)

    return jsonify({
        "run_id":       outcome.run_id,
        "kind":         outcome.kind,
        "path_found":   outcome.path_found,
        "seed":         outcome.seed,
        "total_events": len(outcome.events),
        "metrics":      asdict(outcome.metrics),
        # the maze is already on the grid; the page starts from the board as
        # it was and lets the animation draw the walls in
        "svg":          render_grid(outcome.before),
        "analytics":    analytics_panel(outcome.metrics),
    })


# ---------------------------------------------------------------------------
# API: Animation playback
# ---------------------------------------------------------------------------
@bp.route("/api/animation/poll", methods=["GET"])
def api_animation_poll():
    frame = get_board().poll(request.args.get("run_id", type=int))
    if frame.stale:
        return jsonify({"stale": True, "run_id": frame.run_id})

    return jsonify({
        "stale":    False,
        "run_id":   frame.run_id,
        "events":   [ev.to_dict() for ev in frame.events],
        "finished": frame.finished,
    })


@bp.route("/api/animation/skip", methods=["POST"])
def api_animation_skip():
    frame = get_board().skip()
    return jsonify({
        "run_id":   frame.run_id,
        "events":   [ev.to_dict() for ev in frame.events],
        "finished": True,
        "svg":      render_grid(frame.grid, frame.played),
    })


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>Pathfinding Visualizer</title>
  <style>
    body { font-family: sans-serif; background: #010409; color: #e6edf3; margin: 20px; }
    .panel { background: #161b22; border: 1px solid #30363d; border-radius: 8px; padding: 12px; margin-bottom: 12px; }
    .button-row { display: flex; gap: 8px; flex-wrap: wrap; }
    button { background: #0ea5e9; color: #fff; border: none; padding: 8px 14px; border-radius: 6px; cursor: pointer; }
    .visualizer-btn { background: #10b981; }
    .hint { font-size: 11px; color: #7d8590; }
    #no-path { color: #f43f5e; font-weight: 700; }
    .node-unvisited { fill: #1c2128; }
    .node-wall, .node-maze-wall { fill: #0c3547; }
    .node-visited { fill: #10b981; }
    .node-shortest-path { fill: #fffe6a; }
    .node-shortest-path-start { fill: #0ea5e9; }
    .node-shortest-path-end { fill: #ec4899; }
    .code-line { font-family: monospace; font-size: 12px; white-space: pre; }
  </style>
</head>
<body>
  <div id="toolbar">{{ toolbar|safe }}</div>
  <div id="banner">{{ banner|safe }}</div>
  <div id="canvas">{{ svg|safe }}</div>
  <div id="analytics">{{ analytics|safe }}</div>
  <div class="panel">{{ pseudocode|safe }}</div>

  <script>
    const POLL_MS = {{ poll_ms }};
    let currentRun = null;
    let pollTimer = null;
    let mouseDown = false;

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    function stopPolling() {
      if (pollTimer) clearInterval(pollTimer);
      pollTimer = null;
      currentRun = null;
    }

    function paint(ev) {
      const el = document.getElementById('node-' + ev.row + '-' + ev.col);
      if (!el) return;
      el.setAttribute('class', 'node node-' + ev.state);
      if (ev.distance !== null) {
        el.parentNode.querySelector('text').textContent = ev.distance;
      }
    }

    function setCanvas(svg) {
      document.getElementById('canvas').innerHTML = svg;
    }

    function poll() {
      if (currentRun === null) return;
      fetch('/api/animation/poll?run_id=' + currentRun)
        .then(res => res.json())
        .then(data => {
          if (data.stale || data.run_id !== currentRun) { stopPolling(); return; }
          data.events.forEach(paint);
          if (data.finished) stopPolling();
        });
    }

    document.querySelectorAll('.run-btn').forEach(btn => {
      btn.addEventListener('click', async () => {
        stopPolling();
        const data = await post('/api/run', {algo_key: btn.dataset.algo});
        if (data.error) return;
        setCanvas(data.svg);
        document.getElementById('analytics').innerHTML = data.analytics;
        document.getElementById('no-path').style.display =
          (data.kind === 'search' && !data.path_found) ? 'block' : 'none';
        currentRun = data.run_id;
        pollTimer = setInterval(poll, POLL_MS);
      });
    });

    async function refresh(url) {
      stopPolling();
      const data = await post(url, {});
      if (data.svg) setCanvas(data.svg);
      document.getElementById('no-path').style.display = 'none';
    }

    document.getElementById('btn-clear').addEventListener('click', () => refresh('/api/grid/reset'));
    document.getElementById('btn-spawn-start').addEventListener('click', () => refresh('/api/grid/start'));
    document.getElementById('btn-spawn-finish').addEventListener('click', () => refresh('/api/grid/finish'));

    async function wallAt(target) {
      const g = target.closest('g.cell');
      if (!g) return;
      const data = await post('/api/grid/wall', {row: +g.dataset.row, col: +g.dataset.col});
      if (!data.error) paint({row: data.row, col: data.col, state: 'wall', distance: null});
    }

    const canvas = document.getElementById('canvas');
    canvas.addEventListener('mousedown', e => { if (e.button === 0) { mouseDown = true; wallAt(e.target); } });
    canvas.addEventListener('mouseover', e => { if (mouseDown) wallAt(e.target); });
    document.addEventListener('mouseup', () => { mouseDown = false; });
  </script>
</body>
</html>
"""


app = create_app()


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    print("=" * 60)
    print("  Pathfinding Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=True)
