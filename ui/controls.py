"""
controls.py — UI Control Panels
=================================
Every panel is a pure function that takes state and returns HTML.

Panels:
  • toolbar           – one button per registered algorithm + board commands
  • analytics_panel   – cells visited, path length, walls placed, …
  • no_path_banner    – shown when the search could not reach Finish
  • pseudocode_viewer – static listing of the selected algorithm
"""

from typing import List, Optional

from algorithms import AlgoInfo, SEARCH, MAZE, get_algorithm
from engine import RunMetrics


# ---------------------------------------------------------------------------
# Toolbar
# ---------------------------------------------------------------------------
def toolbar(algorithms: List[AlgoInfo]) -> str:
    buttons = []
    for algo in algorithms:
        cls = "visualizer-btn" if algo.kind == SEARCH else "btn"
        buttons.append(
            f'<button class="{cls} run-btn" data-algo="{algo.key}" title="{algo.description}">'
            f'{algo.label}</button>'
        )
    return f"""
    <div class="panel toolbar">
      <h3>Pathfinding Algorithm</h3>
      <div class="button-row">
        {''.join(buttons)}
        <button id="btn-clear" class="btn">Clear Board</button>
        <button id="btn-spawn-start" class="btn">Spawn New Start Path</button>
        <button id="btn-spawn-finish" class="btn">Spawn New Finish Path</button>
      </div>
      <p class="hint">Click or drag on the grid to paint walls.</p>
    </div>
    """


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics:
        return """
        <div class="panel analytics-panel">
          <h3>Analytics</h3>
          <p class="placeholder">Run an algorithm to see metrics.</p>
        </div>
        """

    info = get_algorithm(metrics.algo_key)
    if info is not None and info.kind == MAZE:
        rows = f"<tr><td>Walls Placed:</td><td><strong>{metrics.walls_placed}</strong></td></tr>"
    else:
        path_status = "Found" if metrics.path_found else "Not Found"
        rows = (
            f"<tr><td>Cells Visited:</td><td><strong>{metrics.cells_visited}</strong></td></tr>"
            f"<tr><td>Path Length:</td><td><strong>{metrics.path_length} steps</strong></td></tr>"
            f"<tr><td>Path:</td><td><strong>{path_status}</strong></td></tr>"
        )

    return f"""
    <div class="panel analytics-panel">
      <h3>Analytics: {metrics.algo_label}</h3>
      <table>
        {rows}
        <tr><td>Animation:</td><td><strong>{metrics.duration_ms} ms</strong></td></tr>
        <tr><td>Compute Time:</td><td><strong>{metrics.wall_time_ms:.2f} ms</strong></td></tr>
      </table>
    </div>
    """


def no_path_banner(show: bool = False) -> str:
    style = "block" if show else "none"
    return f'<span id="no-path" style="display: {style};">THE ALGORITHM DIDN\'T FIND ANY PATH</span>'


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(pseudocode_lines: List[str]) -> str:
    if not pseudocode_lines:
        return '<div class="code-block"></div>'

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        line_escaped = line.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')
        lines_html.append(f'<div class="code-line" data-line="{i}">{line_escaped}</div>')

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """
