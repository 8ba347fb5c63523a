"""
canvas.py — SVG Grid Renderer
=============================
Pure rendering function: Grid (+ optional RenderEvents) → SVG string.

Each cell is a <rect id="node-{row}-{col}"> whose class carries its
symbolic state, so the browser can replay RenderEvents by swapping the
class and the distance label without re-requesting the SVG.

Design decisions:
  - NO mutation.  The caller passes the grid and the events to apply and
    gets back a string.
  - Start / Finish get a marker on top of the state fill, so they stay
    recognisable whatever state the animation paints under them.
"""

from typing import Dict, Iterable, Optional

from grid import Cell, CellState, Grid
from engine.scheduler import RenderEvent


# ---------------------------------------------------------------------------
# Visual Config: palette and dimensions
# ---------------------------------------------------------------------------
class CanvasConfig:
    cell_size: int = 25
    gap:       int = 1
    bg:        str = "#0d1117"

    # state → fill
    cell_colors: Dict[str, str] = {
        CellState.UNVISITED.value:           "#1c2128",   # dark grey
        CellState.WALL.value:                "#0c3547",   # deep blue
        CellState.VISITED.value:             "#10b981",   # emerald
        CellState.SHORTEST_PATH.value:       "#fffe6a",   # yellow
        CellState.SHORTEST_PATH_START.value: "#0ea5e9",   # cyan
        CellState.SHORTEST_PATH_END.value:   "#ec4899",   # pink
        CellState.MAZE_WALL.value:           "#0c3547",
    }

    start_color:  str = "#0ea5e9"
    finish_color: str = "#ec4899"
    label_color:  str = "#e6edf3"
    label_size:   int = 9


CONFIG = CanvasConfig()


def cell_dom_id(row: int, col: int) -> str:
    return f"node-{row}-{col}"


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_grid(
    grid: Grid,
    events: Optional[Iterable[RenderEvent]] = None,
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an SVG string.

    Args:
        grid   : The grid to draw.
        events : RenderEvents already played back (applied in order on top
                 of each cell's resting state), or None for a clean board.
        config : Visual config.
    """
    painted: Dict[tuple, RenderEvent] = {}
    for ev in events or ():
        painted[ev.coord] = ev

    step = config.cell_size + config.gap
    width, height = grid.cols * step, grid.rows * step

    svg_parts = [
        f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">'
    ]
    for cell in grid:
        svg_parts.append(_render_cell(cell, painted.get(cell.coord), config))
    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


# ---------------------------------------------------------------------------
# Cell Rendering
# ---------------------------------------------------------------------------
def _render_cell(cell: Cell, event: Optional[RenderEvent], config: CanvasConfig) -> str:
    state = event.state.value if event else cell.base_state().value
    fill  = config.cell_colors.get(state, config.cell_colors[CellState.UNVISITED.value])

    step = config.cell_size + config.gap
    x, y = cell.col * step, cell.row * step
    s    = config.cell_size

    label = ""
    if event is not None and event.distance is not None:
        label = str(event.distance)

    parts = [
        f'<g class="cell" data-row="{cell.row}" data-col="{cell.col}">',
        f'  <rect id="{cell_dom_id(cell.row, cell.col)}" class="node node-{state}" '
        f'x="{x}" y="{y}" width="{s}" height="{s}" fill="{fill}"/>',
    ]
    if cell.is_start or cell.is_finish:
        color = config.start_color if cell.is_start else config.finish_color
        parts.append(
            f'  <circle class="marker" cx="{x + s / 2}" cy="{y + s / 2}" r="{s / 3}" '
            f'fill="{color}" stroke="{config.label_color}" stroke-width="2"/>'
        )
    parts.append(
        f'  <text x="{x + s / 2}" y="{y + s / 2 + 3}" text-anchor="middle" '
        f'font-size="{config.label_size}" fill="{config.label_color}">{label}</text>'
    )
    parts.append("</g>")
    return "\n".join(parts)
