"""
ui/
---
Presentation layer.

    from ui import render_grid
    from ui import toolbar, analytics_panel, …
"""

from ui.canvas import render_grid, cell_dom_id, CanvasConfig

from ui.controls import (
    toolbar,
    analytics_panel,
    no_path_banner,
    pseudocode_viewer,
)

__all__ = [
    "render_grid",
    "cell_dom_id",
    "CanvasConfig",
    "toolbar",
    "analytics_panel",
    "no_path_banner",
    "pseudocode_viewer",
]
