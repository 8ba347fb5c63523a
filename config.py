"""
config.py — Application Settings
================================
Loaded by Flask with `app.config.from_object(Config)`.  Any key can be
overridden from the environment with a PATHFINDER_ prefix, e.g.

    PATHFINDER_GRID_ROWS=30 PATHFINDER_SEARCH_DELAY_MS=5 python main.py

(values are parsed as JSON, so tuples are written as `[2, 3]`).
"""

import secrets


class Config:
    # board
    GRID_ROWS: int = 20
    GRID_COLS: int = 50
    START          = (2, 3)      # (row, col)
    FINISH         = (10, 20)

    # animation delays, milliseconds per event
    SEARCH_DELAY_MS: int = 10
    PATH_DELAY_MS:   int = 50    # slower, so the final path stands out
    MAZE_DELAY_MS:   int = 10

    # client poll interval for /api/animation/poll
    POLL_INTERVAL_MS: int = 30

    SECRET_KEY: str = secrets.token_hex(32)


class TestingConfig(Config):
    TESTING = True
    GRID_ROWS = 5
    GRID_COLS = 7
    START     = (0, 0)
    FINISH    = (4, 6)
