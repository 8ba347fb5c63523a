import random
import sys
import threading

import pytest

from config import TestingConfig
from grid import GridError, IllegalWallPlacement
from algorithms import SEARCH, MAZE, compute_shortest_path
from engine import AnimationInProgress, Board, Recorder, schedule_search_animation


@pytest.fixture
def board(clock):
    config = {k: getattr(TestingConfig, k) for k in dir(TestingConfig) if k.isupper()}
    return Board.from_config(config, clock=clock)


def test_from_config(clock):
    config = {
        "GRID_ROWS": 8, "GRID_COLS": 9, "START": [1, 1], "FINISH": [6, 7],
        "SEARCH_DELAY_MS": 3, "PATH_DELAY_MS": 4, "MAZE_DELAY_MS": 5,
    }
    board = Board.from_config(config, clock=clock)

    assert (board.grid.rows, board.grid.cols) == (8, 9)
    assert board.grid.find_start().coord == (1, 1)
    assert board.grid.find_finish().coord == (6, 7)
    assert board.delays.path_ms == 4


def test_dijkstra_run(board):
    outcome = board.run("dijkstra")

    assert outcome.run_id == 1
    assert outcome.kind == SEARCH
    assert outcome.path_found
    # open 5x7 board: every cell is extracted before the far corner
    assert outcome.metrics.cells_visited == 35
    assert outcome.metrics.path_length == 10
    assert outcome.metrics.total_events == 35 + 11
    assert outcome.metrics.duration_ms == 35 * 10 + 10 * 50
    assert board.last_metrics is outcome.metrics


def test_edits_refused_while_animating(board, clock):
    outcome = board.run("dijkstra")

    with pytest.raises(AnimationInProgress) as info:
        board.toggle_wall(2, 2)
    assert info.value.run_id == outcome.run_id
    with pytest.raises(AnimationInProgress):
        board.relocate_start(1, 1)
    with pytest.raises(AnimationInProgress):
        board.spawn_finish(random.Random(0))

    clock.advance_ms(outcome.metrics.duration_ms + 5)
    assert not board.animation_in_progress
    board.toggle_wall(2, 2)
    assert board.grid.cell(2, 2).is_wall


def test_new_run_replaces_animation(board):
    first = board.run("dijkstra")
    second = board.run("dijkstra")

    assert second.run_id == first.run_id + 1
    assert board.stepper.is_stale(first.run_id)


def test_reset_cancels_animation(board):
    board.toggle_wall(1, 1)
    board.run("dijkstra")

    board.reset_grid()
    assert not board.animation_in_progress
    assert board.last_metrics is None
    assert board.grid.walls() == []
    board.toggle_wall(3, 3)


def test_unknown_algorithm(board):
    with pytest.raises(ValueError):
        board.run("bogosort")
    assert board.stepper.run_id == 0


def test_grid_errors_propagate(board):
    with pytest.raises(IllegalWallPlacement):
        board.toggle_wall(0, 0)
    with pytest.raises(GridError):
        board.relocate_start(4, 6)
    with pytest.raises(GridError):
        board.toggle_wall(9, 9)


def test_maze_run_applies_walls(board):
    outcome = board.run("recursive_division", seed=3)

    assert outcome.kind == MAZE
    assert outcome.seed == 3
    walls = [ev.coord for ev in outcome.events]
    assert len(walls) > 0
    assert sorted(board.grid.walls()) == sorted(walls)
    assert not board.grid.find_start().is_wall
    assert not board.grid.find_finish().is_wall
    assert outcome.metrics.walls_placed == len(walls)


def test_maze_run_picks_a_seed(board):
    outcome = board.run("recursive_division")
    assert isinstance(outcome.seed, int)


def test_spawn_start_clears_board(board):
    board.toggle_wall(2, 2)
    board.spawn_start(random.Random(1))

    start = board.grid.find_start()
    assert start.coord != (4, 6)
    assert board.grid.walls() == []
    assert sum(1 for c in board.grid if c.is_start) == 1


def test_spawn_finish_keeps_walls(board):
    board.toggle_wall(2, 2)
    board.spawn_finish(random.Random(1))

    finish = board.grid.find_finish()
    assert finish.coord != (0, 0)
    assert sum(1 for c in board.grid if c.is_finish) == 1
    if finish.coord != (2, 2):
        assert board.grid.cell(2, 2).is_wall


def test_recorder_export(board):
    rec = Recorder()
    rec.start("dijkstra")
    search, path = compute_shortest_path(board.grid)
    events = list(schedule_search_animation(search, path))
    metrics = rec.record_search(search, path, events)

    exported = rec.export()
    assert exported["algo_key"] == "dijkstra"
    assert exported["metrics"]["cells_visited"] == metrics.cells_visited
    assert len(exported["events"]) == len(events)
    assert rec.get_metrics() is metrics


def test_poll_and_skip(board, clock):
    outcome = board.run("dijkstra")

    frame = board.poll(outcome.run_id)
    assert not frame.stale
    assert len(frame.events) == 1

    assert board.poll(outcome.run_id - 1).stale
    assert board.poll(None).stale

    rest = board.skip()
    assert rest.finished
    assert len(rest.events) == outcome.metrics.total_events - 1
    assert len(rest.played) == outcome.metrics.total_events
    assert rest.grid is board.grid


def test_run_keeps_grid_it_started_from(board):
    before = board.grid
    outcome = board.run("recursive_division", seed=1)
    assert outcome.before is before
    assert before.walls() == []


def test_concurrent_wall_edits_are_all_kept():
    board = Board(rows=20, cols=50, start=(0, 0), finish=(19, 49))
    cells = [(r, c) for r in range(20) for c in range(50)][1:401]
    chunks = [cells[i::8] for i in range(8)]

    def paint(chunk):
        for row, col in chunk:
            board.toggle_wall(row, col)

    interval = sys.getswitchinterval()
    sys.setswitchinterval(1e-6)
    try:
        threads = [threading.Thread(target=paint, args=(chunk,)) for chunk in chunks]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
    finally:
        sys.setswitchinterval(interval)

    assert sorted(board.grid.walls()) == sorted(cells)
