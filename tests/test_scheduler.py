from grid import CellState, Grid
from algorithms import compute_shortest_path, generate_maze
from engine import (
    AnimationDelays,
    schedule_search_animation,
    schedule_maze_animation,
    schedule_grid_snapshot,
)


def open_search(rows=3, cols=3, start=(0, 0), finish=(2, 2)):
    return compute_shortest_path(Grid.create(rows, cols, start, finish))


def test_search_schedule_is_lazy():
    search, path = open_search()
    events = schedule_search_animation(search, path)
    assert iter(events) is events
    first = next(events)
    assert first.coord == (0, 0)
    assert first.offset_ms == 0


def test_search_schedule_length_and_order():
    search, path = open_search(6, 9, (1, 1), (5, 7))
    events = list(schedule_search_animation(search, path))

    assert len(events) == len(search.visited) + len(path)
    offsets = [ev.offset_ms for ev in events]
    assert offsets == sorted(offsets)

    visits = events[: len(search.visited)]
    reveal = events[len(search.visited):]
    assert [ev.coord for ev in visits] == [c.coord for c in search.visited]
    assert [ev.coord for ev in reveal] == [c.coord for c in path]
    assert reveal[0].offset_ms >= visits[-1].offset_ms


def test_search_schedule_timing_and_states():
    delays = AnimationDelays(search_ms=10, path_ms=50, maze_ms=10)
    search, path = open_search()
    events = list(schedule_search_animation(search, path, delays))

    visits = events[:9]
    assert [ev.offset_ms for ev in visits] == [i * 10 for i in range(9)]
    assert all(ev.state is CellState.VISITED for ev in visits)
    assert [ev.distance for ev in visits] == [0, 1, 1, 2, 2, 2, 3, 3, 4]

    reveal = events[9:]
    assert [ev.offset_ms for ev in reveal] == [90, 140, 190, 240, 290]
    assert reveal[0].state is CellState.SHORTEST_PATH_START
    assert reveal[-1].state is CellState.SHORTEST_PATH_END
    assert all(ev.state is CellState.SHORTEST_PATH for ev in reveal[1:-1])
    assert all(ev.distance is None for ev in reveal)


def test_no_path_schedules_only_visits():
    grid = Grid.create(3, 3, (0, 0), (2, 2))
    for col in range(3):
        grid = grid.toggle_wall(1, col)
    search, path = compute_shortest_path(grid)

    events = list(schedule_search_animation(search, path))
    assert len(events) == len(search.visited) == 3
    assert all(ev.state is CellState.VISITED for ev in events)


def test_maze_schedule():
    grid = Grid.create(9, 15, (0, 0), (8, 14))
    walls = generate_maze(grid, 5)
    events = list(schedule_maze_animation(walls, AnimationDelays(maze_ms=7)))

    assert len(events) == len(walls)
    assert [ev.coord for ev in events] == list(walls)
    assert [ev.offset_ms for ev in events] == [i * 7 for i in range(len(walls))]
    assert all(ev.state is CellState.MAZE_WALL for ev in events)


def test_schedules_are_pure():
    search, path = open_search(4, 4, (0, 0), (3, 3))
    assert list(schedule_search_animation(search, path)) == list(schedule_search_animation(search, path))


def test_grid_snapshot():
    grid = Grid.create(2, 3, (0, 0), (1, 2)).toggle_wall(0, 1)
    events = list(schedule_grid_snapshot(grid))

    assert len(events) == 6
    assert all(ev.offset_ms == 0 for ev in events)
    states = {ev.coord: ev.state for ev in events}
    assert states[(0, 1)] is CellState.WALL
    assert states[(1, 1)] is CellState.UNVISITED


def test_event_to_dict():
    search, path = open_search()
    ev = next(schedule_search_animation(search, path))
    assert ev.to_dict() == {"row": 0, "col": 0, "state": "visited", "offset_ms": 0, "distance": 0}
