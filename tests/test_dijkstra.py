import math

import pytest

from grid import Grid
from algorithms import compute_shortest_path, reconstruct_path, NO_PATH_FOUND
from algorithms.dijkstra import dijkstra


def coords(cells):
    return [c.coord for c in cells]


def test_three_by_three_open_grid():
    grid = Grid.create(3, 3, (0, 0), (2, 2))
    search, path = compute_shortest_path(grid)

    # equal distances come out row-major
    assert coords(search.visited) == [
        (0, 0),
        (0, 1), (1, 0),
        (0, 2), (1, 1), (2, 0),
        (1, 2), (2, 1),
        (2, 2),
    ]
    assert search.reached
    assert search.finish.distance == 4
    assert len(path) == 5
    assert path.coords() == ((0, 0), (0, 1), (0, 2), (1, 2), (2, 2))


def test_visited_cells_carry_final_distances():
    grid = Grid.create(3, 3, (0, 0), (2, 2))
    search, _ = compute_shortest_path(grid)
    assert [int(c.distance) for c in search.visited] == [0, 1, 1, 2, 2, 2, 3, 3, 4]
    assert all(c.visited for c in search.visited)


@pytest.mark.parametrize(
    "rows, cols, start, finish",
    [
        (5, 5, (0, 0), (4, 4)),
        (4, 9, (3, 8), (0, 1)),
        (7, 3, (2, 1), (6, 0)),
        (1, 6, (0, 5), (0, 0)),
        (20, 50, (2, 3), (10, 20)),
    ],
)
def test_open_grid_path_is_manhattan(rows, cols, start, finish):
    grid = Grid.create(rows, cols, start, finish)
    _, path = compute_shortest_path(grid)

    manhattan = abs(start[0] - finish[0]) + abs(start[1] - finish[1])
    assert path.found
    assert path.steps == manhattan


def test_path_goes_around_walls():
    grid = Grid.create(3, 3, (0, 0), (2, 0)).toggle_wall(1, 0).toggle_wall(1, 1)
    search, path = compute_shortest_path(grid)

    assert path.coords() == ((0, 0), (0, 1), (0, 2), (1, 2), (2, 2), (2, 1), (2, 0))
    assert search.finish.distance == 6
    assert len(path) == search.finish.distance + 1
    assert all(not c.is_wall for c in path)


def test_full_wall_row_means_no_path():
    grid = Grid.create(3, 3, (0, 0), (2, 2))
    for col in range(3):
        grid = grid.toggle_wall(1, col)

    search, path = compute_shortest_path(grid)

    assert path == NO_PATH_FOUND
    assert not path.found
    assert not search.reached
    assert coords(search.visited) == [(0, 0), (0, 1), (0, 2)]
    assert not search.visited[-1].is_finish
    assert search.finish.distance == math.inf
    assert search.finish.previous is None


def test_ties_keep_first_predecessor():
    grid = Grid.create(3, 3, (0, 0), (2, 2))
    search, _ = compute_shortest_path(grid)

    # (1, 1) is reachable from (0, 1) and (1, 0) at the same distance;
    # (0, 1) is extracted first and keeps the link
    assert search.grid.cell(1, 1).previous == (0, 1)


def test_visit_order_is_deterministic():
    grid = Grid.create(8, 8, (3, 2), (7, 7)).toggle_wall(4, 4).toggle_wall(5, 4)
    first, _ = compute_shortest_path(grid)
    second, _ = compute_shortest_path(grid)
    assert coords(first.visited) == coords(second.visited)


def test_search_state_is_reset_before_each_run():
    grid = Grid.create(4, 4, (0, 0), (3, 3))
    first, _ = compute_shortest_path(grid)

    # feed the post-search snapshot back in, stale fields and all
    again, path = compute_shortest_path(first.grid)

    assert coords(again.visited) == coords(first.visited)
    assert again.finish.distance == 6
    assert path.steps == 6


def test_search_stops_at_finish():
    grid = Grid.create(5, 5, (0, 0), (0, 1))
    search = dijkstra(grid, grid.find_start(), grid.find_finish())

    assert coords(search.visited) == [(0, 0), (0, 1)]
    # (1, 0) was discovered but never extracted
    assert search.grid.cell(1, 0).distance == 1
    assert not search.grid.cell(1, 0).visited


def test_reconstruct_path_without_chain():
    grid = Grid.create(2, 2, (0, 0), (1, 1))
    result = reconstruct_path(grid, grid.find_finish(), grid.find_start())
    assert result is NO_PATH_FOUND


def test_input_grid_is_untouched():
    grid = Grid.create(3, 3, (0, 0), (2, 2))
    compute_shortest_path(grid)
    assert all(c.distance == math.inf and not c.visited for c in grid)
