"""
grid.py — Grid Container
========================
Single source of truth for the board.  Algorithms, the board session and
the renderer all read from this object.

Responsibilities:
  1. Construction with exactly one Start and one Finish    (create)
  2. Mutation commands                                     (toggle_wall, relocate_*)
  3. Lookup / adjacency queries                            (cell, neighbours, find_*)
  4. Reset helpers                                         (reset_search_state)
  5. Serialisation for the JSON surface                    (to_dict)

Design decisions:
  - Cells live in a row-major list of rows; `rows` / `cols` never change
    for the lifetime of a Grid.
  - Every mutation returns a NEW Grid.  Only the touched rows are copied;
    untouched rows are shared, which is safe because Cells are frozen.
  - Commands validate first and build second, so a rejected command
    leaves the original Grid exactly as it was.
"""

from dataclasses import replace
from typing import Dict, Iterable, Iterator, List, Tuple

from grid.cell import Cell, Coord
from grid.errors import InvalidCoordinate, IllegalWallPlacement, OverlappingEndpoints


# up, down, left, right
DIRECTIONS: Tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Grid:
    """
    Attributes:
        rows, cols : Fixed dimensions.
        _cells     : [row][col] → Cell
    """

    __slots__ = ("rows", "cols", "_cells")

    def __init__(self, rows: int, cols: int, cells: List[List[Cell]]):
        self.rows:   int              = rows
        self.cols:   int              = cols
        self._cells: List[List[Cell]] = cells

    # ==================================================================
    # CONSTRUCTION
    # ==================================================================
    @classmethod
    def create(cls, rows: int, cols: int, start: Coord, finish: Coord) -> "Grid":
        """Open grid with Start at `start` and Finish at `finish`."""
        if rows <= 0 or cols <= 0:
            raise ValueError(f"grid dimensions must be positive, got {rows}x{cols}")
        for r, c in (start, finish):
            if not (0 <= r < rows and 0 <= c < cols):
                raise InvalidCoordinate(r, c, rows, cols)
        if tuple(start) == tuple(finish):
            raise OverlappingEndpoints(*start)

        cells = [
            [
                Cell(
                    row=r,
                    col=c,
                    is_start=(r, c) == tuple(start),
                    is_finish=(r, c) == tuple(finish),
                )
                for c in range(cols)
            ]
            for r in range(rows)
        ]
        return cls(rows, cols, cells)

    # ==================================================================
    # LOOKUP
    # ==================================================================
    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row: int, col: int) -> Cell:
        self._check_bounds(row, col)
        return self._cells[row][col]

    def __getitem__(self, coord: Coord) -> Cell:
        return self.cell(*coord)

    def __iter__(self) -> Iterator[Cell]:
        """Row-major iteration over every cell."""
        for row in self._cells:
            yield from row

    def find_start(self) -> Cell:
        for cell in self:
            if cell.is_start:
                return cell
        raise RuntimeError("grid has no start cell")

    def find_finish(self) -> Cell:
        for cell in self:
            if cell.is_finish:
                return cell
        raise RuntimeError("grid has no finish cell")

    def neighbours(self, cell: Cell) -> List[Cell]:
        """Traversable 4-neighbours in up / down / left / right order."""
        result = []
        for dr, dc in DIRECTIONS:
            r, c = cell.row + dr, cell.col + dc
            if self.in_bounds(r, c):
                nbr = self._cells[r][c]
                if not nbr.is_wall:
                    result.append(nbr)
        return result

    def index_of(self, cell: Cell) -> int:
        """Row-major position, used as the Dijkstra tie-break key."""
        return cell.row * self.cols + cell.col

    def walls(self) -> List[Coord]:
        return [cell.coord for cell in self if cell.is_wall]

    # ==================================================================
    # MUTATION COMMANDS (each returns a new Grid)
    # ==================================================================
    def toggle_wall(self, row: int, col: int) -> "Grid":
        """Wall off (row, col).  Start / Finish are rejected."""
        target = self.cell(row, col)
        if target.is_start or target.is_finish:
            raise IllegalWallPlacement(row, col)
        if target.is_wall:
            return self._with({})
        return self._with({target.coord: replace(target, is_wall=True)})

    def relocate_start(self, row: int, col: int) -> "Grid":
        target = self.cell(row, col)
        if target.is_finish:
            raise OverlappingEndpoints(row, col)
        old = self.find_start()
        updates: Dict[Coord, Cell] = {old.coord: replace(old, is_start=False)}
        updates[target.coord] = replace(target, is_start=True, is_wall=False)
        return self._with(updates)

    def relocate_finish(self, row: int, col: int) -> "Grid":
        target = self.cell(row, col)
        if target.is_start:
            raise OverlappingEndpoints(row, col)
        old = self.find_finish()
        updates: Dict[Coord, Cell] = {old.coord: replace(old, is_finish=False)}
        updates[target.coord] = replace(target, is_finish=True, is_wall=False)
        return self._with(updates)

    def with_walls(self, coords: Iterable[Coord]) -> "Grid":
        """Wall every coordinate in `coords`, silently skipping Start / Finish."""
        updates: Dict[Coord, Cell] = {}
        for r, c in coords:
            cell = self.cell(r, c)
            if cell.is_start or cell.is_finish or cell.is_wall:
                continue
            updates[cell.coord] = replace(cell, is_wall=True)
        return self._with(updates)

    # ==================================================================
    # RESET (keep walls and endpoints, wipe search state)
    # ==================================================================
    def reset_search_state(self) -> "Grid":
        return Grid(self.rows, self.cols, [[cell.cleared() for cell in row] for row in self._cells])

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "rows":   self.rows,
            "cols":   self.cols,
            "start":  list(self.find_start().coord),
            "finish": list(self.find_finish().coord),
            "walls":  [list(w) for w in self.walls()],
        }

    # ==================================================================
    # INTERNAL
    # ==================================================================
    def _check_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise InvalidCoordinate(row, col, self.rows, self.cols)

    def _with(self, updates: Dict[Coord, Cell]) -> "Grid":
        cells = list(self._cells)
        copied = set()
        for (r, c), cell in updates.items():
            if r not in copied:
                cells[r] = list(cells[r])
                copied.add(r)
            cells[r][c] = cell
        return Grid(self.rows, self.cols, cells)

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Grid)
            and self.rows == other.rows
            and self.cols == other.cols
            and self._cells == other._cells
        )

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, walls={len(self.walls())})"
