# grid.py
"""
Grid model shared by the searches and the maze generator.

Wire codes (same as the front-end uses):
  0 = open cell
  1 = wall
  2 = start
  3 = finish
"""
import math
from dataclasses import dataclass

# Cell codes
PATH = 0
WALL = 1
START = 2
END = 3

UNREACHED = math.inf


class GridError(ValueError):
    """Raised for a grid that can't be built (bad size, markers or codes)."""


@dataclass
class Cell:
    row: int
    col: int
    is_wall: bool = False
    is_start: bool = False
    is_finish: bool = False
    distance: float = UNREACHED

    def code(self):
        if self.is_start:
            return START
        if self.is_finish:
            return END
        return WALL if self.is_wall else PATH


class Grid:
    """Rectangular, fully populated array of cells indexed by (row, col)."""

    def __init__(self, rows, cols):
        if rows < 1 or cols < 1:
            raise GridError(f"grid must be at least 1x1, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.cells = [[Cell(r, c) for c in range(cols)] for r in range(rows)]
        self.start = None
        self.finish = None

    def in_bounds(self, row, col):
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row, col):
        return self.cells[row][col]

    def is_wall(self, row, col):
        return self.cells[row][col].is_wall

    def mark_start(self, row, col):
        self._check_marker(row, col, "start")
        if self.start is not None:
            self.cell(*self.start).is_start = False
        node = self.cell(row, col)
        if node.is_finish:
            raise GridError(f"start and finish can't share cell ({row}, {col})")
        node.is_start = True
        node.is_wall = False
        self.start = (row, col)

    def mark_finish(self, row, col):
        self._check_marker(row, col, "finish")
        if self.finish is not None:
            self.cell(*self.finish).is_finish = False
        node = self.cell(row, col)
        if node.is_start:
            raise GridError(f"start and finish can't share cell ({row}, {col})")
        node.is_finish = True
        node.is_wall = False
        self.finish = (row, col)

    def _check_marker(self, row, col, name):
        if not self.in_bounds(row, col):
            raise GridError(f"{name} ({row}, {col}) is outside a {self.rows}x{self.cols} grid")

    def reset_search(self):
        for row in self.cells:
            for node in row:
                node.distance = UNREACHED

    def wall_count(self):
        return sum(node.is_wall for row in self.cells for node in row)

    def to_codes(self):
        return [[node.code() for node in row] for row in self.cells]

    @classmethod
    def from_codes(cls, codes):
        """Build a grid from a list of rows of wire codes.

        The rows must all have the same length and hold exactly one start
        and one finish.
        """
        if not codes or not isinstance(codes, list) or not all(isinstance(r, list) for r in codes):
            raise GridError("maze must be a non-empty list of rows")
        cols = len(codes[0])
        if any(len(r) != cols for r in codes):
            raise GridError("maze rows must all have the same length")

        grid = cls(len(codes), cols)
        starts, finishes = [], []
        for r, row in enumerate(codes):
            for c, code in enumerate(row):
                if code == WALL:
                    grid.cells[r][c].is_wall = True
                elif code == START:
                    starts.append((r, c))
                elif code == END:
                    finishes.append((r, c))
                elif code != PATH:
                    raise GridError(f"unknown cell code {code!r} at ({r}, {c})")

        if len(starts) != 1:
            raise GridError(f"maze needs exactly one start, found {len(starts)}")
        if len(finishes) != 1:
            raise GridError(f"maze needs exactly one finish, found {len(finishes)}")
        grid.mark_start(*starts[0])
        grid.mark_finish(*finishes[0])
        return grid


def make_grid(rows, cols, start=None, finish=None):
    """
    Open grid with start and finish marked.
    By default both sit on the middle row, start near the left edge and
    finish two columns in from the right edge. Where those collide the finish
    moves to the last column, or on a single column to the bottom row.
    """
    grid = Grid(rows, cols)
    mid = rows // 2
    if start is None:
        start = (mid, min(2, cols - 1))
    if finish is None:
        finish = (mid, max(cols - 3, 0))
        if finish == tuple(start) and cols > 1:
            finish = (mid, cols - 1)
        elif finish == tuple(start):
            # single column: move the finish to another row
            finish = (rows - 1, 0) if start[0] != rows - 1 else (0, 0)
    if tuple(start) == tuple(finish):
        raise GridError(f"start and finish can't share cell {tuple(start)}")
    grid.mark_start(*start)
    grid.mark_finish(*finish)
    return grid
