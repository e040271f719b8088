# traversal.py
"""
Breadth-first and depth-first search over a Grid.

A Traversal runs to completion when it is constructed and keeps its own
bookkeeping: which cells were expanded, the expanded cell that last reached
each one, the hop count through that predecessor and the ordered expansion
log. Both strategies look at neighbours in the same order: up, right, down,
left.
"""
import logging
import time
from collections import deque
from enum import Enum

from grid import UNREACHED

logger = logging.getLogger(__name__)

# up, right, down, left
NEIGHBOR_ORDER = ((-1, 0), (0, 1), (1, 0), (0, -1))


class ShortestPathUnavailable(Exception):
    """Raised when a hop count is requested from a depth-first traversal."""


class Strategy(Enum):
    BREADTH_FIRST = "bfs"
    DEPTH_FIRST = "dfs"

    @classmethod
    def from_name(cls, name):
        try:
            return cls((name or "").lower())
        except ValueError:
            raise ValueError(f"unknown algorithm {name!r}, expected 'bfs' or 'dfs'") from None


class Traversal:
    """
    Search state for one run of one strategy from one start cell.

    Results are read through get_steps(), path_to() and distance_to() once
    the constructor returns.
    """

    def __init__(self, grid, start, strategy=Strategy.BREADTH_FIRST):
        self.grid = grid
        self.start = tuple(start)
        self.strategy = strategy
        self.marked = [[False] * grid.cols for _ in range(grid.rows)]
        self.edge_to = [[None] * grid.cols for _ in range(grid.rows)]
        self.distance = [[UNREACHED] * grid.cols for _ in range(grid.rows)]
        self._steps = []

        row, col = self.start
        self.distance[row][col] = 0

        started = time.perf_counter()
        _RUNNERS[strategy](self)
        self.elapsed_ms = (time.perf_counter() - started) * 1000
        self._steps = tuple(self._steps)
        self._publish_distances()
        logger.debug(
            "%s from %s expanded %d of %d cells in %.2fms",
            strategy.value, self.start, len(self._steps),
            grid.rows * grid.cols, self.elapsed_ms,
        )

    def is_node_valid(self, row, col):
        """In bounds, not a wall and not expanded yet."""
        return (
            self.grid.in_bounds(row, col)
            and not self.grid.is_wall(row, col)
            and not self.marked[row][col]
        )

    def _expand(self, frontier, row, col):
        self._steps.append((row, col))
        self.marked[row][col] = True

        for dr, dc in NEIGHBOR_ORDER:
            nr, nc = row + dr, col + dc
            if not self.is_node_valid(nr, nc):
                continue
            # the last expansion to reach a cell before it is expanded owns it
            self.edge_to[nr][nc] = (row, col)
            self.distance[nr][nc] = self.distance[row][col] + 1
            frontier.append((nr, nc))

    def _publish_distances(self):
        self.grid.reset_search()
        for r, row in enumerate(self.distance):
            for c, dist in enumerate(row):
                self.grid.cells[r][c].distance = dist

    def get_steps(self):
        return self._steps

    def has_path_to(self, row, col):
        return (row, col) == self.start or self.edge_to[row][col] is not None

    def path_to(self, row, col):
        """
        Cells from (row, col) back to the start, or None if it was never reached.
        Reverse the list for start-to-target order.
        """
        if not self.has_path_to(row, col):
            return None
        path = [(row, col)]
        step = self.edge_to[row][col]
        while step is not None:
            path.append(step)
            step = self.edge_to[step[0]][step[1]]
        return path

    def distance_to(self, row, col):
        """Shortest hop count from the start, or None if unreachable."""
        if self.strategy is not Strategy.BREADTH_FIRST:
            raise ShortestPathUnavailable(
                f"{self.strategy.value} does not compute shortest distances"
            )
        dist = self.distance[row][col]
        return None if dist == UNREACHED else dist


def _breadth_first(search):
    q = deque([search.start])
    while q:
        r, c = q.popleft()
        if not search.is_node_valid(r, c):
            continue
        search._expand(q, r, c)


def _depth_first(search):
    stack = [search.start]
    while stack:
        r, c = stack.pop()
        if not search.is_node_valid(r, c):
            continue
        search._expand(stack, r, c)


_RUNNERS = {
    Strategy.BREADTH_FIRST: _breadth_first,
    Strategy.DEPTH_FIRST: _depth_first,
}


def bfs(grid, start):
    return Traversal(grid, start, Strategy.BREADTH_FIRST)


def dfs(grid, start):
    return Traversal(grid, start, Strategy.DEPTH_FIRST)
