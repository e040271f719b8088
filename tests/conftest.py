"""Pytest configuration and fixtures."""

import pytest

from app import app as flask_app
from grid import Grid, make_grid


def build(rows, start, finish=None):
    """Grid from a list of row strings: 'X' wall, anything else open."""
    grid = Grid(len(rows), len(rows[0]))
    for r, line in enumerate(rows):
        for c, ch in enumerate(line):
            if ch == "X":
                grid.cells[r][c].is_wall = True
    grid.mark_start(*start)
    if finish is not None:
        grid.mark_finish(*finish)
    return grid


@pytest.fixture
def open_grid():
    """3x3 grid without walls, start top-left and finish bottom-right."""
    return make_grid(3, 3, start=(0, 0), finish=(2, 2))


@pytest.fixture
def split_grid():
    """3x3 grid whose middle row is solid wall."""
    return build(["...", "XXX", "..."], start=(0, 0), finish=(2, 2))


@pytest.fixture
def client():
    """Flask test client."""
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as c:
        yield c


@pytest.fixture
def build_grid():
    """The build() helper, for tests that lay out their own walls."""
    return build
