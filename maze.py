# maze.py
"""Random wall fields for a Grid."""
import logging
import random

import config

logger = logging.getLogger(__name__)


class MazeGenerator:
    """
    Overwrites the wall flags of a grid in place.
    Start and finish are never turned into walls.
    """

    def __init__(self, grid, wall_probability=None, seed=None):
        if wall_probability is None:
            wall_probability = config.WALL_PROBABILITY
        if not 0.0 <= wall_probability <= 1.0:
            raise ValueError(f"wall_probability must be between 0 and 1, got {wall_probability}")
        self.grid = grid
        self.wall_probability = wall_probability
        self.rng = random.Random(seed)

    def random_maze(self):
        """
        Each cell other than start and finish independently becomes a wall
        with probability wall_probability. The start may end up cut off from
        the finish.
        """
        for row in self.grid.cells:
            for node in row:
                if node.is_start or node.is_finish:
                    node.is_wall = False
                    continue
                node.is_wall = self.rng.random() < self.wall_probability
        logger.debug(
            "random maze %dx%d: %d walls at p=%.2f",
            self.grid.rows, self.grid.cols, self.grid.wall_count(), self.wall_probability,
        )
        return self.grid

    def get_maze(self):
        return self.grid
