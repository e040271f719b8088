"""Tests for the random maze generator."""

import pytest

from grid import make_grid
from maze import MazeGenerator


class TestRandomMaze:
    """Probability based wall placement."""

    @pytest.mark.parametrize("probability", [0.0, 0.3, 0.7, 1.0])
    @pytest.mark.parametrize("seed", range(5))
    def test_start_and_finish_stay_open(self, probability, seed):
        grid = make_grid(9, 15)
        MazeGenerator(grid, probability, seed).random_maze()
        assert not grid.is_wall(*grid.start)
        assert not grid.is_wall(*grid.finish)

    def test_returns_same_grid(self):
        grid = make_grid(5, 5)
        generator = MazeGenerator(grid, seed=1)
        assert generator.random_maze() is grid
        assert generator.get_maze() is grid

    def test_all_walls(self):
        grid = make_grid(4, 6)
        MazeGenerator(grid, 1.0).random_maze()
        assert grid.wall_count() == 4 * 6 - 2

    def test_no_walls(self):
        grid = make_grid(4, 6)
        for row in grid.cells:
            for node in row:
                node.is_wall = not (node.is_start or node.is_finish)
        MazeGenerator(grid, 0.0).random_maze()
        assert grid.wall_count() == 0

    def test_seed_is_reproducible(self):
        first, second = make_grid(12, 20), make_grid(12, 20)
        MazeGenerator(first, seed=42).random_maze()
        MazeGenerator(second, seed=42).random_maze()
        assert first.to_codes() == second.to_codes()

    def test_density_roughly_matches_probability(self):
        grid = make_grid(50, 50)
        MazeGenerator(grid, 0.3, seed=7).random_maze()
        assert 0.2 < grid.wall_count() / (50 * 50) < 0.4

    def test_default_probability_from_config(self, monkeypatch):
        import config

        monkeypatch.setattr(config, "WALL_PROBABILITY", 0.5)
        assert MazeGenerator(make_grid(3, 3)).wall_probability == 0.5

    @pytest.mark.parametrize("probability", [-0.1, 1.5])
    def test_bad_probability(self, probability):
        with pytest.raises(ValueError, match="between 0 and 1"):
            MazeGenerator(make_grid(3, 3), probability)
