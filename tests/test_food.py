"""Tests for food placement."""

import random

import pytest

from gridsnake import BoardFull, Grid, place_food


class TestPlaceFood:
    """Tests for place_food."""

    def test_never_on_snake(self, rng):
        """Food never lands on a body segment."""
        body = [(x, 10) for x in range(25)] + [(x, 11) for x in range(25)]
        grid = Grid()
        for _ in range(500):
            food = place_food(body, grid, rng)
            assert food not in body
            assert grid.in_bounds(food)

    def test_only_free_cell(self, rng):
        """With one free cell left, that cell is returned."""
        grid = Grid(tile_count=3)
        body = [(x, y) for y in range(3) for x in range(3) if (x, y) != (2, 1)]
        assert place_food(body, grid, rng) == (2, 1)

    def test_full_board_raises(self, rng):
        """A snake covering the whole grid leaves nowhere for food."""
        grid = Grid(tile_count=2)
        body = [(0, 0), (1, 0), (1, 1), (0, 1)]
        with pytest.raises(BoardFull):
            place_food(body, grid, rng)

    def test_seeded_rng_is_deterministic(self):
        """Same seed, same placement."""
        body = [(10, 10), (9, 10), (8, 10)]
        a = place_food(body, Grid(), random.Random(7))
        b = place_food(body, Grid(), random.Random(7))
        assert a == b
