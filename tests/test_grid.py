"""Tests for the grid model and directions."""

import pytest

from gridsnake import Direction, Grid


class TestGrid:
    """Tests for Grid bounds and pixel mapping."""

    @pytest.mark.parametrize("pos", [(0, 0), (24, 24), (0, 24), (12, 7)])
    def test_in_bounds_inside(self, pos):
        """Every cell with 0 <= x, y < N is in bounds."""
        assert Grid().in_bounds(pos) is True

    @pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (25, 0), (0, 25), (25, 25)])
    def test_in_bounds_outside(self, pos):
        """Cells past either edge are out of bounds."""
        assert Grid().in_bounds(pos) is False

    def test_defaults(self):
        """Default board is 25 tiles of 20px."""
        grid = Grid()
        assert grid.tile_count == 25
        assert grid.cell == 20
        assert grid.canvas_size == 500

    def test_to_px(self):
        """to_px returns the top-left pixel of a cell."""
        assert Grid().to_px((3, 4)) == (60, 80)

    def test_grid_is_immutable(self):
        """Grid is frozen configuration."""
        grid = Grid()
        with pytest.raises(AttributeError):
            grid.tile_count = 10


class TestDirection:
    """Tests for Direction deltas."""

    def test_unit_deltas(self):
        """Each direction is a unit step, never (0, 0)."""
        assert Direction.UP.value == (0, -1)
        assert Direction.DOWN.value == (0, 1)
        assert Direction.LEFT.value == (-1, 0)
        assert Direction.RIGHT.value == (1, 0)

    def test_opposites(self):
        """Opposite pairs are detected, perpendicular ones are not."""
        assert Direction.LEFT.is_opposite(Direction.RIGHT)
        assert Direction.UP.is_opposite(Direction.DOWN)
        assert not Direction.UP.is_opposite(Direction.LEFT)
        assert not Direction.UP.is_opposite(Direction.UP)

    def test_apply(self):
        """apply moves a position by the delta."""
        assert Direction.RIGHT.apply((9, 10)) == (10, 10)
        assert Direction.UP.apply((9, 10)) == (9, 9)
