"""Tests for the Grid module."""

import pytest

from classic_snake.grid import Grid, Point


class TestGridInit:
    def test_default_dimensions(self):
        grid = Grid()
        assert grid.width == 20
        assert grid.height == 20
        assert grid.cell_count == 400

    def test_custom_dimensions(self):
        grid = Grid(width=10, height=15)
        assert grid.width == 10
        assert grid.height == 15

    def test_minimum_size(self):
        with pytest.raises(ValueError, match="at least 4"):
            Grid(width=3, height=10)

    def test_from_pixels_floors(self):
        grid = Grid.from_pixels(410, 399, 20)
        assert grid == Grid(20, 19)

    def test_from_pixels_rejects_zero_cell(self):
        with pytest.raises(ValueError, match="positive"):
            Grid.from_pixels(400, 400, 0)


class TestGridBounds:
    def test_in_bounds(self):
        grid = Grid(width=10, height=10)
        assert grid.in_bounds(Point(0, 0))
        assert grid.in_bounds(Point(9, 9))

    def test_out_of_bounds(self):
        grid = Grid(width=10, height=10)
        assert not grid.in_bounds(Point(-1, 0))
        assert not grid.in_bounds(Point(0, -1))
        assert not grid.in_bounds(Point(10, 0))
        assert not grid.in_bounds(Point(0, 10))

    def test_non_square(self):
        grid = Grid(width=8, height=5)
        assert grid.in_bounds(Point(7, 4))
        assert not grid.in_bounds(Point(4, 7))


class TestGridSerialization:
    def test_to_dict(self):
        assert Grid(width=6, height=5).to_dict() == {"width": 6, "height": 5}
