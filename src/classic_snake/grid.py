"""Grid geometry for the snake game."""

from __future__ import annotations

from typing import NamedTuple


class Point(NamedTuple):
    """A grid cell addressed as (x, y) in cell units."""

    x: int
    y: int


class Grid:
    """Play-field bounds in grid cells.

    Coordinates use (x, y) ordering: ``x`` is the column, ``y`` the row,
    with the origin in the top-left corner.
    """

    def __init__(self, width: int = 20, height: int = 20) -> None:
        if width < 4 or height < 4:
            raise ValueError("Grid dimensions must be at least 4×4.")
        self.width = width
        self.height = height

    @classmethod
    def from_pixels(cls, field_width: int, field_height: int, cell_size: int) -> Grid:
        """Derive grid bounds from a pixel play-field and a cell size."""
        if cell_size < 1:
            raise ValueError("Cell size must be positive.")
        return cls(field_width // cell_size, field_height // cell_size)

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def in_bounds(self, point: Point) -> bool:
        """Check whether a cell lies within the grid."""
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height)

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"
