"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque

from classic_snake.grid import Point


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) unit vectors."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def from_name(cls, name: str) -> Direction:
        """Look up a direction by its lowercase name, e.g. ``"up"``."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction {name!r}.") from None


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(self, start: Point) -> None:
        self.body: deque[Point] = deque([Point(*start)])

    @property
    def head(self) -> Point:
        """Return the head cell."""
        return self.body[0]

    @property
    def tail(self) -> Point:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def next_head(self, direction: Direction) -> Point:
        """Compute the head position one step in *direction* without moving."""
        dx, dy = direction.value
        return Point(self.head.x + dx, self.head.y + dy)

    def advance(self, new_head: Point, grow: bool = False) -> Point | None:
        """Prepend *new_head* and drop the tail unless growing.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(new_head)
        if grow:
            return None
        return self.body.pop()

    def occupies(self, point: Point) -> bool:
        """Check whether the snake occupies a given cell."""
        return point in self.body

    def segments(self) -> list[Point]:
        """Return a head-first copy of the body."""
        return list(self.body)

    def to_dict(self) -> dict:
        return {"body": [list(seg) for seg in self.body]}
