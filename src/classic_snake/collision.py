"""Classification of a prospective head position."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from classic_snake.grid import Grid, Point


class Collision(enum.Enum):
    """Outcome of moving the head into a cell."""

    NONE = "none"
    WALL = "wall"
    SELF = "self"


def classify(head: Point, body: Iterable[Point], bounds: Grid) -> Collision:
    """Classify *head* against the grid edges and the current body.

    *body* is the body before this tick's tail truncation, so moving into
    the cell the tail currently occupies counts as a self-collision.
    """
    if not bounds.in_bounds(head):
        return Collision.WALL
    if head in body:
        return Collision.SELF
    return Collision.NONE
