"""Apple spawning logic."""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import TYPE_CHECKING

import numpy as np

from classic_snake.grid import Point

if TYPE_CHECKING:
    from classic_snake.grid import Grid

logger = logging.getLogger(__name__)


class AppleSpawner:
    """Places the apple on a uniformly random unoccupied cell.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    Placement is rejection sampling: draw any cell, redraw while it lies
    on the snake. A board with no free cell never terminates.
    """

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()

    def random_cell(self, bounds: Grid) -> Point:
        """Draw one cell uniformly from the whole grid."""
        x = int(self.rng.integers(bounds.width))
        y = int(self.rng.integers(bounds.height))
        return Point(x, y)

    def place(self, body: Collection[Point], bounds: Grid) -> Point:
        """Return a cell inside *bounds* that is not part of *body*."""
        occupied = set(body)
        draws = 1
        cell = self.random_cell(bounds)
        while cell in occupied:
            cell = self.random_cell(bounds)
            draws += 1
        logger.debug("Apple placed at %s after %d draw(s).", cell, draws)
        return cell
