"""Game tuning configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from classic_snake.difficulty import DifficultyScheduler
from classic_snake.grid import Grid, Point
from classic_snake.snake import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Fixed settings for a game session.

    Sizes are in pixels, speeds in milliseconds between ticks. Supports
    JSON serialization.
    """

    # Field
    grid_size: int = 20
    field_width: int = 400
    field_height: int = 400

    # Speed
    initial_speed: int = 200
    min_speed: int = 50
    speed_decrement: int = 5

    # Starting position
    start_x: int = 3
    start_y: int = 1
    start_direction: str = "right"

    # Apple placement RNG
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.grid_size < 1:
            raise ValueError("grid_size must be positive.")
        if self.field_width < 1 or self.field_height < 1:
            raise ValueError("field_width and field_height must be positive.")
        if self.field_width // self.grid_size < 4 or self.field_height // self.grid_size < 4:
            raise ValueError("The play field must be at least 4×4 cells.")
        # Reuses the scheduler's speed validation.
        self.difficulty()
        Direction.from_name(self.start_direction)
        if not self.bounds.in_bounds(self.start):
            raise ValueError("The start cell must lie inside the play field.")

    @property
    def bounds(self) -> Grid:
        return Grid.from_pixels(self.field_width, self.field_height, self.grid_size)

    @property
    def start(self) -> Point:
        return Point(self.start_x, self.start_y)

    @property
    def direction(self) -> Direction:
        return Direction.from_name(self.start_direction)

    def difficulty(self) -> DifficultyScheduler:
        return DifficultyScheduler(
            initial_speed=self.initial_speed,
            min_speed=self.min_speed,
            speed_decrement=self.speed_decrement,
        )

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls(**json.loads(Path(path).read_text()))
