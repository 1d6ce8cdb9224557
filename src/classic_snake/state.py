"""Session state and the per-tick update rule."""

from __future__ import annotations

import enum
import logging

import numpy as np

from classic_snake.apple import AppleSpawner
from classic_snake.collision import Collision, classify
from classic_snake.config import GameConfig
from classic_snake.direction import DirectionBuffer
from classic_snake.grid import Point
from classic_snake.snake import Snake

logger = logging.getLogger(__name__)


class TickOutcome(enum.Enum):
    """What a single update did to the session."""

    MOVED = "moved"
    ATE = "ate"
    HIT_WALL = "hit_wall"
    HIT_SELF = "hit_self"

    @property
    def game_over(self) -> bool:
        return self in (TickOutcome.HIT_WALL, TickOutcome.HIT_SELF)


_COLLISION_OUTCOMES: dict[Collision, TickOutcome] = {
    Collision.WALL: TickOutcome.HIT_WALL,
    Collision.SELF: TickOutcome.HIT_SELF,
}


class GameState:
    """Single-snake session state.

    Owns the snake, apple, score and speed, plus the direction buffer
    that input handlers write to. Only :meth:`update` and :meth:`reset`
    mutate the session; both are meant to run on the tick context.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.bounds = self.config.bounds
        self.difficulty = self.config.difficulty()
        self.apple_spawner = AppleSpawner(
            rng if rng is not None else np.random.default_rng(self.config.seed),
        )
        self.directions = DirectionBuffer(self.config.direction)
        self.reset()

    def reset(self) -> None:
        """Reinitialize the session to its starting values."""
        self.snake = Snake(self.config.start)
        self.directions.reset(self.config.direction)
        self.score = 0
        self.speed = self.difficulty.initial_speed
        self.tick = 0
        self.apple: Point = self.apple_spawner.place(self.snake.body, self.bounds)

    def update(self) -> TickOutcome:
        """Advance the session by one tick.

        On a collision the session is left untouched; the caller decides
        how to end and reset it.
        """
        direction = self.directions.commit()
        head = self.snake.next_head(direction)
        collision = classify(head, self.snake.body, self.bounds)
        self.tick += 1

        if collision is not Collision.NONE:
            return _COLLISION_OUTCOMES[collision]

        ate = head == self.apple
        self.snake.advance(head, grow=ate)
        if not ate:
            return TickOutcome.MOVED

        self.score += 1
        self.apple = self.apple_spawner.place(self.snake.body, self.bounds)
        self.speed = self.difficulty.on_apple_consumed(self.speed)
        logger.debug(
            "Apple eaten: score=%d, speed=%dms, next apple at %s.",
            self.score, self.speed, self.apple,
        )
        return TickOutcome.ATE

    def to_dict(self) -> dict:
        """Return a serializable snapshot of the session."""
        return {
            "tick": self.tick,
            "score": self.score,
            "speed": self.speed,
            "direction": self.directions.committed.name.lower(),
            "grid": self.bounds.to_dict(),
            "snake": self.snake.to_dict(),
            "apple": list(self.apple),
        }
