"""Speed progression as apples are eaten."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DifficultyScheduler:
    """Maps the current tick delay to the delay after an apple is eaten.

    Delays are in milliseconds. Lower is faster; the delay never drops
    below ``min_speed``.
    """

    initial_speed: int = 200
    min_speed: int = 50
    speed_decrement: int = 5

    def __post_init__(self) -> None:
        if self.min_speed < 1:
            raise ValueError("min_speed must be positive.")
        if self.initial_speed < self.min_speed:
            raise ValueError("initial_speed must be >= min_speed.")
        if self.speed_decrement < 0:
            raise ValueError("speed_decrement must be >= 0.")

    def on_apple_consumed(self, speed: int) -> int:
        """Return the delay to use after one more apple."""
        return max(self.min_speed, speed - self.speed_decrement)
