"""Interfaces the game loop drives: display, dialogs and timers."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol

from classic_snake.grid import Point


class Presenter(Protocol):
    """Display side of a game session."""

    def render(self, grid_size: int, snake: Sequence[Point], apple: Point) -> None:
        """Draw one frame. Called once per tick, after the update."""

    def show_score(self, score: int) -> None: ...

    def show_high_score(self, high_score: int) -> None: ...

    def notify_game_over(self, score: int, high_score: int) -> bool:
        """Tell the player the game ended; block until acknowledged.

        Returns False if the player dismissed the game instead, e.g. by
        closing the window.
        """


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Runs a callback once after a delay in seconds.

    :class:`asyncio.AbstractEventLoop` satisfies this protocol.
    """

    def call_later(self, delay: float, callback: Callable[[], object]) -> TimerHandle: ...
