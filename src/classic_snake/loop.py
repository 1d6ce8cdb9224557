"""Self-rearming tick loop and the game-over/reset cycle."""

from __future__ import annotations

import asyncio
import enum
import logging

from classic_snake.config import GameConfig
from classic_snake.highscore import HighScoreStore
from classic_snake.presentation import Presenter, Scheduler, TimerHandle
from classic_snake.snake import Direction
from classic_snake.state import GameState, TickOutcome

logger = logging.getLogger(__name__)


class LoopStatus(enum.Enum):
    """Lifecycle states of a :class:`GameLoop`."""

    IDLE = "idle"
    ACTIVE = "active"
    RESETTING = "resetting"
    PAUSED = "paused"
    STOPPED = "stopped"


class GameLoop:
    """Drives a :class:`GameState` one tick at a time.

    Each tick runs the update, renders, then schedules exactly one next
    tick after the current speed. At most one tick is ever pending; every
    reschedule cancels the previous handle first.
    """

    def __init__(
        self,
        presenter: Presenter,
        store: HighScoreStore,
        config: GameConfig | None = None,
        *,
        state: GameState | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        self.state = state if state is not None else GameState(config)
        self.config: GameConfig = self.state.config
        self.presenter = presenter
        self.store = store
        self._scheduler = scheduler
        self._handle: TimerHandle | None = None
        self.status = LoopStatus.IDLE
        self.high_score = 0
        self.games_played = 0

    @property
    def pending(self) -> bool:
        """Whether a future tick is currently scheduled."""
        return self._handle is not None

    def request_direction(self, direction: Direction) -> bool:
        """Forward a direction request from any input source."""
        return self.state.directions.request(direction)

    def start(self) -> None:
        """Load the high score, begin a fresh session and schedule its first tick."""
        if self._scheduler is None:
            self._scheduler = asyncio.get_running_loop()
        stored = self.store.get()
        self.high_score = stored if stored is not None else 0
        self.presenter.show_high_score(self.high_score)
        self.state.reset()
        self.presenter.show_score(self.state.score)
        self.status = LoopStatus.ACTIVE
        logger.info(
            "Session started on a %dx%d grid (high score %d).",
            self.state.bounds.width, self.state.bounds.height, self.high_score,
        )
        self._render()
        self._schedule()

    def stop(self) -> None:
        """Cancel any pending tick and end the loop."""
        self._cancel()
        if self.status is not LoopStatus.STOPPED:
            self.status = LoopStatus.STOPPED
            logger.info("Game loop stopped after %d game(s).", self.games_played)

    def pause(self) -> None:
        if self.status is not LoopStatus.ACTIVE:
            return
        self._cancel()
        self.status = LoopStatus.PAUSED
        logger.debug("Paused at tick %d.", self.state.tick)

    def resume(self) -> None:
        if self.status is not LoopStatus.PAUSED:
            return
        self.status = LoopStatus.ACTIVE
        logger.debug("Resumed at tick %d.", self.state.tick)
        self._schedule()

    def toggle_pause(self) -> None:
        if self.status is LoopStatus.PAUSED:
            self.resume()
        else:
            self.pause()

    def restart(self) -> None:
        """Abandon the current session and start a new one immediately."""
        if self.status in (LoopStatus.IDLE, LoopStatus.STOPPED):
            return
        self._cancel()
        self._reset_session()
        self.status = LoopStatus.ACTIVE
        self._render()
        self._schedule()

    def tick(self) -> TickOutcome:
        """Run one update-then-render step and schedule the next one."""
        self._handle = None
        outcome = self.state.update()
        if outcome is TickOutcome.ATE:
            self.presenter.show_score(self.state.score)
        elif outcome.game_over:
            if not self._end_session(outcome):
                self.stop()
                return outcome
        self._render()
        self._schedule()
        return outcome

    def _end_session(self, outcome: TickOutcome) -> bool:
        """Record the result, notify the player and reset.

        Returns False if the notification was not acknowledged.
        """
        self.status = LoopStatus.RESETTING
        self._cancel()
        score = self.state.score
        self.games_played += 1
        logger.info(
            "Game over (%s) at tick %d with score %d.",
            outcome.value, self.state.tick, score,
        )
        if score > self.high_score:
            self.high_score = score
            self.store.set(score)
            self.presenter.show_high_score(score)
            logger.info("New high score: %d.", score)

        if not self.presenter.notify_game_over(score, self.high_score):
            return False

        self._reset_session()
        self.status = LoopStatus.ACTIVE
        return True

    def _reset_session(self) -> None:
        self.state.reset()
        self.presenter.show_score(self.state.score)

    def _render(self) -> None:
        self.presenter.render(
            self.config.grid_size, self.state.snake.segments(), self.state.apple,
        )

    def _schedule(self) -> None:
        if self.status is not LoopStatus.ACTIVE:
            return
        self._cancel()
        assert self._scheduler is not None  # noqa: S101
        self._handle = self._scheduler.call_later(
            self.state.speed / 1000.0, self.tick,
        )

    def _cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
