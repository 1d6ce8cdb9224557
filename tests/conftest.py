"""Shared fakes for driving the game loop deterministically."""

from __future__ import annotations

import pytest


class FakeHandle:
    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Records ``call_later`` requests; fires them only when asked."""

    def __init__(self):
        self.calls: list[FakeHandle] = []

    def call_later(self, delay, callback):
        handle = FakeHandle(delay, callback)
        self.calls.append(handle)
        return handle

    @property
    def pending(self) -> list[FakeHandle]:
        return [h for h in self.calls if not h.cancelled and not h.fired]

    def fire(self):
        """Run the single pending callback, as the event loop would."""
        (handle,) = self.pending
        handle.fired = True
        return handle.callback()


class FakePresenter:
    def __init__(self, acknowledge: bool = True):
        self.acknowledge = acknowledge
        self.frames: list[tuple[int, list, tuple]] = []
        self.scores: list[int] = []
        self.high_scores: list[int] = []
        self.game_overs: list[tuple[int, int]] = []

    def render(self, grid_size, snake, apple):
        self.frames.append((grid_size, list(snake), apple))

    def show_score(self, score):
        self.scores.append(score)

    def show_high_score(self, high_score):
        self.high_scores.append(high_score)

    def notify_game_over(self, score, high_score):
        self.game_overs.append((score, high_score))
        return self.acknowledge


@pytest.fixture()
def scheduler():
    return FakeScheduler()


@pytest.fixture()
def presenter():
    return FakePresenter()
