"""Single-slot direction register shared between input and the tick loop."""

from __future__ import annotations

import threading

from classic_snake.snake import Direction


class DirectionBuffer:
    """Buffers the latest legal direction request until the next tick.

    Requests may arrive at any time and from any thread. Only the most
    recent accepted request is kept; there is no queue. A request for the
    exact opposite of the committed direction is discarded, since the
    segment behind the head would make it an instant self-collision.
    """

    def __init__(self, initial: Direction = Direction.RIGHT) -> None:
        self._lock = threading.Lock()
        self._committed = initial
        self._pending = initial

    @property
    def committed(self) -> Direction:
        return self._committed

    @property
    def pending(self) -> Direction:
        return self._pending

    def request(self, direction: Direction) -> bool:
        """Record *direction* as pending. Returns False if it was rejected."""
        with self._lock:
            if direction is self._committed.opposite:
                return False
            self._pending = direction
            return True

    def commit(self) -> Direction:
        """Apply the pending direction for the current tick and return it."""
        with self._lock:
            self._committed = self._pending
            return self._committed

    def reset(self, direction: Direction = Direction.RIGHT) -> None:
        with self._lock:
            self._committed = direction
            self._pending = direction
