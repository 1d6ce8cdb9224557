"""Tests for the DirectionBuffer register."""

import threading

import pytest

from classic_snake.direction import DirectionBuffer
from classic_snake.snake import Direction

_REVERSALS = [
    (Direction.RIGHT, Direction.LEFT),
    (Direction.LEFT, Direction.RIGHT),
    (Direction.UP, Direction.DOWN),
    (Direction.DOWN, Direction.UP),
]


class TestDirectionBufferInit:
    def test_defaults_to_right(self):
        buf = DirectionBuffer()
        assert buf.committed is Direction.RIGHT
        assert buf.pending is Direction.RIGHT

    def test_custom_initial(self):
        buf = DirectionBuffer(Direction.UP)
        assert buf.commit() is Direction.UP


class TestDirectionRequests:
    @pytest.mark.parametrize(("committed", "reverse"), _REVERSALS)
    def test_reversal_rejected(self, committed, reverse):
        buf = DirectionBuffer(committed)
        assert not buf.request(reverse)
        assert buf.pending is committed
        assert buf.commit() is committed

    def test_perpendicular_accepted(self):
        buf = DirectionBuffer(Direction.RIGHT)
        assert buf.request(Direction.UP)
        assert buf.pending is Direction.UP
        assert buf.committed is Direction.RIGHT

    def test_last_write_wins(self):
        buf = DirectionBuffer(Direction.RIGHT)
        buf.request(Direction.UP)
        buf.request(Direction.DOWN)
        assert buf.commit() is Direction.DOWN

    def test_rejected_request_keeps_earlier_pending(self):
        buf = DirectionBuffer(Direction.RIGHT)
        buf.request(Direction.UP)
        buf.request(Direction.LEFT)
        assert buf.commit() is Direction.UP

    def test_reversal_checked_against_committed_not_pending(self):
        buf = DirectionBuffer(Direction.RIGHT)
        buf.request(Direction.UP)
        # DOWN reverses the pending UP but not the committed RIGHT.
        assert buf.request(Direction.DOWN)
        assert buf.commit() is Direction.DOWN

    def test_request_after_commit_applies_next_tick(self):
        buf = DirectionBuffer(Direction.RIGHT)
        assert buf.commit() is Direction.RIGHT
        buf.request(Direction.UP)
        assert buf.committed is Direction.RIGHT
        assert buf.commit() is Direction.UP

    def test_reset(self):
        buf = DirectionBuffer(Direction.RIGHT)
        buf.request(Direction.UP)
        buf.commit()
        buf.reset()
        assert buf.committed is Direction.RIGHT
        assert buf.pending is Direction.RIGHT


class TestDirectionThreads:
    def test_requests_from_other_threads(self):
        buf = DirectionBuffer(Direction.RIGHT)
        threads = [
            threading.Thread(target=buf.request, args=(Direction.UP,))
            for _ in range(8)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert buf.commit() is Direction.UP
