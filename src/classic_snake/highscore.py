"""Persistent storage for the best score."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_HIGH_SCORE_FILE = Path.home() / ".classic_snake" / "high_score.json"


class HighScoreStore(Protocol):
    """Anything that can read and write a single high-score value."""

    def get(self) -> int | None: ...

    def set(self, score: int) -> None: ...


class MemoryHighScoreStore:
    """Keeps the high score for the lifetime of the process only."""

    def __init__(self, score: int | None = None) -> None:
        self._score = score

    def get(self) -> int | None:
        return self._score

    def set(self, score: int) -> None:
        self._score = score


class JsonHighScoreStore:
    """Stores the high score as a bare JSON number in a single file.

    A missing file reads as no stored score.
    """

    def __init__(self, path: str | Path = DEFAULT_HIGH_SCORE_FILE) -> None:
        self.path = Path(path)

    def get(self) -> int | None:
        if not self.path.exists():
            return None
        value = json.loads(self.path.read_text())
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise ValueError(
                f"High-score file {self.path} does not hold a non-negative integer."
            )
        return value

    def set(self, score: int) -> None:
        if score < 0:
            raise ValueError("High score must be non-negative.")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(score))
        logger.info("High score %d written to %s.", score, self.path)
