"""Classic Snake — tick-driven single-player game core."""

from classic_snake.apple import AppleSpawner
from classic_snake.collision import Collision, classify
from classic_snake.config import GameConfig
from classic_snake.difficulty import DifficultyScheduler
from classic_snake.direction import DirectionBuffer
from classic_snake.grid import Grid, Point
from classic_snake.highscore import JsonHighScoreStore, MemoryHighScoreStore
from classic_snake.loop import GameLoop, LoopStatus
from classic_snake.snake import Direction, Snake
from classic_snake.state import GameState, TickOutcome

__all__ = [
    "AppleSpawner",
    "Collision",
    "DifficultyScheduler",
    "Direction",
    "DirectionBuffer",
    "GameConfig",
    "GameLoop",
    "GameState",
    "Grid",
    "JsonHighScoreStore",
    "LoopStatus",
    "MemoryHighScoreStore",
    "Point",
    "Snake",
    "TickOutcome",
    "classify",
]
