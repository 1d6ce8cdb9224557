"""Pygame front end: window, keyboard input and game-over dialog."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

import pygame

from classic_snake.config import GameConfig
from classic_snake.grid import Point
from classic_snake.highscore import HighScoreStore, JsonHighScoreStore
from classic_snake.loop import GameLoop, LoopStatus
from classic_snake.snake import Direction

logger = logging.getLogger(__name__)

BACKGROUND = (0, 0, 0)
SNAKE_COLOR = (0, 255, 0)
APPLE_COLOR = (255, 0, 0)
TEXT_COLOR = (240, 240, 240)
HUD_HEIGHT = 32
FONT_SIZE = 24

# Keyboard input is polled this often while the loop waits between ticks.
POLL_INTERVAL = 0.01  # seconds

KEY_DIRECTIONS: dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}

_ACKNOWLEDGE_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)


class DesktopPresenter:
    """Draws the game into a pygame surface.

    The play field occupies the top of the surface; a strip below it
    holds the score and high score.
    """

    def __init__(self, surface: pygame.Surface, config: GameConfig) -> None:
        self.surface = surface
        self.config = config
        self.font = pygame.font.Font(None, FONT_SIZE)
        self.score = 0
        self.high_score = 0

    def render(self, grid_size: int, snake: Sequence[Point], apple: Point) -> None:
        self.surface.fill(BACKGROUND)
        for segment in snake:
            self._fill_cell(grid_size, segment, SNAKE_COLOR)
        self._fill_cell(grid_size, apple, APPLE_COLOR)
        self._draw_hud()
        pygame.display.flip()

    def show_score(self, score: int) -> None:
        self.score = score
        self._update_caption()

    def show_high_score(self, high_score: int) -> None:
        self.high_score = high_score
        self._update_caption()

    def notify_game_over(self, score: int, high_score: int) -> bool:
        lines = (
            f"Game Over! Score: {score}",
            f"High Score: {high_score}",
            "Press Enter to play again",
        )
        centre_x = self.config.field_width // 2
        top = self.config.field_height // 2 - FONT_SIZE * len(lines) // 2
        for i, line in enumerate(lines):
            text = self.font.render(line, True, TEXT_COLOR)
            self.surface.blit(
                text, text.get_rect(center=(centre_x, top + i * FONT_SIZE)),
            )
        pygame.display.flip()

        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key in _ACKNOWLEDGE_KEYS:
                    return True
            elif event.type == pygame.MOUSEBUTTONDOWN:
                return True

    def _fill_cell(self, grid_size: int, cell: Point, color: tuple[int, int, int]) -> None:
        rect = pygame.Rect(
            cell.x * grid_size, cell.y * grid_size, grid_size - 2, grid_size - 2,
        )
        pygame.draw.rect(self.surface, color, rect)

    def _draw_hud(self) -> None:
        mid_y = self.config.field_height + HUD_HEIGHT // 2
        score = self.font.render(f"Score: {self.score}", True, TEXT_COLOR)
        self.surface.blit(score, score.get_rect(midleft=(8, mid_y)))
        best = self.font.render(f"High Score: {self.high_score}", True, TEXT_COLOR)
        self.surface.blit(
            best, best.get_rect(midright=(self.config.field_width - 8, mid_y)),
        )

    def _update_caption(self) -> None:
        pygame.display.set_caption(
            f"Snake  Score: {self.score}  High Score: {self.high_score}",
        )


def handle_event(loop: GameLoop, event: pygame.event.Event) -> bool:
    """Route one pygame event to the loop. Returns False to quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type != pygame.KEYDOWN:
        return True
    if event.key == pygame.K_ESCAPE:
        return False
    if event.key == pygame.K_p:
        loop.toggle_pause()
    elif event.key in KEY_DIRECTIONS:
        loop.request_direction(KEY_DIRECTIONS[event.key])
    return True


async def pump_events(loop: GameLoop) -> None:
    """Forward keyboard input to *loop* until the player quits."""
    while loop.status is not LoopStatus.STOPPED:
        for event in pygame.event.get():
            if not handle_event(loop, event):
                loop.stop()
                break
        await asyncio.sleep(POLL_INTERVAL)


async def play(
    config: GameConfig | None = None,
    store: HighScoreStore | None = None,
) -> int:
    """Open a window and play until it is closed. Returns the high score."""
    config = config if config is not None else GameConfig()
    store = store if store is not None else JsonHighScoreStore()

    pygame.init()
    try:
        surface = pygame.display.set_mode(
            (config.field_width, config.field_height + HUD_HEIGHT),
        )
        presenter = DesktopPresenter(surface, config)
        loop = GameLoop(presenter, store, config)
        loop.start()
        try:
            await pump_events(loop)
        finally:
            loop.stop()
        return loop.high_score
    finally:
        pygame.quit()


def main(config_path: str | Path | None = None) -> None:
    """Desktop entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    config = GameConfig.load(config_path) if config_path else GameConfig()
    high_score = asyncio.run(play(config))
    logger.info("Closed with high score %d.", high_score)


if __name__ == "__main__":
    main()
