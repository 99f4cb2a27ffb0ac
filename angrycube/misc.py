"""Game state, shared counters, timed on-screen texts and small helpers."""

from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Callable, Optional

import pygame

from angrycube.gameobject import Vector2, Vector3

logger = logging.getLogger(__name__)

Color = tuple

DARKGRAY = (80, 80, 80)
YELLOW = (253, 249, 0)
WHITE = (255, 255, 255)
DARKGREEN = (0, 117, 44)
ORANGE = (255, 161, 0)
RED = (230, 41, 55)

TIMED_TEXT_FONT_SIZE = 20


class GameState(enum.Enum):
    MAIN_MENU = enum.auto()
    PLAYING = enum.auto()
    PAUSED = enum.auto()
    GAME_OVER = enum.auto()


def _default_speeds() -> list:
    return [1.0, 1.5, 2.0, 2.5, 3.0, 5.0, 6.0, 7.5, 9.0]


@dataclass
class GameInfo:
    """Running score, anger level and countdown of the current game."""

    score: int = 0
    face_hits: int = 0
    possible_speeds: list = field(default_factory=_default_speeds)
    anger: int = 0
    rotation_countdown: int = 20


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def measure_text(text: str, font_size: int) -> int:
    """Return the pixel width of the widest line of text."""
    font = _font(font_size)
    return max(font.size(line)[0] for line in text.split("\n"))


def draw_text(surface, text: str, x: float, y: float, font_size: int, color) -> None:
    """Draw text, one row per line, with its top left corner at (x, y)."""
    font = _font(font_size)
    line_y = y
    for line in text.split("\n"):
        surface.blit(font.render(line, True, color), (x, line_y))
        line_y += font.get_linesize()


@dataclass
class TimedText:
    """A piece of text that stays on screen for a limited time."""

    draw_function: Callable
    last_check_time: float = field(default_factory=time.monotonic)
    duration: float = 3.0
    text: str = ""

    def draw(self, surface) -> None:
        self.draw_function(surface)

    def expired(self, now: Optional[float] = None) -> bool:
        """Tell whether the text has outlived its duration."""
        if now is None:
            now = time.monotonic()
        return now - self.last_check_time > self.duration


def get_timed_text(
    text: str, position: Optional[Vector2] = None, now: Optional[float] = None
) -> TimedText:
    """Build a yellow timed text; without a position it is centred at a third of the height."""

    def draw(surface) -> None:
        if position is None:
            width, height = surface.get_size()
            x = (width - measure_text(text, 16)) // 2
            y = height // 3
        else:
            x, y = position.x, position.y
        draw_text(surface, text, x, y, TIMED_TEXT_FONT_SIZE, YELLOW)

    if now is None:
        return TimedText(draw, text=text)
    return TimedText(draw, last_check_time=now, text=text)


def abs_vector3(vector: Vector3) -> Vector3:
    return vector.abs()


def sum_vector3(vector: Vector3) -> int:
    """Sum the components, truncated to an integer."""
    return int(vector.x + vector.y + vector.z)


def log(message: str, prefix: str = "CUSTOM", level: int = logging.INFO) -> str:
    """Log a prefixed message and return the logged line."""
    line = f"[{prefix}]: {message}"
    logger.log(level, line)
    return line