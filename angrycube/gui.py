"""Minimal push-button menu."""

from __future__ import annotations

from typing import Callable, Optional

import pygame

from angrycube.gameobject import Vector2
from angrycube.misc import DARKGREEN, ORANGE, RED, WHITE, draw_text, measure_text


class PushButton:
    """A labelled rectangle centred horizontally on (x, y) that fires a callback once."""

    def __init__(
        self,
        text: str,
        x: int,
        y: int,
        callback: Optional[Callable[[], None]] = None,
        measure: Callable[[str, int], int] = measure_text,
    ) -> None:
        self.text = text
        self.position = Vector2(float(x), float(y))
        self.callback = callback
        self.font_size = 20
        self.padding_x = 10
        self.padding_y = 10
        self.text_width = measure(text, self.font_size)
        self.start_x = int(self.position.x) - self.padding_x - self.text_width // 2
        self.start_y = int(self.position.y) - self.padding_y
        self.end_x = self.start_x + self.text_width + self.padding_x * 2
        self.end_y = self.start_y + self.padding_y * 2 + self.font_size
        self.background_color = DARKGREEN
        self.should_update = True

    @property
    def width(self) -> int:
        return self.end_x - self.start_x

    @property
    def height(self) -> int:
        return self.end_y - self.start_y

    def contains(self, point) -> bool:
        x, y = point
        return self.start_x <= x <= self.end_x and self.start_y <= y <= self.end_y

    def render(self, surface) -> None:
        rect = pygame.Rect(self.start_x, self.start_y, self.width, self.height)
        pygame.draw.rect(surface, self.background_color, rect)
        draw_text(
            surface,
            self.text,
            self.start_x + self.padding_x,
            self.start_y + self.padding_y,
            self.font_size,
            WHITE,
        )

    def update(self, mouse_pos, button_down: bool, button_released: bool) -> None:
        """React to the mouse: highlight on hover, press on down, act on release."""
        if not self.should_update:
            return
        if self.contains(mouse_pos):
            self.background_color = ORANGE
            if button_down:
                self.background_color = RED
            if button_released:
                self.do_action()
        else:
            self.background_color = DARKGREEN

    def do_action(self) -> None:
        """Run the callback, after which the button stops reacting."""
        if self.callback is not None:
            self.callback()
            self.should_update = False


class Menu:
    """An ordered collection of GUI items updated and drawn together."""

    def __init__(self) -> None:
        self.items: list = []

    def add_item(self, item) -> None:
        self.items.append(item)

    def render(self, surface) -> None:
        for item in self.items:
            item.render(surface)

    def update(self, mouse_pos, button_down: bool, button_released: bool) -> None:
        for item in self.items:
            item.update(mouse_pos, button_down, button_released)