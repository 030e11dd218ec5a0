"""A clickable text button."""

from __future__ import annotations

import functools

import pygame

PRESS_TICKS = 10
_TEXT_COLOR = (255, 0, 0)
_CHAR_WIDTH = 8


@functools.lru_cache(maxsize=None)
def _font(size: int):
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


class Button:
    """A rectangular hit area with a label; stays pressed for a few ticks after a click."""

    def __init__(self, x, y, width, height, text):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.text = text
        self.pressed = False
        self._pressed_counter = -1

    def reset(self) -> None:
        self._pressed_counter = -1
        self.pressed = False

    def tick(self) -> None:
        self._pressed_counter -= 1
        if self._pressed_counter == 0:
            self.pressed = False
            self._pressed_counter = -1

    def mouse_pressed(self, x, y) -> None:
        """Register a click; the edges of the button count as inside."""
        if self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height:
            self.pressed = True
            self._pressed_counter = PRESS_TICKS

    def render(self, surface) -> None:
        font = _font(16)
        label = font.render(self.text, False, _TEXT_COLOR)
        left = self.x + self.width // 2 - (_CHAR_WIDTH // 2) * len(self.text)
        baseline = self.y + self.height // 2
        surface.blit(label, (left, baseline - font.get_ascent()))

    def was_pressed(self) -> bool:
        return self.pressed