"""Basic game entities: geometry, sprites and the static map pieces."""

from __future__ import annotations

import enum
from dataclasses import dataclass

import pygame


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle with its origin at the top-left corner."""

    x: int
    y: int
    width: int
    height: int

    def intersects(self, other: Rect) -> bool:
        """True when the two rectangles overlap; touching edges do not count."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


class Facing(enum.Enum):
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()


def crop_sprite(sheet, x, y, width, height):
    """Copy a region of a sprite sheet, clipped to the sheet; ``None`` sheets give ``None``."""
    if sheet is None:
        return None
    area = pygame.Rect(x, y, width, height).clip(sheet.get_rect())
    return sheet.subsurface(area).copy()


class Entity:
    """Something placed on the map with a position, a size and a sprite."""

    def __init__(self, x, y, width, height, sprite=None):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.sprite = sprite
        self.ticks = 0
        self.remove = False

    def tick(self) -> None:
        self.ticks += 1

    def render(self, surface) -> None:
        self._draw(surface, self.sprite)

    def _draw(self, surface, image) -> None:
        if image is None:
            return
        scaled = pygame.transform.scale(image, (self.width, self.height))
        surface.blit(scaled, (self.x, self.y))

    def collides(self, other: Entity) -> bool:
        return self.bounds().intersects(other.bounds())

    def bounds(self, x=None, y=None) -> Rect:
        """This entity's rectangle, optionally placed at another position."""
        return Rect(
            self.x if x is None else x,
            self.y if y is None else y,
            self.width,
            self.height,
        )


class _SheetSprite(Entity):
    """An entity whose sprite is a 16x16 tile taken from the sprite sheet."""

    _sheet_origin: tuple[int, int] = (0, 0)

    def __init__(self, x, y, width, height, sprite_sheet):
        sx, sy = self._sheet_origin
        super().__init__(x, y, width, height, crop_sprite(sprite_sheet, sx, sy, 16, 16))


class Dot(_SheetSprite):
    _sheet_origin = (623, 18)

    def __init__(self, x, y, width, height, sprite_sheet):
        super().__init__(x, y, width, height, sprite_sheet)


class BigDot(_SheetSprite):
    _sheet_origin = (643, 18)

    def __init__(self, x, y, width, height, sprite_sheet):
        super().__init__(x, y, width, height, sprite_sheet)


class Cherry(_SheetSprite):
    _sheet_origin = (487, 48)

    def __init__(self, x, y, width, height, sprite_sheet):
        super().__init__(x, y, width, height, sprite_sheet)


class Strawberry(_SheetSprite):
    _sheet_origin = (503, 48)

    def __init__(self, x, y, width, height, sprite_sheet):
        super().__init__(x, y, width, height, sprite_sheet)


class Apple(_SheetSprite):
    _sheet_origin = (535, 48)

    def __init__(self, x, y, width, height, sprite_sheet):
        super().__init__(x, y, width, height, sprite_sheet)


class BoundBlock(Entity):
    """A wall tile."""

    def __init__(self, x, y, width, height, sprite):
        super().__init__(x, y, width, height, sprite)