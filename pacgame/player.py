"""The player-controlled character."""

from __future__ import annotations

import enum
import functools

import pygame

from .animation import Animation
from .entities import (
    Apple,
    BigDot,
    Cherry,
    Dot,
    Entity,
    Facing,
    Strawberry,
    crop_sprite,
)

MAX_HEALTH = 3
PICKUP_POINTS = 10
POWER_PICKUP_POINTS = 20

PICKUPS = (Dot, BigDot, Cherry, Strawberry, Apple)
POWER_PICKUPS = (BigDot, Cherry, Strawberry, Apple)

_HUD_COLOR = (255, 0, 0)
_HUD_Y = 50
_HEART_RADIUS = 10


class Moving(enum.Enum):
    """The direction the player has asked to go."""

    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()


_MOVE_TO_FACING = {
    Moving.UP: Facing.UP,
    Moving.DOWN: Facing.DOWN,
    Moving.LEFT: Facing.LEFT,
    Moving.RIGHT: Facing.RIGHT,
}
_STEPS = {
    Facing.UP: (0, -1),
    Facing.DOWN: (0, 1),
    Facing.LEFT: (-1, 0),
    Facing.RIGHT: (1, 0),
}
_KEY_MOVES = {"w": Moving.UP, "s": Moving.DOWN, "a": Moving.LEFT, "d": Moving.RIGHT}
_SHEET_ROWS = {Facing.RIGHT: 0, Facing.LEFT: 16, Facing.UP: 32, Facing.DOWN: 48}


@functools.lru_cache(maxsize=None)
def _font(size: int):
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


class Player(Entity):
    """Moves through the maze, eats pickups and loses a life when a ghost catches it."""

    def __init__(self, x, y, width, height, entity_manager, sheet):
        super().__init__(x, y, width, height, sheet)
        self.spawn_x = x
        self.spawn_y = y
        self.entity_manager = entity_manager
        self.health = MAX_HEALTH
        self.score = 0
        self.speed = 4
        self.walking = False
        self.teletransport = False
        self.moving = Moving.LEFT
        self.facing = Facing.DOWN
        self.animations = {
            facing: Animation(1, [crop_sprite(sheet, col * 16, row, 16, 16) for col in range(3)])
            for facing, row in _SHEET_ROWS.items()
        }
        self._free = dict.fromkeys(Facing, True)

    def tick(self) -> None:
        self.check_collisions()
        wanted = _MOVE_TO_FACING[self.moving]
        if self._free[wanted]:
            self.facing = wanted
        if self._free[self.facing]:
            dx, dy = _STEPS[self.facing]
            self.x += dx * self.speed
            self.y += dy * self.speed
            self.animations[self.facing].tick()

    def render(self, surface) -> None:
        self._draw(surface, self.animations[self.facing].current_frame())
        centre = surface.get_width() // 2
        font = _font(16)
        surface.blit(font.render("Health: ", False, _HUD_COLOR), (centre + 100, _HUD_Y - font.get_ascent()))
        for i in range(max(self.health, 0)):
            pygame.draw.circle(surface, _HUD_COLOR, (centre + 25 * i + 200, _HUD_Y), _HEART_RADIUS)
        surface.blit(
            font.render(f"Score:{self.score}", False, _HUD_COLOR),
            (centre - 200, _HUD_Y - font.get_ascent()),
        )

    def key_pressed(self, key) -> None:
        """``w``/``a``/``s``/``d`` steer, ``n`` loses a life, ``m`` gains one up to the maximum."""
        if key in _KEY_MOVES:
            self.moving = _KEY_MOVES[key]
        elif key == "n":
            self.die()
        elif key == "m" and self.health < MAX_HEALTH:
            self.health += 1

    def key_released(self, key) -> None:
        if key in _KEY_MOVES:
            self.walking = False

    def mouse_pressed(self, x, y, button) -> None:
        """Mouse clicks have no effect on the player."""

    def check_collisions(self) -> None:
        """Work out which directions are open and handle pickups and ghost contact."""
        walls = [block.bounds() for block in self.entity_manager.bound_blocks]
        for facing, (dx, dy) in _STEPS.items():
            ahead = self.bounds(self.x + dx * self.speed, self.y + dy * self.speed)
            self._free[facing] = not any(ahead.intersects(wall) for wall in walls)

        for entity in self.entity_manager.entities:
            if not self.collides(entity):
                continue
            if isinstance(entity, PICKUPS):
                entity.remove = True
                self.score += PICKUP_POINTS
            if isinstance(entity, POWER_PICKUPS):
                self.score += POWER_PICKUP_POINTS
                self.entity_manager.set_killable(True)

        for ghost in self.entity_manager.ghosts:
            if self.collides(ghost):
                if ghost.killable:
                    ghost.remove = True
                else:
                    self.die()

    def die(self) -> None:
        """Lose a life and go back to the spawn point."""
        self.health -= 1
        self.x = self.spawn_x
        self.y = self.spawn_y