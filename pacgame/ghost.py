"""Ghosts that wander the maze and the spawner that releases them."""

from __future__ import annotations

import random

from .animation import Animation
from .entities import Entity, Facing, crop_sprite

COLORS = ("red", "pink", "cyan", "orange")
SPAWN_DELAY = 30 * 5
MAX_GHOSTS = 4
MAX_SUMMONED_GHOSTS = 8

_COLOR_TILES = {
    "red": (456, 64),
    "pink": (456, 79),
    "cyan": (456, 96),
    "orange": (456, 113),
}
_KILLABLE_TILES = ((584, 64), (600, 64), (616, 64), (632, 64))
_STEPS = {
    Facing.UP: (0, -1),
    Facing.DOWN: (0, 1),
    Facing.LEFT: (-1, 0),
    Facing.RIGHT: (1, 0),
}
_TURNS = (Facing.LEFT, Facing.RIGHT, Facing.DOWN, Facing.UP)


class Ghost(Entity):
    """A ghost that moves straight until it hits a wall, then turns at random."""

    def __init__(self, x, y, width, height, sprite_sheet, entity_manager, color, rng=None):
        tile = _COLOR_TILES.get(color)
        sprite = crop_sprite(sprite_sheet, *tile, 16, 16) if tile else None
        super().__init__(x, y, width, height, sprite)
        self.color = color
        self.entity_manager = entity_manager
        self.rng = rng if rng is not None else random.Random()
        self.killable_animation = Animation(
            10, [crop_sprite(sprite_sheet, sx, sy, 16, 16) for sx, sy in _KILLABLE_TILES]
        )
        self.killable = False
        self.facing = Facing.UP
        self.can_move = True
        self.just_spawned = True
        self.speed = 2

    def tick(self) -> None:
        self.killable_animation.tick()
        self.can_move = not self._blocked()
        if self.can_move:
            dx, dy = _STEPS[self.facing]
            self.x += dx * self.speed
            self.y += dy * self.speed
        else:
            choices = 2 if self.just_spawned else 4
            self.facing = _TURNS[self.rng.randrange(choices)]
            self.just_spawned = False

    def render(self, surface) -> None:
        if self.killable:
            self._draw(surface, self.killable_animation.current_frame())
        else:
            super().render(surface)

    def _blocked(self) -> bool:
        dx, dy = _STEPS[self.facing]
        ahead = self.bounds(self.x + dx * self.speed, self.y + dy * self.speed)
        return any(ahead.intersects(block.bounds()) for block in self.entity_manager.bound_blocks)


class GhostSpawner(Entity):
    """The ghost house: starts with one ghost of each colour and refills over time."""

    def __init__(self, x, y, width, height, entity_manager, sprite_sheet, rng=None):
        super().__init__(x, y, width, height, sprite_sheet)
        self.entity_manager = entity_manager
        self.rng = rng if rng is not None else random.Random()
        self.spawn_counter = SPAWN_DELAY
        for color in COLORS:
            self.spawn_ghost(color)

    def tick(self) -> None:
        if len(self.entity_manager.ghosts) < MAX_GHOSTS:
            if self.spawn_counter == 0:
                self.spawn_ghost(self.rng.choice(COLORS))
                self.spawn_counter = SPAWN_DELAY
            else:
                self.spawn_counter -= 1

    def spawn_ghost(self, color) -> Ghost:
        ghost = Ghost(
            self.x,
            self.y,
            self.width - 2,
            self.height - 2,
            self.sprite,
            self.entity_manager,
            color,
            self.rng,
        )
        self.entity_manager.ghosts.append(ghost)
        return ghost

    def key_pressed(self, key) -> None:
        """Pressing ``g`` summons an extra ghost, up to a limit."""
        if key == "g" and len(self.entity_manager.ghosts) < MAX_SUMMONED_GHOSTS:
            self.spawn_ghost(self.rng.choice(COLORS))