"""A level: the entity manager plus the player and the ghost house."""

from __future__ import annotations

from .entities import BigDot, Dot

_BACKGROUND = (0, 0, 0)


class GameMap:
    """Ties the pieces of one level together and forwards input to them."""

    def __init__(self, entity_manager):
        self.entity_manager = entity_manager
        self.player = None
        self.ghost_spawner = None

    def tick(self) -> None:
        self.entity_manager.tick()
        if self.player is not None:
            self.player.tick()
        if self.ghost_spawner is not None:
            self.ghost_spawner.tick()

    def render(self, surface) -> None:
        surface.fill(_BACKGROUND)
        self.entity_manager.render(surface)
        if self.player is not None:
            self.player.render(surface)

    def key_pressed(self, key) -> None:
        if self.player is not None:
            self.player.key_pressed(key)
        if self.ghost_spawner is not None:
            self.ghost_spawner.key_pressed(key)

    def mouse_pressed(self, x, y, button) -> None:
        if self.player is not None:
            self.player.mouse_pressed(x, y, button)

    def key_released(self, key) -> None:
        if self.player is not None:
            self.player.key_released(key)

    def add_bound_block(self, block) -> None:
        self.entity_manager.bound_blocks.append(block)

    def add_entity(self, entity) -> None:
        self.entity_manager.entities.append(entity)

    def dots_remaining(self) -> int:
        """Number of dots and big dots still on the map."""
        return sum(isinstance(entity, (Dot, BigDot)) for entity in self.entity_manager.entities)