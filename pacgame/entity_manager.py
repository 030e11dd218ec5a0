"""Holds every entity on the map and drives their updates."""

from __future__ import annotations

FRAME_RATE = 30
KILLABLE_TICKS = 10 * FRAME_RATE


def _tick_survivors(items):
    survivors = []
    for item in items:
        if item.remove:
            continue
        item.tick()
        survivors.append(item)
    return survivors


class EntityManager:
    """Pickups, walls and ghosts, plus the timer during which ghosts can be eaten."""

    def __init__(self):
        self.entities = []
        self.bound_blocks = []
        self.ghosts = []
        self.killable = False
        self._killable_counter = 0

    def tick(self) -> None:
        if self.killable:
            self._killable_counter -= 1
            if self._killable_counter == 0:
                self.killable = False
                for ghost in self.ghosts:
                    ghost.killable = False

        self.entities = _tick_survivors(self.entities)
        for block in self.bound_blocks:
            block.tick()
        self.ghosts = _tick_survivors(self.ghosts)

    def render(self, surface) -> None:
        for entity in self.entities:
            entity.render(surface)
        for block in self.bound_blocks:
            block.render(surface)
        for ghost in self.ghosts:
            ghost.render(surface)

    def set_killable(self, killable=True) -> None:
        """Make the current ghosts edible for ten seconds, or end that period."""
        self.killable = bool(killable)
        self._killable_counter = KILLABLE_TICKS if killable else 0
        for ghost in self.ghosts:
            ghost.killable = self.killable