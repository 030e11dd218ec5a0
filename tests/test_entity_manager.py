import random

import pygame

from pacgame.entities import BoundBlock, Entity
from pacgame.entity_manager import KILLABLE_TICKS, EntityManager
from pacgame.ghost import Ghost


def _ghost(em, x=100, y=100):
    return Ghost(x, y, 16, 16, None, em, "red", random.Random(0))


def test_removed_entities_dropped_and_others_ticked():
    em = EntityManager()
    keep = Entity(0, 0, 1, 1)
    gone = Entity(0, 0, 1, 1)
    gone.remove = True
    em.entities = [gone, keep]
    em.tick()
    assert em.entities == [keep]
    assert keep.ticks == 1
    assert gone.ticks == 0


def test_bound_blocks_ticked():
    em = EntityManager()
    block = BoundBlock(0, 0, 16, 16, None)
    em.bound_blocks.append(block)
    em.tick()
    em.tick()
    assert block.ticks == 2


def test_removed_ghosts_dropped():
    em = EntityManager()
    a, b = _ghost(em), _ghost(em)
    b.remove = True
    em.ghosts = [a, b]
    em.tick()
    assert em.ghosts == [a]


def test_set_killable_marks_ghosts():
    em = EntityManager()
    ghosts = [_ghost(em), _ghost(em)]
    em.ghosts = list(ghosts)
    em.set_killable(True)
    assert em.killable
    assert all(g.killable for g in ghosts)


def test_killable_period_expires():
    em = EntityManager()
    ghost = _ghost(em)
    em.ghosts.append(ghost)
    em.set_killable(True)
    for _ in range(KILLABLE_TICKS - 1):
        em.tick()
    assert ghost.killable
    em.tick()
    assert not ghost.killable
    assert not em.killable


def test_set_killable_false_ends_period():
    em = EntityManager()
    ghost = _ghost(em)
    em.ghosts.append(ghost)
    em.set_killable(True)
    em.set_killable(False)
    assert not em.killable
    assert not ghost.killable


def test_render_draws_entities():
    em = EntityManager()
    sprite = pygame.Surface((4, 4))
    sprite.fill((0, 255, 0))
    em.entities.append(Entity(2, 2, 4, 4, sprite))
    surface = pygame.Surface((8, 8))
    surface.fill((0, 0, 0))
    em.render(surface)
    assert tuple(surface.get_at((3, 3)))[:3] == (0, 255, 0)
    assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 0)