"""Builds a level from a map image in which each pixel colour stands for a tile."""

from __future__ import annotations

import random

import pygame

from .entities import Apple, BigDot, BoundBlock, Cherry, Dot, Strawberry, crop_sprite
from .entity_manager import EntityManager
from .game_map import GameMap
from .ghost import GhostSpawner
from .player import Player

TILE_SIZE = 16

WALL = (0, 0, 0)
PACMAN = (255, 255, 0)
GHOST_HOUSE = (25, 255, 0)
DOT = (255, 10, 0)
BIG_DOT = (167, 0, 150)
CHERRY = (255, 0, 0)
STRAWBERRY = (255, 0, 0)
APPLE = (255, 0, 0)

# The fruits share one colour, so the first entry that matches wins.
_PICKUP_COLORS = (
    (DOT, Dot),
    (BIG_DOT, BigDot),
    (CHERRY, Cherry),
    (STRAWBERRY, Strawberry),
    (APPLE, Apple),
)

_WALL_TILES = (
    (603, 18), (615, 37), (635, 37), (655, 37),
    (655, 57), (655, 75), (656, 116), (656, 136),
    (655, 174), (655, 155), (655, 192), (664, 232),
    (479, 191), (494, 191), (479, 208), (479, 223),
)

# Keyed by whether the left, up, down and right neighbours are walls.
_WALL_SHAPES = {
    (False, False, False, True): 1,
    (False, False, True, False): 2,
    (True, False, False, False): 3,
    (False, True, False, False): 4,
    (False, True, True, False): 5,
    (True, False, False, True): 6,
    (False, True, False, True): 7,
    (True, True, False, False): 8,
    (False, False, True, True): 9,
    (True, False, True, False): 10,
    (True, True, True, True): 11,
    (False, True, True, True): 12,
    (True, True, True, False): 13,
    (True, False, True, True): 14,
    (True, True, False, True): 15,
}


def _color(raw) -> tuple:
    return tuple(raw)[:3]


def wall_sprite_index(pixels, i, j) -> int:
    """Pick the wall tile for column ``i``, row ``j`` from its wall neighbours."""
    height = len(pixels)
    width = len(pixels[0]) if height else 0

    def is_wall(col, row):
        return 0 <= col < width and 0 <= row < height and _color(pixels[row][col]) == WALL

    shape = (is_wall(i - 1, j), is_wall(i, j - 1), is_wall(i, j + 1), is_wall(i + 1, j))
    return _WALL_SHAPES.get(shape, 0)


def load_map_pixels(path):
    """Read a map image into rows of RGB tuples."""
    surface = pygame.image.load(str(path))
    width, height = surface.get_size()
    return tuple(
        tuple(_color(surface.get_at((i, j))) for i in range(width)) for j in range(height)
    )


class MapBuilder:
    """Turns a grid of pixel colours into a populated, screen-centred level."""

    def __init__(self, sprite_sheet, player_sheet, screen_size, rng=None):
        self.sprite_sheet = sprite_sheet
        self.player_sheet = player_sheet
        self.screen_size = screen_size
        self.rng = rng if rng is not None else random.Random()
        self.wall_tiles = [
            crop_sprite(sprite_sheet, x, y, TILE_SIZE, TILE_SIZE) for x, y in _WALL_TILES
        ]

    def create_map(self, pixels) -> GameMap:
        height = len(pixels)
        width = len(pixels[0]) if height else 0
        screen_width, screen_height = self.screen_size
        x_offset = int((screen_width - width * TILE_SIZE) / 2)
        y_offset = int((screen_height - height * TILE_SIZE) / 2)

        manager = EntityManager()
        game_map = GameMap(manager)
        for i, column in enumerate(zip(*pixels)):
            for j, raw in enumerate(column):
                color = _color(raw)
                x = i * TILE_SIZE + x_offset
                y = j * TILE_SIZE + y_offset
                if color == WALL:
                    sprite = self.wall_tiles[wall_sprite_index(pixels, i, j)]
                    game_map.add_bound_block(BoundBlock(x, y, TILE_SIZE, TILE_SIZE, sprite))
                elif color == PACMAN:
                    game_map.player = Player(x, y, TILE_SIZE, TILE_SIZE, manager, self.player_sheet)
                elif color == GHOST_HOUSE:
                    game_map.ghost_spawner = GhostSpawner(
                        x, y, TILE_SIZE, TILE_SIZE, manager, self.sprite_sheet, self.rng
                    )
                else:
                    kind = next((k for c, k in _PICKUP_COLORS if c == color), None)
                    if kind is not None:
                        game_map.add_entity(kind(x, y, TILE_SIZE, TILE_SIZE, self.sprite_sheet))
        return game_map