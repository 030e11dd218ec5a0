# pacgame

A maze-chasing arcade game drawn with pygame. Steer your character around a
maze built from a pixel map, eat every dot to clear the level, and keep away
from the ghosts unless a big dot or a piece of fruit has made them edible.

## Installing

```
pip install .
```

A display is needed to play.

## Artwork and sound

The package does not ship any images or sounds. The `pacgame` command loads
them from an assets directory laid out like this:

```
images/CustomSheet.png     sprite sheet for walls, dots, fruit and ghosts
images/pacman.png          yellow character sheet (menus)
images/Custompacman.png    green character sheet (menus and in the maze)
images/map2.png            first level
images/CustomMap.png       bonus level
music/pacman_chomp.wav     chomping sound, played while a level runs
```

The sound is only loaded when pygame's mixer could be started.

## Playing

```
pacgame --assets path/to/assets
```

`--assets` defaults to the current directory. The window is 1024×768 and the
game runs at 30 frames per second.

From the menu click **Start**, then click one of the two characters on the
next screen. Both choices start the first level, and the character in the
maze is always drawn from the green sheet.

- Clearing the first level brings up a screen with **Play again** (a fresh
  first level), **NextLevel** (the bonus level) and **quit** (back to the
  menu).
- Clearing the bonus level offers **Play again from level 1** and **quit**.
- Running out of lives shows the game-over screen with your score; **Start**
  returns to the first level with full lives and the score set to zero.
- The pause screen offers **resume** and **quit**.

### Controls

| Key | Action |
| --- | ------ |
| `w` `a` `s` `d` | Move up, left, down, right |
| `p` | Pause |
| `g` | Spawn an extra ghost (while fewer than eight are out) |
| `m` | Gain a life (up to three) |
| `n` | Lose a life and return to the start point |
| `y` | Finish the level at once |
| `-` | Mute the sound |
| `=` | Restore the sound |

### Rules

- A dot is worth 10 points.
- A big dot, cherry, strawberry or apple is worth 30 points and makes every
  ghost in the maze edible for ten seconds. Touching an edible ghost removes
  it.
- Touching any other ghost costs a life and sends you back to your start
  point. You start with three lives.
- The level is cleared when no dots or big dots are left.
- The ghost house starts with a red, a pink, a cyan and an orange ghost.
  While fewer than four ghosts are in the maze it releases a new one of a
  random colour every 150 frames. Ghosts run straight until a wall is ahead,
  then turn at random.

## Maps

A map is an image with one pixel per 16×16 tile, centred in the window:

| Colour (RGB) | Tile |
| ------------ | ---- |
| 0, 0, 0 | Wall |
| 255, 255, 0 | Player start |
| 25, 255, 0 | Ghost house |
| 255, 10, 0 | Dot |
| 167, 0, 150 | Big dot |
| 255, 0, 0 | Fruit (placed as a cherry) |

Other colours are empty floor. Each wall tile picks its artwork from which of
its four neighbours are walls too, so corridors and corners join up.

`pacgame.map_builder.load_map_pixels(path)` reads a map image into rows of
RGB tuples, and `MapBuilder(sprite_sheet, player_sheet, screen_size).create_map(pixels)`
turns such rows into a `GameMap`.

## What it does not do

There is no high-score table or saved progress, no settings file, and no
fullscreen mode.

## Development

```
pip install .[test]
pytest
```