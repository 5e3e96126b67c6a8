# pokelong

A small tile-based puzzle game. You walk a trainer around a walled map,
pick up every collectible and then step onto the exit. Step onto an enemy
and the game ends.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Playing

    pokelong path/to/level.ber

The command takes exactly one argument, a map file whose name is longer
than `.ber` and ends in `.ber`. No argument, more than one argument, a
wrong extension, an invalid map or a map that cannot be read is refused
with a message on standard error starting with `Error`, and the command
exits with status 1.

Controls:

| Key   | Action     |
|-------|------------|
| `z`   | move up    |
| `s`   | move down  |
| `q`   | move left  |
| `d`   | move right |
| Esc   | quit       |

Closing the window also quits. Every key released prints the running
count of released keys to standard output. When the game is won or lost
the window closes; no message is shown.

The game reads its textures, XPM images, from a `Textures/` directory in
the current working directory. It needs all of these files:
`WALLF.xpm`, `solFINAl.xpm`, `N1.xpm`, `N2.xpm`, `exit.xpm`,
`collect.xpm`, `p_up.xpm`, `p_down.xpm`, `p_left.xpm`, `p_right.xpm`.
If one is missing or cannot be decoded the command stops with an error.
Each tile is 50×50 pixels and the window is sized to fit the whole map.

## Map format

A map is a plain text file of equal-length rows (empty lines are ignored):

| Char | Meaning           |
|------|-------------------|
| `1`  | wall              |
| `0`  | floor             |
| `P`  | player start      |
| `C`  | collectible       |
| `E`  | exit              |
| `I`  | enemy             |

The first and last rows must be all walls, every row must start and end
with a wall, and the map must hold at least one player, one collectible
and one exit. For example:

    1111111
    1P0C0E1
    1111111

The exit only lets the player in once every collectible has been picked up.

## Library use

The pieces can be used without opening a window:

```python
from pokelong.gamemap import parse_map
from pokelong.game import Game, Direction

game = Game(parse_map("1111111\n1P0C0E1\n1111111\n"))
for _ in range(4):
    game.move(Direction.RIGHT)
print(game.is_over())  # True: the exit was reached with nothing left to collect
```

- `pokelong.params`: `check_params` and `check_extension` validate the
  command-line arguments, raising `ParamError`.
- `pokelong.gamemap`: `read_map`, `parse_map` and `check_map` load and
  validate maps into a `GameMap`, raising `MapError`.
- `pokelong.game`: `Game` holds the player position, collectibles left,
  facing `Direction`, move count and won/lost state.
- `pokelong.render`: `draw_list` gives the `(Sprite, x, y)` placements for
  one redraw; `EnemyAnimator` and `FrameClock` pace the enemy animation
  and redraws; `texture_paths` maps each `Sprite` to its file.
- `pokelong.xpm`: `load_xpm`, `xpm_from_text` and `parse_xpm` decode XPM
  images into an `XpmImage`, raising `XpmError`.
- `pokelong.colors`: `lookup_color` turns X11 colour names into 0xRRGGBB
  values; `rgb_to_visual` packs a colour for a shallow visual.
- `pokelong.app`: `Session` and `key_to_direction` handle keys; `main` is
  the command.