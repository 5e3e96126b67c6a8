"""What to draw each frame: sprites, their texture files and their places."""

from __future__ import annotations

import enum
from os import PathLike
from pathlib import Path

from pokelong.game import TILE_SIZE, Direction, Game
from pokelong.gamemap import COLLECTIBLE, ENEMY, EXIT, FLOOR, PLAYER, WALL

DrawCommand = tuple["Sprite", int, int]

REDRAW_PERIOD = 900
"""Number of loop iterations between two redraws of the window."""

ENEMY_CYCLE = 12
"""Number of redraws in one cycle of the enemy animation."""


class Sprite(enum.Enum):
    """A picture that can be drawn on a tile, valued by its texture file name."""

    WALL = "WALLF.xpm"
    FLOOR = "solFINAl.xpm"
    ENEMY_1 = "N1.xpm"
    ENEMY_2 = "N2.xpm"
    EXIT = "exit.xpm"
    COLLECTIBLE = "collect.xpm"
    PLAYER_UP = "p_up.xpm"
    PLAYER_DOWN = "p_down.xpm"
    PLAYER_LEFT = "p_left.xpm"
    PLAYER_RIGHT = "p_right.xpm"

    @property
    def filename(self) -> str:
        return self.value


_PLAYER_SPRITES = {
    Direction.RIGHT: Sprite.PLAYER_RIGHT,
    Direction.LEFT: Sprite.PLAYER_LEFT,
    Direction.UP: Sprite.PLAYER_UP,
    Direction.DOWN: Sprite.PLAYER_DOWN,
}

# Layers in drawing order: each tile kind is drawn with its sprite.
_STATIC_LAYERS = (
    (WALL, Sprite.WALL),
    (FLOOR, Sprite.FLOOR),
    (EXIT, Sprite.EXIT),
    (COLLECTIBLE, Sprite.COLLECTIBLE),
)


class EnemyAnimator:
    """Chooses the enemy picture for each redraw.

    Over a cycle of twelve redraws the first four show the first picture,
    the fifth shows no enemy and the remaining seven show the second one.
    """

    def __init__(self) -> None:
        self._count = 0

    def step(self) -> Sprite | None:
        """Advance one redraw and return the enemy sprite to draw, if any."""
        self._count += 1
        sprite: Sprite | None = None
        if self._count < 5:
            sprite = Sprite.ENEMY_1
        elif self._count > 5:
            sprite = Sprite.ENEMY_2
        if self._count >= ENEMY_CYCLE:
            self._count = 0
        return sprite


class FrameClock:
    """Counts loop iterations and tells when the window is due for a redraw."""

    def __init__(self, period: int = REDRAW_PERIOD) -> None:
        if period <= 0:
            raise ValueError("period must be positive")
        self.period = period
        self._count = 0

    def tick(self) -> bool:
        """Count one iteration; tell whether this one triggers a redraw."""
        self._count += 1
        if self._count == self.period:
            self._count = 0
            return True
        return False


def texture_paths(base: str | PathLike[str] = "Textures") -> dict[Sprite, Path]:
    """Map every sprite to its texture file inside the directory ``base``."""
    root = Path(base)
    return {sprite: root / sprite.filename for sprite in Sprite}


def _layer(game: Game, tile: str, sprite: Sprite) -> list[DrawCommand]:
    return [
        (sprite, x * TILE_SIZE, y * TILE_SIZE)
        for y, row in enumerate(game.map.rows)
        for x, char in enumerate(row)
        if char == tile
    ]


def draw_list(game: Game, enemy_sprite: Sprite | None) -> list[DrawCommand]:
    """Return the (sprite, x, y) pixel placements for one redraw, in order.

    Walls, floor, exit and collectibles come first, then the player facing
    its last direction (right before any move), then the enemies with
    ``enemy_sprite`` unless it is None.
    """
    commands: list[DrawCommand] = []
    for tile, sprite in _STATIC_LAYERS:
        commands.extend(_layer(game, tile, sprite))
    facing = game.facing if game.facing is not None else Direction.RIGHT
    commands.extend(_layer(game, PLAYER, _PLAYER_SPRITES[facing]))
    if enemy_sprite is not None:
        commands.extend(_layer(game, ENEMY, enemy_sprite))
    return commands