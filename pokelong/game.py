"""Game state and movement rules."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from pokelong.gamemap import COLLECTIBLE, ENEMY, EXIT, FLOOR, PLAYER, WALL, GameMap

TILE_SIZE = 50
"""Width and height of one tile, in pixels."""


class Direction(enum.Enum):
    """A step the player can take, as (dx, dy)."""

    RIGHT = (1, 0)
    LEFT = (-1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


@dataclass
class Game:
    """The state of one game on a map."""

    map: GameMap
    x: int = field(init=False)
    y: int = field(init=False)
    collectibles: int = field(init=False)
    won: bool = False
    lost: bool = False
    facing: Direction | None = None
    moves: int = 0

    def __post_init__(self) -> None:
        self.x, self.y = self.map.find_player()
        self.collectibles = self.map.count_collectibles()

    @property
    def window_size(self) -> tuple[int, int]:
        """Size in pixels of a window showing the whole map."""
        return self.map.width * TILE_SIZE, self.map.height * TILE_SIZE

    def can_move(self, x: int, y: int) -> bool:
        """Tell whether the player may enter (x, y), applying its effects.

        Entering a collectible uses it up, entering the exit once every
        collectible is taken wins, and entering an enemy loses.
        """
        tile = self.map.tile(x, y)
        if tile == WALL:
            return False
        if tile == COLLECTIBLE:
            self.collectibles -= 1
        if tile == EXIT:
            if self.collectibles > 0:
                return False
            self.won = True
        if tile == ENEMY:
            self.lost = True
        return True

    def move(self, direction: Direction) -> bool:
        """Face ``direction`` and step that way if possible; tell whether it moved."""
        self.facing = direction
        target_x, target_y = self.x + direction.dx, self.y + direction.dy
        if not self.can_move(target_x, target_y):
            return False
        self.map.rows[self.y][self.x] = FLOOR
        self.x, self.y = target_x, target_y
        self.map.rows[self.y][self.x] = PLAYER
        self.moves += 1
        return True

    def is_over(self) -> bool:
        """Tell whether the game has been won or lost."""
        return self.won or self.lost