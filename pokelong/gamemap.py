"""Loading and validation of game maps."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from os import PathLike

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "I"


class MapError(ValueError):
    """Raised when a map is missing or invalid."""


@dataclass
class GameMap:
    """A rectangular grid of tiles, indexed as ``rows[y][x]``."""

    rows: list[list[str]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.rows = [list(row) for row in self.rows]

    @property
    def width(self) -> int:
        """Number of tiles in a row."""
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.rows)

    def tile(self, x: int, y: int) -> str:
        """Return the tile at column ``x`` of row ``y``."""
        if not (0 <= y < self.height and 0 <= x < len(self.rows[y])):
            raise IndexError(f"tile ({x}, {y}) is outside the map")
        return self.rows[y][x]

    def find_player(self) -> tuple[int, int]:
        """Return the (x, y) position of the first player tile."""
        for y, row in enumerate(self.rows):
            for x, char in enumerate(row):
                if char == PLAYER:
                    return x, y
        raise MapError("The map has no player")

    def count_collectibles(self) -> int:
        """Return the number of collectible tiles on the map."""
        return sum(row.count(COLLECTIBLE) for row in self.rows)

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.rows)


def split_lines(text: str) -> list[str]:
    """Split ``text`` on newlines, dropping empty lines."""
    return [line for line in text.split("\n") if line]


def _walls_closed(rows: Sequence[str]) -> bool:
    last = len(rows[0]) - 1
    if any(row[0] != WALL or row[last] != WALL for row in rows):
        return False
    return all(char == WALL for char in rows[0]) and all(char == WALL for char in rows[-1])


def _has_required_tiles(rows: Iterable[str]) -> bool:
    present = set().union(*(set(row) for row in rows))
    return {COLLECTIBLE, EXIT, PLAYER} <= present


def check_map(rows: Sequence[str]) -> None:
    """Raise MapError unless ``rows`` form a playable map.

    A playable map is rectangular, closed by walls and holds at least one
    collectible, one exit and one player.
    """
    if not rows:
        raise MapError("There is no map")
    width = len(rows[0])
    if (
        any(len(row) != width for row in rows)
        or not _walls_closed(rows)
        or not _has_required_tiles(rows)
    ):
        raise MapError("Invalid map")


def parse_map(text: str) -> GameMap:
    """Build a validated map from the text of a map file."""
    rows = split_lines(text)
    check_map(rows)
    return GameMap(rows)


def read_map(path: str | PathLike[str]) -> GameMap:
    """Read and validate the map file at ``path``."""
    with open(path, encoding="latin-1") as handle:
        return parse_map(handle.read())