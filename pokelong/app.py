"""The game window: key handling, the event loop and the command entry point."""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from os import PathLike
from typing import TextIO

from pokelong.game import Direction, Game
from pokelong.gamemap import MapError, read_map
from pokelong.params import ParamError, check_params
from pokelong.render import (
    EnemyAnimator,
    FrameClock,
    Sprite,
    draw_list,
    texture_paths,
)
from pokelong.xpm import XpmError, XpmImage, load_xpm

WINDOW_TITLE = "pokelong"
TEXTURES_DIR = "Textures"

_KEY_DIRECTIONS = {
    ord("d"): Direction.RIGHT,
    ord("q"): Direction.LEFT,
    ord("z"): Direction.UP,
    ord("s"): Direction.DOWN,
}


def key_to_direction(key: int | str) -> Direction | None:
    """Return the direction bound to a key code or character, or None."""
    if isinstance(key, str):
        if len(key) != 1:
            return None
        key = ord(key)
    return _KEY_DIRECTIONS.get(key)


@dataclass
class Session:
    """A running game and the count of keys released so far."""

    game: Game
    out: TextIO = field(default_factory=lambda: sys.stdout)
    key_presses: int = 0
    running: bool = True

    def handle_key(self, key: int | str) -> int:
        """Handle one released key and return the number of keys handled.

        Any key clears the direction the player faces; a movement key then
        moves the player. The running count is written to ``out``.
        """
        self.game.facing = None
        direction = key_to_direction(key)
        if direction is not None:
            self.game.move(direction)
        self.key_presses += 1
        print(self.key_presses, file=self.out)
        return self.key_presses


def _report(message: object) -> None:
    print(f"Error\n{message}", file=sys.stderr)


def _load_textures(
    base: str | PathLike[str],
) -> dict[Sprite, XpmImage]:
    return {sprite: load_xpm(path) for sprite, path in texture_paths(base).items()}


def _to_surface(pygame, image: XpmImage):
    surface = pygame.Surface((image.width, image.height))
    for y, row in enumerate(image.pixels):
        for x, value in enumerate(row):
            surface.set_at((x, y), ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF))
    return surface


def _run(game: Game, textures: Mapping[Sprite, XpmImage]) -> None:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode(game.window_size)
        pygame.display.set_caption(WINDOW_TITLE)
        images = {sprite: _to_surface(pygame, image) for sprite, image in textures.items()}
        session = Session(game)
        clock = FrameClock()
        animator = EnemyAnimator()
        while session.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    session.running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    session.running = False
                elif event.type == pygame.KEYUP:
                    session.handle_key(event.key)
            if game.is_over():
                session.running = False
            if clock.tick():
                for sprite, x, y in draw_list(game, animator.step()):
                    screen.blit(images[sprite], (x, y))
                pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Check the arguments, load the map and play until the game ends."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path = check_params(args)
    except ParamError as exc:
        _report(exc)
        return 1
    try:
        game_map = read_map(path)
    except MapError as exc:
        _report(exc)
        return 1
    except OSError as exc:
        _report(f"Cannot read map: {exc}")
        return 1
    game = Game(game_map)
    try:
        textures = _load_textures(TEXTURES_DIR)
    except (OSError, XpmError) as exc:
        _report(f"Cannot load textures: {exc}")
        return 1
    _run(game, textures)
    return 0


if __name__ == "__main__":
    sys.exit(main())