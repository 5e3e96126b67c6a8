"""Validation of the command-line arguments naming a map file."""

from __future__ import annotations

from collections.abc import Sequence

MAP_EXTENSION = ".ber"


class ParamError(ValueError):
    """Raised when the command-line arguments are unusable."""


def check_extension(filename: str) -> bool:
    """Tell whether ``filename`` is a name followed by the ``.ber`` extension."""
    return len(filename) > len(MAP_EXTENSION) and filename.endswith(MAP_EXTENSION)


def check_params(args: Sequence[str]) -> str:
    """Check the arguments after the program name and return the map path."""
    if not args:
        raise ParamError("Please give a map with a .ber extension.")
    if len(args) > 1:
        raise ParamError("Please give only one argument.")
    path = args[0]
    if not check_extension(path):
        raise ParamError("Wrong file extension.")
    return path