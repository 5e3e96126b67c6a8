"""Reading of XPM images into plain pixel grids."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike

from pokelong.colors import lookup_color

TRANSPARENT = 0xFF000000
"""Pixel value given to the colour named "None"."""

_QUOTED = re.compile(r'"([^"]*)"')
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_HEX = re.compile(r"[0-9a-fA-F]*")
_NAME_LIMIT = 63


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: rows of 0xRRGGBB values, transparent ones as 0xFF000000."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")
        return self.pixels[y][x]


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in re.split(r"[ \t]+", text) if word]


def _find_unquoted(text: str, token: str) -> int:
    """Position of ``token`` in ``text`` outside double quotes, or -1."""
    quoted = False
    for pos, char in enumerate(text):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(token, pos):
            return pos
    return -1


def _blank(text: str, start: int, end: int) -> str:
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces.

    The result has the same length as ``text``. A comment that is never
    closed runs to the end of the text.
    """
    while (begin := _find_unquoted(text, "/*")) != -1:
        close = text.find("*/", begin + 2)
        end = len(text) if close == -1 else close + 2
        text = _blank(text, begin, end)
    while (begin := _find_unquoted(text, "//")) != -1:
        newline = text.find("\n", begin + 2)
        end = len(text) if newline == -1 else newline + 1
        text = _blank(text, begin, end)
    return text


def color_key(text: str) -> int:
    """Pack the characters of a pixel code into one integer key."""
    key = 0
    for char in text:
        key = (key << 8) + ord(char)
    return key


def text_to_rgb(name: str, end: str | None) -> int:
    """Turn a colour specification into a 0xRRGGBB value.

    ``#RRGGBB`` forms are read as hexadecimal. Otherwise ``name`` (joined
    with ``end`` by a space when given) is looked up among the named
    colours; "None" gives -1 and an unknown name gives 0.
    """
    if name.startswith("#"):
        digits = _LEADING_HEX.match(name, 1).group()
        return int(digits, 16) if digits else 0
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an image from the strings of an XPM array, in order."""
    source = iter(lines)
    header = split_words(_next_line(source, "header"))
    if len(header) < 4:
        raise XpmError("XPM header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if width <= 0 or height <= 0 or ncolors <= 0 or cpp <= 0:
        raise XpmError("XPM header values must be positive")

    # Short codes: a later definition replaces an earlier one.
    # Longer codes: the first definition of a code is kept.
    later_wins = cpp <= 2
    table: dict[int, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour table")
        if len(line) < cpp:
            raise XpmError(f"colour line too short: {line!r}")
        words = split_words(line[cpp:])
        try:
            spec_at = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line has no 'c' entry: {line!r}") from None
        if spec_at >= len(words):
            raise XpmError(f"colour line has no colour after 'c': {line!r}")
        end = words[spec_at + 1] if spec_at + 1 < len(words) else None
        rgb = text_to_rgb(words[spec_at], end)
        key = color_key(line[:cpp])
        if later_wins or key not in table:
            table[key] = rgb

    rows = []
    for _ in range(height):
        line = _next_line(source, "pixel rows")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        row = []
        for start in range(0, width * cpp, cpp):
            value = table.get(color_key(line[start:start + cpp]), 0)
            row.append(TRANSPARENT if value == -1 else value)
        rows.append(tuple(row))
    return XpmImage(width, height, tuple(rows))


def xpm_from_text(text: str) -> XpmImage:
    """Decode an image from the text of an XPM file."""
    return parse_xpm(_QUOTED.findall(strip_comments(text)))


def load_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    with open(path, encoding="latin-1") as handle:
        return xpm_from_text(handle.read())