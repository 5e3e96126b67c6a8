"""Named X11 colours and conversion of 0xRRGGBB values to visual pixels."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

# Base colours in table order.  A two-element entry registers the name and,
# for a name with a space, the same name with the spaces removed.  A
# three-element entry registers the name and the given alias instead.
# When a name appears more than once, the first entry is the one that counts.
_BASE: tuple[tuple, ...] = (
    (0xFFFAFA, "snow"),
    (0xF8F8FF, "ghost white"),
    (0xF5F5F5, "white smoke"),
    (0xDCDCDC, "gainsboro"),
    (0xFFFAF0, "floral white"),
    (0xFDF5E6, "old lace"),
    (0xFAF0E6, "linen"),
    (0xFAEBD7, "antique white"),
    (0xFFEFD5, "papaya whip"),
    (0xFFEBCD, "blanched almond"),
    (0xFFE4C4, "bisque"),
    (0xFFDAB9, "peach puff"),
    (0xFFDEAD, "navajo white"),
    (0xFFE4B5, "moccasin"),
    (0xFFF8DC, "cornsilk"),
    (0xFFFFF0, "ivory"),
    (0xFFFACD, "lemon chiffon"),
    (0xFFF5EE, "seashell"),
    (0xF0FFF0, "honeydew"),
    (0xF5FFFA, "mint cream"),
    (0xF0FFFF, "azure"),
    (0xF0F8FF, "alice blue"),
    (0xE6E6FA, "lavender"),
    (0xFFF0F5, "lavender blush"),
    (0xFFE4E1, "misty rose"),
    (0xFFFFFF, "white"),
    (0x000000, "black"),
    (0x2F4F4F, "dark slate", "darkslategray"),
    (0x2F4F4F, "dark slate", "darkslategrey"),
    (0x696969, "dim gray"),
    (0x696969, "dim grey"),
    (0x708090, "slate gray"),
    (0x708090, "slate grey"),
    (0x778899, "light slate", "lightslategray"),
    (0x778899, "light slate", "lightslategrey"),
    (0xBEBEBE, "gray"),
    (0xBEBEBE, "grey"),
    (0xD3D3D3, "light grey"),
    (0xD3D3D3, "light gray"),
    (0x191970, "midnight blue"),
    (0x000080, "navy"),
    (0x000080, "navy blue"),
    (0x6495ED, "cornflower blue"),
    (0x483D8B, "dark slate", "darkslateblue"),
    (0x6A5ACD, "slate blue"),
    (0x7B68EE, "medium slate", "mediumslateblue"),
    (0x8470FF, "light slate", "lightslateblue"),
    (0x0000CD, "medium blue"),
    (0x4169E1, "royal blue"),
    (0x0000FF, "blue"),
    (0x1E90FF, "dodger blue"),
    (0x00BFFF, "deep sky", "deepskyblue"),
    (0x87CEEB, "sky blue"),
    (0x87CEFA, "light sky", "lightskyblue"),
    (0x4682B4, "steel blue"),
    (0xB0C4DE, "light steel", "lightsteelblue"),
    (0xADD8E6, "light blue"),
    (0xB0E0E6, "powder blue"),
    (0xAFEEEE, "pale turquoise"),
    (0x00CED1, "dark turquoise"),
    (0x48D1CC, "medium turquoise"),
    (0x40E0D0, "turquoise"),
    (0x00FFFF, "cyan"),
    (0xE0FFFF, "light cyan"),
    (0x5F9EA0, "cadet blue"),
    (0x66CDAA, "medium aquamarine"),
    (0x7FFFD4, "aquamarine"),
    (0x006400, "dark green"),
    (0x556B2F, "dark olive", "darkolivegreen"),
    (0x8FBC8F, "dark sea", "darkseagreen"),
    (0x2E8B57, "sea green"),
    (0x3CB371, "medium sea", "mediumseagreen"),
    (0x20B2AA, "light sea", "lightseagreen"),
    (0x98FB98, "pale green"),
    (0x00FF7F, "spring green"),
    (0x7CFC00, "lawn green"),
    (0x00FF00, "green"),
    (0x7FFF00, "chartreuse"),
    (0x00FA9A, "medium spring", "mediumspringgreen"),
    (0xADFF2F, "green yellow"),
    (0x32CD32, "lime green"),
    (0x9ACD32, "yellow green"),
    (0x228B22, "forest green"),
    (0x6B8E23, "olive drab"),
    (0xBDB76B, "dark khaki"),
    (0xF0E68C, "khaki"),
    (0xEEE8AA, "pale goldenrod"),
    (0xFAFAD2, "light goldenrod", "lightgoldenrodyellow"),
    (0xFFFFE0, "light yellow"),
    (0xFFFF00, "yellow"),
    (0xFFD700, "gold"),
    (0xEEDD82, "light goldenrod"),
    (0xDAA520, "goldenrod"),
    (0xB8860B, "dark goldenrod"),
    (0xBC8F8F, "rosy brown"),
    (0xCD5C5C, "indian red"),
    (0x8B4513, "saddle brown"),
    (0xA0522D, "sienna"),
    (0xCD853F, "peru"),
    (0xDEB887, "burlywood"),
    (0xF5F5DC, "beige"),
    (0xF5DEB3, "wheat"),
    (0xF4A460, "sandy brown"),
    (0xD2B48C, "tan"),
    (0xD2691E, "chocolate"),
    (0xB22222, "firebrick"),
    (0xA52A2A, "brown"),
    (0xE9967A, "dark salmon"),
    (0xFA8072, "salmon"),
    (0xFFA07A, "light salmon"),
    (0xFFA500, "orange"),
    (0xFF8C00, "dark orange"),
    (0xFF7F50, "coral"),
    (0xF08080, "light coral"),
    (0xFF6347, "tomato"),
    (0xFF4500, "orange red"),
    (0xFF0000, "red"),
    (0xFF69B4, "hot pink"),
    (0xFF1493, "deep pink"),
    (0xFFC0CB, "pink"),
    (0xFFB6C1, "light pink"),
    (0xDB7093, "pale violet", "palevioletred"),
    (0xB03060, "maroon"),
    (0xC71585, "medium violet", "mediumvioletred"),
    (0xD02090, "violet red"),
    (0xFF00FF, "magenta"),
    (0xEE82EE, "violet"),
    (0xDDA0DD, "plum"),
    (0xDA70D6, "orchid"),
    (0xBA55D3, "medium orchid"),
    (0x9932CC, "dark orchid"),
    (0x9400D3, "dark violet"),
    (0x8A2BE2, "blue violet"),
    (0xA020F0, "purple"),
    (0x9370DB, "medium purple"),
    (0xD8BFD8, "thistle"),
)

# Families with four shades, registered as <name>1 .. <name>4.
_SHADES: dict[str, tuple[int, int, int, int]] = {
    "snow": (0xFFFAFA, 0xEEE9E9, 0xCDC9C9, 0x8B8989),
    "seashell": (0xFFF5EE, 0xEEE5DE, 0xCDC5BF, 0x8B8682),
    "antiquewhite": (0xFFEFDB, 0xEEDFCC, 0xCDC0B0, 0x8B8378),
    "bisque": (0xFFE4C4, 0xEED5B7, 0xCDB79E, 0x8B7D6B),
    "peachpuff": (0xFFDAB9, 0xEECBAD, 0xCDAF95, 0x8B7765),
    "navajowhite": (0xFFDEAD, 0xEECFA1, 0xCDB38B, 0x8B795E),
    "lemonchiffon": (0xFFFACD, 0xEEE9BF, 0xCDC9A5, 0x8B8970),
    "cornsilk": (0xFFF8DC, 0xEEE8CD, 0xCDC8B1, 0x8B8878),
    "ivory": (0xFFFFF0, 0xEEEEE0, 0xCDCDC1, 0x8B8B83),
    "honeydew": (0xF0FFF0, 0xE0EEE0, 0xC1CDC1, 0x838B83),
    "lavenderblush": (0xFFF0F5, 0xEEE0E5, 0xCDC1C5, 0x8B8386),
    "mistyrose": (0xFFE4E1, 0xEED5D2, 0xCDB7B5, 0x8B7D7B),
    "azure": (0xF0FFFF, 0xE0EEEE, 0xC1CDCD, 0x838B8B),
    "slateblue": (0x836FFF, 0x7A67EE, 0x6959CD, 0x473C8B),
    "royalblue": (0x4876FF, 0x436EEE, 0x3A5FCD, 0x27408B),
    "blue": (0x0000FF, 0x0000EE, 0x0000CD, 0x00008B),
    "dodgerblue": (0x1E90FF, 0x1C86EE, 0x1874CD, 0x104E8B),
    "steelblue": (0x63B8FF, 0x5CACEE, 0x4F94CD, 0x36648B),
    "deepskyblue": (0x00BFFF, 0x00B2EE, 0x009ACD, 0x00688B),
    "skyblue": (0x87CEFF, 0x7EC0EE, 0x6CA6CD, 0x4A708B),
    "lightskyblue": (0xB0E2FF, 0xA4D3EE, 0x8DB6CD, 0x607B8B),
    "slategray": (0xC6E2FF, 0xB9D3EE, 0x9FB6CD, 0x6C7B8B),
    "lightsteelblue": (0xCAE1FF, 0xBCD2EE, 0xA2B5CD, 0x6E7B8B),
    "lightblue": (0xBFEFFF, 0xB2DFEE, 0x9AC0CD, 0x68838B),
    "lightcyan": (0xE0FFFF, 0xD1EEEE, 0xB4CDCD, 0x7A8B8B),
    "paleturquoise": (0xBBFFFF, 0xAEEEEE, 0x96CDCD, 0x668B8B),
    "cadetblue": (0x98F5FF, 0x8EE5EE, 0x7AC5CD, 0x53868B),
    "turquoise": (0x00F5FF, 0x00E5EE, 0x00C5CD, 0x00868B),
    "cyan": (0x00FFFF, 0x00EEEE, 0x00CDCD, 0x008B8B),
    "darkslategray": (0x97FFFF, 0x8DEEEE, 0x79CDCD, 0x528B8B),
    "aquamarine": (0x7FFFD4, 0x76EEC6, 0x66CDAA, 0x458B74),
    "darkseagreen": (0xC1FFC1, 0xB4EEB4, 0x9BCD9B, 0x698B69),
    "seagreen": (0x54FF9F, 0x4EEE94, 0x43CD80, 0x2E8B57),
    "palegreen": (0x9AFF9A, 0x90EE90, 0x7CCD7C, 0x548B54),
    "springgreen": (0x00FF7F, 0x00EE76, 0x00CD66, 0x008B45),
    "green": (0x00FF00, 0x00EE00, 0x00CD00, 0x008B00),
    "chartreuse": (0x7FFF00, 0x76EE00, 0x66CD00, 0x458B00),
    "olivedrab": (0xC0FF3E, 0xB3EE3A, 0x9ACD32, 0x698B22),
    "darkolivegreen": (0xCAFF70, 0xBCEE68, 0xA2CD5A, 0x6E8B3D),
    "khaki": (0xFFF68F, 0xEEE685, 0xCDC673, 0x8B864E),
    "lightgoldenrod": (0xFFEC8B, 0xEEDC82, 0xCDBE70, 0x8B814C),
    "lightyellow": (0xFFFFE0, 0xEEEED1, 0xCDCDB4, 0x8B8B7A),
    "yellow": (0xFFFF00, 0xEEEE00, 0xCDCD00, 0x8B8B00),
    "gold": (0xFFD700, 0xEEC900, 0xCDAD00, 0x8B7500),
    "goldenrod": (0xFFC125, 0xEEB422, 0xCD9B1D, 0x8B6914),
    "darkgoldenrod": (0xFFB90F, 0xEEAD0E, 0xCD950C, 0x8B6508),
    "rosybrown": (0xFFC1C1, 0xEEB4B4, 0xCD9B9B, 0x8B6969),
    "indianred": (0xFF6A6A, 0xEE6363, 0xCD5555, 0x8B3A3A),
    "sienna": (0xFF8247, 0xEE7942, 0xCD6839, 0x8B4726),
    "burlywood": (0xFFD39B, 0xEEC591, 0xCDAA7D, 0x8B7355),
    "wheat": (0xFFE7BA, 0xEED8AE, 0xCDBA96, 0x8B7E66),
    "tan": (0xFFA54F, 0xEE9A49, 0xCD853F, 0x8B5A2B),
    "chocolate": (0xFF7F24, 0xEE7621, 0xCD661D, 0x8B4513),
    "firebrick": (0xFF3030, 0xEE2C2C, 0xCD2626, 0x8B1A1A),
    "brown": (0xFF4040, 0xEE3B3B, 0xCD3333, 0x8B2323),
    "salmon": (0xFF8C69, 0xEE8262, 0xCD7054, 0x8B4C39),
    "lightsalmon": (0xFFA07A, 0xEE9572, 0xCD8162, 0x8B5742),
    "orange": (0xFFA500, 0xEE9A00, 0xCD8500, 0x8B5A00),
    "darkorange": (0xFF7F00, 0xEE7600, 0xCD6600, 0x8B4500),
    "coral": (0xFF7256, 0xEE6A50, 0xCD5B45, 0x8B3E2F),
    "tomato": (0xFF6347, 0xEE5C42, 0xCD4F39, 0x8B3626),
    "orangered": (0xFF4500, 0xEE4000, 0xCD3700, 0x8B2500),
    "red": (0xFF0000, 0xEE0000, 0xCD0000, 0x8B0000),
    "deeppink": (0xFF1493, 0xEE1289, 0xCD1076, 0x8B0A50),
    "hotpink": (0xFF6EB4, 0xEE6AA7, 0xCD6090, 0x8B3A62),
    "pink": (0xFFB5C5, 0xEEA9B8, 0xCD919E, 0x8B636C),
    "lightpink": (0xFFAEB9, 0xEEA2AD, 0xCD8C95, 0x8B5F65),
    "palevioletred": (0xFF82AB, 0xEE799F, 0xCD6889, 0x8B475D),
    "maroon": (0xFF34B3, 0xEE30A7, 0xCD2990, 0x8B1C62),
    "violetred": (0xFF3E96, 0xEE3A8C, 0xCD3278, 0x8B2252),
    "magenta": (0xFF00FF, 0xEE00EE, 0xCD00CD, 0x8B008B),
    "orchid": (0xFF83FA, 0xEE7AE9, 0xCD69C9, 0x8B4789),
    "plum": (0xFFBBFF, 0xEEAEEE, 0xCD96CD, 0x8B668B),
    "mediumorchid": (0xE066FF, 0xD15FEE, 0xB452CD, 0x7A378B),
    "darkorchid": (0xBF3EFF, 0xB23AEE, 0x9A32CD, 0x68228B),
    "purple": (0x9B30FF, 0x912CEE, 0x7D26CD, 0x551A8B),
    "mediumpurple": (0xAB82FF, 0x9F79EE, 0x8968CD, 0x5D478B),
    "thistle": (0xFFE1FF, 0xEED2EE, 0xCDB5CD, 0x8B7B8B),
}

# Channel level of gray0 .. gray100 (and grey0 .. grey100).
_GRAY_LEVELS = (
    0x00, 0x03, 0x05, 0x08, 0x0A, 0x0D, 0x0F, 0x12, 0x14, 0x17,
    0x1A, 0x1C, 0x1F, 0x21, 0x24, 0x26, 0x29, 0x2B, 0x2E, 0x30,
    0x33, 0x36, 0x38, 0x3B, 0x3D, 0x40, 0x42, 0x45, 0x47, 0x4A,
    0x4D, 0x4F, 0x52, 0x54, 0x57, 0x59, 0x5C, 0x5E, 0x61, 0x63,
    0x66, 0x69, 0x6B, 0x6E, 0x70, 0x73, 0x75, 0x78, 0x7A, 0x7D,
    0x7F, 0x82, 0x85, 0x87, 0x8A, 0x8C, 0x8F, 0x91, 0x94, 0x96,
    0x99, 0x9C, 0x9E, 0xA1, 0xA3, 0xA6, 0xA8, 0xAB, 0xAD, 0xB0,
    0xB3, 0xB5, 0xB8, 0xBA, 0xBD, 0xBF, 0xC2, 0xC4, 0xC7, 0xC9,
    0xCC, 0xCF, 0xD1, 0xD4, 0xD6, 0xD9, 0xDB, 0xDE, 0xE0, 0xE3,
    0xE5, 0xE8, 0xEB, 0xED, 0xF0, 0xF2, 0xF5, 0xF7, 0xFA, 0xFC,
    0xFF,
)

# Entries that follow the gray ramp in the table.
_TAIL: tuple[tuple, ...] = (
    (0xA9A9A9, "dark grey"),
    (0xA9A9A9, "dark gray"),
    (0x00008B, "dark blue"),
    (0x008B8B, "dark cyan"),
    (0x8B008B, "dark magenta"),
    (0x8B0000, "dark red"),
    (0x90EE90, "light green"),
)


def _expand(entries: Sequence[tuple]) -> Iterator[tuple[str, int]]:
    for value, name, *alias in entries:
        yield name, value
        if alias:
            yield alias[0], value
        elif " " in name:
            yield name.replace(" ", ""), value


def _entries() -> Iterator[tuple[str, int]]:
    yield from _expand(_BASE)
    for family, shades in _SHADES.items():
        for number, value in enumerate(shades, start=1):
            yield f"{family}{number}", value
    for number, level in enumerate(_GRAY_LEVELS):
        value = level * 0x010101
        yield f"gray{number}", value
        yield f"grey{number}", value
    yield from _expand(_TAIL)
    # "none" marks a transparent colour.
    yield "none", -1


def _build_table() -> dict[str, int]:
    colors: dict[str, int] = {}
    for name, value in _entries():
        colors.setdefault(name.lower(), value)
    return colors


_COLORS = _build_table()


def lookup_color(name: str) -> int:
    """Return the 0xRRGGBB value of a named colour, ignoring case.

    The name "none" gives -1. An unknown name raises KeyError.
    """
    try:
        return _COLORS[name.lower()]
    except KeyError:
        raise KeyError(f"unknown colour name: {name!r}") from None


def rgb_to_visual(color: int, depth: int, shifts: Sequence[int]) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for a visual.

    Visuals of depth 24 or more take the colour unchanged. For shallower
    visuals, ``shifts`` gives (red offset, red bits, green offset, green
    bits, blue offset, blue bits) of the visual's channel masks.
    """
    if depth >= 24:
        return color
    if len(shifts) != 6:
        raise ValueError("shifts must hold six values")
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )