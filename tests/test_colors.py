import pytest

from pokelong.colors import lookup_color, rgb_to_visual

RGB565 = (11, 5, 5, 6, 0, 5)
RGB555 = (10, 5, 5, 5, 0, 5)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("grey100", 0xFFFFFF),
        ("lightgoldenrodyellow", 0xFAFAD2),
        ("light green", 0x90EE90),
        ("darkred", 0x8B0000),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == 0xFFFAFA
    assert lookup_color("Ghost White") == 0xF8F8FF


def test_first_entry_wins_for_repeated_names():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_none_is_transparent():
    assert lookup_color("none") == -1


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def _gradient(x, y, w, h):
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


@pytest.mark.parametrize("depth", [24, 32])
def test_deep_visual_keeps_colour(depth):
    w = h = 42
    for x, y in [(0, 0), (10, 20), (41, 41)]:
        color = _gradient(x, y, w, h)
        assert rgb_to_visual(color, depth, RGB565) == color


def test_rgb565_pixels():
    assert rgb_to_visual(0xFFFFFF, 16, RGB565) == 0xFFFF
    assert rgb_to_visual(0xFF0000, 16, RGB565) == 0xF800
    assert rgb_to_visual(0x00FF00, 16, RGB565) == 0x07E0
    assert rgb_to_visual(0x0000FF, 16, RGB565) == 0x001F
    assert rgb_to_visual(0x000000, 16, RGB565) == 0


def test_rgb555_pixels():
    assert rgb_to_visual(0xFFFFFF, 15, RGB555) == 0x7FFF
    assert rgb_to_visual(0xFF0000, 15, RGB555) == 0x7C00
    assert rgb_to_visual(0x00FF00, 15, RGB555) == 0x03E0


def test_shallow_pixels_fit_in_depth():
    for x in range(0, 242, 17):
        for y in range(0, 242, 23):
            color = _gradient(x, y, 242, 242)
            assert 0 <= rgb_to_visual(color, 16, RGB565) <= 0xFFFF


def test_bad_shifts_raise():
    with pytest.raises(ValueError):
        rgb_to_visual(0xFFFFFF, 16, (11, 5, 5))