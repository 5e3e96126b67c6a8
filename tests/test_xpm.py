import pytest

from pokelong.colors import lookup_color
from pokelong.xpm import (
    XpmError,
    XpmImage,
    color_key,
    load_xpm,
    parse_xpm,
    split_words,
    strip_comments,
    text_to_rgb,
    xpm_from_text,
)

SAMPLE_LINES = ["2 2 2 1", ". c #FF0000", "# c None", ".#", "#."]

SAMPLE_FILE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1",
". c #FF0000", // red
"# c None",
/* pixels */
".#",
"#."
};
"""


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tb   c ") == ["a", "b", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_strip_comments_block_keeps_length():
    text = 'x /* gone */ "y"'
    out = strip_comments(text)
    assert len(out) == len(text)
    assert "gone" not in out
    assert out.endswith('"y"')


def test_strip_comments_ignores_quoted():
    text = '"a /* b */ c"'
    assert strip_comments(text) == text


def test_strip_comments_line_comment():
    text = "x // note\ny"
    out = strip_comments(text)
    assert "note" not in out
    assert out.startswith("x ")
    assert out.endswith("y")
    assert len(out) == len(text)


def test_color_key_single_char():
    assert color_key("A") == ord("A")


def test_color_key_distinct_codes():
    codes = ["ab", "ba", "aa", "bb", ".#", "#."]
    assert len({color_key(code) for code in codes}) == len(codes)


def test_text_to_rgb_hex():
    assert text_to_rgb("#FF0000", None) == 0xFF0000


def test_text_to_rgb_named():
    assert text_to_rgb("Red", None) == lookup_color("red")


def test_text_to_rgb_two_words():
    assert text_to_rgb("light", "grey") == lookup_color("light grey")


def test_text_to_rgb_none_and_unknown():
    assert text_to_rgb("None", None) == -1
    assert text_to_rgb("nosuchcolour", None) == 0


def test_parse_xpm_pixels():
    image = parse_xpm(SAMPLE_LINES)
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == 0xFF000000
    assert image.pixel(0, 1) == 0xFF000000
    assert image.pixel(1, 1) == 0xFF0000


def test_parse_xpm_unknown_code_is_black():
    image = parse_xpm(["1 1 1 1", ". c #FF0000", "x"])
    assert image.pixel(0, 0) == 0


def test_parse_xpm_long_codes_first_definition_wins():
    lines = ["1 1 2 3", "abc c #00FF00", "abc c #0000FF", "abc"]
    assert parse_xpm(lines).pixel(0, 0) == 0x00FF00


def test_parse_xpm_short_codes_last_definition_wins():
    lines = ["1 1 2 1", "a c #00FF00", "a c #0000FF", "a"]
    assert parse_xpm(lines).pixel(0, 0) == 0x0000FF


@pytest.mark.parametrize(
    "lines",
    [
        ["0 2 2 1", ". c #FF0000", "# c None", ".#", "#."],
        ["2 2"],
        [],
        ["1 1 1 1", ". #FF0000", "."],
        ["1 1 1 1", ". c", "."],
        ["2 2 2 1", ". c #FF0000", "# c None", ".#"],
        ["2 1 1 1", ". c #FF0000", "."],
    ],
)
def test_parse_xpm_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_pixel_out_of_range():
    image = parse_xpm(SAMPLE_LINES)
    with pytest.raises(IndexError):
        image.pixel(2, 0)


def test_xpm_from_text_matches_lines():
    assert xpm_from_text(SAMPLE_FILE) == parse_xpm(SAMPLE_LINES)


def test_load_xpm(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE_FILE)
    image = load_xpm(path)
    assert image == parse_xpm(SAMPLE_LINES)
    assert image == XpmImage(2, 2, image.pixels)