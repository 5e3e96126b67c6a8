import io

import pytest

from pokelong.app import Session, key_to_direction, main
from pokelong.game import Direction, Game
from pokelong.gamemap import parse_map

CORRIDOR = "111111\n1P0CE1\n111111\n"


def make_session(text=CORRIDOR):
    out = io.StringIO()
    return Session(Game(parse_map(text)), out=out), out


@pytest.mark.parametrize(
    "key, expected",
    [
        ("d", Direction.RIGHT),
        ("q", Direction.LEFT),
        ("z", Direction.UP),
        ("s", Direction.DOWN),
        (ord("d"), Direction.RIGHT),
        (ord("s"), Direction.DOWN),
    ],
)
def test_key_to_direction_bindings(key, expected):
    assert key_to_direction(key) is expected


@pytest.mark.parametrize("key", ["w", "a", "dd", "", 65307, ord("x")])
def test_key_to_direction_unbound(key):
    assert key_to_direction(key) is None


def test_handle_key_moves_and_counts():
    session, out = make_session()
    assert session.handle_key("d") == 1
    assert (session.game.x, session.game.y) == (2, 1)
    assert session.game.moves == 1
    assert out.getvalue() == "1\n"


def test_non_movement_key_counts_but_does_not_move():
    session, out = make_session()
    session.handle_key("x")
    session.handle_key("x")
    assert session.key_presses == 2
    assert (session.game.x, session.game.y) == (1, 1)
    assert session.game.moves == 0
    assert out.getvalue() == "1\n2\n"


def test_any_key_clears_facing():
    session, _ = make_session()
    session.handle_key("d")
    assert session.game.facing is Direction.RIGHT
    session.handle_key("x")
    assert session.game.facing is None


def test_blocked_move_keeps_position_but_faces():
    session, _ = make_session()
    session.handle_key("z")
    assert session.game.facing is Direction.UP
    assert (session.game.x, session.game.y) == (1, 1)
    assert session.key_presses == 1


def test_collect_then_exit_wins():
    session, _ = make_session()
    for key in "ddd":
        session.handle_key(key)
    assert session.game.collectibles == 0
    assert session.game.won is True
    assert session.game.is_over() is True


def test_exit_blocked_while_collectibles_remain():
    session, _ = make_session("11111\n1PEC1\n11111\n")
    session.handle_key("d")
    assert (session.game.x, session.game.y) == (1, 1)
    assert session.game.won is False


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "Please give a map with a .ber extension." in capsys.readouterr().err


def test_main_with_too_many_arguments(capsys):
    assert main(["a.ber", "b.ber"]) == 1
    assert "Please give only one argument." in capsys.readouterr().err


def test_main_with_wrong_extension(capsys):
    assert main(["map.txt"]) == 1
    assert "Wrong file extension." in capsys.readouterr().err


def test_main_with_invalid_map(tmp_path, capsys):
    path = tmp_path / "bad.ber"
    path.write_text("111\n1P1\n111\n")
    assert main([str(path)]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error\n")
    assert "Invalid map" in err


def test_main_with_empty_map(tmp_path, capsys):
    path = tmp_path / "empty.ber"
    path.write_text("")
    assert main([str(path)]) == 1
    assert "There is no map" in capsys.readouterr().err


def test_main_with_missing_map(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ber")]) == 1
    assert capsys.readouterr().err.startswith("Error\n")