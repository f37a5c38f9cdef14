import math

import pytest

from raycube.gamemap import (
    DOOR,
    DOOR_ENTITY,
    FLOOR,
    MONEY,
    SOLDIER,
    VOID,
    Entity,
    GameMap,
    MapError,
    is_enclosed,
    only_allowed_chars,
    parse_map,
)
from raycube.utils import Vec2

VALID = [
    "111111",
    "100001",
    "10N0M1",
    "1V0D01",
    "111111",
]


def _locate(lines, char):
    for y, row in enumerate(lines):
        if char in row:
            return row.index(char), y
    raise LookupError(char)


def test_dimensions():
    game_map = parse_map(VALID)
    assert game_map.width == len(VALID[0])
    assert game_map.height == len(VALID)


def test_spawn_and_player():
    game_map = parse_map(VALID)
    sx, sy = _locate(VALID, "N")
    assert game_map.spawn == (sx, sy)
    assert game_map.player == Vec2(sx + 0.5, sy + 0.5)
    assert game_map.rotation == pytest.approx(math.pi + math.pi / 2)
    assert game_map.get(sx, sy) == FLOOR


@pytest.mark.parametrize(
    "char, angle",
    [("N", math.pi + math.pi / 2), ("S", math.pi / 2), ("E", math.pi * 2), ("W", math.pi)],
)
def test_spawn_angles(char, angle):
    lines = ["111", "1" + char + "1", "111"]
    assert parse_map(lines).rotation == pytest.approx(angle)


def test_entities_in_row_major_order():
    game_map = parse_map(VALID)
    mx, my = _locate(VALID, "M")
    vx, vy = _locate(VALID, "V")
    dx, dy = _locate(VALID, "D")
    assert game_map.entities == [
        Entity(MONEY, mx, my),
        Entity(SOLDIER, vx, vy),
        Entity(DOOR_ENTITY, dx, dy),
    ]
    assert game_map.get(mx, my) == FLOOR
    assert game_map.get(vx, vy) == FLOOR
    assert game_map.get(dx, dy) == DOOR


def test_blank_lines_and_newlines_are_ignored():
    lines = ["\n", "111\n", "   \n", "1S1\n", "111"]
    game_map = parse_map(lines)
    assert game_map.rows == ["111", "101", "111"]


def test_whitespace_becomes_void():
    lines = [" 111", " 1E1", "\t111"]
    game_map = parse_map(lines)
    assert game_map.get(0, 0) == VOID
    assert game_map.get(0, 2) == VOID
    assert game_map.is_void(0, 1)


def test_queries():
    game_map = parse_map(VALID)
    assert game_map.is_wall(0, 0)
    assert game_map.is_floor(1, 1)
    assert not game_map.is_wall(1, 1)
    assert game_map.is_void(-1, 0)
    assert game_map.is_void(0, game_map.height)
    assert game_map.is_void(game_map.width, 0)
    assert not game_map.is_wall(-1, -1)
    assert game_map.get(1.9, 1.2) == game_map.get(1, 1)
    assert game_map.is_void(math.inf, 0)


def test_door_counts_as_wall_for_rays():
    game_map = parse_map(VALID)
    dx, dy = _locate(VALID, "D")
    assert game_map.is_wall(dx, dy)


def test_no_lines():
    with pytest.raises(MapError, match="no map lines"):
        parse_map(["", "   ", "\n"])


def test_no_spawn():
    with pytest.raises(MapError, match="no player spawn"):
        parse_map(["111", "101", "111"])


def test_multiple_spawns():
    with pytest.raises(MapError, match="multiples player spawn"):
        parse_map(["1111", "1NS1", "1111"])


def test_unsupported_char():
    with pytest.raises(MapError, match="none supported"):
        parse_map(["111", "1N1", "1Z1", "111"])


def test_open_map():
    with pytest.raises(MapError, match="not surronded"):
        parse_map(["111", "1N0", "111"])


def test_open_door():
    with pytest.raises(MapError, match="not surronded"):
        parse_map(["1111", "1N0D", "1111"])


def test_only_allowed_chars():
    assert only_allowed_chars(VALID)
    assert only_allowed_chars([" \t01NSEWVMD"])
    assert not only_allowed_chars(["10x1"])


def test_is_enclosed():
    assert is_enclosed(GameMap(rows=["111", "101", "111"]))
    assert not is_enclosed(GameMap(rows=["111", "10 ", "111"]))
    assert not is_enclosed(GameMap(rows=["0"]))
    assert is_enclosed(GameMap(rows=["1"]))


def test_width_of_ragged_rows():
    game_map = GameMap(rows=["1", "111", "11"])
    assert game_map.width == 3
    assert game_map.is_void(2, 2)