import pytest

from raycube.gamemap import FLOOR
from raycube.parsing import (
    ParseError,
    Scene,
    is_valid_map_path,
    load_scene,
    parse_color,
    parse_scene,
)

HEADER = [
    "NO ./textures/north.xpm",
    "SO ./textures/south.xpm",
    "",
    "F 255,255,255",
    "C 0,0,0",
    "WE   ./textures/west.xpm   ",
    "EA ./textures/east.xpm",
]
MAP = ["", "111", "1N1", "111"]


def test_color_extremes():
    assert parse_color("255,255,255") == 0xFFFFFF
    assert parse_color("0,0,0") == 0


def test_color_channel_order():
    assert parse_color("1,2,3") == 0x010203


def test_color_with_spaces_matches_compact():
    assert parse_color(" 10 , 20 ,30 \n") == parse_color("10,20,30")


def test_color_extra_components_ignored():
    assert parse_color("1 2 3 4") == parse_color("1,2,3")


@pytest.mark.parametrize(
    "value, message",
    [
        ("1,2,3,4", "too many comas"),
        ("256,0,0", "invalid color"),
        ("a,2,3", "invalid color"),
        ("0001,2,3", "invalid color"),
        ("-1,2,3", "invalid color"),
        ("1,2", "missing color"),
        ("", "missing color"),
    ],
)
def test_color_errors(value, message):
    with pytest.raises(ParseError, match=message):
        parse_color(value)


def test_parse_scene():
    scene = parse_scene(HEADER + MAP)
    assert isinstance(scene, Scene)
    assert scene.north_texture == "./textures/north.xpm"
    assert scene.south_texture == "./textures/south.xpm"
    assert scene.west_texture == "./textures/west.xpm"
    assert scene.east_texture == "./textures/east.xpm"
    assert scene.floor_color == parse_color("255,255,255")
    assert scene.ceiling_color == 0
    assert scene.game_map.rows == ["111", "101", "111"]
    assert scene.game_map.get(1, 1) == FLOOR


def test_colors_default_to_zero():
    lines = [line for line in HEADER if not line.startswith(("F", "C"))]
    scene = parse_scene(lines + MAP)
    assert scene.floor_color == 0
    assert scene.ceiling_color == 0


def test_repeated_color_is_merged():
    lines = ["F 1,0,0", "F 0,0,1"] + HEADER[:3] + HEADER[5:] + MAP
    scene = parse_scene(lines)
    assert scene.floor_color == parse_color("1,0,1")


def test_repeated_texture_keeps_last():
    lines = ["NO first.xpm"] + HEADER + MAP
    scene = parse_scene(lines)
    assert scene.north_texture == "./textures/north.xpm"


def test_missing_texture():
    with pytest.raises(ParseError, match="not complete"):
        parse_scene(HEADER[:-1])


def test_unknown_identifier():
    with pytest.raises(ParseError, match="invalid map data"):
        parse_scene(["XX something"] + HEADER + MAP)


def test_empty_path():
    with pytest.raises(ParseError, match="invalid path"):
        parse_scene(["NO    "] + HEADER + MAP)


def test_bad_color_in_scene():
    with pytest.raises(ParseError, match="invalid color"):
        parse_scene(["F 300,0,0"] + HEADER + MAP)


def test_map_error_becomes_parse_error():
    with pytest.raises(ParseError, match="no player spawn"):
        parse_scene(HEADER + ["111", "101", "111"])


def test_no_map_lines():
    with pytest.raises(ParseError, match="no map lines"):
        parse_scene(HEADER)


@pytest.mark.parametrize(
    "path, expected",
    [
        ("maps/valid.cub", True),
        (".cub", True),
        ("maps/.cub", False),
        ("maps/valid.ber", False),
        ("maps/valid.cub.bak", False),
        ("", False),
        (None, False),
    ],
)
def test_is_valid_map_path(path, expected):
    assert is_valid_map_path(path) is expected


def test_load_scene(tmp_path):
    path = tmp_path / "level.cub"
    path.write_text("\n".join(HEADER + MAP) + "\n")
    scene = load_scene(path)
    assert scene.east_texture == "./textures/east.xpm"
    assert scene.game_map.height == 3


def test_load_scene_bad_extension(tmp_path):
    path = tmp_path / "level.txt"
    path.write_text("\n".join(HEADER + MAP))
    with pytest.raises(ParseError, match="only <.cub> maps"):
        load_scene(path)


def test_load_scene_missing_file(tmp_path):
    with pytest.raises(ParseError, match="cannot open"):
        load_scene(tmp_path / "missing.cub")