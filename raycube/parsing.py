"""Reading a .cub scene: texture paths, floor and ceiling colours, then the map."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from raycube.gamemap import GameMap, MapError, parse_map
from raycube.utils import char_count, endswith, is_only_digits, split_with_set

_SPACES = " \t\n\v\f\r"

_TEXTURE_KEYS = {"NO": "north", "SO": "south", "WE": "west", "EA": "east"}


class ParseError(ValueError):
    """Raised when a scene file cannot be read or is invalid."""


@dataclass
class Scene:
    """Everything a scene file describes."""

    north_texture: str
    south_texture: str
    west_texture: str
    east_texture: str
    floor_color: int
    ceiling_color: int
    game_map: GameMap


def parse_color(value: str) -> int:
    """Parse ``"R,G,B"`` into a ``0xRRGGBB`` integer.

    Components may be surrounded by whitespace; each must be at most three
    digits and at most 255. Components after the third are ignored.
    """
    if char_count(value, ",") >= 3:
        raise ParseError("too many comas in rgb format!")
    parts = split_with_set(value, _SPACES + ",")
    color = 0
    for shift, part in zip((16, 8, 0), parts):
        if not is_only_digits(part) or len(part) > 3 or int(part) > 255:
            raise ParseError("invalid color value in the map data!")
        color |= int(part) << shift
    if len(parts) < 3:
        raise ParseError("missing color value in the map data!")
    return color


def _split_identifier(line: str) -> tuple[str, str]:
    rest = line.lstrip(_SPACES)
    end = next((i for i, char in enumerate(rest) if char in _SPACES), len(rest))
    return rest[:end], rest[end:]


def parse_scene(lines: Iterable[str]) -> Scene:
    """Parse the lines of a scene.

    Identifier lines are read until all four wall textures are known; every
    line after that belongs to the map. A repeated colour is merged into the
    previous one bit by bit.
    """
    remaining = iter(lines)
    textures: dict[str, str] = {}
    colors = {"F": 0, "C": 0}
    while len(textures) < len(_TEXTURE_KEYS):
        line = next(remaining, None)
        if line is None:
            break
        identifier, value = _split_identifier(line)
        if not identifier:
            continue
        if identifier in _TEXTURE_KEYS:
            path = value.strip(_SPACES)
            if not path:
                raise ParseError("invalid path in map data!")
            textures[_TEXTURE_KEYS[identifier]] = path
        elif identifier in colors:
            colors[identifier] |= parse_color(value)
        else:
            raise ParseError("invalid map data!")
    if len(textures) < len(_TEXTURE_KEYS):
        raise ParseError("map data is not complete!")
    try:
        game_map = parse_map(remaining)
    except MapError as exc:
        raise ParseError(str(exc)) from exc
    return Scene(
        north_texture=textures["north"],
        south_texture=textures["south"],
        west_texture=textures["west"],
        east_texture=textures["east"],
        floor_color=colors["F"],
        ceiling_color=colors["C"],
        game_map=game_map,
    )


def is_valid_map_path(path: Optional[Union[str, os.PathLike]]) -> bool:
    """Tell whether ``path`` names a ``.cub`` file with a non-empty name."""
    if path is None:
        return False
    text = os.fspath(path)
    return endswith(text, ".cub") and not endswith(text, "/.cub")


def load_scene(path: Union[str, os.PathLike]) -> Scene:
    """Read and parse the scene file at ``path``."""
    if not is_valid_map_path(path):
        raise ParseError(
            "please provide a valid map path, only <.cub> maps are supported!"
        )
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError as exc:
        raise ParseError("cannot open map file!") from exc
    return parse_scene(text.split("\n"))