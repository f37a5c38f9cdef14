"""The map grid of a scene: parsing, spawn point, entities and validity checks."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

from raycube.utils import Vec2, has_non_space

FLOOR = "0"
WALL = "1"
DOOR = "D"
VOID = " "
BUILDING = "B"
TOWNHALL = "T"

PLAYER_DIRECTIONS = "NSEW"
MAP_CHARS = "01GF" + BUILDING + TOWNHALL
ENTITY_CHARS = "VMD"

SOLDIER = "soldier"
MONEY = "money"
DOOR_ENTITY = "door"

_SPACES = " \t\n\v\f\r"

_SPAWN_ANGLES = {
    "N": math.pi + math.pi / 2,
    "S": math.pi / 2,
    "E": math.pi * 2,
    "W": math.pi,
}

_ENTITY_KINDS = {"V": SOLDIER, "M": MONEY, "D": DOOR_ENTITY}


class MapError(ValueError):
    """Raised when the map part of a scene is invalid."""


@dataclass(frozen=True)
class Entity:
    """Something placed on the map: a soldier, money or a door."""

    kind: str
    x: int
    y: int


@dataclass
class GameMap:
    """A parsed map grid with the player spawn and the entities found on it."""

    rows: list[str]
    spawn: tuple[int, int] = (0, 0)
    player: Vec2 = Vec2(-1.0, -1.0)
    rotation: float = 0.0
    entities: list[Entity] = field(default_factory=list)

    @property
    def width(self) -> int:
        """Length of the longest row."""
        return max((len(row) for row in self.rows), default=0)

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.rows)

    def get(self, x: float, y: float) -> str:
        """Cell at ``(x, y)``; anything outside the grid reads as void."""
        if isinstance(x, float) and not math.isfinite(x):
            return VOID
        if isinstance(y, float) and not math.isfinite(y):
            return VOID
        xi, yi = int(x), int(y)
        if not 0 <= yi < len(self.rows):
            return VOID
        row = self.rows[yi]
        if not 0 <= xi < len(row):
            return VOID
        return row[xi]

    def is_void(self, x: float, y: float) -> bool:
        """Tell whether ``(x, y)`` is outside the playable area."""
        return self.get(x, y) == VOID

    def is_floor(self, x: float, y: float) -> bool:
        """Tell whether ``(x, y)`` is walkable floor."""
        return self.get(x, y) == FLOOR

    def is_wall(self, x: float, y: float) -> bool:
        """Tell whether ``(x, y)`` blocks rays: any cell that is neither floor nor void."""
        return self.get(x, y) not in (FLOOR, VOID)


def _is_map_char(char: str) -> bool:
    return (
        char in MAP_CHARS
        or char in ENTITY_CHARS
        or char in _SPACES
        or char in PLAYER_DIRECTIONS
        or char == VOID
    )


def only_allowed_chars(rows: Iterable[str]) -> bool:
    """Tell whether every cell of ``rows`` is a supported map character."""
    return all(_is_map_char(char) for row in rows for char in row)


def is_enclosed(game_map: GameMap) -> bool:
    """Tell whether no floor or door cell touches the void."""
    for y, row in enumerate(game_map.rows):
        for x, cell in enumerate(row):
            if cell != FLOOR and cell != DOOR:
                continue
            neighbours = ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1))
            if any(game_map.is_void(nx, ny) for nx, ny in neighbours):
                return False
    return True


def _map_rows(lines: Iterable[str]) -> list[list[str]]:
    rows = []
    for line in lines:
        line = line.rstrip("\n")
        if not line or not has_non_space(line):
            continue
        rows.append([VOID if char in _SPACES else char for char in line])
    return rows


def parse_map(lines: Iterable[str]) -> GameMap:
    """Build a :class:`GameMap` from the map lines of a scene.

    Blank lines are skipped and whitespace becomes void. The spawn cell and
    the entity cells are turned into floor (doors stay doors). Raises
    :class:`MapError` when the map is missing, has no or several spawn
    points, holds unsupported characters or is not closed by walls.
    """
    grid = _map_rows(lines)
    if not grid:
        raise MapError("no map lines found!")

    spawn = None
    rotation = 0.0
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell in _SPAWN_ANGLES:
                spawn = (x, y)
                rotation = _SPAWN_ANGLES[cell]
    if spawn is None:
        raise MapError("no player spawn position in the map!")

    entities = []
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            kind = _ENTITY_KINDS.get(cell)
            if kind is None:
                continue
            row[x] = DOOR if kind == DOOR_ENTITY else FLOOR
            entities.append(Entity(kind, x, y))

    sx, sy = spawn
    grid[sy][sx] = FLOOR
    rows = ["".join(row) for row in grid]
    game_map = GameMap(
        rows=rows,
        spawn=spawn,
        player=Vec2(sx + 0.5, sy + 0.5),
        rotation=rotation,
        entities=entities,
    )

    if not only_allowed_chars(rows):
        raise MapError("none supported characteres in map data!")
    if any(char in PLAYER_DIRECTIONS for row in rows for char in row):
        raise MapError("multiples player spawn point in map data!")
    if not is_enclosed(game_map):
        raise MapError("map is not surronded by walls correcly!")
    return game_map