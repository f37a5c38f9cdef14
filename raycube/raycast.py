"""Grid ray casting: finding the first wall a ray meets on the map."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from raycube.gamemap import VOID, GameMap
from raycube.utils import Vec2, distance_between

TILE_SIZE = 64
"""Size of one map cell in world units."""

_NO_HIT = 99999.0
_EDGE_NUDGE = 0.001
_HALF_PI = math.pi / 2
_THREE_HALF_PI = 3 * math.pi / 2


class Facing(Enum):
    """Side of the wall a ray landed on."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


@dataclass
class Ray:
    """One cast ray and what it hit."""

    angle: float
    distance: float = 0.0
    wall_hit: Vec2 = Vec2(0.0, 0.0)
    was_hit_vertical: bool = False
    facing: Facing = Facing.NORTH
    wall: str = VOID
    column: int = 0


def normalize_angle(angle: float) -> float:
    """Bring an angle that is at most one turn off back into ``[0, 2π]``."""
    if angle > 2 * math.pi:
        angle -= 2 * math.pi
    if angle < 0:
        angle += 2 * math.pi
    return angle


def _inside(game_map: GameMap, point_x: float, point_y: float) -> bool:
    return (
        0 <= point_x <= game_map.width * TILE_SIZE
        and 0 <= point_y <= game_map.height * TILE_SIZE
    )


def horizontal_intersection(
    game_map: GameMap, position: Vec2, angle: float
) -> Optional[Vec2]:
    """First wall hit on a horizontal grid line, in world units, or ``None``."""
    tangent = math.tan(angle)
    if tangent == 0:
        return None
    facing_down = 0 < angle < math.pi
    next_y = math.floor(position.y) * TILE_SIZE
    if facing_down:
        next_y += TILE_SIZE
    next_x = position.x * TILE_SIZE + (next_y - position.y * TILE_SIZE) / tangent

    step_y = TILE_SIZE if facing_down else -TILE_SIZE
    step_x = TILE_SIZE / tangent
    facing_left = _HALF_PI < angle < _THREE_HALF_PI
    if facing_left and step_x > 0:
        step_x = -step_x
    if not facing_left and step_x < 0:
        step_x = -step_x

    while _inside(game_map, next_x, next_y):
        check_y = next_y if facing_down else next_y - _EDGE_NUDGE
        if game_map.is_wall(next_x / TILE_SIZE, check_y / TILE_SIZE):
            return Vec2(next_x, check_y)
        next_x += step_x
        next_y += step_y
    return None


def vertical_intersection(
    game_map: GameMap, position: Vec2, angle: float
) -> Optional[Vec2]:
    """First wall hit on a vertical grid line, in world units, or ``None``."""
    tangent = math.tan(angle)
    facing_right = angle < _HALF_PI or angle > _THREE_HALF_PI
    next_x = math.floor(position.x) * TILE_SIZE
    if facing_right:
        next_x += TILE_SIZE
    next_y = position.y * TILE_SIZE + (next_x - position.x * TILE_SIZE) * tangent

    step_x = TILE_SIZE if facing_right else -TILE_SIZE
    step_y = TILE_SIZE * tangent
    if angle > math.pi and step_y > 0:
        step_y = -step_y
    if angle < math.pi and step_y < 0:
        step_y = -step_y

    while _inside(game_map, next_x, next_y):
        check_x = next_x if facing_right else next_x - _EDGE_NUDGE
        if game_map.is_wall(check_x / TILE_SIZE, next_y / TILE_SIZE):
            return Vec2(check_x, next_y)
        next_x += step_x
        next_y += step_y
    return None


def cast_ray(game_map: GameMap, position: Vec2, rotation: float, angle: float) -> Ray:
    """Cast a ray from ``position`` (map units) at ``angle``.

    The distance is corrected for the camera ``rotation`` so walls do not
    bulge towards the edges of the view.
    """
    angle = normalize_angle(angle)
    origin = Vec2(position.x * TILE_SIZE, position.y * TILE_SIZE)
    horizontal = horizontal_intersection(game_map, position, angle)
    vertical = vertical_intersection(game_map, position, angle)
    hor_dist = distance_between(origin, horizontal) if horizontal else _NO_HIT
    vert_dist = distance_between(origin, vertical) if vertical else _NO_HIT

    ray = Ray(angle=angle)
    if vertical is not None and vert_dist < hor_dist:
        ray.distance = vert_dist * math.cos(angle - rotation)
        ray.was_hit_vertical = True
        ray.wall_hit = vertical
        ray.facing = Facing.WEST if _HALF_PI <= angle <= _THREE_HALF_PI else Facing.EAST
    else:
        ray.distance = hor_dist * math.cos(angle - rotation)
        ray.was_hit_vertical = False
        ray.wall_hit = horizontal if horizontal is not None else Vec2(0.0, 0.0)
        ray.facing = Facing.NORTH if 0 <= angle <= math.pi else Facing.SOUTH
    ray.wall = game_map.get(ray.wall_hit.x / TILE_SIZE, ray.wall_hit.y / TILE_SIZE)
    return ray