"""Drawing one frame: sky, textured walls and a shaded floor per ray column."""

from __future__ import annotations

import math
from dataclasses import dataclass

from raycube.gamemap import BUILDING, TOWNHALL, WALL, GameMap
from raycube.images import Image, melt_colors_weighted, put_pixel
from raycube.raycast import Facing, Ray, cast_ray, normalize_angle
from raycube.textures import TextureAtlas
from raycube.utils import Vec2

TEXTURE_WALL_NORTH = 0
TEXTURE_WALL_SOUTH = 1
TEXTURE_WALL_EAST = 2
TEXTURE_WALL_WEST = 3
TEXTURE_WALL_DEFAULT = 4
TEXTURE_FLOOR = 5

SKY_COLOR = 0x120228

_FACING_TEXTURES = {
    Facing.NORTH: TEXTURE_WALL_NORTH,
    Facing.SOUTH: TEXTURE_WALL_SOUTH,
    Facing.EAST: TEXTURE_WALL_EAST,
    Facing.WEST: TEXTURE_WALL_WEST,
}

_WALL_BASE_HEIGHTS = {"G": 135.0, "F": 400.0, BUILDING: 350.0}
_DEFAULT_BASE_HEIGHT = 850.0
_FLOOR_BASE_HEIGHT = 64.0


@dataclass(frozen=True)
class ViewSettings:
    """Camera values derived from the field of view and the screen width."""

    fov: float
    distance_from_camera: float
    plane_len: float
    num_rays: int

    @staticmethod
    def from_fov(fov_degrees: float, screen_width: int, rays: int = 1) -> "ViewSettings":
        """Settings for a ``fov_degrees`` view, one ray per ``rays`` columns."""
        if rays <= 0:
            raise ValueError("rays must be positive")
        fov = fov_degrees * (math.pi / 180)
        return ViewSettings(
            fov=fov,
            distance_from_camera=(screen_width // 2) / math.tan(fov / 2),
            plane_len=math.tan(fov * 0.5),
            num_rays=int(screen_width) // int(rays),
        )


def darkness(distance: float) -> float:
    """Light weight in ``[0, 1]`` for something at ``distance``; near is bright."""
    if distance == 0:
        return 1.0
    weight = 215 / distance
    return min(max(weight, 0.0), 1.0)


def wall_height(settings: ViewSettings, ray: Ray) -> float:
    """Projected height on screen of the wall the ray hit."""
    base = _WALL_BASE_HEIGHTS.get(ray.wall, _DEFAULT_BASE_HEIGHT)
    if ray.distance == 0:
        return math.inf
    return base / ray.distance * settings.distance_from_camera


def wall_span(settings: ViewSettings, ray: Ray, screen_height: int) -> tuple[float, float]:
    """Return ``(begin, height)`` of the wall strip, clamped to the screen."""
    height = min(max(wall_height(settings, ray), 0.0), float(screen_height))
    begin = (screen_height - height) / 2
    if ray.wall == TOWNHALL:
        begin -= height / 4
    begin = min(max(begin, 0.0), float(screen_height))
    return begin, height


def draw_sky(buffer: Image, x: int, begin: float) -> None:
    """Paint column ``x`` with the sky colour above ``begin``."""
    for y in range(max(0, math.ceil(begin))):
        put_pixel(buffer, x, y, SKY_COLOR)


def _texture_x(texture: Image, ray: Ray) -> int:
    coord = ray.wall_hit.y if ray.was_hit_vertical else ray.wall_hit.x
    return int(math.floor(coord)) % texture.width


def draw_textured_wall(
    buffer: Image, settings: ViewSettings, ray: Ray, texture: Image, begin: float
) -> None:
    """Draw the wall strip of ``ray`` from ``begin`` down to its mirror row."""
    screen_height = buffer.height
    weight = darkness(ray.distance)
    tex_x = _texture_x(texture, ray)
    half_height = wall_height(settings, ray) / 2
    if half_height == 0 or math.isinf(half_height):
        return
    y = int(begin)
    while y < screen_height - begin:
        distance_top = y + half_height - screen_height // 2
        tex_y = int((distance_top * texture.height + half_height) / (half_height * 2))
        tex_y %= texture.height
        color = melt_colors_weighted(0x000000, texture.get_pixel(tex_x, tex_y), weight)
        put_pixel(buffer, ray.column, y, color)
        y += 1


def draw_floor(
    buffer: Image,
    settings: ViewSettings,
    ray: Ray,
    texture: Image,
    position: Vec2,
    rotation: float,
) -> None:
    """Draw the floor below the wall in column ``ray.column``, darker with distance."""
    screen_height = buffer.height
    half_screen = screen_height // 2
    if ray.distance == 0:
        return
    standard_height = _FLOOR_BASE_HEIGHT / ray.distance * settings.distance_from_camera
    floor_start = half_screen + standard_height / 2
    dir_x = math.cos(ray.angle)
    dir_y = math.sin(ray.angle)
    correction = math.cos(ray.angle - rotation)
    for y in range(max(0, int(floor_start)), screen_height):
        denominator = (y - half_screen) * correction
        if denominator == 0:
            continue
        row_distance = (settings.distance_from_camera * 0.5) / (y - half_screen) / correction
        floor_x = position.x + row_distance * dir_x
        floor_y = position.y + row_distance * dir_y
        tex_x = int(floor_x * texture.width) % texture.width
        tex_y = int(floor_y * texture.height) % texture.height
        color = melt_colors_weighted(
            0x000000, texture.get_pixel(tex_x, tex_y), darkness(row_distance * 100)
        )
        put_pixel(buffer, ray.column, y, color)


def _required(atlas: TextureAtlas, texture_id: int) -> Image:
    texture = atlas.get(texture_id)
    if texture is None:
        raise LookupError(f"texture {texture_id} is not loaded")
    return texture


def _wall_texture(atlas: TextureAtlas, ray: Ray) -> Image:
    if ray.wall == WALL:
        return _required(atlas, _FACING_TEXTURES[ray.facing])
    linked = atlas.get_linked(ray.wall)
    if linked is not None:
        return linked
    return _required(atlas, TEXTURE_WALL_DEFAULT)


def render_frame(
    buffer: Image,
    settings: ViewSettings,
    game_map: GameMap,
    atlas: TextureAtlas,
    position: Vec2,
    rotation: float,
) -> list[float]:
    """Draw one frame into ``buffer`` and return the wall distance of every column."""
    floor_texture = _required(atlas, TEXTURE_FLOOR)
    depths: list[float] = []
    if settings.num_rays <= 0:
        return depths
    angle = rotation - settings.fov / 2
    step = settings.fov / settings.num_rays
    for column in range(settings.num_rays):
        ray = cast_ray(game_map, position, rotation, normalize_angle(angle))
        ray.column = column
        angle += step
        depths.append(ray.distance)
        begin, _ = wall_span(settings, ray, buffer.height)
        draw_sky(buffer, column, begin)
        draw_textured_wall(buffer, settings, ray, _wall_texture(atlas, ray), begin)
        draw_floor(buffer, settings, ray, floor_texture, position, rotation)
    return depths