"""In-memory ARGB images with pixel access, colour blending and shape drawing."""

from __future__ import annotations

import math
from typing import Any, Optional, Sequence, Tuple, Union

TRANSPARENT = 0xFF000000
"""Colour value treated as 'nothing to draw' by the transparent operations."""

DEFAULT_FILTER_WEIGHT = 0.7

_MASK32 = 0xFFFFFFFF

Point = Union[Sequence[float], Any]


def _xy(point: Point) -> Tuple[float, float]:
    """Accept either an object with ``x``/``y`` attributes or an ``(x, y)`` pair."""
    if hasattr(point, "x") and hasattr(point, "y"):
        return point.x, point.y
    x, y = point
    return x, y


class Image:
    """A rectangular grid of 32-bit ARGB pixels stored row by row."""

    def __init__(self, width: int, height: int, fill: int = 0) -> None:
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        self.width = int(width)
        self.height = int(height)
        self.pixels = [fill & _MASK32] * (self.width * self.height)

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height})"

    def _index(self, x: int, y: int) -> int:
        """Index of the pixel at ``(x, y)``, out-of-range coordinates pinned to the edge."""
        if self.width == 0 or self.height == 0:
            raise IndexError("image has no pixels")
        x = int(x)
        y = int(y)
        if x < 0 or x >= self.width:
            x = self.width - 1
        if y < 0 or y >= self.height:
            y = self.height - 1
        return y * self.width + x

    def get_pixel(self, x: int, y: int) -> int:
        """Colour at ``(x, y)``; coordinates outside the image read the edge."""
        return self.pixels[self._index(x, y)]

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at ``(x, y)``; coordinates outside the image write the edge."""
        self.pixels[self._index(x, y)] = color & _MASK32


def put_pixel(image: Image, x: int, y: int, color: int) -> None:
    """Draw one pixel unless ``color`` is the transparent marker."""
    color &= _MASK32
    if color == TRANSPARENT:
        return
    image.set_pixel(x, y, color)


def _channels(color: int) -> Tuple[int, int, int, int]:
    color &= _MASK32
    return (color >> 24) & 0xFF, (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def melt_colors_weighted(input_color: int, filter_color: int, filter_weight: float) -> int:
    """Blend two ARGB colours channel by channel, ``filter_weight`` going to the filter."""
    input_weight = 1.0 - filter_weight
    result = 0
    for a, b in zip(_channels(input_color), _channels(filter_color)):
        channel = int(a * input_weight + b * filter_weight) & 0xFF
        result = (result << 8) | channel
    return result


def melt_colors(input_color: int, filter_color: int) -> int:
    """Blend two colours with the filter taking the default weight."""
    return melt_colors_weighted(input_color, filter_color, DEFAULT_FILTER_WEIGHT)


def apply_color_filter(image: Optional[Image], filter_color: int) -> None:
    """Tint every non-transparent pixel of ``image`` towards ``filter_color``."""
    if image is None:
        return
    image.pixels = [
        pixel if pixel == TRANSPARENT else melt_colors(pixel, filter_color)
        for pixel in image.pixels
    ]


def copy_to_dest(
    origin: Optional[Image],
    origin_pos: Point,
    length: Point,
    dest: Optional[Image],
    dest_pos: Point,
    transparency: bool,
) -> None:
    """Copy a ``length``-sized block from ``origin`` into ``dest``.

    With ``transparency`` the transparent pixels of the origin are skipped.
    """
    if origin is None or dest is None:
        return
    ox, oy = (int(v) for v in _xy(origin_pos))
    width, height = (int(v) for v in _xy(length))
    dx, dy = (int(v) for v in _xy(dest_pos))
    for cx in range(width):
        for cy in range(height):
            color = origin.get_pixel(ox + cx, oy + cy)
            if transparency and color == TRANSPARENT:
                continue
            dest.set_pixel(dx + cx, dy + cy, color)


def simple_copy_to_dest(origin: Optional[Image], dest: Optional[Image], dest_pos: Point) -> None:
    """Paste the whole of ``origin`` into ``dest`` at ``dest_pos``, skipping transparency."""
    if origin is None or dest is None:
        return
    copy_to_dest(origin, (0, 0), (origin.width, origin.height), dest, dest_pos, True)


def draw_line(image: Image, color: int, start: Point, end: Point) -> None:
    """Draw a straight line from ``start`` running one step past ``end``."""
    sx, sy = _xy(start)
    ex, ey = _xy(end)
    dx = ex - sx
    dy = ey - sy
    steps = max(abs(dx), abs(dy))
    if steps != 0:
        step_x, step_y = dx / steps, dy / steps
    else:
        step_x = step_y = 0.0
    i = 0
    while i <= steps + 1:
        put_pixel(image, math.floor(sx + i * step_x), math.floor(sy + i * step_y), color)
        i += 1


def draw_rect(image: Image, color: int, start: Point, end: Point) -> None:
    """Fill the rectangle from ``start`` (inclusive) to ``end`` (exclusive)."""
    sx, sy = (int(v) for v in _xy(start))
    ex, ey = (int(v) for v in _xy(end))
    for x in range(sx, ex):
        for y in range(sy, ey):
            put_pixel(image, x, y, color)