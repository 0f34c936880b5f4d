"""Drawing the map's grid of lines into an image with the DDA algorithm."""

from __future__ import annotations

import math
import struct
from typing import List, Sequence, Tuple

from wireframe.image import Image
from wireframe.parser import MapData

OFFSET = 100
LINE_COLOR = 0xFF0000

Pixel = Tuple[int, int]


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _round(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def line_points(p1: Sequence[int], p2: Sequence[int]) -> List[Pixel]:
    """The pixels of the line from ``p1`` to ``p2``, both ends included.

    Each point is read as ``(x, y)`` from its first two items. The line takes
    one step per unit of its longer axis, with single-precision increments.
    """
    x0, y0 = p1[0], p1[1]
    dx = p2[0] - x0
    dy = p2[1] - y0
    if dx == 0 and dy == 0:
        return [(x0, y0)]
    steps = max(abs(dx), abs(dy))
    x_increment = _f32(dx / steps)
    y_increment = _f32(dy / steps)
    x, y = _f32(x0), _f32(y0)
    points = []
    for _ in range(steps + 1):
        points.append((_round(x), _round(y)))
        x = _f32(x + x_increment)
        y = _f32(y + y_increment)
    return points


def draw_line(
    image: Image,
    p1: Sequence[int],
    p2: Sequence[int],
    color: int = LINE_COLOR,
) -> int:
    """Draw the line from ``p1`` to ``p2``, shifted by ``OFFSET`` on both axes.

    Pixels that fall outside the image are skipped. Returns how many were set.
    """
    start = (p1[0] + OFFSET, p1[1] + OFFSET)
    end = (p2[0] + OFFSET, p2[1] + OFFSET)
    drawn = 0
    for x, y in line_points(start, end):
        if image.contains(x, y):
            image.put_pixel(x, y, color)
            drawn += 1
    return drawn


def draw_map(map_data: MapData, image: Image) -> int:
    """Join every stored point to its right and lower neighbours.

    The two values stored for each point are used as its coordinates.
    Returns the number of pixels set.
    """
    points = map_data.points
    drawn = 0
    for y, row in enumerate(points):
        for x, point in enumerate(row):
            if x + 1 < len(row):
                drawn += draw_line(image, point, row[x + 1])
            if y + 1 < len(points):
                drawn += draw_line(image, point, points[y + 1][x])
    return drawn