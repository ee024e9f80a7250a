from __future__ import annotations  # tolerate "subscriptable 'type' for < 3.9

from typing import Sequence, Tuple

import numpy as np

from .geometry import PointLike, barycentric_weights
from .image import FrameBuffer
from .types import Colour

__all__ = ["bounding_box", "draw_line", "draw_triangle"]


def draw_line(
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    buffer: FrameBuffer,
    colour: Colour,
) -> int:
    """Draw a line with Bresenham's integer algorithm.

    The result is an 8-connected path of `max(|dx|, |dy|) + 1` pixels and does
    not depend on the order of the endpoints. Pixels outside the buffer are
    skipped.

    Returns: number of pixels visited.
    """
    x0, y0, x1, y1 = int(x0), int(y0), int(x1), int(y1)

    # iterate along the longer axis so near-vertical lines have no gaps
    steep = abs(x0 - x1) < abs(y0 - y1)
    if steep:
        x0, y0 = y0, x0
        x1, y1 = y1, x1
    if x0 > x1:
        x0, x1 = x1, x0
        y0, y1 = y1, y0

    dx = x1 - x0
    dy = y1 - y0
    derror2 = abs(dy) * 2
    error2 = 0
    y_step = 1 if y1 > y0 else -1
    y = y0

    for x in range(x0, x1 + 1):
        if steep:
            buffer.set(y, x, colour)
        else:
            buffer.set(x, y, colour)
        error2 += derror2
        if error2 > dx:
            y += y_step
            error2 -= dx * 2

    return dx + 1


def bounding_box(
    pts: Sequence[PointLike],
    width: int,
    height: int,
) -> Tuple[int, int, int, int]:
    """Axis-aligned bounding box of `pts` clamped to the buffer.

    Returns: `(min_x, min_y, max_x, max_y)`, all inclusive.
    """
    min_x, min_y = width - 1, height - 1
    max_x, max_y = 0, 0
    for x, y in pts:
        min_x = max(min(min_x, int(x)), 0)
        min_y = max(min(min_y, int(y)), 0)
        max_x = min(max(max_x, int(x)), width - 1)
        max_y = min(max(max_y, int(y)), height - 1)

    return min_x, min_y, max_x, max_y


def draw_triangle(
    pts: Sequence[PointLike],
    buffer: FrameBuffer,
    colour: Colour,
) -> int:
    """Fill a screen-space triangle with a flat colour.

    Every pixel of the clamped bounding box whose barycentric coordinates are
    all non-negative is set, so pixels exactly on an edge are included.
    Triangles with zero screen area draw nothing.

    Returns: number of pixels filled.
    """
    triangle = np.asarray(pts, dtype=np.int64).reshape(3, 2)
    min_x, min_y, max_x, max_y = bounding_box(triangle, buffer.width, buffer.height)

    xs, ys = np.meshgrid(np.arange(min_x, max_x + 1), np.arange(min_y, max_y + 1))
    xs, ys = xs.flatten(), ys.flatten()

    weights = barycentric_weights(triangle, xs, ys)
    if weights is None:
        return 0

    mask = (weights >= 0).all(axis=1)
    buffer.data[ys[mask], xs[mask]] = colour

    return int(mask.sum())
