from __future__ import annotations  # tolerate "subscriptable 'type' for < 3.9

import enum
from typing import NamedTuple, Optional, Sequence, Union

import numpy as np
from jaxtyping import Float, Integer

from .errors import DegenerateGeometryError
from .types import Vec3f

__all__ = [
    "Barycentric",
    "Containment",
    "barycentric",
    "barycentric_weights",
    "cross",
    "dot",
    "normalise",
    "sub",
    "vec3f",
]

PointLike = Union[Sequence[int], Integer[np.ndarray, "2"]]


def vec3f(x: float, y: float, z: float) -> Vec3f:
    return np.array((x, y, z), dtype=np.float32)


def sub(a: Vec3f, b: Vec3f) -> Vec3f:
    """Componentwise `a - b`."""
    return np.subtract(a, b, dtype=np.float32)


def dot(a: Vec3f, b: Vec3f) -> float:
    return float(np.dot(a, b))


def cross(a: Vec3f, b: Vec3f) -> Vec3f:
    """Cross product `a x b`. Not commutative: swapping the operands flips the
    resulting normal.
    """
    return vec3f(
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def normalise(vector: Vec3f) -> Vec3f:
    """Scale vector to unit length.

    Raises `DegenerateGeometryError` for a zero-length vector, e.g. the normal
    of a triangle whose vertices are collinear.
    """
    length = float(np.linalg.norm(vector))
    if length == 0.0:
        raise DegenerateGeometryError(f"cannot normalise zero-length vector {vector}")

    result: Vec3f = (np.asarray(vector, dtype=np.float32) / length).astype(np.float32)
    assert isinstance(result, Float[np.ndarray, "3"])

    return result


class Containment(enum.Enum):
    """Where a point lies relative to a screen-space triangle."""

    OUTSIDE = 0
    INSIDE = 1
    """Inside or exactly on an edge."""
    DEGENERATE = 2
    """The triangle has (near) zero area; no point can be inside it."""


class Barycentric(NamedTuple):
    containment: Containment
    coords: Optional[Vec3f]
    """`(w0, w1, w2)` weights of the triangle's vertices; None when the
    triangle is degenerate.
    """


def barycentric_weights(
    pts: Integer[np.ndarray, "3 2"],
    xs: Integer[np.ndarray, "n"],
    ys: Integer[np.ndarray, "n"],
) -> Optional[Float[np.ndarray, "n 3"]]:
    """Barycentric coordinates of a batch of points, or None if the triangle
    is degenerate.

    Uses the cross product of `(x2-x0, x1-x0, x0-px)` and `(y2-y0, y1-y0,
    y0-py)`; its z component is twice the signed area of the triangle and
    does not depend on the point, so degeneracy (`|z| < 1`) is decided once
    for the whole batch.
    """
    (x0, y0), (x1, y1), (x2, y2) = (tuple(int(c) for c in pt) for pt in pts)

    uz = (x2 - x0) * (y1 - y0) - (x1 - x0) * (y2 - y0)
    if abs(uz) < 1:
        return None

    xs = np.asarray(xs, dtype=np.int64)
    ys = np.asarray(ys, dtype=np.int64)
    ux = (x1 - x0) * (y0 - ys) - (x0 - xs) * (y1 - y0)
    uy = (x0 - xs) * (y2 - y0) - (x2 - x0) * (y0 - ys)

    weights = np.empty((xs.shape[0], 3), dtype=np.float32)
    weights[:, 0] = 1.0 - (ux + uy) / uz
    weights[:, 1] = uy / uz
    weights[:, 2] = ux / uz

    return weights


def barycentric(pts: Sequence[PointLike], p: PointLike) -> Barycentric:
    """Barycentric coordinates of integer point `p` with respect to the
    integer triangle `pts`.

    Parameters:
      - pts: 3 screen-space vertices.
      - p: the point to classify.

    Returns: `Barycentric` with `Containment.DEGENERATE` (and no coordinates)
      when the triangle has zero screen area, otherwise `INSIDE` when all
      three coordinates are non-negative and `OUTSIDE` when any is negative.
    """
    triangle = np.asarray(pts, dtype=np.int64).reshape(3, 2)
    weights = barycentric_weights(
        triangle,
        np.array([int(p[0])]),
        np.array([int(p[1])]),
    )
    if weights is None:
        return Barycentric(Containment.DEGENERATE, None)

    coords: Vec3f = weights[0]
    if (coords < 0).any():
        return Barycentric(Containment.OUTSIDE, coords)

    return Barycentric(Containment.INSIDE, coords)
