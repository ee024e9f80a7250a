from __future__ import annotations  # tolerate "subscriptable 'type' for < 3.9

from typing import NamedTuple, Tuple, TypeAlias

import numpy as np
from jaxtyping import Float, Integer, UInt8

__all__ = [
    "Canvas",
    "Colour",
    "FaceIndices",
    "LightSource",
    "Triangle2D",
    "Vec2i",
    "Vec3f",
    "Vertices",
    "BLACK",
    "WHITE",
]

Vec2i: TypeAlias = Integer[np.ndarray, "2"]
# Used both as a point in world space and as a free vector (normal, light
# direction). Subtracting two points gives a vector; cross/dot are only
# meaningful on such vectors.
Vec3f: TypeAlias = Float[np.ndarray, "3"]
# 3 vertices, with each vertex defined in Vec2i in screen(canvas) space
Triangle2D: TypeAlias = Integer[np.ndarray, "3 2"]

# each vertex is defined by 3 float numbers, x-y-z
Vertices: TypeAlias = Float[np.ndarray, "vertices 3"]
# faces are not required to be triangles by the loader
FaceIndices: TypeAlias = Tuple[Tuple[int, ...], ...]

# row 0 is the bottom row while rasterising; see `FrameBuffer.flip_vertically`
Canvas: TypeAlias = UInt8[np.ndarray, "height width 4"]


class Colour(NamedTuple):
    """RGBA colour, 8 bits per channel."""

    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def rgba(cls, r: int, g: int, b: int, a: int = 255) -> "Colour":
        for name, value in zip("rgba", (r, g, b, a)):
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name} out of range [0, 255], got {value}")

        return cls(int(r), int(g), int(b), int(a))

    @classmethod
    def grey(cls, intensity: float) -> "Colour":
        """Opaque grey with every colour channel set to
        `floor(intensity * 255)`.

        `intensity` is expected in (0, 1]; the value is capped at 255 so that
        float round-off just above 1 does not overflow the channel.
        """
        value = min(int(intensity * 255), 255)

        return cls.rgba(value, value, value, 255)

    @classmethod
    def from_hex(cls, value: str) -> "Colour":
        """Parse `RRGGBB` or `RRGGBBAA`, with or without a leading `#`."""
        text = value.strip().lstrip("#")
        if len(text) not in (6, 8):
            raise ValueError(f"expected RRGGBB or RRGGBBAA, got {value!r}")
        channels = [int(text[i : i + 2], 16) for i in range(0, len(text), 2)]

        return cls.rgba(*channels)


WHITE = Colour(255, 255, 255, 255)
BLACK = Colour(0, 0, 0, 255)


def _frozen(*values: float) -> Vec3f:
    array = np.array(values, dtype=np.float32)
    array.setflags(write=False)

    return array


class LightSource(NamedTuple):
    direction: Vec3f = _frozen(0.0, 0.0, -1.0)
    """Direction the light travels, in world space. The default points into
    the screen, so faces whose normal points towards -z are lit. The default
    array is shared and read-only.
    """
