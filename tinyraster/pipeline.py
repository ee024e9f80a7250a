from __future__ import annotations  # tolerate "subscriptable 'type' for < 3.9

import enum
from typing import NamedTuple, Optional, Tuple

import numpy as np
from jaxtyping import Float

from .errors import DegenerateGeometryError
from .geometry import cross, dot, normalise, sub
from .image import FrameBuffer
from .log import get_logger
from .model import Model
from .rasterizer import draw_line, draw_triangle
from .types import WHITE, Colour, LightSource, Vec3f

__all__ = [
    "RenderMode",
    "RenderStats",
    "draw_flat_shaded",
    "draw_wireframe",
    "face_normal",
    "light_intensity",
    "render",
    "shade_colour",
    "world_to_screen",
]


class RenderMode(enum.Enum):
    WIREFRAME = "wireframe"
    """Edges of every face, no culling or shading."""
    FLAT = "flat"
    """Filled triangles, one colour per face from the light intensity."""


class RenderStats(NamedTuple):
    faces_drawn: int = 0
    faces_culled: int = 0
    faces_degenerate: int = 0
    pixels: int = 0


def world_to_screen(vertex: Vec3f, width: int, height: int) -> Tuple[int, int]:
    """Map world coordinates in [-1, 1] onto the buffer, truncating towards
    zero. z is ignored.
    """
    x = int((float(vertex[0]) + 1.0) * width / 2.0)
    y = int((float(vertex[1]) + 1.0) * height / 2.0)

    return x, y


def face_normal(world: Float[np.ndarray, "3 3"]) -> Vec3f:
    """Unit normal `(v2 - v0) x (v1 - v0)`.

    The vertex order decides which side is the front. Raises
    `DegenerateGeometryError` if the vertices are collinear.
    """
    v0, v1, v2 = world
    return normalise(cross(sub(v2, v0), sub(v1, v0)))


def light_intensity(normal: Vec3f, light_direction: Vec3f) -> float:
    return dot(normal, light_direction)


def shade_colour(intensity: float) -> Colour:
    """Flat-shading colour for a lit face; `intensity` must be in (0, 1]."""
    return Colour.grey(intensity)


def draw_wireframe(
    model: Model,
    buffer: FrameBuffer,
    colour: Colour = WHITE,
) -> RenderStats:
    """Draw the three edges of every face."""
    width, height = buffer.width, buffer.height
    pixels = 0

    for idx in range(model.nfaces()):
        screen = [world_to_screen(v, width, height) for v in model.triangle(idx)]
        for i in range(3):
            (x0, y0), (x1, y1) = screen[i], screen[(i + 1) % 3]
            pixels += draw_line(x0, y0, x1, y1, buffer, colour)

    return RenderStats(faces_drawn=model.nfaces(), pixels=pixels)


def draw_flat_shaded(
    model: Model,
    buffer: FrameBuffer,
    light: LightSource = LightSource(),
) -> RenderStats:
    """Fill every face that faces the light with a grey proportional to the
    light intensity.

    Faces with `intensity <= 0` are culled. There is no depth buffer, so
    overlapping faces are drawn in face order.
    """
    log = get_logger()
    width, height = buffer.width, buffer.height
    drawn = culled = degenerate = pixels = 0

    for idx in range(model.nfaces()):
        world = model.triangle(idx)
        try:
            normal = face_normal(world)
        except DegenerateGeometryError:
            log.debug("face %d is degenerate, skipped", idx)
            degenerate += 1
            continue

        intensity = light_intensity(normal, light.direction)
        if intensity <= 0:
            culled += 1
            continue

        screen = [world_to_screen(v, width, height) for v in world]
        pixels += draw_triangle(screen, buffer, shade_colour(intensity))
        drawn += 1

    return RenderStats(
        faces_drawn=drawn,
        faces_culled=culled,
        faces_degenerate=degenerate,
        pixels=pixels,
    )


def render(
    model: Model,
    buffer: FrameBuffer,
    mode: RenderMode = RenderMode.FLAT,
    light: Optional[LightSource] = None,
    colour: Colour = WHITE,
) -> RenderStats:
    """Render `model` into `buffer` in the given mode.

    Parameters:
      - model: mesh with world coordinates in [-1, 1].
      - buffer: target, drawn with a bottom-left origin.
      - mode: `RenderMode.WIREFRAME` or `RenderMode.FLAT`.
      - light: light for `FLAT` mode, defaults to `LightSource()`.
      - colour: line colour for `WIREFRAME` mode.
    """
    if mode == RenderMode.WIREFRAME:
        stats = draw_wireframe(model, buffer, colour)
    elif mode == RenderMode.FLAT:
        stats = draw_flat_shaded(model, buffer, light if light is not None else LightSource())
    else:
        raise ValueError(f"Unknown render mode {mode}")

    get_logger().info(
        "rendered %s: %d faces drawn, %d culled, %d degenerate, %d pixels",
        mode.value,
        stats.faces_drawn,
        stats.faces_culled,
        stats.faces_degenerate,
        stats.pixels,
    )

    return stats
