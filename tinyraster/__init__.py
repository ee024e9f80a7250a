from .config import RenderConfig
from .errors import (
    DegenerateGeometryError,
    FaceArityError,
    FaceIndexError,
    ImageIOError,
    ModelLoadError,
    ModelParseError,
    RenderError,
)
from .geometry import (
    Barycentric,
    Containment,
    barycentric,
    cross,
    dot,
    normalise,
    sub,
    vec3f,
)
from .image import FrameBuffer
from .model import Model, parse_obj
from .pipeline import (
    RenderMode,
    RenderStats,
    draw_flat_shaded,
    draw_wireframe,
    face_normal,
    light_intensity,
    render,
    shade_colour,
    world_to_screen,
)
from .rasterizer import bounding_box, draw_line, draw_triangle
from .types import BLACK, WHITE, Colour, LightSource

__all__ = [
    "Barycentric",
    "barycentric",
    "BLACK",
    "bounding_box",
    "Colour",
    "Containment",
    "cross",
    "DegenerateGeometryError",
    "dot",
    "draw_flat_shaded",
    "draw_line",
    "draw_triangle",
    "draw_wireframe",
    "face_normal",
    "FaceArityError",
    "FaceIndexError",
    "FrameBuffer",
    "ImageIOError",
    "light_intensity",
    "LightSource",
    "Model",
    "ModelLoadError",
    "ModelParseError",
    "normalise",
    "parse_obj",
    "render",
    "RenderConfig",
    "RenderError",
    "RenderMode",
    "RenderStats",
    "shade_colour",
    "sub",
    "vec3f",
    "WHITE",
    "world_to_screen",
]
