from __future__ import annotations

from pathlib import Path
from typing import NamedTuple

from .pipeline import RenderMode
from .types import WHITE, Colour, LightSource

__all__ = ["RenderConfig"]

DEFAULT_MODEL = Path("obj/african_head.obj")
DEFAULT_OUTPUT = Path("output.tga")
WIDTH = 800
HEIGHT = 800


class RenderConfig(NamedTuple):
    """Everything a render run needs. Defaults reproduce the fixed
    model/output/size of the plain `tinyraster` invocation.
    """

    model_path: Path = DEFAULT_MODEL
    output_path: Path = DEFAULT_OUTPUT
    width: int = WIDTH
    height: int = HEIGHT
    mode: RenderMode = RenderMode.FLAT
    light: LightSource = LightSource()
    colour: Colour = WHITE
    """Line colour in wireframe mode."""
    rle: bool = True
    """Run-length encode the output TGA."""
