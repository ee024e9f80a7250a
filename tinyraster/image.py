from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from .errors import ImageIOError
from .log import get_logger
from .types import BLACK, Canvas, Colour

__all__ = ["FrameBuffer"]

PathLike = Union[str, Path]


class FrameBuffer:
    """RGBA pixel buffer that rasterisers draw into.

    Pixels are addressed as `(x, y)` with the origin at the bottom-left while
    drawing. Image files use a top-left origin, so `flip_vertically` must be
    called before `write_tga_file`.
    """

    def __init__(self, width: int, height: int, background: Colour = BLACK):
        if width <= 0 or height <= 0:
            raise ValueError(f"buffer size must be positive, got {width}x{height}")

        self.data: Canvas = np.empty((height, width, 4), dtype=np.uint8)
        self.data[...] = background

    @classmethod
    def from_array(cls, data: np.ndarray) -> "FrameBuffer":
        """Wrap a copy of an existing `(height, width, 4)` uint8 array."""
        array = np.asarray(data)
        if array.ndim != 3 or array.shape[2] != 4:
            raise ValueError(f"expected (height, width, 4) array, got {array.shape}")

        buffer = cls.__new__(cls)
        buffer.data = array.astype(np.uint8, copy=True)

        return buffer

    @property
    def width(self) -> int:
        return self.data.shape[1]

    @property
    def height(self) -> int:
        return self.data.shape[0]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set(self, x: int, y: int, colour: Colour) -> bool:
        """Set one pixel. Out-of-range coordinates are ignored and return
        False.
        """
        if not self.in_bounds(x, y):
            return False

        self.data[y, x] = colour
        return True

    def get(self, x: int, y: int) -> Colour:
        if not self.in_bounds(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} buffer")

        return Colour(*(int(c) for c in self.data[y, x]))

    def clear(self, colour: Colour = BLACK) -> None:
        self.data[...] = colour

    def flip_vertically(self) -> None:
        """Reverse the row order. Applying it twice restores the buffer."""
        self.data = np.ascontiguousarray(self.data[::-1, ...])

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.data)

    def write_tga_file(self, path: PathLike, rle: bool = True) -> None:
        """Write the buffer, row 0 first, as a 32-bit TGA.

        Parameters:
          - path: destination file.
          - rle: compress with run-length encoding.
        """
        compression = "tga_rle" if rle else None
        try:
            self.to_image().save(path, format="TGA", compression=compression)
        except OSError as e:
            raise ImageIOError(f"cannot write {path}: {e}") from e

        get_logger().info(
            "wrote %dx%d image to %s (rle=%s)", self.width, self.height, path, rle
        )

    @classmethod
    def read_tga_file(cls, path: PathLike) -> "FrameBuffer":
        """Read an image file into a buffer with the bottom-left origin used
        while drawing, i.e. the inverse of `flip_vertically` +
        `write_tga_file`.
        """
        try:
            with Image.open(path) as image:
                data = np.array(image.convert("RGBA"), dtype=np.uint8)
        except OSError as e:
            raise ImageIOError(f"cannot read {path}: {e}") from e

        buffer = cls.from_array(data)
        buffer.flip_vertically()

        return buffer
