"""Exceptions raised by tinyraster.

Every failure is fatal to a render run; the CLI catches `RenderError`, logs
it and exits with a non-zero status.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "DegenerateGeometryError",
    "FaceArityError",
    "FaceIndexError",
    "ImageIOError",
    "ModelLoadError",
    "ModelParseError",
    "RenderError",
]


class RenderError(Exception):
    """Base class for all tinyraster errors."""


class ModelLoadError(RenderError, OSError):
    """Mesh file could not be opened or read."""


class ModelParseError(RenderError, ValueError):
    """A `v` or `f` line of a mesh file is malformed."""

    def __init__(self, message: str, lineno: int, source: Optional[str] = None):
        self.lineno = lineno
        self.source = source
        where = f"{source}:{lineno}" if source else f"line {lineno}"
        super().__init__(f"{where}: {message}")


class FaceIndexError(RenderError, IndexError):
    """A face references a vertex that does not exist."""


class FaceArityError(RenderError, ValueError):
    """A face has fewer than three vertices and cannot be drawn."""


class DegenerateGeometryError(RenderError, ValueError):
    """A zero-length vector was normalised."""


class ImageIOError(RenderError, OSError):
    """An image could not be written or read."""
