from __future__ import annotations  # tolerate "subscriptable 'type' for < 3.9

import math
from pathlib import Path
from typing import Iterable, List, NamedTuple, Optional, Tuple, Union

import numpy as np
from jaxtyping import Float

from .errors import FaceArityError, FaceIndexError, ModelLoadError, ModelParseError
from .log import get_logger
from .types import FaceIndices, Vec3f, Vertices

__all__ = ["Model", "parse_obj"]


def _parse_vertex(line: str, lineno: int, source: Optional[str]) -> Tuple[float, float, float]:
    tokens = line.split()[1:]
    if len(tokens) < 3:
        raise ModelParseError(
            f"vertex needs 3 coordinates, got {len(tokens)}", lineno, source
        )
    try:
        x, y, z = (float(token) for token in tokens[:3])
    except ValueError as e:
        raise ModelParseError(f"invalid vertex coordinate: {e}", lineno, source) from e
    if not all(math.isfinite(c) for c in (x, y, z)):
        raise ModelParseError(f"vertex coordinates must be finite, got {x} {y} {z}", lineno, source)

    return x, y, z


def _parse_face(line: str, lineno: int, source: Optional[str]) -> Tuple[int, ...]:
    tokens = line.split()[1:]
    if not tokens:
        raise ModelParseError("face has no vertex indices", lineno, source)

    face: List[int] = []
    for token in tokens:
        # v, v/vt, v//vn and v/vt/vn: only the vertex index is used
        index = token.split("/")[0]
        try:
            face.append(int(index) - 1)
        except ValueError as e:
            raise ModelParseError(f"invalid face index {token!r}", lineno, source) from e

    return tuple(face)


def parse_obj(
    lines: Iterable[str],
    source: Optional[str] = None,
) -> Tuple[Vertices, FaceIndices]:
    """Parse the `v` and `f` records of a Wavefront OBJ file.

    Parameters:
      - lines: lines of the file.
      - source: name used in error messages.

    Returns: vertices as a float32 `(n, 3)` array and faces as 0-based index
      tuples. All other record types are ignored.
    """
    verts: List[Tuple[float, float, float]] = []
    faces: List[Tuple[int, ...]] = []

    for lineno, line in enumerate(lines, start=1):
        if line.startswith("v "):
            verts.append(_parse_vertex(line, lineno, source))
        elif line.startswith("f "):
            faces.append(_parse_face(line, lineno, source))

    vertices: Vertices = np.array(verts, dtype=np.float32).reshape(-1, 3)

    return vertices, tuple(faces)


class Model(NamedTuple):
    """Triangle mesh, loaded once and read-only afterwards.

    Faces are not required to be triangles here; the shading pipeline uses
    the first three indices of each face.
    """

    verts: Vertices
    faces: FaceIndices

    @classmethod
    def create(cls, verts: Iterable[Iterable[float]], faces: Iterable[Iterable[int]]) -> "Model":
        """Build a model from plain sequences, freezing the vertex array and
        checking that every face index is in range.
        """
        array = np.array(list(verts), dtype=np.float32).reshape(-1, 3)
        array.setflags(write=False)
        assert isinstance(array, Vertices), f"{array}"

        model = cls(verts=array, faces=tuple(tuple(int(i) for i in face) for face in faces))
        model.value_checks()

        return model

    @classmethod
    def load(cls, filename: Union[str, Path]) -> "Model":
        """Load a model from an OBJ file.

        Raises `ModelLoadError` if the file cannot be read, `ModelParseError`
        on a malformed record and `FaceIndexError` on a dangling index.
        """
        try:
            with open(filename, "r", encoding="utf-8") as file:
                verts, faces = parse_obj(file, source=str(filename))
        except (OSError, UnicodeDecodeError) as e:
            raise ModelLoadError(f"cannot read model {filename}: {e}") from e

        model = cls.create(verts, faces)
        get_logger().info(
            "loaded %s: %d vertices, %d faces", filename, model.nverts(), model.nfaces()
        )

        return model

    def value_checks(self) -> None:
        """Check that face indices are in bound, i.e. in `[0, nverts)`."""
        n = self.nverts()
        for face_idx, face in enumerate(self.faces):
            for index in face:
                if not 0 <= index < n:
                    raise FaceIndexError(
                        f"faces out of bound, expected [0, {n}), got {index}"
                        f" (face {face_idx})"
                    )

    def nverts(self) -> int:
        return int(self.verts.shape[0])

    def nfaces(self) -> int:
        return len(self.faces)

    def vert(self, i: int) -> Vec3f:
        return self.verts[i]

    def face(self, idx: int) -> Tuple[int, ...]:
        return self.faces[idx]

    def triangle(self, idx: int) -> Float[np.ndarray, "3 3"]:
        """World-space vertices of face `idx`, first three indices only."""
        face = self.faces[idx]
        if len(face) < 3:
            raise FaceArityError(f"face {idx} has {len(face)} vertices, expected 3")

        return self.verts[list(face[:3])]
