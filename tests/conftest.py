from __future__ import annotations

from pathlib import Path

import pytest

from tinyraster import FrameBuffer


@pytest.fixture
def buffer() -> FrameBuffer:
    return FrameBuffer(32, 32)


@pytest.fixture
def triangle_obj(tmp_path: Path) -> Path:
    path = tmp_path / "triangle.obj"
    path.write_text(
        "# one front-facing triangle covering the lower-left half\n"
        "v -1.0 -1.0 0.0\n"
        "v 1.0 -1.0 0.0\n"
        "v -1.0 1.0 0.0\n"
        "vt 0.0 0.0\n"
        "f 1/1/1 2/1/1 3/1/1\n",
        encoding="utf-8",
    )
    return path
