from __future__ import annotations

import numpy as np

from tinyraster import Colour, FrameBuffer

RED = Colour(255, 0, 0, 255)


def plotted(buffer: FrameBuffer, colour: Colour = RED) -> set[tuple[int, int]]:
    """Pixels of `buffer` equal to `colour`, as (x, y) pairs."""
    ys, xs = np.nonzero((buffer.data == np.array(colour, dtype=np.uint8)).all(axis=2))
    return {(int(x), int(y)) for x, y in zip(xs, ys)}
