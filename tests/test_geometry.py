import math

import numpy as np
import pytest

from tinyraster import (
    Containment,
    DegenerateGeometryError,
    barycentric,
    cross,
    dot,
    normalise,
    sub,
    vec3f,
)


def test_sub_dot_cross():
    a = vec3f(1.0, 2.0, 3.0)
    b = vec3f(4.0, 5.0, 6.0)

    np.testing.assert_allclose(sub(a, b), [-3.0, -3.0, -3.0])
    assert dot(a, b) == pytest.approx(32.0)
    np.testing.assert_allclose(cross(vec3f(1, 0, 0), vec3f(0, 1, 0)), [0, 0, 1])


def test_cross_is_order_dependent():
    a = vec3f(1.0, 2.0, 3.0)
    b = vec3f(-2.0, 0.5, 4.0)

    np.testing.assert_allclose(cross(a, b), -cross(b, a))
    assert dot(cross(a, b), a) == pytest.approx(0.0, abs=1e-5)


def test_normalise_unit_length():
    n = normalise(vec3f(3.0, 0.0, -4.0))

    np.testing.assert_allclose(n, [0.6, 0.0, -0.8], rtol=1e-6)
    assert math.isclose(float(np.linalg.norm(n)), 1.0, rel_tol=1e-6)
    assert n.dtype == np.float32


def test_normalise_zero_vector_raises():
    with pytest.raises(DegenerateGeometryError):
        normalise(vec3f(0.0, 0.0, 0.0))


TRIANGLE = [(0, 0), (10, 0), (0, 10)]


def test_barycentric_inside_and_outside():
    inside = barycentric(TRIANGLE, (2, 2))
    assert inside.containment is Containment.INSIDE
    np.testing.assert_allclose(inside.coords, [0.6, 0.2, 0.2], rtol=1e-6)

    outside = barycentric(TRIANGLE, (9, 9))
    assert outside.containment is Containment.OUTSIDE
    assert (outside.coords < 0).any()


def test_barycentric_edge_is_inside():
    on_edge = barycentric(TRIANGLE, (5, 5))
    assert on_edge.containment is Containment.INSIDE
    assert on_edge.coords[0] == pytest.approx(0.0, abs=1e-7)

    assert barycentric(TRIANGLE, (0, 0)).containment is Containment.INSIDE


def test_barycentric_degenerate_triangle():
    result = barycentric([(0, 0), (5, 5), (10, 10)], (5, 5))

    assert result.containment is Containment.DEGENERATE
    assert result.coords is None


def test_barycentric_partition_of_unity():
    pts = [(3, 1), (27, 8), (11, 25)]
    for x in range(0, 30):
        for y in range(0, 30):
            result = barycentric(pts, (x, y))
            if result.containment is not Containment.INSIDE:
                continue
            assert float(result.coords.sum()) == pytest.approx(1.0, abs=1e-5)
            assert (result.coords >= 0).all()
