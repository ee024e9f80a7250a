import numpy as np
import pytest

from tinyraster import (
    FaceArityError,
    FaceIndexError,
    Model,
    ModelLoadError,
    ModelParseError,
    parse_obj,
)


def test_load_round_trip(triangle_obj):
    model = Model.load(triangle_obj)

    assert model.nverts() == 3
    assert model.nfaces() == 1
    assert model.face(0) == (0, 1, 2)
    np.testing.assert_allclose(model.vert(1), [1.0, -1.0, 0.0])


def test_parse_ignores_other_records():
    lines = [
        "# comment",
        "o object",
        "v 0 0 0",
        "vt 0.5 0.5",
        "vn 0 0 1",
        "v 1 0 0 1.0",
        "v 0 1 0",
        "g group",
        "s off",
        "f 3//1 1//1 2//1",
        "f 1 2 3",
        "",
    ]

    verts, faces = parse_obj(lines)

    assert verts.shape == (3, 3)
    assert verts.dtype == np.float32
    assert faces == ((2, 0, 1), (0, 1, 2))


def test_loader_keeps_face_arity():
    verts, faces = parse_obj(["v 0 0 0", "v 1 0 0", "v 1 1 0", "v 0 1 0", "f 1 2 3 4"])

    assert faces == ((0, 1, 2, 3),)


@pytest.mark.parametrize(
    "line",
    ["v 1.0 2.0", "v 1.0 abc 3.0", "v", "v nan 0 0", "v 0 inf 0", "v 0 0 -inf"],
)
def test_malformed_vertex(line):
    with pytest.raises(ModelParseError) as info:
        parse_obj(["v 0 0 0", line + " "], source="bad.obj")

    assert info.value.lineno == 2
    assert "bad.obj:2" in str(info.value)


@pytest.mark.parametrize("line", ["f 1 x 3", "f 1/2/3 /2/3 3", "f 1.5 2 3", "f "])
def test_malformed_face(line):
    with pytest.raises(ModelParseError):
        parse_obj(["v 0 0 0", "v 1 0 0", "v 0 1 0", line])


def test_face_index_out_of_range():
    with pytest.raises(FaceIndexError, match=r"expected \[0, 3\), got 3"):
        Model.create([(0, 0, 0), (1, 0, 0), (0, 1, 0)], [(0, 1, 3)])


def test_zero_index_is_rejected():
    # OBJ indices are 1-based, so "0" becomes -1
    with pytest.raises(FaceIndexError):
        Model.create(*parse_obj(["v 0 0 0", "v 1 0 0", "v 0 1 0", "f 0 1 2"]))


def test_missing_file(tmp_path):
    with pytest.raises(ModelLoadError):
        Model.load(tmp_path / "missing.obj")


def test_model_is_immutable(triangle_obj):
    model = Model.load(triangle_obj)

    with pytest.raises(ValueError):
        model.verts[0, 0] = 5.0
    with pytest.raises(AttributeError):
        model.faces = ()  # type: ignore[misc]


def test_triangle_requires_three_vertices():
    model = Model.create([(0, 0, 0), (1, 0, 0)], [(0, 1)])

    with pytest.raises(FaceArityError, match="face 0 has 2 vertices"):
        model.triangle(0)
