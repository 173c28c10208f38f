import math

import pytest

from engine3d.camera import Camera
from engine3d.geometry import Mesh, Triangle, Vec3
from engine3d.matrices import (
    create_projection_matrix,
    create_rotation_matrix,
    degrees_to_radians,
    identity,
    mult_matrix_constant,
    mult_matrix_matrix,
    mult_matrix_vector,
    mult_mesh_matrix,
    radians_to_degrees,
    scale_mesh,
    translate_mesh,
)


def _translation(dx, dy, dz):
    rows = [list(row) for row in identity()]
    rows[3][0], rows[3][1], rows[3][2] = dx, dy, dz
    return tuple(tuple(r) for r in rows)


def _scaling(sx, sy, sz):
    rows = [list(row) for row in identity()]
    rows[0][0], rows[1][1], rows[2][2] = sx, sy, sz
    return tuple(tuple(r) for r in rows)


def _coords(p):
    return (p.x, p.y, p.z)


def _sample_mesh():
    return Mesh(
        [
            Triangle((Vec3(1, 2, 3), Vec3(-1, 0.5, 2), Vec3(0, 0, 1))),
            Triangle((Vec3(4, 4, 4), Vec3(2, 3, 1), Vec3(-2, 1, 0.5))),
        ]
    )


def test_identity_is_neutral_for_products():
    m = _translation(1.0, 2.0, 3.0)
    assert mult_matrix_matrix(identity(), m) == m
    assert mult_matrix_matrix(m, identity()) == m


def test_identity_leaves_vector_unchanged():
    v = Vec3(1.5, -2.0, 7.0)
    assert mult_matrix_vector(v, identity()) == v


def test_product_applies_second_matrix_first():
    a = _translation(1.0, 2.0, 3.0)
    b = _scaling(2.0, 3.0, 4.0)
    v = Vec3(1.0, -1.0, 0.5)
    combined = mult_matrix_vector(v, mult_matrix_matrix(a, b))
    # scaled first to (2, -3, 2), then translated
    assert _coords(combined) == pytest.approx((3.0, -1.0, 5.0))
    stepwise = mult_matrix_vector(mult_matrix_vector(v, b), a)
    assert _coords(stepwise) == pytest.approx((3.0, -1.0, 5.0))


def test_vector_is_divided_by_w():
    m = mult_matrix_constant(identity(), 2.0)
    result = mult_matrix_vector(Vec3(3.0, 4.0, 5.0), m)
    assert _coords(result) == pytest.approx((3.0, 4.0, 5.0))


def test_zero_w_is_not_divided():
    zero = mult_matrix_constant(identity(), 0.0)
    assert mult_matrix_vector(Vec3(1.0, 2.0, 3.0), zero) == Vec3(0.0, 0.0, 0.0)


def test_mult_matrix_constant_round_trip():
    m = _translation(1.0, -2.0, 3.5)
    assert mult_matrix_constant(mult_matrix_constant(m, 2.0), 0.5) == m


def test_scale_mesh_by_one_is_unchanged():
    mesh = _sample_mesh()
    assert scale_mesh(Vec3(1, 1, 1), mesh) == mesh


def test_scale_mesh_round_trip():
    mesh = _sample_mesh()
    back = scale_mesh(Vec3(0.5, 0.25, 0.125), scale_mesh(Vec3(2, 4, 8), mesh))
    assert back == mesh


def test_translate_mesh_round_trip():
    mesh = _sample_mesh()
    moved = translate_mesh(Vec3(4.0, 3.0, 5.0), mesh)
    assert moved != mesh
    assert translate_mesh(Vec3(-4.0, -3.0, -5.0), moved) == mesh


def test_mult_mesh_matrix_matches_translate_mesh():
    mesh = _sample_mesh()
    via_matrix = mult_mesh_matrix(_translation(4.0, 3.0, 5.0), mesh)
    direct = translate_mesh(Vec3(4.0, 3.0, 5.0), mesh)
    assert _coords(via_matrix.tris[0].p[0]) == pytest.approx((5.0, 5.0, 8.0))
    assert _coords(via_matrix.tris[1].p[2]) == pytest.approx((2.0, 4.0, 5.5))
    assert len(via_matrix) == len(direct) == 2
    for t1, t2 in zip(via_matrix, direct):
        for p1, p2 in zip(t1, t2):
            assert _coords(p1) == pytest.approx(_coords(p2), abs=1e-9)


def test_degree_radian_conversions_round_trip():
    for angle in (0.0, 45.0, 90.0, 180.0, -270.0):
        assert radians_to_degrees(degrees_to_radians(angle)) == pytest.approx(angle, rel=1e-4)
    assert degrees_to_radians(180.0) == pytest.approx(math.pi, rel=1e-5)


def test_zero_rotation_is_identity():
    assert create_rotation_matrix(Vec3(0.0, 0.0, 0.0)) == identity()


def test_rotation_preserves_length():
    m = create_rotation_matrix(Vec3(30.0, 45.0, 60.0))
    v = Vec3(1.0, 2.0, 3.0)
    r = mult_matrix_vector(v, m)
    length = lambda p: math.sqrt(p.x ** 2 + p.y ** 2 + p.z ** 2)
    assert length(r) == pytest.approx(length(v), rel=1e-9)


def test_rotation_is_undone_by_opposite_angle():
    forward = create_rotation_matrix(Vec3(0.0, 0.0, 37.0))
    backward = create_rotation_matrix(Vec3(0.0, 0.0, -37.0))
    product = mult_matrix_matrix(forward, backward)
    expected = [
        [1.0, 0.0, 0.0, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ]
    assert len(product) == 4
    for row, expected_row in zip(product, expected):
        assert list(row) == pytest.approx(expected_row, abs=1e-9)


def test_projection_matrix_layout():
    cam = Camera()
    m = create_projection_matrix(cam)
    assert m[2][3] == 1.0
    assert m[3][3] == 0.0
    assert m[0][0] == pytest.approx(m[1][1] * 1000 / 1200)


def test_projection_maps_clip_planes():
    cam = Camera()
    m = create_projection_matrix(cam)
    near = mult_matrix_vector(Vec3(0.0, 0.0, cam.znear), m)
    far = mult_matrix_vector(Vec3(0.0, 0.0, cam.zfar), m)
    assert near.z == pytest.approx(0.0, abs=1e-9)
    assert far.z == pytest.approx(1.0)