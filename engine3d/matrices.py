"""4x4 matrix operations for transforming and projecting meshes.

Matrices are indexed ``m[row][column]`` and vectors are treated as row
vectors, so a point is transformed as ``v * m``.
"""

from __future__ import annotations

import math

from engine3d.camera import Camera
from engine3d.geometry import WINDOW_HEIGHT, WINDOW_WIDTH, Mesh, Vec3

Matrix = tuple[tuple[float, float, float, float], ...]

_SIZE = range(4)


def _build(cells: dict[tuple[int, int], float]) -> Matrix:
    return tuple(tuple(float(cells.get((r, c), 0.0)) for c in _SIZE) for r in _SIZE)


def identity() -> Matrix:
    """Return the 4x4 identity matrix."""
    return _build({(i, i): 1.0 for i in _SIZE})


def mult_matrix_matrix(m1: Matrix, m2: Matrix) -> Matrix:
    """Return the product in which ``m2`` is applied first, then ``m1``."""
    return tuple(
        tuple(sum(m1[k][i] * m2[j][k] for k in _SIZE) for i in _SIZE) for j in _SIZE
    )


def mult_matrix_vector(vector: Vec3, m: Matrix) -> Vec3:
    """Transform a point, dividing by ``w`` when it is non-zero."""
    x, y, z = vector
    ox = x * m[0][0] + y * m[1][0] + z * m[2][0] + m[3][0]
    oy = x * m[0][1] + y * m[1][1] + z * m[2][1] + m[3][1]
    oz = x * m[0][2] + y * m[1][2] + z * m[2][2] + m[3][2]
    w = x * m[0][3] + y * m[1][3] + z * m[2][3] + m[3][3]
    if w != 0.0:
        return Vec3(ox / w, oy / w, oz / w)
    return Vec3(ox, oy, oz)


def mult_matrix_constant(m: Matrix, c: float) -> Matrix:
    """Return ``m`` with every element multiplied by ``c``."""
    return tuple(tuple(value * c for value in row) for row in m)


def scale_mesh(vec: Vec3, mesh: Mesh) -> Mesh:
    """Scale every vertex component-wise by ``vec``."""
    return mesh.map_points(lambda p: Vec3(p.x * vec.x, p.y * vec.y, p.z * vec.z))


def degrees_to_radians(degrees: float) -> float:
    return degrees * 0.0174533


def radians_to_degrees(radians: float) -> float:
    return radians * 57.2958


def mult_mesh_matrix(m: Matrix, mesh: Mesh) -> Mesh:
    """Transform every vertex of ``mesh`` by ``m``."""
    return mesh.map_points(lambda p: mult_matrix_vector(p, m))


def create_projection_matrix(cam: Camera) -> Matrix:
    """Build the perspective projection matrix for ``cam``."""
    near = cam.znear
    far = cam.zfar
    aspect_ratio = WINDOW_HEIGHT / WINDOW_WIDTH
    fov_rad = 1.0 / math.tan(cam.theta * 0.5 / 180.0 * 3.14159)
    return _build(
        {
            (0, 0): aspect_ratio * fov_rad,
            (1, 1): fov_rad,
            (2, 2): far / (far - near),
            (3, 2): (-far * near) / (far - near),
            (2, 3): 1.0,
        }
    )


def _axis_rotation(angle: float, a: int, b: int, sign: float) -> Matrix:
    if angle == 0.0:
        return identity()
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    cells = {(i, i): 1.0 for i in _SIZE}
    cells[(a, a)] = cos_a
    cells[(b, b)] = cos_a
    cells[(a, b)] = -sign * sin_a
    cells[(b, a)] = sign * sin_a
    return _build(cells)


def create_rotation_matrix(rotation: Vec3) -> Matrix:
    """Build the combined rotation for per-axis angles given in degrees."""
    x = degrees_to_radians(rotation.x)
    y = degrees_to_radians(rotation.y)
    z = degrees_to_radians(rotation.z)

    rot_x = _axis_rotation(x, 1, 2, 1.0)
    rot_y = _axis_rotation(y, 0, 2, -1.0)
    rot_z = _axis_rotation(z, 0, 1, 1.0)

    return mult_matrix_matrix(mult_matrix_matrix(rot_z, rot_y), rot_x)


def translate_mesh(vec: Vec3, mesh: Mesh) -> Mesh:
    """Offset every vertex of ``mesh`` by ``vec``."""
    return mesh.map_points(lambda p: p + vec)