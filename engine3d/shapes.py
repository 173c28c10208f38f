"""Built-in meshes."""

from __future__ import annotations

from engine3d.geometry import Mesh, Triangle, Vec3


def _mesh(faces: list[tuple[tuple[float, float, float], ...]]) -> Mesh:
    return Mesh(Triangle(tuple(Vec3(*p) for p in face)) for face in faces)


def cube() -> Mesh:
    """Return a unit cube made of 12 triangles."""
    return _mesh(
        [
            # south
            ((0, 0, 0), (0, 1, 0), (1, 1, 0)),
            ((0, 0, 0), (1, 1, 0), (1, 0, 0)),
            # east
            ((1, 0, 0), (1, 1, 0), (1, 1, 1)),
            ((1, 0, 0), (1, 1, 1), (1, 0, 1)),
            # north
            ((1, 0, 1), (1, 1, 1), (0, 1, 1)),
            ((1, 0, 1), (0, 1, 1), (0, 0, 1)),
            # west
            ((0, 0, 1), (0, 1, 1), (0, 1, 0)),
            ((0, 0, 1), (0, 1, 0), (0, 0, 0)),
            # top
            ((0, 1, 0), (0, 1, 1), (1, 1, 1)),
            ((0, 1, 0), (1, 1, 1), (1, 1, 0)),
            # bottom
            ((1, 0, 1), (0, 0, 1), (0, 0, 0)),
            ((1, 0, 1), (0, 0, 0), (1, 0, 0)),
        ]
    )


def tetrahedron() -> Mesh:
    """Return a tetrahedron made of 4 triangles."""
    return _mesh(
        [
            ((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.5, 0.0, 1.0)),
            ((0.0, 0.0, 0.0), (0.5, 1.0, 0.5), (1.0, 0.0, 0.0)),
            ((1.0, 0.0, 0.0), (0.5, 1.0, 0.5), (0.5, 0.0, 1.0)),
            ((0.5, 0.0, 1.0), (0.5, 1.0, 0.5), (0.0, 0.0, 0.0)),
        ]
    )