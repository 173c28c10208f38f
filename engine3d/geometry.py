"""Core geometric types: points, triangles and meshes."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 1000


@dataclass(frozen=True)
class Vec3:
    """A point or direction in three-dimensional space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def cross(self, other: Vec3) -> Vec3:
        """Return the cross product ``self x other``."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Vec3) -> int:
        """Return the dot product, truncated toward zero to an integer."""
        return int(self.x * other.x + self.y * other.y + self.z * other.z)


@dataclass(frozen=True)
class Triangle:
    """Three vertices, in winding order."""

    p: tuple[Vec3, Vec3, Vec3]

    def __post_init__(self) -> None:
        points = tuple(self.p)
        if len(points) != 3:
            raise ValueError(f"a triangle needs 3 points, got {len(points)}")
        object.__setattr__(self, "p", points)

    def __iter__(self) -> Iterator[Vec3]:
        return iter(self.p)

    def normal(self) -> Vec3:
        """Return the (unnormalised) face normal from the winding order."""
        a, b, c = self.p
        return (b - a).cross(c - a)


@dataclass(frozen=True)
class Mesh:
    """An ordered collection of triangles."""

    tris: tuple[Triangle, ...] = ()

    def __init__(self, tris: Iterable[Triangle] = ()) -> None:
        object.__setattr__(self, "tris", tuple(tris))

    def __len__(self) -> int:
        return len(self.tris)

    def __iter__(self) -> Iterator[Triangle]:
        return iter(self.tris)

    def map_points(self, func: Callable[[Vec3], Vec3]) -> Mesh:
        """Return a new mesh with ``func`` applied to every vertex."""
        return Mesh(Triangle(tuple(func(point) for point in tri)) for tri in self.tris)