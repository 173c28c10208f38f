"""Viewer parameters used to build the projection."""

from __future__ import annotations

from dataclasses import dataclass, field

from engine3d.geometry import Vec3

Z_NEAR = 0.1
Z_FAR = 1000.0


@dataclass
class Camera:
    """Position, orientation, clipping planes and field of view (degrees)."""

    position: Vec3 = field(default_factory=Vec3)
    rotation: Vec3 = field(default_factory=Vec3)
    zfar: float = Z_FAR
    znear: float = Z_NEAR
    theta: float = 60.0