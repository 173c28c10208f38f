"""A small software 3D engine: rotate, project and draw triangle meshes with pygame."""

__version__ = "0.1.0"
__all__ = ["camera", "geometry", "matrices", "render", "shapes"]