"""Window set-up, back-face culling, drawing and the per-frame pipeline."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence

import pygame

from engine3d.camera import Camera
from engine3d.geometry import WINDOW_HEIGHT, WINDOW_WIDTH, Mesh, Triangle, Vec3
from engine3d.matrices import (
    create_projection_matrix,
    create_rotation_matrix,
    mult_mesh_matrix,
    scale_mesh,
    translate_mesh,
)
from engine3d.shapes import cube

BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)

WINDOW_TITLE = "Screen"
FRAME_DELAY_MS = 16

SCREEN_OFFSET = Vec3(4.0, 3.0, 5.0)
SCREEN_SCALE = Vec3(300.0, 300.0, 300.0)


def init_renderer() -> pygame.Surface:
    """Open the window, clear it to black and return its surface.

    Raises RuntimeError when the video system or the window cannot be set up.
    """
    try:
        pygame.display.init()
        surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    except pygame.error as exc:
        raise RuntimeError(f"Error: {exc}") from exc
    pygame.display.set_caption(WINDOW_TITLE)
    surface.fill(BLACK)
    return surface


def visible_triangles(mesh: Mesh) -> Iterator[Triangle]:
    """Yield the triangles whose face normal points towards the viewer."""
    return (tri for tri in mesh if tri.normal().z < 0.0)


def _pixel(point: Vec3) -> tuple[int, int]:
    return int(point.x), int(point.y)


def draw_wire_mesh(mesh: Mesh, surface: pygame.Surface) -> None:
    """Draw the outline of every visible triangle in white."""
    for tri in visible_triangles(mesh):
        a, b, c = (_pixel(p) for p in tri)
        for start, end in ((a, b), (b, c), (c, a)):
            pygame.draw.line(surface, WHITE, start, end)


def draw_filled_mesh(mesh: Mesh, surface: pygame.Surface) -> None:
    """Fill every visible triangle in white."""
    for tri in visible_triangles(mesh):
        pygame.draw.polygon(surface, WHITE, [_pixel(p) for p in tri])


def transform_frame(elapsed_time: float, cam: Camera, mesh: Mesh) -> Mesh:
    """Rotate, offset, project and scale ``mesh`` into screen coordinates."""
    rotation = create_rotation_matrix(
        Vec3(elapsed_time * 0.5, elapsed_time * 1.5, elapsed_time)
    )
    rotated = mult_mesh_matrix(rotation, mesh)
    offset = translate_mesh(SCREEN_OFFSET, rotated)
    projected = mult_mesh_matrix(create_projection_matrix(cam), offset)
    return scale_mesh(SCREEN_SCALE, projected)


def main_loop(
    elapsed_time: float, surface: pygame.Surface, cam: Camera, mesh: Mesh
) -> None:
    """Render one frame of ``mesh`` onto ``surface``."""
    surface.fill(BLACK)
    draw_filled_mesh(transform_frame(elapsed_time, cam, mesh), surface)
    if pygame.display.get_init() and pygame.display.get_surface() is surface:
        pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    """Show a spinning cube until the window is closed."""
    try:
        surface = init_renderer()
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        return 1

    mesh = cube()
    cam = Camera()
    running = True
    time = 0.0
    try:
        while running:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                running = False
            main_loop(time, surface, cam, mesh)
            time += 1.0
            pygame.time.delay(FRAME_DELAY_MS)
    finally:
        pygame.display.quit()
    return 0