# engine3d

A small software 3D engine. A mesh is a collection of triangles that is
rotated, moved away from the camera, put through a perspective projection and
scaled onto the screen. Only triangles whose face normal has a negative z
component (facing the viewer) are drawn, as white polygons in a pygame window.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Run the demo

```
engine3d
```

This opens a 1200×1000 window titled "Screen" showing a spinning cube,
redrawn about every 16 ms. Close the window to quit. If the window cannot be
opened, the error is printed to standard error and the command exits with
status 1.

## Use it as a library

```python
from engine3d.camera import Camera
from engine3d.geometry import Vec3
from engine3d.matrices import (
    create_projection_matrix,
    create_rotation_matrix,
    mult_mesh_matrix,
    scale_mesh,
    translate_mesh,
)
from engine3d.shapes import cube

cam = Camera()                       # near 0.1, far 1000, 60° field of view
mesh = cube()                        # 12 triangles of a unit cube

rotation = create_rotation_matrix(Vec3(30.0, 45.0, 0.0))   # degrees
moved = translate_mesh(Vec3(4.0, 3.0, 5.0), mult_mesh_matrix(rotation, mesh))
projected = mult_mesh_matrix(create_projection_matrix(cam), moved)
on_screen = scale_mesh(Vec3(300.0, 300.0, 300.0), projected)
```

The same steps for one demo frame are available as
`engine3d.render.transform_frame(elapsed_time, cam, mesh)`.

All geometry types are immutable; every transformation returns a new mesh.

### Modules

- `engine3d.geometry` — `Vec3`, `Triangle` and `Mesh`, plus the window size
  constants `WINDOW_WIDTH` and `WINDOW_HEIGHT`. `Vec3` supports `+`, `-` and
  unpacking; `Vec3.cross` gives the cross product and `Vec3.dot` the dot
  product truncated to an integer. `Triangle` requires exactly three points
  (otherwise `ValueError`) and `Triangle.normal()` gives the unnormalised face
  normal from the winding order. `Mesh` supports `len()` and iteration, and
  `Mesh.map_points(func)` returns a new mesh with every vertex passed through
  `func`.
- `engine3d.camera` — `Camera`, a dataclass with `position`, `rotation`,
  `zfar` (1000), `znear` (0.1) and `theta`, the field of view in degrees (60).
- `engine3d.matrices` — 4×4 matrices stored as tuples of rows, with points
  treated as row vectors: `identity`, `mult_matrix_matrix`,
  `mult_matrix_vector` (divides by `w` when it is non-zero),
  `mult_matrix_constant`, `mult_mesh_matrix`, `create_rotation_matrix`
  (per-axis angles in degrees, combined as Z·Y·X), `create_projection_matrix`,
  `translate_mesh`, `scale_mesh`, `degrees_to_radians` and
  `radians_to_degrees`.
- `engine3d.shapes` — ready-made meshes: `cube()` (12 triangles) and
  `tetrahedron()` (4 triangles).
- `engine3d.render` — the pygame side: `init_renderer` (opens the window,
  raises `RuntimeError` on failure), `visible_triangles`, `draw_wire_mesh`,
  `draw_filled_mesh`, `transform_frame`, `main_loop` (clears a surface, draws
  one filled frame and flips the display if the surface is the window) and
  `main` (the demo).

## What it does not do

The camera's `position` and `rotation` are stored but not used: the
projection depends only on the near and far planes and the field of view, so
the view cannot be moved or turned. There is no lighting, depth sorting or
clipping, and no way to load meshes from files; only the built-in cube and
tetrahedron, or meshes built by hand, can be drawn. The demo takes no
command-line options and responds to no input other than closing the window.