# graphicslab

Computer-graphics building blocks in plain Python on top of NumPy and Pillow:

- `graphicslab.vecmath`: immutable `Vec2` / `Vec3` types, `dot`, `cross`,
  `normalize`, `lerp`, `clamp`, `solve_quadratic`, `MaterialType` and a text
  progress bar (`progress_bar`, `update_progress`).
- `graphicslab.transforms`: view, model and perspective projection matrices
  (`view_matrix`, `z_rotation_model`, `identity_model`, `spot_model`,
  `perspective_projection`, `flipped_perspective_projection`).
- `graphicslab.triangle`: a `Triangle` with homogeneous vertices and
  per-vertex colours, normals and texture coordinates.
- `graphicslab.wireframe`: `WireframeRasterizer`, which projects indexed
  triangles and draws their edges with Bresenham's algorithm
  (`bresenham_line`), plus `frame_to_image` to turn a frame buffer into an
  8-bit image.
- `graphicslab.trianglefill`: `TriangleRasterizer`, which fills triangles
  with a flat colour using a depth buffer and barycentric depth
  interpolation (`inside_triangle`, `barycentric_2d`).
- `graphicslab.texture`: `Texture` (sampled with `get_color(u, v)`, loaded
  from an array or with `Texture.from_file`) and the `FragmentPayload` /
  `VertexPayload` records handed to shaders.
- `graphicslab.shaders`: fragment shaders working on a `FragmentPayload`:
  `normal_fragment_shader`, `phong_fragment_shader`,
  `texture_fragment_shader`, `bump_fragment_shader` and
  `displacement_fragment_shader`, plus `vertex_shader` and `reflect`.
- `graphicslab.objparse`: helpers for Wavefront OBJ lines (`split`, `tail`,
  `first_token`, `get_element`) and `vertices_from_face`, which turns an
  `f ...` line into `Vertex` records.
- `graphicslab.bezier`: cubic Bezier curves drawn from the Bernstein form
  (`naive_bezier`, red) and with de Casteljau's algorithm (`recursive_bezier`,
  `bezier`, green), and `render_curve` to produce a whole image.
- `graphicslab.scene`: ray-tracing scene description: `Scene`,
  `PointLight`, `Sphere`, `MeshTriangle` (with a checkerboard diffuse
  pattern), `Hit` and the Möller-Trumbore test `ray_triangle_intersect`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line programs

| Command                 | What it does                                                           |
|-------------------------|------------------------------------------------------------------------|
| `graphicslab-wireframe` | Renders the sample triangle as a wireframe into a PNG image.           |
| `graphicslab-triangles` | Rasterizes two overlapping, depth-tested triangles into a PNG image.   |
| `graphicslab-bezier`    | Draws a cubic Bezier curve from four control points into a PNG image.  |

```
graphicslab-wireframe -r 30 wire.png      # rotation about Z in degrees; default output.png
graphicslab-triangles filled.png          # default output.png
graphicslab-bezier 100,600 200,100 500,100 600,600 -o curve.png
```

All three images are 700 by 700 pixels. `graphicslab-bezier` writes
`my_bezier_curve.png` when `-o` is not given.

## Using the library

### Vector maths

```python
from graphicslab.vecmath import Vec3, cross, dot, normalize

a = Vec3(1.0, 0.0, 0.0)
b = Vec3(0.0, 1.0, 0.0)
print(dot(a, b))        # 0.0
print(cross(a, b))      # 0, 0, 1
print(normalize(Vec3(3.0, 0.0, 4.0)))
```

### Rasterizing

```python
from graphicslab.trianglefill import TriangleRasterizer
from graphicslab.transforms import flipped_perspective_projection, view_matrix
from graphicslab.wireframe import Buffers, Primitive, frame_to_image

r = TriangleRasterizer(200, 200)
pos = r.load_positions([(2, 0, -2), (0, 2, -2), (-2, 0, -2)])
ind = r.load_indices([(0, 1, 2)])
col = r.load_colors([(217, 238, 185)] * 3)
r.clear(Buffers.COLOR | Buffers.DEPTH)
r.set_view(view_matrix((0, 0, 5)))
r.set_projection(flipped_perspective_projection(45, 1, 0.1, 50))
r.draw(pos, ind, col, Primitive.TRIANGLE)
image = frame_to_image(r.frame_buffer, r.width, r.height)
```

### Bezier curves

```python
from graphicslab.bezier import recursive_bezier, render_curve

points = [(100.0, 600.0), (200.0, 100.0), (500.0, 100.0), (600.0, 600.0)]
point = recursive_bezier(points, 0.5)
image = render_curve(points, 700, 700)   # blue-green-red channel order
```

### Ray intersections

```python
from graphicslab.scene import Scene, Sphere, PointLight
from graphicslab.vecmath import Vec3

scene = Scene(320, 240)
sphere = Sphere(Vec3(0, 0, -5), 1.0)
scene.add(sphere)
scene.add(PointLight(Vec3(-20, 70, 20), 0.5))
hit = sphere.intersect(Vec3(), Vec3(0, 0, -1))
print(hit.t_near)       # 4.0
```

## Conventions

- Colours given to triangles are in the range 0 to 255; anything outside it
  raises `ValueError`.
- Screen-space points have their origin at the bottom left; frame buffers
  are stored row by row from the top.
- Angles passed to the model helpers and to
  `flipped_perspective_projection` are in degrees; `perspective_projection`
  takes its field of view in radians.

## What is not included

- There is no rasterizer that runs the fragment shaders over a mesh: the
  shaders can be called on a `FragmentPayload` directly, but nothing here
  draws a textured or lit model.
- There is no OBJ or MTL file loader and no polygon triangulation; only the
  line helpers and face decoding in `graphicslab.objparse` are provided.
- There is no ray-tracing renderer: `graphicslab.scene` describes scenes and
  intersects rays with objects, but nothing casts rays through an image or
  writes a picture.
- No command shows a live window; every command writes an image file.