"""Filled-triangle rasterizer with a depth buffer and flat colours."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

import numpy as np
from PIL import Image

from graphicslab.transforms import flipped_perspective_projection, identity_model, view_matrix
from graphicslab.triangle import Triangle
from graphicslab.wireframe import (
    Buffers,
    IndexBufferId,
    PositionBufferId,
    Primitive,
    frame_to_image,
)

WINDOW_SIZE = 700
DEFAULT_OUTPUT = "output.png"


@dataclass(frozen=True)
class ColorBufferId:
    col_id: int = 0


def _cross_z(ax, ay, bx, by):
    return ax * by - ay * bx


def inside_triangle(x, y, vertices):
    """Whether the centre of pixel (x, y) lies strictly inside the triangle.

    Works on scalars or on numpy arrays of pixel coordinates.
    """
    px, py = x + 0.5, y + 0.5
    (ax, ay), (bx, by), (cx, cy) = ((v[0], v[1]) for v in vertices)
    z1 = _cross_z(bx - ax, by - ay, px - ax, py - ay)
    z2 = _cross_z(cx - bx, cy - by, px - bx, py - by)
    z3 = _cross_z(ax - cx, ay - cy, px - cx, py - cy)
    return ((z1 > 0) & (z2 > 0) & (z3 > 0)) | ((z1 < 0) & (z2 < 0) & (z3 < 0))


def barycentric_2d(x, y, vertices) -> Tuple:
    """Barycentric coordinates of (x, y) with respect to the triangle's XY."""
    (x0, y0), (x1, y1), (x2, y2) = ((v[0], v[1]) for v in vertices)
    c1 = (x * (y1 - y2) + (x2 - x1) * y + x1 * y2 - x2 * y1) / (
        x0 * (y1 - y2) + (x2 - x1) * y0 + x1 * y2 - x2 * y1
    )
    c2 = (x * (y2 - y0) + (x0 - x2) * y + x2 * y0 - x0 * y2) / (
        x1 * (y2 - y0) + (x0 - x2) * y1 + x2 * y0 - x0 * y2
    )
    c3 = (x * (y0 - y1) + (x1 - x0) * y + x0 * y1 - x1 * y0) / (
        x2 * (y0 - y1) + (x1 - x0) * y2 + x0 * y1 - x1 * y0
    )
    return c1, c2, c3


class TriangleRasterizer:
    """Fills indexed triangles with the colour of their first vertex."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.model = np.identity(4)
        self.view = np.identity(4)
        self.projection = np.identity(4)
        self._positions: Dict[int, np.ndarray] = {}
        self._indices: Dict[int, np.ndarray] = {}
        self._colors: Dict[int, np.ndarray] = {}
        self._frame = np.zeros((width * height, 3))
        self._depth = np.zeros(width * height)
        self._next_id = 0

    @property
    def frame_buffer(self) -> np.ndarray:
        return self._frame

    @property
    def depth_buffer(self) -> np.ndarray:
        return self._depth

    def _take_id(self) -> int:
        ident = self._next_id
        self._next_id += 1
        return ident

    def load_positions(self, positions) -> PositionBufferId:
        ident = self._take_id()
        self._positions[ident] = np.asarray(positions, dtype=float).reshape(-1, 3)
        return PositionBufferId(ident)

    def load_indices(self, indices) -> IndexBufferId:
        ident = self._take_id()
        self._indices[ident] = np.asarray(indices, dtype=int).reshape(-1, 3)
        return IndexBufferId(ident)

    def load_colors(self, colors) -> ColorBufferId:
        ident = self._take_id()
        self._colors[ident] = np.asarray(colors, dtype=float).reshape(-1, 3)
        return ColorBufferId(ident)

    def set_model(self, matrix) -> None:
        self.model = np.asarray(matrix, dtype=float)

    def set_view(self, matrix) -> None:
        self.view = np.asarray(matrix, dtype=float)

    def set_projection(self, matrix) -> None:
        self.projection = np.asarray(matrix, dtype=float)

    def clear(self, buffers: Buffers) -> None:
        if buffers & Buffers.COLOR:
            self._frame.fill(0.0)
        if buffers & Buffers.DEPTH:
            self._depth.fill(np.inf)

    def _index(self, x, y):
        return (self.height - 1 - y) * self.width + x

    def set_pixel(self, point, color) -> None:
        """Write ``color`` at integer ``point``; rows count up from the bottom."""
        x, y = int(point[0]), int(point[1])
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the frame")
        self._frame[self._index(x, y)] = color

    def draw(self, pos_buffer: PositionBufferId, ind_buffer: IndexBufferId,
             col_buffer: ColorBufferId, primitive: Primitive = Primitive.TRIANGLE) -> None:
        """Project and fill every indexed triangle."""
        positions = self._positions[pos_buffer.pos_id]
        indices = self._indices[ind_buffer.ind_id]
        colors = self._colors[col_buffer.col_id]

        f1 = (50 - 0.1) / 2.0
        f2 = (50 + 0.1) / 2.0
        mvp = self.projection @ self.view @ self.model

        for tri in indices:
            homogeneous = np.hstack([positions[tri], np.ones((3, 1))])
            verts = homogeneous @ mvp.T
            verts = verts / verts[:, 3:4]
            verts[:, 0] = 0.5 * self.width * (verts[:, 0] + 1.0)
            verts[:, 1] = 0.5 * self.height * (verts[:, 1] + 1.0)
            verts[:, 2] = verts[:, 2] * f1 + f2

            triangle = Triangle()
            for i, vert in enumerate(verts):
                triangle.set_vertex(i, vert)
            triangle.set_colors(colors[tri])

            self._rasterize_triangle(triangle)

    def _rasterize_triangle(self, triangle: Triangle) -> None:
        v = triangle.to_vector4()
        x_min, x_max = v[:, 0].min(), v[:, 0].max()
        y_min, y_max = v[:, 1].min(), v[:, 1].max()

        xs = np.arange(max(int(x_min), 0), min(math.ceil(x_max), self.width))
        ys = np.arange(max(int(y_min), 0), min(math.ceil(y_max), self.height))
        if xs.size == 0 or ys.size == 0:
            return

        grid_x, grid_y = np.meshgrid(xs, ys)
        inside = inside_triangle(grid_x, grid_y, triangle.v)
        if not inside.any():
            return
        px, py = grid_x[inside], grid_y[inside]

        alpha, beta, gamma = barycentric_2d(px.astype(float), py.astype(float), triangle.v)
        w = v[:, 3]
        z = v[:, 2]
        w_reciprocal = 1.0 / (alpha / w[0] + beta / w[1] + gamma / w[2])
        z_interpolated = (
            alpha * z[0] / w[0] + beta * z[1] / w[1] + gamma * z[2] / w[2]
        ) * w_reciprocal

        index = self._index(px, py)
        closer = self._depth[index] > z_interpolated
        index = index[closer]
        self._frame[index] = triangle.flat_color()
        self._depth[index] = z_interpolated[closer]


def render_triangles_scene() -> TriangleRasterizer:
    """Draw the two overlapping sample triangles."""
    r = TriangleRasterizer(WINDOW_SIZE, WINDOW_SIZE)
    eye_pos = (0.0, 0.0, 5.0)
    pos_id = r.load_positions([
        (2, 0, -2), (0, 2, -2), (-2, 0, -2),
        (3.5, -1, -5), (2.5, 1.5, -5), (-1, 0.5, -5),
    ])
    ind_id = r.load_indices([(0, 1, 2), (3, 4, 5)])
    col_id = r.load_colors([
        (217.0, 238.0, 185.0), (217.0, 238.0, 185.0), (217.0, 238.0, 185.0),
        (185.0, 217.0, 238.0), (185.0, 217.0, 238.0), (185.0, 217.0, 238.0),
    ])

    r.clear(Buffers.COLOR | Buffers.DEPTH)
    r.set_model(identity_model(0.0))
    r.set_view(view_matrix(eye_pos))
    r.set_projection(flipped_perspective_projection(45, 1, 0.1, 50))
    r.draw(pos_id, ind_id, col_id, Primitive.TRIANGLE)
    return r


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Render two filled, overlapping triangles.")
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    r = render_triangles_scene()
    image = frame_to_image(r.frame_buffer, r.width, r.height)
    Image.fromarray(image).save(args.output)
    return 0