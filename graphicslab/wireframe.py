"""Wireframe rasterizer: projects triangles and draws their edges."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Dict, Iterator, Optional, Sequence, Tuple

import numpy as np
from PIL import Image

from graphicslab.transforms import perspective_projection, view_matrix, z_rotation_model
from graphicslab.triangle import Triangle

WINDOW_SIZE = 700
DEFAULT_OUTPUT = "output.png"
LINE_COLOR = (255.0, 255.0, 255.0)


class Buffers(IntFlag):
    """Buffers that :meth:`clear` can reset."""

    COLOR = 1
    DEPTH = 2


class Primitive(Enum):
    LINE = 0
    TRIANGLE = 1


@dataclass(frozen=True)
class PositionBufferId:
    pos_id: int = 0


@dataclass(frozen=True)
class IndexBufferId:
    ind_id: int = 0


def bresenham_line(begin, end) -> Iterator[Tuple[int, int]]:
    """Integer pixels on the segment from ``begin`` to ``end`` (Bresenham)."""
    x1, y1 = float(begin[0]), float(begin[1])
    x2, y2 = float(end[0]), float(end[1])

    dx = int(x2 - x1)
    dy = int(y2 - y1)
    dx1 = abs(dx)
    dy1 = abs(dy)
    px = 2 * dy1 - dx1
    py = 2 * dx1 - dy1
    step = 1 if (dx < 0 and dy < 0) or (dx > 0 and dy > 0) else -1

    if dy1 <= dx1:
        if dx >= 0:
            x, y, xe = int(x1), int(y1), int(x2)
        else:
            x, y, xe = int(x2), int(y2), int(x1)
        yield x, y
        while x < xe:
            x += 1
            if px < 0:
                px += 2 * dy1
            else:
                y += step
                px += 2 * (dy1 - dx1)
            yield x, y
    else:
        if dy >= 0:
            x, y, ye = int(x1), int(y1), int(y2)
        else:
            x, y, ye = int(x2), int(y2), int(y1)
        yield x, y
        while y < ye:
            y += 1
            if py <= 0:
                py += 2 * dx1
            else:
                x += step
                py += 2 * (dx1 - dy1)
            yield x, y


def frame_to_image(frame_buffer, width: int, height: int, swap_channels: bool = False) -> np.ndarray:
    """Round a float frame buffer into an 8-bit ``(height, width, 3)`` image."""
    arr = np.nan_to_num(np.asarray(frame_buffer, dtype=float)).reshape(height, width, 3)
    img = np.clip(np.rint(arr), 0, 255).astype(np.uint8)
    if swap_channels:
        return np.ascontiguousarray(img[:, :, ::-1])
    return img


class WireframeRasterizer:
    """Draws the edges of indexed triangles into a colour buffer."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.model = np.identity(4)
        self.view = np.identity(4)
        self.projection = np.identity(4)
        self._positions: Dict[int, np.ndarray] = {}
        self._indices: Dict[int, np.ndarray] = {}
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

    def set_pixel(self, point, color) -> None:
        """Write ``color`` at ``point``; rows count up from the bottom.

        Points outside the window are ignored, as is row 0, whose index lies
        past the end of the buffer.
        """
        x, y = float(point[0]), float(point[1])
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return
        index = int((self.height - y) * self.width + x)
        if index >= len(self._frame):
            return
        self._frame[index] = color

    def draw_line(self, begin, end) -> None:
        for x, y in bresenham_line(begin, end):
            self.set_pixel((x, y), LINE_COLOR)

    def _rasterize_wireframe(self, triangle: Triangle) -> None:
        self.draw_line(triangle.c(), triangle.a())
        self.draw_line(triangle.c(), triangle.b())
        self.draw_line(triangle.b(), triangle.a())

    def draw(self, pos_buffer: PositionBufferId, ind_buffer: IndexBufferId,
             primitive: Primitive = Primitive.TRIANGLE) -> None:
        """Project every indexed triangle and draw its outline."""
        if primitive is not Primitive.TRIANGLE:
            raise ValueError("only triangle primitives can be drawn")
        positions = self._positions[pos_buffer.pos_id]
        indices = self._indices[ind_buffer.ind_id]

        f1 = (100 - 0.1) / 2.0
        f2 = (100 + 0.1) / 2.0
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
            triangle.set_color(0, 255.0, 0.0, 0.0)
            triangle.set_color(1, 0.0, 255.0, 0.0)
            triangle.set_color(2, 0.0, 0.0, 255.0)

            self._rasterize_wireframe(triangle)


def render_wireframe_scene(angle: float = 0.0) -> WireframeRasterizer:
    """Draw the sample triangle rotated by ``angle`` degrees about Z."""
    r = WireframeRasterizer(WINDOW_SIZE, WINDOW_SIZE)
    eye_pos = (0.0, 0.0, 5.0)
    pos_id = r.load_positions([(2, 0, -2), (0, 2, -2), (-2, 0, -2)])
    ind_id = r.load_indices([(0, 1, 2)])

    r.clear(Buffers.COLOR | Buffers.DEPTH)
    r.set_model(z_rotation_model(angle))
    r.set_view(view_matrix(eye_pos))
    r.set_projection(perspective_projection(45, 1, 0.1, 50))
    r.draw(pos_id, ind_id, Primitive.TRIANGLE)
    return r


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Render a rotated wireframe triangle.")
    parser.add_argument("-r", "--rotation", type=float, default=0.0,
                        help="rotation about the Z axis in degrees")
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    r = render_wireframe_scene(args.rotation)
    image = frame_to_image(r.frame_buffer, r.width, r.height, swap_channels=True)
    Image.fromarray(image).save(args.output)
    return 0