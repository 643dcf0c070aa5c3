"""Triangle with per-vertex attributes used by the rasterizers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Optional

import numpy as np

if TYPE_CHECKING:
    from graphicslab.texture import Texture


def _default_vertices() -> np.ndarray:
    return np.tile(np.array([0.0, 0.0, 0.0, 1.0]), (3, 1))


@dataclass(eq=False)
class Triangle:
    """Three homogeneous vertices with colours, texture coordinates and normals."""

    v: np.ndarray = field(default_factory=_default_vertices)
    color: np.ndarray = field(default_factory=lambda: np.zeros((3, 3)))
    tex_coords: np.ndarray = field(default_factory=lambda: np.zeros((3, 2)))
    normal: np.ndarray = field(default_factory=lambda: np.zeros((3, 3)))
    tex: Optional["Texture"] = None

    def a(self) -> np.ndarray:
        return self.v[0].copy()

    def b(self) -> np.ndarray:
        return self.v[1].copy()

    def c(self) -> np.ndarray:
        return self.v[2].copy()

    def set_vertex(self, index: int, vertex) -> None:
        self.v[index] = np.asarray(vertex, dtype=float)

    def set_normal(self, index: int, normal) -> None:
        self.normal[index] = np.asarray(normal, dtype=float)

    def set_normals(self, normals: Iterable) -> None:
        for index, normal in enumerate(normals):
            self.set_normal(index, normal)

    def set_color(self, index: int, r: float, g: float, b: float) -> None:
        """Store a colour given in 0..255, kept internally in 0..1."""
        if any(c < 0.0 or c > 255.0 for c in (r, g, b)):
            raise ValueError("Invalid color values")
        self.color[index] = np.array([r, g, b], dtype=float) / 255.0

    def set_colors(self, colors: Iterable) -> None:
        for index, (r, g, b) in enumerate(colors):
            self.set_color(index, r, g, b)

    def set_tex_coord(self, index: int, uv) -> None:
        self.tex_coords[index] = np.asarray(uv, dtype=float)

    def flat_color(self) -> np.ndarray:
        """Colour of the first vertex in 0..255; one colour per triangle."""
        return self.color[0] * 255.0

    def to_vector4(self) -> np.ndarray:
        """Vertices with the homogeneous coordinate forced to 1."""
        res = self.v.copy()
        res[:, 3] = 1.0
        return res