"""Image textures and the payloads handed to shaders."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np
from PIL import Image


class Texture:
    """An RGB image sampled with (u, v) coordinates."""

    def __init__(self, pixels) -> None:
        arr = np.asarray(pixels)
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise ValueError("texture pixels must have shape (height, width, 3)")
        if arr.shape[0] == 0 or arr.shape[1] == 0:
            raise ValueError("texture must not be empty")
        self._pixels = np.array(arr, dtype=np.uint8)

    @classmethod
    def from_file(cls, path) -> "Texture":
        """Load an image file as an RGB texture."""
        with Image.open(path) as img:
            return cls(np.asarray(img.convert("RGB")))

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    def get_color(self, u: float, v: float) -> np.ndarray:
        """Colour (0..255 floats) at texture coordinate (u, v); v grows upward."""
        col = int(u * self.width)
        row = int((1 - v) * self.height)
        col = min(max(col, 0), self.width - 1)
        row = min(max(row, 0), self.height - 1)
        return self._pixels[row, col].astype(float)


@dataclass(eq=False)
class FragmentPayload:
    """Interpolated attributes of one fragment."""

    color: np.ndarray = field(default_factory=lambda: np.zeros(3))
    normal: np.ndarray = field(default_factory=lambda: np.zeros(3))
    tex_coords: np.ndarray = field(default_factory=lambda: np.zeros(2))
    texture: Optional[Texture] = None
    view_pos: np.ndarray = field(default_factory=lambda: np.zeros(3))


@dataclass(eq=False)
class VertexPayload:
    """Input of a vertex shader."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))