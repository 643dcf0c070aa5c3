"""Small 2D/3D vector types and scalar helpers used by the ray tracer."""

from __future__ import annotations

import math
import random
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO, Tuple, Union

K_INFINITY = 3.4028234663852886e38
BAR_WIDTH = 70

Number = Union[int, float]


def _fmt(value: float) -> str:
    return format(value, "g")


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def fill(cls, value: Number) -> "Vec3":
        """Vector with every component set to ``value``."""
        return cls(value, value, value)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union["Vec3", Number]) -> "Vec3":
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: Number) -> "Vec3":
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other: Number) -> "Vec3":
        if isinstance(other, (int, float)):
            return Vec3(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"{_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)}"


@dataclass(frozen=True)
class Vec2:
    """An immutable two-component vector."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def fill(cls, value: Number) -> "Vec2":
        """Vector with both components set to ``value``."""
        return cls(value, value)

    def __iter__(self):
        yield self.x
        yield self.y

    def __add__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __mul__(self, other: Number) -> "Vec2":
        if isinstance(other, (int, float)):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: Number) -> "Vec2":
        return self.__mul__(other)


class MaterialType(Enum):
    """How a surface interacts with light."""

    DIFFUSE_AND_GLOSSY = 0
    REFLECTION_AND_REFRACTION = 1
    REFLECTION = 2


def lerp(a: Vec3, b: Vec3, t: float) -> Vec3:
    """Linear interpolation between ``a`` and ``b``."""
    return a * (1 - t) + b * t


def normalize(v: Vec3) -> Vec3:
    """Unit vector along ``v``; the zero vector is returned unchanged."""
    mag2 = v.x * v.x + v.y * v.y + v.z * v.z
    if mag2 > 0:
        inv = 1 / math.sqrt(mag2)
        return Vec3(v.x * inv, v.y * inv, v.z * inv)
    return v


def dot(a: Vec3, b: Vec3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def clamp(lo: float, hi: float, v: float) -> float:
    """Clamp ``v`` into ``[lo, hi]``."""
    return max(lo, min(hi, v))


def solve_quadratic(a: float, b: float, c: float) -> Optional[Tuple[float, float]]:
    """Real roots of ``a x^2 + b x + c`` in ascending order, or None."""
    discr = b * b - 4 * a * c
    if discr < 0:
        return None
    if discr == 0:
        x0 = x1 = -0.5 * b / a
    else:
        root = math.sqrt(discr)
        q = -0.5 * (b + root) if b > 0 else -0.5 * (b - root)
        x0 = q / a
        x1 = c / q
    if x0 > x1:
        x0, x1 = x1, x0
    return x0, x1


def random_float() -> float:
    """Uniform random number in ``[0, 1)``."""
    return random.random()


def progress_bar(progress: float) -> str:
    """Text of a progress bar for ``progress`` in ``[0, 1]``."""
    pos = int(BAR_WIDTH * progress)
    cells = "".join(
        "=" if i < pos else ">" if i == pos else " " for i in range(BAR_WIDTH)
    )
    return f"[{cells}] {int(progress * 100.0)} %\r"


def update_progress(progress: float, stream: Optional[TextIO] = None) -> None:
    """Write the progress bar to ``stream`` (standard output by default)."""
    out = sys.stdout if stream is None else stream
    out.write(progress_bar(progress))
    out.flush()