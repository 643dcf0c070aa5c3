"""Scene description for the ray tracer: lights, spheres and triangle meshes."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from graphicslab.vecmath import (
    K_INFINITY,
    MaterialType,
    Vec2,
    Vec3,
    cross,
    dot,
    lerp,
    normalize,
    solve_quadratic,
)


@dataclass(frozen=True)
class PointLight:
    """A point light; a scalar intensity applies to all three channels."""

    position: Vec3
    intensity: Union[Vec3, float]

    def __post_init__(self) -> None:
        if isinstance(self.intensity, (int, float)):
            object.__setattr__(self, "intensity", Vec3.fill(float(self.intensity)))


@dataclass
class Hit:
    """Nearest intersection of a ray with an object."""

    t_near: float
    index: int = 0
    uv: Vec2 = field(default_factory=Vec2)
    obj: Optional["SceneObject"] = None


class SceneObject(ABC):
    """Base of every renderable object, holding its material properties."""

    def __init__(self) -> None:
        self.material_type = MaterialType.DIFFUSE_AND_GLOSSY
        self.ior = 1.3
        self.kd = 0.8
        self.ks = 0.2
        self.diffuse_color = Vec3.fill(0.2)
        self.specular_exponent = 25.0

    @abstractmethod
    def intersect(self, orig: Vec3, direction: Vec3) -> Optional[Hit]:
        """Nearest hit of the ray with this object, or None."""

    @abstractmethod
    def surface_properties(
        self, point: Vec3, direction: Vec3, index: int, uv: Vec2
    ) -> Tuple[Vec3, Vec2]:
        """Surface normal and texture coordinate at a hit point."""

    def eval_diffuse_color(self, st: Vec2) -> Vec3:
        return self.diffuse_color


class Sphere(SceneObject):
    """A sphere given by centre and radius."""

    def __init__(self, center: Vec3, radius: float) -> None:
        super().__init__()
        self.center = center
        self.radius = radius
        self.radius2 = radius * radius

    def intersect(self, orig: Vec3, direction: Vec3) -> Optional[Hit]:
        offset = orig - self.center
        a = dot(direction, direction)
        b = 2 * dot(direction, offset)
        c = dot(offset, offset) - self.radius2
        roots = solve_quadratic(a, b, c)
        if roots is None:
            return None
        t0, t1 = roots
        if t0 < 0:
            t0 = t1
        if t0 < 0:
            return None
        return Hit(t0, 0, Vec2(), self)

    def surface_properties(
        self, point: Vec3, direction: Vec3, index: int, uv: Vec2
    ) -> Tuple[Vec3, Vec2]:
        return normalize(point - self.center), Vec2()


def ray_triangle_intersect(
    v0: Vec3, v1: Vec3, v2: Vec3, orig: Vec3, direction: Vec3
) -> Optional[Tuple[float, float, float]]:
    """Möller-Trumbore test; returns ``(t, u, v)`` or None.

    Back faces are culled, and ``u`` and ``v`` are each required to lie
    strictly in (0, 1).
    """
    e1 = v1 - v0
    e2 = v2 - v0
    s = orig - v0
    s1 = cross(direction, e2)
    s2 = cross(s, e1)

    det = dot(s1, e1)
    if det <= 0:
        return None
    t = dot(s2, e2) / det
    u = dot(s1, s) / det
    v = dot(s2, direction) / det
    if t > 0 and 0 < u < 1 and 0 < v < 1:
        return t, u, v
    return None


class MeshTriangle(SceneObject):
    """An indexed triangle mesh with a checkerboard diffuse pattern."""

    def __init__(
        self,
        vertices: Sequence[Vec3],
        vertex_index: Sequence[int],
        num_triangles: int,
        st_coordinates: Sequence[Vec2],
    ) -> None:
        super().__init__()
        indices = [int(i) for i in vertex_index[: num_triangles * 3]]
        if len(indices) < num_triangles * 3:
            raise ValueError("not enough vertex indices for the triangle count")
        count = (max(indices) + 1) if indices else 0
        if len(vertices) < count or len(st_coordinates) < count:
            raise ValueError("vertex index refers past the supplied vertices")
        self.vertices: List[Vec3] = list(vertices[:count])
        self.st_coordinates: List[Vec2] = list(st_coordinates[:count])
        self.vertex_index: List[int] = indices
        self.num_triangles = num_triangles

    def _corners(self, k: int) -> Tuple[int, int, int]:
        return tuple(self.vertex_index[k * 3 : k * 3 + 3])  # type: ignore[return-value]

    def intersect(self, orig: Vec3, direction: Vec3) -> Optional[Hit]:
        best: Optional[Hit] = None
        t_near = K_INFINITY
        for k in range(self.num_triangles):
            i0, i1, i2 = self._corners(k)
            result = ray_triangle_intersect(
                self.vertices[i0], self.vertices[i1], self.vertices[i2], orig, direction
            )
            if result is not None and result[0] < t_near:
                t, u, v = result
                t_near = t
                best = Hit(t, k, Vec2(u, v), self)
        return best

    def surface_properties(
        self, point: Vec3, direction: Vec3, index: int, uv: Vec2
    ) -> Tuple[Vec3, Vec2]:
        i0, i1, i2 = self._corners(index)
        v0, v1, v2 = self.vertices[i0], self.vertices[i1], self.vertices[i2]
        e0 = normalize(v1 - v0)
        e1 = normalize(v2 - v1)
        normal = normalize(cross(e0, e1))
        st0, st1, st2 = self.st_coordinates[i0], self.st_coordinates[i1], self.st_coordinates[i2]
        st = st0 * (1 - uv.x - uv.y) + st1 * uv.x + st2 * uv.y
        return normal, st

    def eval_diffuse_color(self, st: Vec2) -> Vec3:
        scale = 5
        pattern = float(
            (math.fmod(st.x * scale, 1) > 0.5) ^ (math.fmod(st.y * scale, 1) > 0.5)
        )
        return lerp(Vec3(0.815, 0.235, 0.031), Vec3(0.937, 0.937, 0.231), pattern)


@dataclass
class Scene:
    """Render options together with the objects and lights to render."""

    width: int = 1280
    height: int = 960
    fov: float = 90.0
    background_color: Vec3 = field(default_factory=lambda: Vec3(0.235294, 0.67451, 0.843137))
    max_depth: int = 5
    epsilon: float = 0.00001
    objects: List[SceneObject] = field(default_factory=list)
    lights: List[PointLight] = field(default_factory=list)

    def add(self, item: Union[SceneObject, PointLight]) -> None:
        """Add an object or a light to the scene."""
        if isinstance(item, SceneObject):
            self.objects.append(item)
        elif isinstance(item, PointLight):
            self.lights.append(item)
        else:
            raise TypeError(f"cannot add {type(item).__name__} to a scene")