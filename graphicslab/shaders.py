"""Vertex and fragment shaders for the shading rasterizer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from graphicslab.texture import FragmentPayload, Texture, VertexPayload

__all__ = [
    "Light",
    "vertex_shader",
    "reflect",
    "normal_fragment_shader",
    "texture_fragment_shader",
    "phong_fragment_shader",
    "displacement_fragment_shader",
    "bump_fragment_shader",
]


@dataclass(frozen=True, eq=False)
class Light:
    """A point light."""

    position: np.ndarray
    intensity: np.ndarray


KA = np.array([0.005, 0.005, 0.005])
KS = np.array([0.7937, 0.7937, 0.7937])
AMBIENT_INTENSITY = np.array([10.0, 10.0, 10.0])
EYE_POS = np.array([0.0, 0.0, 10.0])
SPECULAR_POWER = 150.0
KH = 0.2
KN = 0.1

LIGHTS: Tuple[Light, ...] = (
    Light(np.array([20.0, 20.0, 20.0]), np.array([500.0, 500.0, 500.0])),
    Light(np.array([-20.0, 20.0, 0.0]), np.array([500.0, 500.0, 500.0])),
)


def _vec(values) -> np.ndarray:
    return np.asarray(values, dtype=float)


def _normalized(v: np.ndarray) -> np.ndarray:
    norm = float(np.linalg.norm(v))
    return v / norm if norm > 0 else v


def _blinn_phong(kd: np.ndarray, point: np.ndarray, normal: np.ndarray) -> np.ndarray:
    result = np.zeros(3)
    ambient = KA * AMBIENT_INTENSITY
    for light in LIGHTS:
        to_light = light.position - point
        light_dir = _normalized(to_light)
        rr = float(to_light @ to_light)
        view_dir = _normalized(EYE_POS - point)
        half = _normalized(view_dir + light_dir)
        diffuse = kd * light.intensity / rr * max(0.0, float(normal @ light_dir))
        specular = KS * light.intensity / rr * max(0.0, float(normal @ half)) ** SPECULAR_POWER
        result = result + diffuse + specular + ambient
    return result * 255.0


def _require_texture(payload: FragmentPayload) -> Texture:
    if payload.texture is None:
        raise ValueError("this shader needs a texture")
    return payload.texture


def _height_perturbation(payload: FragmentPayload) -> Tuple[np.ndarray, np.ndarray, float]:
    """TBN matrix, perturbed tangent-space normal and height at the fragment."""
    texture = _require_texture(payload)
    normal = _vec(payload.normal)
    x, y, z = normal
    with np.errstate(divide="ignore", invalid="ignore"):
        r = np.sqrt(np.float64(x * x + z * z))
        t = np.array([x * y / r, r, z * y / r])
    b = np.cross(normal, t)
    tbn = np.column_stack([t, b, normal])

    u, v = float(payload.tex_coords[0]), float(payload.tex_coords[1])
    huv = float(np.linalg.norm(texture.get_color(u, v)))
    du = KH * KN * (float(np.linalg.norm(texture.get_color(u + 1.0 / texture.width, v))) - huv)
    dv = KH * KN * (float(np.linalg.norm(texture.get_color(u, v + 1.0 / texture.height))) - huv)
    ln = np.array([-du, -dv, 1.0])
    return tbn, ln, huv


def vertex_shader(payload: VertexPayload) -> np.ndarray:
    """Pass the position through unchanged."""
    return payload.position


def reflect(vec, axis) -> np.ndarray:
    """Unit reflection of ``vec`` about ``axis``."""
    vec, axis = _vec(vec), _vec(axis)
    costheta = float(vec @ axis)
    return _normalized(2 * costheta * axis - vec)


def normal_fragment_shader(payload: FragmentPayload) -> np.ndarray:
    """Colour the fragment by its unit normal mapped into 0..255."""
    normal = _normalized(_vec(payload.normal)[:3])
    return (normal + 1.0) / 2.0 * 255.0


def texture_fragment_shader(payload: FragmentPayload) -> np.ndarray:
    """Blinn-Phong lighting with the diffuse colour taken from the texture."""
    texture_color = np.zeros(3)
    if payload.texture is not None:
        texture_color = payload.texture.get_color(
            float(payload.tex_coords[0]), float(payload.tex_coords[1])
        )
    kd = texture_color / 255.0
    return _blinn_phong(kd, _vec(payload.view_pos), _vec(payload.normal))


def phong_fragment_shader(payload: FragmentPayload) -> np.ndarray:
    """Blinn-Phong lighting with the interpolated vertex colour."""
    return _blinn_phong(_vec(payload.color), _vec(payload.view_pos), _vec(payload.normal))


def displacement_fragment_shader(payload: FragmentPayload) -> np.ndarray:
    """Move the point along the normal by the texture height, then light it."""
    tbn, ln, huv = _height_perturbation(payload)
    normal = _vec(payload.normal)
    point = _vec(payload.view_pos) + KN * normal * huv
    new_normal = _normalized(tbn @ ln)
    return _blinn_phong(_vec(payload.color), point, new_normal)


def bump_fragment_shader(payload: FragmentPayload) -> np.ndarray:
    """Colour the fragment by its bump-mapped normal scaled to 0..255."""
    tbn, ln, _ = _height_perturbation(payload)
    return _normalized(tbn @ ln) * 255.0