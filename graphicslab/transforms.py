"""Model, view and projection matrices for the rasterizers."""

from __future__ import annotations

import math

import numpy as np

MY_PI = 3.1415926


def view_matrix(eye_pos) -> np.ndarray:
    """Translate the world so that the eye sits at the origin."""
    eye = np.asarray(eye_pos, dtype=float)
    view = np.identity(4)
    view[:3, 3] = -eye[:3]
    return view


def z_rotation_model(angle: float) -> np.ndarray:
    """Rotation about the Z axis by ``angle`` degrees."""
    rad = angle / 180 * math.acos(-1)
    c, s = math.cos(rad), math.sin(rad)
    model = np.identity(4)
    model[0, 0] = c
    model[0, 1] = -s
    model[1, 0] = s
    model[1, 1] = c
    return model


def identity_model(angle: float) -> np.ndarray:
    """Model matrix that ignores the angle."""
    return np.identity(4)


def spot_model(angle: float) -> np.ndarray:
    """Rotation about the Y axis by ``angle`` degrees, scaled by 2.5."""
    rad = angle * MY_PI / 180.0
    c, s = math.cos(rad), math.sin(rad)
    rotation = np.array(
        [
            [c, 0, s, 0],
            [0, 1, 0, 0],
            [-s, 0, c, 0],
            [0, 0, 0, 1],
        ],
        dtype=float,
    )
    scale = np.diag([2.5, 2.5, 2.5, 1.0])
    translate = np.identity(4)
    return translate @ rotation @ scale


def _projection(top: float, aspect_ratio: float, z_near: float, z_far: float) -> np.ndarray:
    persp2orth = np.array(
        [
            [z_near, 0, 0, 0],
            [0, z_near, 0, 0],
            [0, 0, z_near + z_far, -z_near * z_far],
            [0, 0, 1, 0],
        ],
        dtype=float,
    )
    right = aspect_ratio * top
    orth_translate = np.identity(4)
    orth_translate[2, 3] = -(z_near + z_far) / 2
    orth_scale = np.identity(4)
    orth_scale[0, 0] = 1 / right
    orth_scale[1, 1] = 1 / top
    orth_scale[2, 2] = 2 / (z_near - z_far)
    return orth_scale @ orth_translate @ persp2orth


def perspective_projection(
    eye_fov: float, aspect_ratio: float, z_near: float, z_far: float
) -> np.ndarray:
    """Perspective projection; ``eye_fov`` is taken as an angle in radians."""
    top = math.tan(eye_fov / 2) * z_near
    return _projection(top, aspect_ratio, z_near, z_far)


def flipped_perspective_projection(
    eye_fov: float, aspect_ratio: float, z_near: float, z_far: float
) -> np.ndarray:
    """Perspective projection with ``eye_fov`` in degrees and the image flipped."""
    top = -math.tan(eye_fov / 180 * MY_PI / 2) * z_near
    return _projection(top, aspect_ratio, z_near, z_far)