"""Bezier curves drawn with a direct cubic formula and de Casteljau's algorithm."""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence, Tuple

import numpy as np
from PIL import Image

Point = Tuple[float, float]

WINDOW_SIZE = 700
DEFAULT_OUTPUT = "my_bezier_curve.png"

# Channel indices in the window's blue-green-red layout.
_GREEN = 1
_RED = 2


def new_window(width: int = WINDOW_SIZE, height: int = WINDOW_SIZE) -> np.ndarray:
    """Black image with blue-green-red channels."""
    return np.zeros((height, width, 3), dtype=np.uint8)


def draw_circle(window: np.ndarray, center: Point, radius: float, color, thickness: float) -> None:
    """Draw a ring of the given stroke width, or a filled disc if thickness < 0."""
    cx, cy = center
    h, w = window.shape[:2]
    ys, xs = np.ogrid[:h, :w]
    dist = np.hypot(xs - cx, ys - cy)
    if thickness < 0:
        mask = dist <= radius
    else:
        half = thickness / 2
        mask = (dist >= radius - half) & (dist <= radius + half)
    window[mask] = color


def _mark(window: np.ndarray, x: float, y: float, channel: int) -> None:
    row, col = int(y), int(x)
    h, w = window.shape[:2]
    if 0 <= row < h and 0 <= col < w:
        window[row, col, channel] = 255


def naive_bezier(points: Sequence[Point], window: np.ndarray) -> None:
    """Draw the cubic curve of the first four points in red."""
    if len(points) < 4:
        raise ValueError("a cubic curve needs four control points")
    p0, p1, p2, p3 = (np.asarray(p, dtype=float) for p in points[:4])
    t = 0.0
    while t <= 1.0:
        point = (
            (1 - t) ** 3 * p0
            + 3 * t * (1 - t) ** 2 * p1
            + 3 * t ** 2 * (1 - t) * p2
            + t ** 3 * p3
        )
        _mark(window, point[0], point[1], _RED)
        t += 0.001


def recursive_bezier(control_points: Sequence[Point], t: float) -> Point:
    """Point of the curve at ``t``; ``t`` weights the earlier point of each pair."""
    pts: List[Point] = [(float(x), float(y)) for x, y in control_points]
    if not pts:
        raise ValueError("at least one control point is required")
    while len(pts) > 1:
        pts = [
            (t * a[0] + (1 - t) * b[0], t * a[1] + (1 - t) * b[1])
            for a, b in zip(pts, pts[1:])
        ]
    return pts[0]


def bezier(control_points: Sequence[Point], window: np.ndarray) -> None:
    """Draw the curve in green, sampling ``t`` from 0 up to but excluding 1."""
    step = np.float32(0.001)
    t = np.float32(0.0)
    while t < 1:
        x, y = recursive_bezier(control_points, float(t))
        _mark(window, x, y, _GREEN)
        t = np.float32(t + step)


def render_curve(
    control_points: Sequence[Point], width: int = WINDOW_SIZE, height: int = WINDOW_SIZE
) -> np.ndarray:
    """Window with the control points circled and, given four, both curves drawn."""
    window = new_window(width, height)
    for point in control_points:
        draw_circle(window, point, 3, (255, 255, 255), 3)
    if len(control_points) == 4:
        naive_bezier(control_points, window)
        bezier(control_points, window)
    return window


def _parse_point(text: str) -> Point:
    try:
        x, y = (float(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y, got {text!r}") from None
    return x, y


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Draw a cubic Bezier curve to an image.")
    parser.add_argument("points", nargs=4, type=_parse_point, metavar="X,Y")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    window = render_curve(args.points)
    Image.fromarray(np.ascontiguousarray(window[:, :, ::-1])).save(args.output)
    return 0