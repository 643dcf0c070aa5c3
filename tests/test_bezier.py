import numpy as np
import pytest
from PIL import Image

from graphicslab.bezier import (
    bezier,
    draw_circle,
    main,
    naive_bezier,
    new_window,
    recursive_bezier,
    render_curve,
)

POINTS = [(100.0, 100.0), (200.0, 300.0), (400.0, 300.0), (500.0, 100.0)]


def test_new_window_shape_and_black():
    window = new_window(30, 20)
    assert window.shape == (20, 30, 3)
    assert not window.any()


def test_recursive_bezier_endpoints():
    assert recursive_bezier(POINTS, 0.0) == POINTS[-1]
    assert recursive_bezier(POINTS, 1.0) == POINTS[0]


def test_recursive_bezier_linear_midpoint():
    assert recursive_bezier([(0, 0), (10, 20)], 0.5) == pytest.approx((5.0, 10.0))


@pytest.mark.parametrize("t", [0.1, 0.33, 0.8])
def test_recursive_bezier_reversal_symmetry(t):
    forward = recursive_bezier(POINTS, t)
    backward = recursive_bezier(list(reversed(POINTS)), 1 - t)
    assert forward == pytest.approx(backward)


def test_recursive_bezier_single_point():
    assert recursive_bezier([(3, 4)], 0.7) == (3.0, 4.0)


def test_recursive_bezier_empty():
    with pytest.raises(ValueError):
        recursive_bezier([], 0.5)


def test_naive_bezier_marks_red_only():
    window = new_window()
    naive_bezier(POINTS, window)
    assert window[100, 100, 2] == 255
    assert not window[:, :, 0].any()
    assert not window[:, :, 1].any()


def test_naive_bezier_needs_four_points():
    with pytest.raises(ValueError):
        naive_bezier(POINTS[:3], new_window())


def test_bezier_marks_green_only():
    window = new_window()
    bezier(POINTS, window)
    assert window[100, 500, 1] == 255
    assert not window[:, :, 2].any()


def test_draw_circle_ring():
    window = new_window(20, 20)
    draw_circle(window, (10, 10), 3, (255, 255, 255), 3)
    assert list(window[10, 13]) == [255, 255, 255]
    assert not window[10, 10].any()
    assert not window[0, 0].any()


def test_draw_circle_filled():
    window = new_window(20, 20)
    draw_circle(window, (10, 10), 3, (1, 2, 3), -1)
    assert list(window[10, 10]) == [1, 2, 3]
    assert not window[10, 15].any()


def test_render_curve_draws_both():
    window = render_curve(POINTS)
    assert window[100, 500, 1] == 255
    assert window[100, 100, 2] == 255


def test_render_curve_incomplete_only_circles():
    window = render_curve(POINTS[:2])
    assert not window[200, 150].any()
    assert list(window[100, 103]) == [255, 255, 255]


def test_main_writes_image(tmp_path):
    out = tmp_path / "curve.png"
    assert main(["-o", str(out), "100,100", "200,300", "400,300", "500,100"]) == 0
    with Image.open(out) as img:
        rgb = np.asarray(img.convert("RGB"))
    assert rgb.shape == (700, 700, 3)
    assert rgb[100, 100, 0] == 255
    assert rgb[100, 500, 1] == 255


def test_main_rejects_bad_point(tmp_path):
    with pytest.raises(SystemExit):
        main(["-o", str(tmp_path / "x.png"), "1,2", "3", "4,5", "6,7"])