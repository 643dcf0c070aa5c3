import io
import math

import pytest

from graphicslab.vecmath import (
    BAR_WIDTH,
    Vec2,
    Vec3,
    clamp,
    cross,
    dot,
    lerp,
    normalize,
    progress_bar,
    random_float,
    solve_quadratic,
    update_progress,
)


def test_fill_sets_all_components():
    assert Vec3.fill(2.5) == Vec3(2.5, 2.5, 2.5)
    assert Vec2.fill(-1.0) == Vec2(-1.0, -1.0)


def test_add_sub_round_trip():
    a = Vec3(1, 2, 3)
    b = Vec3(4, -5, 6)
    assert (a + b) - b == a


def test_scalar_multiplication_commutes():
    a = Vec3(1.5, -2, 3)
    assert a * 3 == 3 * a


def test_componentwise_product_sums_to_dot():
    a = Vec3(1, 2, 3)
    b = Vec3(4, 5, 6)
    p = a * b
    assert p.x + p.y + p.z == dot(a, b)


def test_division_inverts_multiplication():
    a = Vec3(2, 4, 8)
    assert (a * 4) / 4 == a


def test_negation_cancels():
    a = Vec3(1, -2, 3)
    assert a + (-a) == Vec3()


def test_str_format():
    assert str(Vec3(1, 2, 3)) == "1, 2, 3"


def test_vec2_operations():
    a = Vec2(1, 2)
    b = Vec2(3, 4)
    assert a + b == b + a
    assert a * 2 == 2 * a
    assert (a * 2) + a == a * 3


def test_normalize_gives_unit_length():
    n = normalize(Vec3(3, -4, 12))
    assert math.sqrt(dot(n, n)) == pytest.approx(1.0)


def test_normalize_zero_unchanged():
    assert normalize(Vec3()) == Vec3()


def test_cross_is_orthogonal():
    a = Vec3(1, 2, 3)
    b = Vec3(-2, 0.5, 4)
    c = cross(a, b)
    assert dot(c, a) == pytest.approx(0.0, abs=1e-12)
    assert dot(c, b) == pytest.approx(0.0, abs=1e-12)
    assert cross(b, a) == -c


def test_lerp_endpoints():
    a = Vec3(1, 2, 3)
    b = Vec3(7, 8, 9)
    assert lerp(a, b, 0) == a
    assert lerp(a, b, 1) == b


def test_clamp():
    assert clamp(0, 1, 2) == 1
    assert clamp(0, 1, -1) == 0
    assert clamp(0, 1, 0.5) == 0.5


@pytest.mark.parametrize("a,b,c", [(1, -3, 2), (2, 5, -3), (-1, 4, 1)])
def test_solve_quadratic_roots_satisfy_equation(a, b, c):
    x0, x1 = solve_quadratic(a, b, c)
    assert x0 <= x1
    for x in (x0, x1):
        assert a * x * x + b * x + c == pytest.approx(0.0, abs=1e-9)


def test_solve_quadratic_double_root():
    x0, x1 = solve_quadratic(1, -2, 1)
    assert x0 == x1
    assert x0 * x0 - 2 * x0 + 1 == pytest.approx(0.0)


def test_solve_quadratic_no_real_roots():
    assert solve_quadratic(1, 0, 1) is None


def test_random_float_range():
    for _ in range(100):
        value = random_float()
        assert 0.0 <= value < 1.0


def test_progress_bar_layout():
    bar = progress_bar(0.25)
    body = bar[1 : 1 + BAR_WIDTH]
    assert bar.startswith("[")
    assert bar[1 + BAR_WIDTH] == "]"
    assert body.index(">") == body.count("=")
    assert bar.endswith(" %\r")


def test_progress_bar_full():
    bar = progress_bar(1.0)
    assert bar == "[" + "=" * BAR_WIDTH + "] 100 %\r"


def test_update_progress_writes_bar():
    stream = io.StringIO()
    update_progress(0.5, stream)
    assert stream.getvalue() == progress_bar(0.5)