import math

import numpy as np
import pytest

from rose_tiling import PHI, PHI_INVERSE, Line, Point, close, compare_points
from rose_tiling.geometry import ORIGIN, point_sort_key


def _random_point(rng, low=-1000.0, high=1000.0):
    x, y = rng.uniform(low, high, size=2)
    return Point(x, y)


def test_golden_ratio_constants():
    assert PHI == pytest.approx((1 + math.sqrt(5)) / 2)
    assert PHI_INVERSE == pytest.approx(1 / PHI)


def test_point_arithmetic_identities():
    rng = np.random.default_rng(2024)
    for _ in range(500):
        a = _random_point(rng)
        b = _random_point(rng)
        assert close(a, -(-a))
        assert close(a, a + ORIGIN)
        assert close(a, a - ORIGIN)
        assert close(a, 1.0 * a)
        assert close(a, a / 1.0)
        assert close(ORIGIN, 0.0 * a)
        assert close(a.cross(a), 0.0)
        assert close(a + b, b + a)
        assert close(a - b, -(b - a))
        assert close(a.cross(b), -(b.cross(a)))
        assert close(a.dot(b), b.dot(a))


def test_point_distance_and_normalization():
    rng = np.random.default_rng(7)
    for _ in range(500):
        a = _random_point(rng)
        b = _random_point(rng)
        assert close(ORIGIN.distance_to(a.normalized()), 1.0)
        assert close(a.distance_to(a), 0.0)
        assert close(a.distance_to(b), b.distance_to(a))


def test_rotation_direction():
    rotated = Point(1.0, 0.0).rotate(90.0)
    assert close(rotated, Point(0.0, 1.0))


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_point_transforms_round_trip(seed):
    rng = np.random.default_rng(seed)
    for _ in range(300):
        a = _random_point(rng)
        angle = float(rng.uniform(0.0, 360.0))
        assert close(a.mirror_x().mirror_x(), a)
        assert close(a.mirror_y().mirror_y(), a)
        assert close(a.mirror_x().mirror_y(), a.mirror_y().mirror_x())
        assert close(a.mirror_x().mirror_y(), a.rotate(180.0))
        assert close(a.rotate(0.0), a)
        assert close(a.rotate(360.0), a)
        assert close(a.rotate(angle).rotate(angle), a.rotate(2 * angle))
        assert close(a.rotate(angle).rotate(-angle), a)


def test_close_is_not_transitive():
    a = Point(0.0, 0.0)
    b = Point(0.6e-5, 0.0)
    c = Point(1.2e-5, 0.0)
    assert close(a, b)
    assert close(b, c)
    assert not close(a, c)


def test_points_do_not_use_closeness_for_equality():
    a = Point(1.0, 2.0)
    b = Point(1.0, 2.0)
    assert close(a, b)
    assert a != b
    assert a == a


def test_line_length_and_median():
    line = Line(Point(0.0, 0.0), Point(3.0, 4.0))
    assert line.length == pytest.approx(5.0)
    assert close(line.median, Point(1.5, 2.0))


def test_compare_points_orders_by_x_then_y():
    assert compare_points(Point(0.0, 5.0), Point(1.0, 0.0)) == -1
    assert compare_points(Point(1.0, 0.0), Point(1.0 + 1e-7, -1.0)) == 1
    assert compare_points(Point(1.0, 1.0), Point(1.0 + 1e-7, 1.0 - 1e-7)) == 0

    points = [Point(2.0, 0.0), Point(1.0, 3.0), Point(1.0, -3.0)]
    ordered = sorted(points, key=point_sort_key)
    assert [tuple(p) for p in ordered] == [(1.0, -3.0), (1.0, 3.0), (2.0, 0.0)]
