import numpy as np
import pytest

from rose_tiling import (
    PHI,
    InvalidTriangleError,
    Point,
    Quadrilateral,
    RobinsonTriangle,
    TriangleKind,
    close,
    infer_kind,
)


def _random_base(rng):
    while True:
        a = Point(*rng.uniform(-1000.0, 1000.0, size=2))
        c = Point(*rng.uniform(-1000.0, 1000.0, size=2))
        if a.distance_to(c) > 1.0:
            return a, c


@pytest.mark.parametrize("kind", list(TriangleKind))
@pytest.mark.parametrize("right_handed", [True, False])
def test_from_base_reinfers_requested_kind(kind, right_handed):
    rng = np.random.default_rng(11)
    for _ in range(300):
        a, c = _random_base(rng)
        triangle = RobinsonTriangle.from_base(a, c, kind, right_handed)
        assert triangle.kind is kind
        assert infer_kind(triangle.a, triangle.b, triangle.c) is kind
        assert close(triangle.a, a)
        assert close(triangle.c, c)


def test_from_base_handedness_sets_turn_direction():
    a, c = Point(0.0, 0.0), Point(1000.0, 0.0)
    right = RobinsonTriangle.from_base(a, c, TriangleKind.LARGE, True)
    left = RobinsonTriangle.from_base(a, c, TriangleKind.LARGE, False)
    # +Y points down: a clockwise a->b->c path has its apex at negative y.
    assert (right.b - right.a).cross(right.c - right.b) > 0
    assert (left.b - left.a).cross(left.c - left.b) < 0
    assert close(right.b, left.b.mirror_y())


def test_side_ratios_match_kind():
    a, c = Point(0.0, 0.0), Point(PHI, 0.0)
    large = RobinsonTriangle.from_base(a, c, TriangleKind.LARGE, True)
    assert large.leg_length == pytest.approx(1.0)
    small = RobinsonTriangle.from_base(Point(0.0, 0.0), Point(1.0 / PHI, 0.0), TriangleKind.SMALL, False)
    assert small.leg_length == pytest.approx(1.0)
    assert close(small.base_median(), Point(0.5 / PHI, 0.0))


def test_infer_kind_rejects_non_isosceles_triangle():
    with pytest.raises(InvalidTriangleError, match="isosceles"):
        infer_kind(Point(0.0, 0.0), Point(0.0, 1.0), Point(2.0, 0.0))


def test_infer_kind_rejects_equilateral_triangle():
    b = Point(0.5, 3 ** 0.5 / 2)
    with pytest.raises(InvalidTriangleError, match="ratio"):
        RobinsonTriangle(Point(0.0, 0.0), b, Point(1.0, 0.0))


def test_infer_kind_rejects_degenerate_triangle():
    p = Point(1.0, 1.0)
    with pytest.raises(InvalidTriangleError):
        infer_kind(p, Point(1.0, 1.0), Point(3.0, 1.0))


def test_kind_cannot_be_reassigned():
    triangle = RobinsonTriangle.from_base(Point(0.0, 0.0), Point(PHI, 0.0), TriangleKind.LARGE, True)
    with pytest.raises(AttributeError):
        triangle.kind = TriangleKind.SMALL  # type: ignore[misc]


@pytest.mark.parametrize("kind", list(TriangleKind))
def test_triangle_transforms_round_trip(kind):
    rng = np.random.default_rng(13)
    for _ in range(100):
        a, c = _random_base(rng)
        for right_handed in (True, False):
            triangle = RobinsonTriangle.from_base(a, c, kind, right_handed)
            angle = float(rng.uniform(0.0, 360.0))
            assert close(triangle.mirror_x().mirror_x(), triangle)
            assert close(triangle.mirror_y().mirror_y(), triangle)
            assert close(triangle.mirror_x().mirror_y(), triangle.rotate(180.0))
            assert close(triangle.rotate(0.0), triangle)
            assert close(triangle.rotate(360.0), triangle)
            assert close(triangle.rotate(angle).rotate(-angle), triangle)
            assert triangle.rotate(angle).kind is kind
            assert triangle.mirror_x().kind is kind


def test_transformed_scales_then_translates():
    triangle = RobinsonTriangle.from_base(Point(-0.5, 0.0), Point(0.5, 0.0), TriangleKind.SMALL, True)
    moved = triangle.transformed(10.0, Point(100.0, 200.0))
    assert moved.kind is TriangleKind.SMALL
    assert close(moved.a, Point(95.0, 200.0))
    assert close(moved.c, Point(105.0, 200.0))
    assert moved.leg_length == pytest.approx(10.0 * triangle.leg_length)


@pytest.mark.parametrize("kind", list(TriangleKind))
def test_quadrilateral_kind_from_diagonals(kind):
    a, c = Point(0.0, 0.0), Point(1000.0, 0.0)
    first = RobinsonTriangle.from_base(a, c, kind, True)
    second = RobinsonTriangle.from_base(a, c, kind, False)
    quad = Quadrilateral(first.a, first.b, first.c, second.b)
    assert quad.kind is kind
    assert close(quad.center, Point(500.0, 0.0))
