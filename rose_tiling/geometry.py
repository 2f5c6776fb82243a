"""Planar point and segment primitives used by the tiling engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Iterator

PHI = (1.0 + math.sqrt(5.0)) / 2.0
PHI_INVERSE = PHI - 1.0  # == 1 / PHI
TOLERANCE = 1e-5


def _close_scalar(a: float, b: float) -> bool:
    return abs(a - b) < TOLERANCE


def close(a: Any, b: Any) -> bool:
    """Return ``True`` when *a* and *b* agree within :data:`TOLERANCE`.

    Scalars are compared directly; geometric values delegate to their own
    ``is_close``. The relation is reflexive and symmetric but not transitive,
    so it is deliberately kept out of ``__eq__`` and ``__hash__``.
    """

    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return _close_scalar(float(a), float(b))
    return bool(a.is_close(b))


@dataclass(frozen=True, eq=False)
class Point:
    """Immutable 2D vector. Positive rotation angles turn clockwise when +Y points down."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r})"

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Point":
        return self * (1.0 / divisor)

    def dot(self, other: "Point") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Point") -> float:
        return self.x * other.y - self.y * other.x

    def norm(self) -> float:
        return math.hypot(self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def normalized(self) -> "Point":
        return self / self.norm()

    def rotate(self, angle: float) -> "Point":
        """Rotate about the origin by *angle* degrees."""

        theta = math.radians(angle)
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        return Point(self.x * cos_t - self.y * sin_t, self.x * sin_t + self.y * cos_t)

    def mirror_x(self) -> "Point":
        return Point(-self.x, self.y)

    def mirror_y(self) -> "Point":
        return Point(self.x, -self.y)

    def is_close(self, other: "Point") -> bool:
        return _close_scalar(self.x, other.x) and _close_scalar(self.y, other.y)


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True, eq=False)
class Line:
    start: Point
    end: Point

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def median(self) -> Point:
        return (self.start + self.end) / 2.0

    def is_close(self, other: "Line") -> bool:
        return self.start.is_close(other.start) and self.end.is_close(other.end)


def compare_points(a: Point, b: Point) -> int:
    """Order by x, falling back to y when the x coordinates are close.

    Built on :func:`close`, so the order is only consistent inside tight,
    well separated clusters. Fine for grouping coincident base medians; not a
    general purpose comparator.
    """

    if _close_scalar(a.x, b.x):
        if _close_scalar(a.y, b.y):
            return 0
        return 1 if a.y > b.y else -1
    return 1 if a.x > b.x else -1


point_sort_key = cmp_to_key(compare_points)


__all__ = [
    "PHI",
    "PHI_INVERSE",
    "TOLERANCE",
    "ORIGIN",
    "Point",
    "Line",
    "close",
    "compare_points",
    "point_sort_key",
]
