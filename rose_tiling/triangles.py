"""Robinson triangles and the rhombi assembled from them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Tuple

from .geometry import PHI, PHI_INVERSE, Line, Point, close


class InvalidTriangleError(RuntimeError):
    """Raised when three vertices do not form a Robinson triangle.

    This signals malformed geometry upstream (a broken seed or transform),
    never a property of well formed input.
    """


class TriangleKind(enum.Enum):
    """Shape family of a Robinson triangle, keyed by its base-to-leg ratio."""

    SMALL = "small"
    LARGE = "large"

    @property
    def base_to_leg_ratio(self) -> float:
        return PHI_INVERSE if self is TriangleKind.SMALL else PHI

    @property
    def base_angle(self) -> float:
        """Interior angle at each base vertex, in degrees."""

        return 72.0 if self is TriangleKind.SMALL else 36.0


def infer_kind(a: Point, b: Point, c: Point) -> TriangleKind:
    """Classify the triangle with apex *b* and base *a*-*c*."""

    ab = Line(a, b).length
    bc = Line(b, c).length
    ca = Line(c, a).length
    if ab == 0.0:
        raise InvalidTriangleError(f"degenerate triangle, zero-length leg at {a!r}")
    if not close(bc / ab, 1.0):
        raise InvalidTriangleError(
            f"triangle is not isosceles: legs {ab:.9g} and {bc:.9g}"
        )
    ratio = ca / ab
    for kind in TriangleKind:
        if close(ratio, kind.base_to_leg_ratio):
            return kind
    raise InvalidTriangleError(f"base-to-leg ratio {ratio:.9g} matches no triangle kind")


@dataclass(frozen=True, eq=False)
class RobinsonTriangle:
    """Isosceles triangle with apex ``b`` and base ``a``-``c``.

    ``kind`` is always inferred from the vertices; there is no way to build
    a triangle whose tag disagrees with its geometry.
    """

    a: Point
    b: Point
    c: Point
    kind: TriangleKind = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", infer_kind(self.a, self.b, self.c))

    @classmethod
    def from_base(
        cls, a: Point, c: Point, kind: TriangleKind, right_handed: bool
    ) -> "RobinsonTriangle":
        """Build the triangle of *kind* standing on base *a*-*c*.

        Right-handed means the path a -> b -> c turns clockwise in rendering
        coordinates, so a->b is a->c rotated anti-clockwise.
        """

        angle = -kind.base_angle if right_handed else kind.base_angle
        direction = (c - a).rotate(angle).normalized()
        leg = Line(a, c).length / kind.base_to_leg_ratio
        triangle = cls(a, a + leg * direction, c)
        if triangle.kind is not kind:
            raise InvalidTriangleError(
                f"from_base produced a {triangle.kind.value} triangle, expected {kind.value}"
            )
        return triangle

    @property
    def vertices(self) -> Tuple[Point, Point, Point]:
        return (self.a, self.b, self.c)

    @property
    def leg_length(self) -> float:
        return Line(self.a, self.b).length

    @property
    def base(self) -> Line:
        return Line(self.a, self.c)

    def base_median(self) -> Point:
        return (self.a + self.c) / 2.0

    def rotate(self, angle: float) -> "RobinsonTriangle":
        return RobinsonTriangle(self.a.rotate(angle), self.b.rotate(angle), self.c.rotate(angle))

    def mirror_x(self) -> "RobinsonTriangle":
        return RobinsonTriangle(self.a.mirror_x(), self.b.mirror_x(), self.c.mirror_x())

    def mirror_y(self) -> "RobinsonTriangle":
        return RobinsonTriangle(self.a.mirror_y(), self.b.mirror_y(), self.c.mirror_y())

    def transformed(self, scale: float, offset: Point) -> "RobinsonTriangle":
        """Scale about the origin, then translate by *offset*."""

        return RobinsonTriangle(
            scale * self.a + offset,
            scale * self.b + offset,
            scale * self.c + offset,
        )

    def is_close(self, other: "RobinsonTriangle") -> bool:
        return self.a.is_close(other.a) and self.b.is_close(other.b) and self.c.is_close(other.c)

    def __repr__(self) -> str:
        return f"RobinsonTriangle({self.kind.value}, a={self.a!r}, b={self.b!r}, c={self.c!r})"


@dataclass(frozen=True, eq=False)
class Quadrilateral:
    """Rhombus fused from two triangles sharing the base ``a``-``c``."""

    a: Point
    b: Point
    c: Point
    d: Point

    @property
    def vertices(self) -> Tuple[Point, Point, Point, Point]:
        return (self.a, self.b, self.c, self.d)

    @property
    def kind(self) -> TriangleKind:
        # The shared base is the long diagonal only for the thick rhombus.
        if Line(self.a, self.c).length > Line(self.b, self.d).length:
            return TriangleKind.LARGE
        return TriangleKind.SMALL

    @property
    def center(self) -> Point:
        return (self.a + self.b + self.c + self.d) / 4.0

    def is_close(self, other: "Quadrilateral") -> bool:
        return all(p.is_close(q) for p, q in zip(self.vertices, other.vertices))


__all__ = [
    "InvalidTriangleError",
    "TriangleKind",
    "infer_kind",
    "RobinsonTriangle",
    "Quadrilateral",
]
