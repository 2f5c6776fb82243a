"""Matching-arc geometry for decorating tiles."""

from __future__ import annotations

from typing import NamedTuple, Tuple, Union

from .geometry import PHI, PHI_INVERSE, Line, Point
from .triangles import Quadrilateral, RobinsonTriangle, TriangleKind

Shape = Union[RobinsonTriangle, Quadrilateral]


class Arc(NamedTuple):
    """Circular arc from ``start`` to ``end`` around ``center``."""

    start: Point
    center: Point
    end: Point

    @property
    def radius(self) -> float:
        return Line(self.start, self.center).length

    @property
    def sweep(self) -> bool:
        """``True`` when the arc turns clockwise in rendering coordinates."""

        return (self.start - self.center).cross(self.end - self.center) > 0.0


def _triangle_arcs(triangle: RobinsonTriangle) -> Tuple[Arc, Arc]:
    # Fraction of the base that spans half a leg.
    ratio = PHI if triangle.kind is TriangleKind.SMALL else PHI_INVERSE
    a, b, c = triangle.a, triangle.b, triangle.c
    return (
        Arc(Line(a, b).median, a, a + 0.5 * ratio * (c - a)),
        Arc(Line(c, b).median, c, c + 0.5 * ratio * (a - c)),
    )


def _quadrilateral_arcs(quad: Quadrilateral) -> Tuple[Arc, Arc]:
    a, b, c, d = quad.vertices
    return (
        Arc(Line(a, b).median, a, Line(a, d).median),
        Arc(Line(c, b).median, c, Line(c, d).median),
    )


def matching_arcs(shape: Shape) -> Tuple[Arc, Arc]:
    """Return the two matching arcs of a triangle or rhombus.

    Each arc is centered on a base vertex with a radius of half a leg, so
    arcs continue across every correctly matched edge of the tiling.
    """

    if isinstance(shape, Quadrilateral):
        return _quadrilateral_arcs(shape)
    return _triangle_arcs(shape)


__all__ = ["Arc", "Shape", "matching_arcs"]
