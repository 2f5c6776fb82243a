"""Unit-scale starting patterns for the tiling."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .geometry import ORIGIN, PHI, PHI_INVERSE, Point
from .triangles import RobinsonTriangle, TriangleKind


class Seed:
    """Unit-scale triangle set.

    A seed is consumed by :meth:`transform`; afterwards only the returned
    triangle list remains.
    """

    __slots__ = ("_triangles",)

    def __init__(self, triangles: Sequence[RobinsonTriangle]) -> None:
        self._triangles: Optional[Tuple[RobinsonTriangle, ...]] = tuple(triangles)

    def __len__(self) -> int:
        return len(self._triangles or ())

    def transform(self, center: Point, scale: float) -> List[RobinsonTriangle]:
        if self._triangles is None:
            raise RuntimeError("seed has already been transformed")
        triangles, self._triangles = self._triangles, None
        return [t.transformed(scale, center) for t in triangles]


def rose() -> Seed:
    p1 = Point(1.0, 0.0)
    p2 = Point(PHI, 0.0)
    p3 = p2 + p1.rotate(36.0)
    p4 = p2.rotate(36.0)
    p5 = (p2 + p1).rotate(36.0)

    top_half = [
        RobinsonTriangle(p4, p1, ORIGIN),  # inner petal
        RobinsonTriangle(p1, p4, p2),  # outer petal
        RobinsonTriangle(p5, p4, p2),  # leaf
        RobinsonTriangle(p5, p3, p2),  # leaf
    ]
    sector = top_half + [t.mirror_y() for t in top_half]

    triangles = list(sector)
    for step in range(1, 5):
        triangles.extend(t.rotate(72.0 * step) for t in sector)
    return Seed(triangles)


def rhombus(kind: TriangleKind) -> Seed:
    base = PHI_INVERSE if kind is TriangleKind.SMALL else PHI
    right = Point(base / 2.0, 0.0)
    left = -right
    return Seed(
        [
            RobinsonTriangle.from_base(left, right, kind, True),
            RobinsonTriangle.from_base(left, right, kind, False),
        ]
    )


def pizza() -> Seed:
    p1 = Point(1.0, 0.0)
    p2 = p1.rotate(36.0)
    p3 = p1.rotate(72.0)

    first = RobinsonTriangle(p1, ORIGIN, p2)
    second = RobinsonTriangle(p3, ORIGIN, p2)
    triangles = [first, second]
    for step in range(1, 5):
        triangles.append(first.rotate(72.0 * step))
        triangles.append(second.rotate(72.0 * step))
    return Seed(triangles)


_SEED_BUILDERS: Dict[str, Callable[[], Seed]] = {
    "rose": rose,
    "large-rhombus": lambda: rhombus(TriangleKind.LARGE),
    "small-rhombus": lambda: rhombus(TriangleKind.SMALL),
    "pizza": pizza,
}

SEED_NAMES: Tuple[str, ...] = tuple(_SEED_BUILDERS)


def get_seed(name: str) -> Seed:
    try:
        builder = _SEED_BUILDERS[name]
    except KeyError:
        raise ValueError(
            f"unknown seed {name!r}; expected one of {', '.join(SEED_NAMES)}"
        ) from None
    return builder()


__all__ = ["Seed", "rose", "rhombus", "pizza", "SEED_NAMES", "get_seed"]
