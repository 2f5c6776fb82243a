"""Array views of tiles for rendering and analysis code."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .arcs import Shape
from .triangles import TriangleKind


def to_vertex_array(shapes: Sequence[Shape]) -> np.ndarray:
    """Stack tile vertices into an array of shape ``(n, k, 2)``.

    ``k`` is 3 for triangles and 4 for rhombi; mixing the two raises
    ``ValueError``. An empty input gives an array of shape ``(0, 0, 2)``.
    """

    if not shapes:
        return np.zeros((0, 0, 2), dtype=float)
    sizes = {len(shape.vertices) for shape in shapes}
    if len(sizes) != 1:
        raise ValueError("cannot stack triangles and rhombi into one array")
    return np.array(
        [[tuple(point) for point in shape.vertices] for shape in shapes],
        dtype=float,
    )


def kind_array(shapes: Sequence[Shape]) -> np.ndarray:
    """Boolean mask, ``True`` where the tile is of the large kind."""

    return np.fromiter(
        (shape.kind is TriangleKind.LARGE for shape in shapes),
        dtype=bool,
        count=len(shapes),
    )


__all__ = ["to_vertex_array", "kind_array"]
