"""Fuse triangles that share a base back into rhombi.

Two triangles share a base exactly when their base medians coincide, so
pairing reduces to grouping triangles by that single point. ``merge_pairs``
groups by sorting; ``merge_pairs_fast`` buckets medians on a grid and hands
whatever the grid could not resolve to ``merge_pairs``.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .config import get_engine_config
from .geometry import close, point_sort_key
from .logging_utils import debug_log_call
from .triangles import Quadrilateral, RobinsonTriangle

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class MergeCheckError(RuntimeError):
    """Raised when two triangles share a base median but not a base."""


def _fuse(first: RobinsonTriangle, second: RobinsonTriangle) -> Quadrilateral:
    if not (close(first.a, second.a) or close(first.a, second.c)):
        raise MergeCheckError(
            f"base medians coincide but bases differ: {first!r} / {second!r}"
        )
    return Quadrilateral(first.a, first.b, first.c, second.b)


@debug_log_call(logger, log_result=False)
def merge_pairs(triangles: Iterable[RobinsonTriangle]) -> List[Quadrilateral]:
    """Pair triangles by sorting on their base medians. Unpaired ones are dropped."""

    keyed = [(triangle.base_median(), triangle) for triangle in triangles]
    keyed.sort(key=lambda item: point_sort_key(item[0]))

    quads: List[Quadrilateral] = []
    index = 0
    while index + 1 < len(keyed):
        median, current = keyed[index]
        next_median, following = keyed[index + 1]
        if close(median, next_median):
            quads.append(_fuse(current, following))
            index += 2
        else:
            index += 1
    return quads


def _grid_cells(triangles: Sequence[RobinsonTriangle], resolution: float) -> np.ndarray:
    medians = np.array([tuple(t.base_median()) for t in triangles], dtype=float)
    scale = resolution / triangles[0].leg_length
    return np.floor(medians * scale).astype(np.int64)


@debug_log_call(logger, log_result=False)
def merge_pairs_fast(
    triangles: Iterable[RobinsonTriangle], *, grid_resolution: Optional[float] = None
) -> List[Quadrilateral]:
    """Pair triangles through a grid hash, falling back to :func:`merge_pairs`.

    Medians are snapped to cells of ``leg / grid_resolution`` where ``leg`` is
    the leg length of the first triangle. A cell hit with a close median is
    fused with the occupant first; a hit with a distant median (collision) is
    set aside. Occupants left at the end are either boundary singletons or
    halves of a pair split across a cell boundary (miss); they and the
    collisions get a full sort-based pass, so no true pair is lost.
    """

    triangles = list(triangles)
    if not triangles:
        return []

    resolution = grid_resolution if grid_resolution is not None else get_engine_config().grid_resolution
    cells = _grid_cells(triangles, resolution)

    occupants: Dict[Cell, int] = {}
    collisions: List[RobinsonTriangle] = []
    quads: List[Quadrilateral] = []
    for index, triangle in enumerate(triangles):
        cell = (int(cells[index, 0]), int(cells[index, 1]))
        occupant_index = occupants.pop(cell, None)
        if occupant_index is None:
            occupants[cell] = index
            continue
        occupant = triangles[occupant_index]
        if close(occupant.base_median(), triangle.base_median()):
            quads.append(_fuse(occupant, triangle))
        else:
            occupants[cell] = occupant_index
            collisions.append(triangle)

    leftovers = [triangles[i] for i in sorted(occupants.values())] + collisions
    logger.debug(
        "merge_pairs_fast: %d pair(s) from grid, %d collision(s), %d triangle(s) to fallback",
        len(quads),
        len(collisions),
        len(leftovers),
    )
    if leftovers:
        quads.extend(merge_pairs(leftovers))
    return quads


__all__ = ["MergeCheckError", "merge_pairs", "merge_pairs_fast"]
