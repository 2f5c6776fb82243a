"""Penrose substitution: repeated decomposition of Robinson triangles."""

from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

import numpy as np

from .config import get_engine_config
from .geometry import PHI
from .logging_utils import debug_log_call
from .triangles import RobinsonTriangle, TriangleKind

logger = logging.getLogger(__name__)

# Column j holds the (small, large) children of a triangle of kind j.
_KIND_TRANSITIONS = np.array([[1, 1], [1, 2]], dtype=np.int64)


def decompose(triangle: RobinsonTriangle) -> List[RobinsonTriangle]:
    """Replace *triangle* by the two or three triangles of the next generation."""

    a, b, c = triangle.a, triangle.b, triangle.c
    if triangle.kind is TriangleKind.SMALL:
        #        B
        #        /\
        #       /  \
        #   D  *    \
        #     /      \
        #  A /________\ C
        # |BD| == |BA| / phi
        d = b + (a - b) / PHI
        return [RobinsonTriangle(d, c, a), RobinsonTriangle(c, d, b)]

    #   A
    #   |\
    #   | * D
    #   |  \
    # E *   > B
    #   |  /
    #   | /
    #   |/
    #   C
    # |AD| == |AB| / phi and |AE| == |AC| / phi
    d = a + (b - a) / PHI
    e = a + (c - a) / PHI
    return [
        RobinsonTriangle(e, d, a),
        RobinsonTriangle(c, e, b),
        RobinsonTriangle(d, e, b),
    ]


@debug_log_call(logger, log_result=False)
def generate_tiling(seed: Iterable[RobinsonTriangle], generations: int) -> List[RobinsonTriangle]:
    """Decompose every triangle of *seed* ``generations`` times."""

    if generations < 0:
        raise ValueError(f"generations must be non-negative, got {generations}")

    threshold = get_engine_config().generation_warning_threshold
    if generations > threshold:
        logger.warning(
            "generate_tiling: %d generations requested (threshold %d); triangle count grows ~2.6x per generation",
            generations,
            threshold,
        )

    triangles = list(seed)
    for generation in range(1, generations + 1):
        triangles = [child for triangle in triangles for child in decompose(triangle)]
        logger.debug("generate_tiling: generation %d -> %d triangle(s)", generation, len(triangles))
    return triangles


def count_kinds(triangles: Iterable[RobinsonTriangle]) -> Tuple[int, int]:
    """Return the ``(small, large)`` triangle counts."""

    small = large = 0
    for triangle in triangles:
        if triangle.kind is TriangleKind.SMALL:
            small += 1
        else:
            large += 1
    return small, large


def expected_triangle_count(seed: Iterable[RobinsonTriangle], generations: int) -> int:
    """Closed-form size of ``generate_tiling(seed, generations)``."""

    counts = np.array(count_kinds(seed), dtype=np.int64)
    grown = np.linalg.matrix_power(_KIND_TRANSITIONS, generations) @ counts
    return int(grown.sum())


__all__ = ["decompose", "generate_tiling", "count_kinds", "expected_triangle_count"]
