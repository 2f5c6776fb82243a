from .geometry import PHI, PHI_INVERSE, TOLERANCE, Point, Line, close, compare_points
from .triangles import (
    InvalidTriangleError,
    TriangleKind,
    RobinsonTriangle,
    Quadrilateral,
    infer_kind,
)
from .seeds import Seed, SEED_NAMES, get_seed, rose, rhombus, pizza
from .tiling import decompose, generate_tiling, count_kinds, expected_triangle_count
from .merge import MergeCheckError, merge_pairs, merge_pairs_fast
from .arcs import Arc, matching_arcs
from .export import to_vertex_array, kind_array
from .config import EngineConfig, get_engine_config, set_engine_config

__all__ = [
    'PHI',
    'PHI_INVERSE',
    'TOLERANCE',
    'Point',
    'Line',
    'close',
    'compare_points',
    'InvalidTriangleError',
    'TriangleKind',
    'RobinsonTriangle',
    'Quadrilateral',
    'infer_kind',
    'Seed',
    'SEED_NAMES',
    'get_seed',
    'rose',
    'rhombus',
    'pizza',
    'decompose',
    'generate_tiling',
    'count_kinds',
    'expected_triangle_count',
    'MergeCheckError',
    'merge_pairs',
    'merge_pairs_fast',
    'Arc',
    'matching_arcs',
    'to_vertex_array',
    'kind_array',
    'EngineConfig',
    'get_engine_config',
    'set_engine_config',
]
