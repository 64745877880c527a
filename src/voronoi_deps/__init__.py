import logging as _logging

from .config import DependencyConfig
from .constants import SENTINEL, VERTEX_DEGREE
from .datastructures import VertexDependencies, DegenerateVertex
from .dependencies import compute_vertex_dependencies, int_v_depends_on_x
from .diagram import from_scipy_voronoi, voronoin
from .errors import (
    VertexDependencyError,
    InvalidBoundsError,
    SentinelCollisionError,
    VertexIndexError,
    DegenerateVertexError,
)
from .geometry import interior_mask, interior_vertex_indices, validate_bounds
from .inverse import build_inverse_index
from .logging_utils import configure_logging, get_logger
from .membership import pad_membership
from .resolver import Incidence, resolve_dependencies, assemble_dependency_table
from .sampling import sample_sites_in_box

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__all__ = [
    "DependencyConfig",
    "SENTINEL",
    "VERTEX_DEGREE",
    "VertexDependencies",
    "DegenerateVertex",
    "compute_vertex_dependencies",
    "int_v_depends_on_x",
    "from_scipy_voronoi",
    "voronoin",
    "VertexDependencyError",
    "InvalidBoundsError",
    "SentinelCollisionError",
    "VertexIndexError",
    "DegenerateVertexError",
    "interior_mask",
    "interior_vertex_indices",
    "validate_bounds",
    "build_inverse_index",
    "configure_logging",
    "get_logger",
    "pad_membership",
    "Incidence",
    "resolve_dependencies",
    "assemble_dependency_table",
    "sample_sites_in_box",
]
