from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from .config import DependencyConfig
from .datastructures import DegenerateVertex, VertexDependencies
from .errors import DegenerateVertexError
from .geometry import as_vertex_array, interior_vertex_indices
from .inverse import build_inverse_index
from .logging_utils import get_logger
from .membership import pad_membership
from .resolver import Incidence, assemble_dependency_table, resolve_dependencies

logger = get_logger(__name__)


def _drop_degenerate(incidence: Incidence, interior: np.ndarray, degree: int):
    """
    Remove vertices whose site count differs from degree and renumber the
    survivors 1..K' in their original order.
    """
    keep = incidence.counts == degree
    skipped = []
    for i in np.flatnonzero(~keep):
        sites = incidence.site[incidence.local_vertex == i + 1]
        skipped.append(DegenerateVertex(int(interior[i]), tuple(int(s) for s in sites)))

    renumber = np.cumsum(keep)
    hit_kept = keep[incidence.local_vertex - 1]
    kept = Incidence(
        local_vertex=renumber[incidence.local_vertex[hit_kept] - 1],
        site=incidence.site[hit_kept],
        counts=incidence.counts[keep],
    )
    return kept, interior[keep], tuple(skipped)


def compute_vertex_dependencies(
    vertices,
    cells: Sequence,
    bounds,
    *,
    config: Optional[DependencyConfig] = None,
) -> VertexDependencies:
    """
    Index interior Voronoi vertices by the sites that generate them.

    vertices: (M,2) vertex coordinates; vertex j is row j-1. Points at
              infinity are allowed and treated as exterior.
    cells:    N sequences of 1-based vertex indices, one per site.
    bounds:   (lo, hi); interior means lo < x < hi and lo < y < hi.

    Raises DegenerateVertexError for an interior vertex not shared by
    exactly config.degree sites, unless config.on_degenerate == "skip".
    """
    cfg = config or DependencyConfig()

    V = as_vertex_array(vertices)
    interior = interior_vertex_indices(V, bounds)
    membership = pad_membership(cells, n_vertices=len(V))
    n_sites, width = membership.shape

    incidence = resolve_dependencies(
        membership,
        interior,
        chunk_size=cfg.resolve_chunk_size(n_sites, width),
        max_workers=cfg.max_workers,
    )

    skipped = ()
    bad = np.flatnonzero(incidence.counts != cfg.degree)
    if len(bad):
        if cfg.on_degenerate == "raise":
            i = int(bad[0])
            sites = incidence.site[incidence.local_vertex == i + 1]
            raise DegenerateVertexError(
                int(interior[i]), i + 1, tuple(int(s) for s in sites), degree=cfg.degree
            )
        incidence, interior, skipped = _drop_degenerate(incidence, interior, cfg.degree)
        logger.warning(
            "skipped %d degenerate interior vertices: %s",
            len(skipped), [d.vertex_index for d in skipped],
        )

    dep_sites = assemble_dependency_table(incidence, cfg.degree)
    site_vertices = build_inverse_index(incidence.local_vertex, incidence.site, n_sites)
    int_vertices = V[interior - 1].copy() if len(interior) else np.zeros((0, 2), dtype=np.float64)

    logger.debug(
        "%d of %d vertices interior, %d sites, %d incidences",
        len(interior), len(V), n_sites, dep_sites.size,
    )
    return VertexDependencies(
        int_vertices=int_vertices,
        dep_sites=dep_sites,
        site_vertices=site_vertices,
        interior_indices=interior,
        skipped=skipped,
    )


def int_v_depends_on_x(vertices, cells: Sequence, bounds, *, config: Optional[DependencyConfig] = None):
    """Tuple form of compute_vertex_dependencies(): (intV, vDepX, xGenV)."""
    return compute_vertex_dependencies(vertices, cells, bounds, config=config).as_tuple()
