from __future__ import annotations
from dataclasses import dataclass, field
import numpy as np
from typing import List, Tuple


@dataclass(frozen=True)
class DegenerateVertex:
    vertex_index: int            # 1-based index into the input vertices
    sites: Tuple[int, ...]       # matched sites, ascending


@dataclass(frozen=True)
class VertexDependencies:
    """
    Interior vertices of a Voronoi diagram and the sites they depend on.

    int_vertices:     (K,2) coordinates of interior vertices, input order
    dep_sites:        (K,3) 1-based site indices per interior vertex, ascending
    site_vertices:    N lists of 1-based local interior-vertex indices
    interior_indices: (K,) 1-based indices of the kept vertices in the input
    skipped:          degenerate vertices dropped under on_degenerate="skip"
    """
    int_vertices: np.ndarray
    dep_sites: np.ndarray
    site_vertices: List[List[int]]
    interior_indices: np.ndarray
    skipped: Tuple[DegenerateVertex, ...] = field(default_factory=tuple)

    @property
    def n_interior(self) -> int:
        return len(self.int_vertices)

    @property
    def n_sites(self) -> int:
        return len(self.site_vertices)

    def incidence_count(self) -> int:
        return int(self.dep_sites.size)

    def as_tuple(self):
        """(intV, vDepX, xGenV)"""
        return self.int_vertices, self.dep_sites, self.site_vertices
