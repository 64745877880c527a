from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np
from scipy.spatial import Voronoi


def from_scipy_voronoi(vor: Voronoi) -> Tuple[np.ndarray, List[List[int]]]:
    """
    Convert a SciPy Voronoi into (vertices, cells) with 1-based indices.

    Vertex 1 is the point at infinity (inf, inf); SciPy vertex j becomes
    vertex j+2 and SciPy's -1 becomes 1. cells[i] lists the vertices of the
    region of input point i, in SciPy's region order.
    """
    V = np.asarray(vor.vertices, dtype=np.float64).reshape(-1, 2)
    vertices = np.vstack([np.full((1, 2), np.inf), V])

    cells = []
    for region_idx in vor.point_region:
        region = vor.regions[int(region_idx)]
        cells.append([1 if j < 0 else int(j) + 2 for j in region])
    return vertices, cells


def voronoin(points: np.ndarray, *, qhull_options: Optional[str] = None) -> Tuple[np.ndarray, List[List[int]]]:
    """
    Voronoi diagram of planar sites as (vertices, cells), see from_scipy_voronoi().
    """
    P = np.asarray(points, dtype=np.float64)
    if P.ndim != 2 or P.shape[1] != 2:
        raise ValueError("points must be (N,2)")
    return from_scipy_voronoi(Voronoi(P, qhull_options=qhull_options))
