from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from .constants import SENTINEL
from .errors import SentinelCollisionError, VertexIndexError


def _site_indices(site: int, members) -> np.ndarray:
    """
    One membership list -> int64 array of vertex indices, checked against
    the sentinel. ``site`` is 1-based and only used for error reporting.
    """
    arr = np.asarray(members if isinstance(members, np.ndarray) else list(members)).reshape(-1)
    if arr.size == 0:
        return np.zeros(0, dtype=np.int64)

    if arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.number):
        raise SentinelCollisionError(site, arr[0])

    if not np.issubdtype(arr.dtype, np.integer):
        ok = np.isfinite(arr) & (arr == np.round(arr))
        if not np.all(ok):
            raise SentinelCollisionError(site, arr[np.argmin(ok)].item())

    idx = arr.astype(np.int64)
    bad = idx <= SENTINEL
    if np.any(bad):
        raise SentinelCollisionError(site, int(idx[np.argmax(bad)]))
    return idx


def pad_membership(cells: Sequence, *, n_vertices: Optional[int] = None) -> np.ndarray:
    """
    Ragged per-site vertex lists -> (N, W) int64 matrix.

    Row s-1 holds the indices of site s left-packed and right-padded with
    SENTINEL; W is the longest list. Empty sites give all-sentinel rows.
    If n_vertices is given, indices above it are rejected.
    """
    rows = [_site_indices(s + 1, members) for s, members in enumerate(cells)]
    width = max((len(r) for r in rows), default=0)

    mat = np.full((len(rows), width), SENTINEL, dtype=np.int64)
    for s, r in enumerate(rows):
        if n_vertices is not None and len(r) and int(r.max()) > n_vertices:
            raise VertexIndexError(s + 1, int(r.max()), int(n_vertices))
        mat[s, :len(r)] = r
    return mat
