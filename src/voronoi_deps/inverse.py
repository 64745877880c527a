from __future__ import annotations

from typing import List

import numpy as np


def build_inverse_index(local_vertices: np.ndarray, sites: np.ndarray, n_sites: int) -> List[List[int]]:
    """
    Invert (local vertex, site) incidences into one list per site.

    Entry s-1 lists, ascending, the 1-based local interior vertices that
    site s helps define. Sites without interior vertices get [].
    """
    lv = np.asarray(local_vertices, dtype=np.int64).reshape(-1)
    st = np.asarray(sites, dtype=np.int64).reshape(-1)
    if lv.shape != st.shape:
        raise ValueError("local_vertices and sites must have the same length")

    keep = (lv > 0) & (st > 0)
    lv, st = lv[keep], st[keep]
    if len(st) and int(st.max()) > n_sites:
        raise ValueError(f"site index {int(st.max())} exceeds n_sites={n_sites}")

    order = np.lexsort((lv, st))
    lv, st = lv[order], st[order]
    counts = np.bincount(st - 1, minlength=n_sites) if len(st) else np.zeros(n_sites, dtype=np.int64)
    groups = np.split(lv, np.cumsum(counts)[:-1]) if n_sites else []
    return [g.tolist() for g in groups]
