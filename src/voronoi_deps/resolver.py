from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .constants import SENTINEL, VERTEX_DEGREE
from .logging_utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Incidence:
    """
    Site-indexed accumulator of (interior vertex, site) hits.

    local_vertex, site: parallel (H,) int64 arrays, both 1-based, sorted by
    local vertex then site.
    counts: (K,) number of sites matched by each interior vertex.
    """
    local_vertex: np.ndarray
    site: np.ndarray
    counts: np.ndarray


def _match_chunk(membership: np.ndarray, values: np.ndarray) -> np.ndarray:
    """
    (N,W) membership, (k,) vertex indices -> (k,N) bool hits.

    Every vertex value is compared against the whole matrix at once; a row
    hits when any of its columns equals the value.
    """
    if membership.shape[1] == 0:
        return np.zeros((len(values), membership.shape[0]), dtype=bool)
    eq = membership[None, :, :] == values[:, None, None]
    return eq.any(axis=2)


def _resolve_chunk(membership: np.ndarray, values: np.ndarray, offset: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    hits = _match_chunk(membership, values)
    rows, cols = np.nonzero(hits)
    return rows.astype(np.int64) + offset + 1, cols.astype(np.int64) + 1, hits.sum(axis=1)


def _chunks(n: int, size: int) -> List[Tuple[int, int]]:
    return [(start, min(n, start + size)) for start in range(0, n, size)]


def resolve_dependencies(
    membership: np.ndarray,
    interior: np.ndarray,
    *,
    chunk_size: Optional[int] = None,
    max_workers: int = 1,
) -> Incidence:
    """
    Find, for every interior vertex, the sites whose padded membership row
    contains it.

    membership: (N,W) sentinel-padded matrix from pad_membership().
    interior: (K,) 1-based vertex indices; local vertex i is interior[i-1].

    Chunks of the vertex axis may run on a thread pool; partial results are
    concatenated and ordered once after the merge, so the output does not
    depend on chunk_size or max_workers.
    """
    membership = np.asarray(membership, dtype=np.int64)
    if membership.ndim != 2:
        raise ValueError(f"membership must be (N,W), got shape {membership.shape}")
    interior = np.asarray(interior, dtype=np.int64).reshape(-1)
    if np.any(interior == SENTINEL):
        raise ValueError("interior vertex indices must not contain the sentinel")

    K = len(interior)
    size = K if chunk_size is None else max(1, int(chunk_size))
    spans = _chunks(K, max(1, size))
    logger.debug(
        "resolving %d interior vertices against %d sites (width %d) in %d chunk(s)",
        K, membership.shape[0], membership.shape[1], len(spans),
    )

    if max_workers > 1 and len(spans) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [
                executor.submit(_resolve_chunk, membership, interior[a:b], a)
                for a, b in spans
            ]
            parts = [f.result() for f in futures]
    else:
        parts = [_resolve_chunk(membership, interior[a:b], a) for a, b in spans]

    if parts:
        local_vertex = np.concatenate([p[0] for p in parts])
        site = np.concatenate([p[1] for p in parts])
        counts = np.concatenate([p[2] for p in parts]).astype(np.int64)
    else:
        local_vertex = np.zeros(0, dtype=np.int64)
        site = np.zeros(0, dtype=np.int64)
        counts = np.zeros(0, dtype=np.int64)

    order = np.lexsort((site, local_vertex))
    return Incidence(local_vertex=local_vertex[order], site=site[order], counts=counts)


def assemble_dependency_table(incidence: Incidence, degree: int = VERTEX_DEGREE) -> np.ndarray:
    """
    Accumulator -> (K, degree) table of ascending site indices per vertex.
    Every vertex must match exactly ``degree`` sites; check before calling.
    """
    K = len(incidence.counts)
    if np.any(incidence.counts != degree):
        raise ValueError(f"every interior vertex must match exactly {degree} sites")
    return incidence.site.reshape(K, degree)

