"""Configuration for the vertex dependency pipeline."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constants import VERTEX_DEGREE

DEGENERATE_POLICIES = ("raise", "skip")


@dataclass(frozen=True)
class DependencyConfig:
    """
    Attributes
    ----------
    on_degenerate : str
        "raise" rejects the input at the first interior vertex whose site
        count differs from ``degree``; "skip" drops such vertices from every
        output and reports them in ``VertexDependencies.skipped``.
    degree : int
        Number of sites expected at each interior vertex.
    chunk_size : int, optional
        Interior vertices compared per batch. Derived from
        ``max_chunk_elements`` when None.
    max_chunk_elements : int
        Upper bound on booleans in one (vertices, sites, width) comparison.
    max_workers : int
        Threads used to resolve chunks; 1 runs inline.
    """
    on_degenerate: str = "raise"
    degree: int = VERTEX_DEGREE
    chunk_size: Optional[int] = None
    max_chunk_elements: int = 2 ** 24
    max_workers: int = 1

    def __post_init__(self):
        if self.on_degenerate not in DEGENERATE_POLICIES:
            raise ValueError(
                f"on_degenerate must be one of {DEGENERATE_POLICIES}, got {self.on_degenerate!r}"
            )
        if self.degree < 1:
            raise ValueError("degree must be >= 1")
        if self.chunk_size is not None and self.chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")
        if self.max_chunk_elements < 1:
            raise ValueError("max_chunk_elements must be >= 1")
        if self.max_workers < 1:
            raise ValueError("max_workers must be >= 1")

    def resolve_chunk_size(self, n_sites: int, width: int) -> int:
        """Vertices per comparison batch for a (n_sites, width) membership matrix."""
        if self.chunk_size is not None:
            return int(self.chunk_size)
        per_vertex = max(1, int(n_sites) * int(width))
        return max(1, int(self.max_chunk_elements) // per_vertex)


__all__ = ["DependencyConfig", "DEGENERATE_POLICIES"]
