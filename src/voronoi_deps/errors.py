from __future__ import annotations

from typing import Tuple


class VertexDependencyError(ValueError):
    """Base class for invalid input to the dependency index."""


class InvalidBoundsError(VertexDependencyError):
    pass


class SentinelCollisionError(VertexDependencyError):
    """
    A membership list holds a value that cannot be a real vertex index
    (zero, negative or non-integral), so it would collide with the padding.
    """

    def __init__(self, site: int, value):
        self.site = site
        self.value = value
        super().__init__(
            f"site {site} lists vertex index {value!r}; indices must be integers >= 1"
        )


class VertexIndexError(VertexDependencyError):
    def __init__(self, site: int, value: int, n_vertices: int):
        self.site = site
        self.value = value
        self.n_vertices = n_vertices
        super().__init__(
            f"site {site} lists vertex index {value}, but only {n_vertices} vertices exist"
        )


class DegenerateVertexError(VertexDependencyError):
    """
    An interior vertex is shared by a number of sites other than three
    (co-circular sites or inconsistent membership lists).
    """

    def __init__(self, vertex_index: int, local_index: int, sites: Tuple[int, ...], degree: int = 3):
        self.vertex_index = vertex_index
        self.local_index = local_index
        self.sites = tuple(sites)
        self.degree = degree
        super().__init__(
            f"interior vertex {vertex_index} (local {local_index}) is shared by "
            f"{len(self.sites)} sites {list(self.sites)}, expected {degree}"
        )


__all__ = [
    "VertexDependencyError",
    "InvalidBoundsError",
    "SentinelCollisionError",
    "VertexIndexError",
    "DegenerateVertexError",
]
