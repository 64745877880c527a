"""Shared constants for vertex dependency indexing."""
from __future__ import annotations

# Padding value of the membership matrix; never a real (1-based) vertex index.
SENTINEL: int = 0

# Sites meeting at a non-degenerate planar Voronoi vertex.
VERTEX_DEGREE: int = 3

__all__ = ["SENTINEL", "VERTEX_DEGREE"]
