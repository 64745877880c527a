from __future__ import annotations

import numpy as np

from .geometry import validate_bounds


def sample_sites_in_box(
    bounds,
    n: int,
    rng: np.random.Generator,
) -> np.ndarray:
    """
    Uniform sampling of n sites in the square lo < x, y < hi.
    """
    lo, hi = validate_bounds(bounds)
    if n < 0:
        raise ValueError("n must be >= 0")
    pts = np.empty((n, 2), dtype=np.float64)
    pts[:, 0] = lo + rng.random(n) * (hi - lo)
    pts[:, 1] = lo + rng.random(n) * (hi - lo)
    # rng.random() is in [0, 1); keep the lower edge open
    pts[pts <= lo] = np.nextafter(lo, hi)
    return pts
