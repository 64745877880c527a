from __future__ import annotations

from numbers import Real
from typing import Tuple

import numpy as np

from .errors import InvalidBoundsError


def validate_bounds(bounds) -> Tuple[float, float]:
    """
    bounds: (lo, hi) of the open square lo < x, y < hi.
    Returns the pair as floats; rejects anything that is not a pair of
    reals with lo < hi.
    """
    try:
        lo, hi = bounds
    except (TypeError, ValueError):
        raise InvalidBoundsError(f"bounds must be a (lo, hi) pair, got {bounds!r}") from None

    if not isinstance(lo, Real) or not isinstance(hi, Real):
        raise InvalidBoundsError(f"bounds must be real numbers, got {bounds!r}")

    lo, hi = float(lo), float(hi)
    # also rejects NaN
    if not lo < hi:
        raise InvalidBoundsError(f"bounds require lo < hi, got lo={lo}, hi={hi}")
    return lo, hi


def as_vertex_array(vertices) -> np.ndarray:
    V = np.asarray(vertices, dtype=np.float64)
    if V.size == 0:
        return np.zeros((0, 2), dtype=np.float64)
    if V.ndim != 2 or V.shape[1] != 2:
        raise ValueError(f"vertices must be (M,2), got shape {V.shape}")
    return V


def interior_mask(vertices: np.ndarray, bounds) -> np.ndarray:
    """
    (M,2) -> (M,) bool, True where both coordinates lie strictly inside bounds.
    Points at infinity and NaN rows compare False and are exterior.
    """
    lo, hi = validate_bounds(bounds)
    V = as_vertex_array(vertices)
    with np.errstate(invalid="ignore"):
        inside = (V > lo) & (V < hi)
    return np.all(inside, axis=1)


def interior_vertex_indices(vertices: np.ndarray, bounds) -> np.ndarray:
    """
    1-based indices of interior vertices, in their original order.
    """
    mask = interior_mask(vertices, bounds)
    return np.flatnonzero(mask).astype(np.int64) + 1
