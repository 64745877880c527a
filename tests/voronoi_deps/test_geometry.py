import numpy as np
import pytest

from voronoi_deps.errors import InvalidBoundsError
from voronoi_deps.geometry import interior_mask, interior_vertex_indices, validate_bounds


def test_interior_indices_are_one_based_and_ordered():
    V = np.array([
        [9.0, 1.0],    # 1 inside
        [-1.0, 5.0],   # 2 outside
        [5.0, 5.0],    # 3 inside
        [1.0, 12.0],   # 4 outside
        [0.5, 0.5],    # 5 inside
    ], dtype=np.float64)

    idx = interior_vertex_indices(V, (0.0, 10.0))
    assert idx.tolist() == [1, 3, 5]


def test_boundary_is_exterior():
    V = np.array([
        [0.0, 5.0],
        [5.0, 0.0],
        [10.0, 5.0],
        [5.0, 10.0],
        [5.0, 5.0],
        [9.999, 0.001],
    ], dtype=np.float64)

    idx = interior_vertex_indices(V, (0.0, 10.0))
    assert idx.tolist() == [5, 6]


def test_points_at_infinity_and_nan_are_exterior():
    V = np.array([
        [np.inf, np.inf],
        [-np.inf, 5.0],
        [np.nan, 5.0],
        [2.0, 3.0],
    ], dtype=np.float64)

    mask = interior_mask(V, (0, 10))
    assert mask.tolist() == [False, False, False, True]


def test_empty_vertex_list():
    idx = interior_vertex_indices(np.zeros((0, 2)), (0, 1))
    assert idx.shape == (0,)
    assert interior_vertex_indices([], (0, 1)).shape == (0,)


def test_vertices_must_be_planar():
    with pytest.raises(ValueError):
        interior_vertex_indices(np.zeros((4, 3)), (0, 1))


def test_validate_bounds_accepts_numpy_scalars():
    lo, hi = validate_bounds((np.float64(-1.5), np.int64(2)))
    assert (lo, hi) == (-1.5, 2.0)


@pytest.mark.parametrize("bounds", [
    (1.0, 1.0),
    (2.0, 1.0),
    (np.nan, 1.0),
    (0.0,),
    (0.0, 1.0, 2.0),
    None,
    "ab",
])
def test_malformed_bounds_rejected(bounds):
    with pytest.raises(InvalidBoundsError):
        validate_bounds(bounds)
