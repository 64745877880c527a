import numpy as np
import pytest

from voronoi_deps.constants import SENTINEL
from voronoi_deps.errors import SentinelCollisionError, VertexIndexError
from voronoi_deps.membership import pad_membership


def test_rows_left_packed_and_padded():
    C = [[2, 4], [2], [], [4, 1, 3]]
    M = pad_membership(C)

    assert M.dtype == np.int64
    assert M.shape == (4, 3)
    assert M.tolist() == [
        [2, 4, SENTINEL],
        [2, SENTINEL, SENTINEL],
        [SENTINEL, SENTINEL, SENTINEL],
        [4, 1, 3],
    ]


def test_no_sites_and_all_empty_sites():
    assert pad_membership([]).shape == (0, 0)
    assert pad_membership([[], []]).shape == (2, 0)


def test_accepts_arrays_and_integral_floats():
    C = [np.array([3, 1]), (2.0, 5.0), range(1, 4)]
    M = pad_membership(C)
    assert M.tolist() == [[3, 1, 0], [2, 5, 0], [1, 2, 3]]


def test_sentinel_collision_reports_site():
    with pytest.raises(SentinelCollisionError) as exc:
        pad_membership([[1, 2], [3, 0, 4]])
    assert exc.value.site == 2
    assert exc.value.value == 0


def test_negative_and_fractional_indices_rejected():
    with pytest.raises(SentinelCollisionError):
        pad_membership([[1], [-1]])
    with pytest.raises(SentinelCollisionError):
        pad_membership([[1.5, 2]])
    with pytest.raises(SentinelCollisionError):
        pad_membership([["a"]])


def test_index_beyond_vertex_count():
    pad_membership([[1, 2]], n_vertices=2)
    with pytest.raises(VertexIndexError) as exc:
        pad_membership([[1, 2], [3]], n_vertices=2)
    assert exc.value.site == 2
    assert exc.value.value == 3
