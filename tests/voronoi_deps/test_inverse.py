import numpy as np
import pytest

from voronoi_deps.inverse import build_inverse_index


def test_groups_by_site_ascending():
    lv = np.array([2, 1, 1, 2, 1, 2])
    st = np.array([4, 1, 2, 1, 3, 3])
    out = build_inverse_index(lv, st, 5)
    assert out == [[1, 2], [1], [1, 2], [2], []]


def test_no_incidences():
    assert build_inverse_index(np.zeros(0), np.zeros(0), 3) == [[], [], []]
    assert build_inverse_index(np.zeros(0), np.zeros(0), 0) == []


def test_unused_slots_ignored():
    # zeros mark empty accumulator slots
    lv = np.array([0, 1, 0])
    st = np.array([1, 2, 0])
    assert build_inverse_index(lv, st, 2) == [[], [1]]


def test_site_out_of_range():
    with pytest.raises(ValueError):
        build_inverse_index(np.array([1]), np.array([3]), 2)
