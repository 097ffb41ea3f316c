"""Tests for the GridIndex spatial index."""
import numpy as np
import pytest

from poisson_disk import GridIndex


@pytest.fixture
def index():
    idx = GridIndex(2, cell_size=1.0)
    for p in [(0.0, 0.0), (3.0, 0.0), (0.5, 2.5)]:
        idx.insert(np.array(p))
    return idx


class TestEmptyIndex:
    def test_any_within_is_false(self):
        idx = GridIndex(3, cell_size=0.5)
        assert not idx.any_within(np.zeros(3), 100.0)

    def test_within_is_empty(self):
        idx = GridIndex(3, cell_size=0.5)
        assert idx.within(np.zeros(3), 100.0) == []
        assert len(idx) == 0
        assert idx.points.shape == (0, 3)


class TestQueries:
    def test_hit_and_miss(self, index):
        assert index.any_within(np.array([0.9, 0.0]), 1.0)
        assert not index.any_within(np.array([1.5, 1.0]), 1.0)

    def test_boundary_is_inclusive(self, index):
        assert index.any_within(np.array([1.0, 0.0]), 1.0)

    def test_neighbouring_cell(self, index):
        # (2.05, 0) lives in a different cell from (3, 0) but is within 1
        assert index.any_within(np.array([2.05, 0.0]), 1.0)

    def test_negative_coordinates(self, index):
        assert index.any_within(np.array([-0.6, -0.6]), 1.0)

    def test_radius_wider_than_cell(self, index):
        assert index.any_within(np.array([5.5, 0.0]), 2.6 ** 2)
        assert not index.any_within(np.array([5.5, 0.0]), 2.4 ** 2)

    def test_within_returns_matching_points(self, index):
        hits = index.within(np.array([0.2, 0.2]), 6.0)
        assert sorted(hits) == [(0.0, 0.0), (0.5, 2.5)]


class TestInsertion:
    def test_grows_past_initial_capacity(self):
        idx = GridIndex(2, cell_size=0.1)
        coords = np.random.default_rng(0).random((100, 2))
        for p in coords:
            idx.insert(p)
        assert len(idx) == 100
        np.testing.assert_array_equal(idx.points, coords)
        for p in coords:
            assert idx.any_within(p, 0.0)

    def test_single_precision_storage(self):
        idx = GridIndex(2, cell_size=1.0, dtype=np.float32)
        idx.insert(np.array([0.25, 0.5], dtype=np.float32))
        assert idx.points.dtype == np.float32

    def test_rejects_non_positive_cell_size(self):
        with pytest.raises(ValueError):
            GridIndex(2, cell_size=0.0)
