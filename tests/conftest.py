import numpy as np
import pytest


def _min_distance(points) -> float:
    """Smallest pairwise Euclidean distance; inf for fewer than two points."""
    pts = np.asarray(points, dtype=np.float64)
    if len(pts) < 2:
        return float("inf")
    delta = pts[:, None, :] - pts[None, :, :]
    dist = np.sqrt((delta * delta).sum(axis=-1))
    np.fill_diagonal(dist, np.inf)
    return float(dist.min())


@pytest.fixture
def min_distance():
    return _min_distance
