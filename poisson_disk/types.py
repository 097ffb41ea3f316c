"""Core data structures shared by the sampler and its builder."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from .protocols import Validator

DEFAULT_RADIUS = 0.1
DEFAULT_MAX_ATTEMPTS = 30
PRECISIONS = ("double", "single")

Point = tuple[float, ...]

DTYPES = {
    "double": np.dtype(np.float64),
    "single": np.dtype(np.float32),
}


def in_box(point: np.ndarray, dimensions: Any = None) -> bool:
    """Default domain predicate: 0 <= point[i] < dimensions[i].

    With no dimensions the box is the unit hypercube [0, 1)^N.
    """
    if dimensions is None:
        return bool(np.all((point >= 0.0) & (point < 1.0)))
    return bool(np.all((point >= 0.0) & (point < np.asarray(dimensions))))


@dataclass(frozen=True)
class SamplerConfig:
    """Immutable snapshot of a distribution's parameters.

    Built by ``Poisson.snapshot()``; the engine only ever reads it.
    """
    dimensions: int
    radius: float
    max_attempts: int
    seed: int | None = None
    validate: Validator = in_box
    user_data: Any = None
    dtype: np.dtype = DTYPES["double"]

    @property
    def radius_sq(self) -> float:
        return self.radius * self.radius

    def accepts(self, point: np.ndarray) -> bool:
        return bool(self.validate(point, self.user_data))
