"""Protocol definitions for swappable sampling components."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    """Seedable pseudo-random generator used by the sampling engine."""

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        ...

    def integers(self, n: int) -> int:
        """Uniform integer in [0, n)."""
        ...

    def standard_normal(self, n: int) -> np.ndarray:
        """Returns n independent standard-normal draws, shape (n,)."""
        ...


@runtime_checkable
class RandomSourceFactory(Protocol):
    """Builds a random source; seed=None means seed from OS entropy."""

    def __call__(self, seed: int | None, dtype: np.dtype) -> RandomSource: ...


@runtime_checkable
class Validator(Protocol):
    """Domain predicate: accept or reject a candidate point."""

    def __call__(self, point: np.ndarray, user_data: Any) -> bool: ...
