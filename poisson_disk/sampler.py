"""Sampling engine — lazy active-list dart throwing (Bridson, 2007)."""
from __future__ import annotations

import logging

import numpy as np

from .protocols import RandomSource
from .spatial import GridIndex
from .types import Point, SamplerConfig

logger = logging.getLogger(__name__)


class PoissonSampler:
    """Iterator over the points of one Poisson-disk distribution.

    Each ``next()`` throws darts around randomly chosen active points until
    one lands inside the domain and at least ``radius`` from every point
    emitted so far. Once the active list empties the iterator is exhausted
    for good.

    The initial active point sits within ``radius / 2`` of the origin on each
    axis. It is neither indexed nor emitted, so it leaves a void in the output.
    """

    def __init__(self, config: SamplerConfig, rng: RandomSource):
        self.config = config
        self.rng = rng
        self._float = config.dtype.type
        self._radius = self._float(config.radius)
        self.index = GridIndex(config.dimensions, config.radius, config.dtype)

        first_point = np.array(
            [(0.5 - self.rng.random()) for _ in range(config.dimensions)],
            dtype=config.dtype,
        ) * self._radius
        self.active: list[np.ndarray] = [first_point]
        self.emitted = 0
        logger.debug(
            "sampler started: dimensions=%d radius=%g max_attempts=%d seed=%s",
            config.dimensions, config.radius, config.max_attempts, config.seed,
        )

    def __iter__(self) -> PoissonSampler:
        return self

    @property
    def exhausted(self) -> bool:
        return not self.active

    def _add_point(self, point: np.ndarray) -> None:
        self.active.append(point)
        self.index.insert(point)

    def _random_point(self, around: np.ndarray) -> np.ndarray:
        """Random point between radius and 2 * radius away from ``around``."""
        dist = self._radius * (1 + self._float(self.rng.random()))
        # Normalised Gaussian vectors are uniform over the unit hypersphere.
        vector = np.asarray(self.rng.standard_normal(self.config.dimensions), dtype=self.config.dtype)
        mag = np.sqrt(np.dot(vector, vector))
        return around + vector * (dist / mag)

    def _in_neighborhood(self, point: np.ndarray) -> bool:
        return self.index.any_within(point, self.config.radius_sq)

    def __next__(self) -> Point:
        while self.active:
            i = self.rng.integers(len(self.active))
            around = self.active[i]

            for _ in range(self.config.max_attempts):
                point = self._random_point(around)
                if self.config.accepts(point) and not self._in_neighborhood(point):
                    self._add_point(point)
                    self.emitted += 1
                    return tuple(float(x) for x in point)

            # swap-remove; order of the active list is irrelevant
            self.active[i] = self.active[-1]
            self.active.pop()
            if not self.active:
                logger.debug("sampler exhausted after %d points", self.emitted)

        raise StopIteration

    def drain(self) -> PoissonSampler:
        """Pull until exhausted, discarding the points."""
        for _ in self:
            pass
        return self

    def to_index(self) -> GridIndex:
        """Exhaust the sampler and return the index of every accepted point."""
        return self.drain().index
