"""Poisson disk distribution builder and convenience generators."""
from __future__ import annotations

import copy
import math
from typing import Any, Callable, Iterator, TypeVar

from .protocols import RandomSourceFactory, Validator
from .rng import NumpyRandomSource
from .sampler import PoissonSampler
from .spatial import GridIndex
from .types import DEFAULT_MAX_ATTEMPTS, DEFAULT_RADIUS, DTYPES, Point, SamplerConfig, in_box

T = TypeVar("T")

_MAX_SEED = 2 ** 64 - 1


class Poisson:
    """Poisson disk distribution in ``dimensions`` dimensions.

    By default each axis is sampled from [0, 1) with a radius of 0.1 and up
    to 30 candidates around each active point; without a seed the output is
    different on every generation.

    ``with_*`` methods return a configured copy; ``set_*`` methods modify the
    instance in place::

        points = Poisson2D().with_seed(0xBADBEEF).generate()

        poisson = Poisson3D()
        poisson.set_samples(40)
        for point in poisson:
            ...

    Two distributions compare equal only if both have a seed and will
    therefore produce the same points: dimensions, radius, attempts,
    precision, random source factory and domain (predicate identity plus
    user data) must all match. Factories from ``NumpyRandomSource.using``
    are distinct objects per call. An unseeded distribution is not even
    equal to itself.
    """

    def __init__(
        self,
        dimensions: int = 2,
        *,
        radius: float = DEFAULT_RADIUS,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        seed: int | None = None,
        precision: str = "double",
        random_source: RandomSourceFactory | None = None,
    ):
        if dimensions < 1:
            raise ValueError(f"dimensions must be at least 1, got {dimensions}")
        self.dimensions = dimensions
        self.validate: Validator = in_box
        self.user_data: Any = None
        self.random_source: RandomSourceFactory = random_source or NumpyRandomSource
        self.set_radius(radius)
        self.set_samples(max_attempts)
        self.seed: int | None = None
        if seed is not None:
            self.set_seed(seed)
        self.set_precision(precision)

    @classmethod
    def from_settings(cls, settings, dimensions: int = 2) -> Poisson:
        """Build from a ``poisson_disk.config.Settings`` instance."""
        return cls(
            dimensions,
            radius=settings.radius,
            max_attempts=settings.max_attempts,
            seed=settings.seed,
            precision=settings.precision,
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(dimensions={self.dimensions}, radius={self.radius}, "
            f"max_attempts={self.max_attempts}, seed={self.seed}, precision={self.precision!r})"
        )

    # ------------------------------------------------------------------
    # In-place setters
    # ------------------------------------------------------------------

    def set_radius(self, radius: float) -> None:
        """Minimum distance between any two points."""
        if not math.isfinite(radius) or radius <= 0:
            raise ValueError(f"radius must be a positive finite number, got {radius}")
        self.radius = float(radius)

    def set_seed(self, seed: int) -> None:
        """Seed the PRNG; without one it is seeded from OS entropy."""
        if not 0 <= seed <= _MAX_SEED:
            raise ValueError(f"seed must fit in an unsigned 64-bit integer, got {seed}")
        self.seed = int(seed)

    def set_samples(self, samples: int) -> None:
        """Maximum candidates tried around each active point.

        This is not the number of points in the output. Higher values fill
        space more completely but slow generation down.
        """
        if samples < 1:
            raise ValueError(f"max_attempts must be at least 1, got {samples}")
        self.max_attempts = int(samples)

    def set_validate(self, func: Validator, user_data: Any = None) -> None:
        """Replace the domain predicate. ``func(point, user_data) -> bool``."""
        self.validate = func
        self.user_data = copy.deepcopy(user_data)

    def set_dimensions(self, dimensions, radius: float) -> None:
        """Sample the box [0, dimensions[i]) with the given radius."""
        dims = tuple(float(d) for d in dimensions)
        if len(dims) != self.dimensions:
            raise ValueError(f"expected {self.dimensions} box dimensions, got {len(dims)}")
        if any(d <= 0 for d in dims):
            raise ValueError(f"box dimensions must be positive, got {dims}")
        self.set_radius(radius)
        self.set_validate(in_box, dims)

    def set_random_source(self, factory: RandomSourceFactory) -> None:
        self.random_source = factory

    def set_precision(self, precision: str) -> None:
        """``"double"`` (float64) or ``"single"`` (float32) arithmetic."""
        if precision not in DTYPES:
            raise ValueError(f"precision must be one of {sorted(DTYPES)}, got {precision!r}")
        self.precision = precision

    # ------------------------------------------------------------------
    # Builder (copy-returning) variants
    # ------------------------------------------------------------------

    def _with(self, setter: str, *args) -> Poisson:
        other = copy.copy(self)
        other.user_data = copy.deepcopy(self.user_data)
        getattr(other, setter)(*args)
        return other

    def with_radius(self, radius: float) -> Poisson:
        return self._with("set_radius", radius)

    def with_seed(self, seed: int) -> Poisson:
        return self._with("set_seed", seed)

    def with_samples(self, samples: int) -> Poisson:
        return self._with("set_samples", samples)

    def with_validate(self, func: Validator, user_data: Any = None) -> Poisson:
        return self._with("set_validate", func, user_data)

    def with_dimensions(self, dimensions, radius: float) -> Poisson:
        return self._with("set_dimensions", dimensions, radius)

    def with_random_source(self, factory: RandomSourceFactory) -> Poisson:
        return self._with("set_random_source", factory)

    def with_precision(self, precision: str) -> Poisson:
        return self._with("set_precision", precision)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def snapshot(self) -> SamplerConfig:
        return SamplerConfig(
            dimensions=self.dimensions,
            radius=self.radius,
            max_attempts=self.max_attempts,
            seed=self.seed,
            validate=self.validate,
            user_data=copy.deepcopy(self.user_data),
            dtype=DTYPES[self.precision],
        )

    def iter(self) -> PoissonSampler:
        """A fresh lazy sampler over this distribution."""
        config = self.snapshot()
        return PoissonSampler(config, self.random_source(config.seed, config.dtype))

    def __iter__(self) -> Iterator[Point]:
        return self.iter()

    def generate(self) -> list[Point]:
        """All points of the distribution.

        Calling this twice gives identical lists only when a seed is set.
        """
        return list(self.iter())

    def generate_index(self) -> GridIndex:
        """Spatial index of a fully generated distribution."""
        return self.iter().to_index()

    def iter_as(self, convert: Callable[[Point], T]) -> Iterator[T]:
        """Lazily map each point through ``convert``."""
        return (convert(point) for point in self.iter())

    def to_list(self, convert: Callable[[Point], T]) -> list[T]:
        return list(self.iter_as(convert))

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Poisson):
            return NotImplemented
        return (
            self.seed is not None
            and other.seed is not None
            and self.dimensions == other.dimensions
            and self.radius == other.radius
            and self.seed == other.seed
            and self.max_attempts == other.max_attempts
            and self.precision == other.precision
            and self.random_source == other.random_source
            and self.validate is other.validate
            and self.user_data == other.user_data
        )

    __hash__ = None


class Poisson2D(Poisson):
    """Poisson disk distribution in 2 dimensions."""

    def __init__(self, **kwargs):
        super().__init__(2, **kwargs)


class Poisson3D(Poisson):
    """Poisson disk distribution in 3 dimensions."""

    def __init__(self, **kwargs):
        super().__init__(3, **kwargs)


class Poisson4D(Poisson):
    """Poisson disk distribution in 4 dimensions."""

    def __init__(self, **kwargs):
        super().__init__(4, **kwargs)
