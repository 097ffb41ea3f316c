"""Lazy Poisson-disk point generation in N dimensions (Bridson's algorithm)."""
from .types import DEFAULT_MAX_ATTEMPTS, DEFAULT_RADIUS, PRECISIONS, Point, SamplerConfig, in_box
from .rng import NumpyRandomSource, TorchRandomSource
from .spatial import GridIndex
from .sampler import PoissonSampler
from .poisson import Poisson, Poisson2D, Poisson3D, Poisson4D

__all__ = [
    "DEFAULT_RADIUS",
    "DEFAULT_MAX_ATTEMPTS",
    "PRECISIONS",
    "Point",
    "SamplerConfig",
    "in_box",
    "NumpyRandomSource",
    "TorchRandomSource",
    "GridIndex",
    "PoissonSampler",
    "Poisson",
    "Poisson2D",
    "Poisson3D",
    "Poisson4D",
]
