"""Spatial index over accepted points — insertion-only hash grid."""
from __future__ import annotations

import itertools
import math

import numpy as np

from .types import Point


class GridIndex:
    """Uniform hash grid answering "any point within r of p?" queries.

    Cells have side ``cell_size``. Queries with radius <= cell_size only need
    the 3^N cells around the query's own cell; larger radii widen the stencil.
    Points are kept in a growable (capacity, N) array; each cell stores row
    indices into it.
    """

    def __init__(self, dimensions: int, cell_size: float, dtype: np.dtype = np.float64):
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.dimensions = dimensions
        self.cell_size = float(cell_size)
        self.dtype = np.dtype(dtype)
        self._cells: dict[tuple[int, ...], list[int]] = {}
        self._data = np.empty((16, dimensions), dtype=self.dtype)
        self._size = 0
        self._stencils: dict[int, np.ndarray] = {}

    def __len__(self) -> int:
        return self._size

    @property
    def points(self) -> np.ndarray:
        """Accepted points in insertion order, shape (len, N)."""
        return self._data[:self._size]

    def _cell(self, point: np.ndarray) -> tuple[int, ...]:
        return tuple(int(c) for c in np.floor(np.asarray(point, dtype=np.float64) / self.cell_size))

    def _stencil(self, reach: int) -> np.ndarray:
        """All integer offsets in [-reach, reach]^N."""
        stencil = self._stencils.get(reach)
        if stencil is None:
            span = range(-reach, reach + 1)
            stencil = np.array(list(itertools.product(span, repeat=self.dimensions)), dtype=np.int64)
            self._stencils[reach] = stencil
        return stencil

    def insert(self, point: np.ndarray) -> None:
        if self._size == len(self._data):
            grown = np.empty((2 * len(self._data), self.dimensions), dtype=self.dtype)
            grown[:self._size] = self._data[:self._size]
            self._data = grown
        self._data[self._size] = point
        self._cells.setdefault(self._cell(point), []).append(self._size)
        self._size += 1

    def _candidates(self, point: np.ndarray, radius_sq: float) -> list[int]:
        if self._size == 0:
            return []
        reach = max(1, math.ceil(math.sqrt(radius_sq) / self.cell_size))
        base = np.array(self._cell(point), dtype=np.int64)
        rows: list[int] = []
        for offset in self._stencil(reach):
            rows.extend(self._cells.get(tuple((base + offset).tolist()), ()))
        return rows

    def _distances_sq(self, point: np.ndarray, rows: list[int]) -> np.ndarray:
        delta = self._data[rows].astype(np.float64) - np.asarray(point, dtype=np.float64)
        return np.einsum("ij,ij->i", delta, delta)

    def any_within(self, point: np.ndarray, radius_sq: float) -> bool:
        """True if some indexed point p satisfies |p - point|^2 <= radius_sq."""
        rows = self._candidates(point, radius_sq)
        if not rows:
            return False
        return bool(np.any(self._distances_sq(point, rows) <= radius_sq))

    def within(self, point: np.ndarray, radius_sq: float) -> list[Point]:
        """All indexed points with |p - point|^2 <= radius_sq."""
        rows = self._candidates(point, radius_sq)
        if not rows:
            return []
        hits = np.asarray(rows)[self._distances_sq(point, rows) <= radius_sq]
        return [tuple(float(x) for x in self._data[row]) for row in hits]
