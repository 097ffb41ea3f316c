"""Random sources — seedable generators behind the RandomSource protocol."""
from __future__ import annotations

import numpy as np
import torch

_TORCH_DTYPES = {
    np.dtype(np.float64): torch.float64,
    np.dtype(np.float32): torch.float32,
}


class NumpyRandomSource:
    """numpy ``Generator`` over a configurable bit generator.

    Defaults to PCG64 for double precision and SFC64 for single precision,
    so the two precisions are not expected to produce matching output.
    With ``seed=None`` the bit generator draws its state from OS entropy.
    """

    def __init__(
        self,
        seed: int | None = None,
        dtype: np.dtype = np.float64,
        bit_generator: type[np.random.BitGenerator] | None = None,
    ):
        self.dtype = np.dtype(dtype)
        if bit_generator is None:
            bit_generator = np.random.PCG64 if self.dtype == np.float64 else np.random.SFC64
        self.seed = seed
        self._gen = np.random.Generator(bit_generator(seed))

    @classmethod
    def using(cls, bit_generator: type[np.random.BitGenerator]):
        """Factory bound to a specific bit generator, e.g. ``using(np.random.MT19937)``."""
        def factory(seed: int | None, dtype: np.dtype) -> NumpyRandomSource:
            return cls(seed, dtype, bit_generator=bit_generator)
        return factory

    def random(self) -> float:
        return self._gen.random(dtype=self.dtype)

    def integers(self, n: int) -> int:
        return int(self._gen.integers(n))

    def standard_normal(self, n: int) -> np.ndarray:
        return self._gen.standard_normal(n, dtype=self.dtype)


class TorchRandomSource:
    """CPU ``torch.Generator`` wrapped to hand numpy values to the engine."""

    def __init__(self, seed: int | None = None, dtype: np.dtype = np.float64):
        self.dtype = np.dtype(dtype)
        self._torch_dtype = _TORCH_DTYPES[self.dtype]
        self._gen = torch.Generator(device="cpu")
        if seed is None:
            self.seed = self._gen.seed()
        else:
            self.seed = seed
            self._gen.manual_seed(seed)

    def random(self) -> float:
        return torch.rand(1, generator=self._gen, dtype=self._torch_dtype).item()

    def integers(self, n: int) -> int:
        return int(torch.randint(n, (1,), generator=self._gen).item())

    def standard_normal(self, n: int) -> np.ndarray:
        return torch.randn(n, generator=self._gen, dtype=self._torch_dtype).numpy()
