import numpy as np


class NormalSource:
    """
    Stream of independent standard normal draws.

    Wraps a single ``np.random.Generator`` so the generator state is owned
    explicitly by whoever creates the source (one per process, shared
    sequentially by the sweeps). ``next()`` and ``draw(size)`` consume the
    same stream: drawing ``n`` values one at a time or in batches yields the
    same numbers in the same order.

    Parameters
    ----------
    seed : int, optional
        Seed for reproducible streams. If None, the generator is seeded from
        OS entropy.
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def next(self) -> float:
        return float(self._rng.standard_normal())

    def draw(self, size: int) -> np.ndarray:
        """Return the next ``size`` draws as a float64 array."""
        if size < 0:
            raise ValueError("size must be non-negative.")
        return self._rng.standard_normal(size)

    def __repr__(self) -> str:
        return f"NormalSource(seed={self.seed!r})"
