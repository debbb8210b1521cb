import math

import numpy as np
from numba import njit


@njit
def _update_moments(
    count: int, mean: float, second_moment: float, samples: np.ndarray
) -> tuple:
    """
    Feed ``samples`` one by one through the incremental-mean recurrence.

        mean_k          = (1 - 1/k) * mean_{k-1}          + (1/k) * x_k
        second_moment_k = (1 - 1/k) * second_moment_{k-1} + (1/k) * x_k^2

    with mean_1 = second_moment_1 = x_1.
    """
    for i in range(samples.shape[0]):
        x = samples[i]
        count += 1
        if count == 1:
            mean = x
            second_moment = x * x
        else:
            w = 1.0 / count
            mean = (1.0 - w) * mean + w * x
            second_moment = (1.0 - w) * second_moment + w * x * x
    return count, mean, second_moment


class OnlineMoments:
    """
    Single-pass running mean and running second moment.

    Samples are never stored, so memory stays O(1) whatever the number of
    replicates. ``update`` and ``update_many`` apply the same recurrence in
    the same order, so a batch produces exactly the floats that repeated
    single updates would.
    """

    def __init__(self):
        self.count = 0
        self.mean = 0.0
        self.second_moment = 0.0

    def update(self, x: float) -> None:
        self.count += 1
        k = self.count
        if k == 1:
            self.mean = x
            self.second_moment = x * x
        else:
            w = 1.0 / k
            self.mean = (1.0 - w) * self.mean + w * x
            self.second_moment = (1.0 - w) * self.second_moment + w * x * x

    def update_many(self, samples: np.ndarray) -> None:
        samples = np.ascontiguousarray(samples, dtype=np.float64)
        count, mean, second_moment = _update_moments(
            self.count, self.mean, self.second_moment, samples
        )
        self.count = int(count)
        self.mean = float(mean)
        self.second_moment = float(second_moment)

    def _require_samples(self) -> None:
        if self.count == 0:
            raise ValueError("No samples have been accumulated.")

    @property
    def variance(self) -> float:
        """Sample variance E[X^2] - E[X]^2, clamped at 0 against cancellation."""
        self._require_samples()
        return max(self.second_moment - self.mean * self.mean, 0.0)

    @property
    def standard_error(self) -> float:
        return math.sqrt(self.variance / self.count)

    def __repr__(self) -> str:
        return (
            f"OnlineMoments(count={self.count}, mean={self.mean!r}, "
            f"second_moment={self.second_moment!r})"
        )
