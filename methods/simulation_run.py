import enum
import math
import time
from dataclasses import dataclass
from typing import Callable

import numpy as np

import parameters
from config import ModelParameters
from methods.antithetic_monte_carlo import antithetic_samples
from methods.direct_monte_carlo import direct_samples
from methods.online_moments import OnlineMoments
from methods.timing import Stopwatch
from models.normal_source import NormalSource


class Strategy(enum.Enum):
    DIRECT = "direct"
    ANTITHETIC = "antithetic"

    @property
    def label(self) -> str:
        return self.value.capitalize()


_SAMPLERS: dict[Strategy, Callable[[ModelParameters, np.ndarray], np.ndarray]] = {
    Strategy.DIRECT: direct_samples,
    Strategy.ANTITHETIC: antithetic_samples,
}


def _compile_kernels(
    sampler: Callable[[ModelParameters, np.ndarray], np.ndarray],
    params: ModelParameters,
) -> None:
    # Numba compiles on first call; do it before the stopwatch starts.
    OnlineMoments().update_many(sampler(params, np.zeros(1)))


@dataclass(frozen=True)
class RunResult:
    replicate_count: int
    estimated_price: float
    standard_error: float
    ci_lower: float
    ci_upper: float
    elapsed_seconds: float
    efficiency: float


def simulation_run(
    strategy: Strategy,
    replicate_count: int,
    params: ModelParameters,
    source: NormalSource,
    confidence_multiplier: float = parameters.z_95,
    chunk_size: int = parameters.chunk_size,
    clock: Callable[[], float] = time.perf_counter,
) -> RunResult:
    """
    Price the call with ``replicate_count`` Monte Carlo samples.

    Draws are pulled from ``source`` in chunks of at most ``chunk_size``,
    mapped to payoff samples by the strategy and folded into a fresh
    ``OnlineMoments``; only the current chunk is ever held in memory. The
    elapsed time covers the whole draw + accumulate loop and nothing else;
    the Numba kernels are compiled before the clock starts.

    Parameters
    ----------
    strategy : Strategy
        DIRECT (one path per draw) or ANTITHETIC (pair z, -z per draw).
    replicate_count : int
        Number of samples fed to the accumulator (antithetic: number of
        pairs).
    params : ModelParameters
        Market and contract inputs.
    source : NormalSource
        Generator of standard normal draws; consumed sequentially.
    confidence_multiplier : float
        Half-width multiplier of the confidence interval (1.96 for 95%).
    chunk_size : int
        Maximum number of draws per batch. Does not change the result.
    clock : callable
        Monotonic clock returning seconds.

    Returns
    -------
    RunResult

    Notes
    -----
    The confidence interval is
        mean -/+ confidence_multiplier * volatility / sqrt(replicate_count),
    i.e. it uses the model volatility, not the sampled standard error, as
    its dispersion term.
    """
    if replicate_count < 1:
        raise ValueError("replicate_count must be positive.")
    if chunk_size < 1:
        raise ValueError("chunk_size must be positive.")

    sampler = _SAMPLERS[strategy]
    _compile_kernels(sampler, params)
    moments = OnlineMoments()

    with Stopwatch(clock) as stopwatch:
        remaining = replicate_count
        while remaining > 0:
            current = min(chunk_size, remaining)
            Z = source.draw(current)
            moments.update_many(sampler(params, Z))
            remaining -= current

    estimated_price = moments.mean
    standard_error = moments.standard_error
    half_width = confidence_multiplier * params.volatility / math.sqrt(replicate_count)
    elapsed = stopwatch.elapsed

    return RunResult(
        replicate_count=replicate_count,
        estimated_price=estimated_price,
        standard_error=standard_error,
        ci_lower=estimated_price - half_width,
        ci_upper=estimated_price + half_width,
        elapsed_seconds=elapsed,
        efficiency=standard_error * standard_error * elapsed,
    )
