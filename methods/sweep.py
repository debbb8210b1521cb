import logging
import time
from typing import Callable, Iterator, List

import parameters
from config import MAX_REPLICATES, ConfigurationError, ModelParameters
from methods.simulation_run import RunResult, Strategy, simulation_run
from models.normal_source import NormalSource

logger = logging.getLogger(__name__)


def replicate_counts(
    base_replicates: int, run_count: int, multiplier: int = parameters.multiplier
) -> List[int]:
    """Replicate count of every run: base * multiplier**i for i in [0, run_count)."""
    if base_replicates < 1 or run_count < 1:
        raise ConfigurationError("base_replicates and run_count must be positive.")
    if multiplier < 2:
        raise ConfigurationError("multiplier must be an integer greater than 1.")

    counts = [base_replicates * multiplier**i for i in range(run_count)]
    if counts[-1] > MAX_REPLICATES:
        raise ConfigurationError(
            f"Run {run_count - 1} would need {counts[-1]} replicates, "
            f"more than the supported maximum of {MAX_REPLICATES}."
        )
    return counts


def sweep(
    strategy: Strategy,
    run_count: int,
    base_replicates: int,
    params: ModelParameters,
    source: NormalSource,
    multiplier: int = parameters.multiplier,
    confidence_multiplier: float = parameters.z_95,
    chunk_size: int = parameters.chunk_size,
    clock: Callable[[], float] = time.perf_counter,
) -> Iterator[RunResult]:
    """
    Run ``run_count`` simulations with geometrically growing sample sizes.

    Runs are executed lazily and in increasing order of size, all drawing
    from the same ``source``; each run gets its own accumulator.
    """
    counts = replicate_counts(base_replicates, run_count, multiplier)
    logger.info(
        "Starting %s sweep: %d runs, replicate counts %s",
        strategy.value,
        run_count,
        counts,
    )

    for idx, R in enumerate(counts):
        result = simulation_run(
            strategy,
            R,
            params,
            source,
            confidence_multiplier=confidence_multiplier,
            chunk_size=chunk_size,
            clock=clock,
        )
        logger.info(
            "%s run %d/%d: R=%d est=%.6f se=%.6f elapsed=%.3fs",
            strategy.value,
            idx + 1,
            run_count,
            R,
            result.estimated_price,
            result.standard_error,
            result.elapsed_seconds,
        )
        yield result
