from .antithetic_monte_carlo import antithetic_sample, antithetic_samples
from .direct_monte_carlo import direct_sample, direct_samples
from .online_moments import OnlineMoments
from .simulation_run import RunResult, Strategy, simulation_run
from .sweep import replicate_counts, sweep
from .timing import Stopwatch

__all__ = [
    "antithetic_sample",
    "antithetic_samples",
    "direct_sample",
    "direct_samples",
    "OnlineMoments",
    "RunResult",
    "Strategy",
    "simulation_run",
    "replicate_counts",
    "sweep",
    "Stopwatch",
]
