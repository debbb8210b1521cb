import argparse
import logging
import sys
import time
from dataclasses import replace
from typing import Callable, List, Optional, TextIO, Tuple

from config import ConfigurationError, SimulationConfig, default_config, load_config
from methods import RunResult, Strategy, sweep
from models import NormalSource, black_scholes_price

logger = logging.getLogger(__name__)

CSV_COLUMNS = (
    "sample_size",
    "estimated_price",
    "estimated_standard_error",
    "95_percent_confidence_interval_lower",
    "95_percent_confidence_interval_upper",
    "runtime_in_seconds",
    "efficiency",
)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Price a European call with the Black-Scholes-Merton formula and "
            "with direct and antithetic Monte Carlo sweeps over growing "
            "sample sizes. Prints CSV tables to stdout."
        )
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file with configuration options (overrides parameters.py).",
    )
    seed_group = parser.add_mutually_exclusive_group()
    seed_group.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Fixed seed for reproducible output (default: OS entropy).",
    )
    seed_group.add_argument(
        "--random-seed",
        action="store_true",
        help="Seed from OS entropy even if the config file fixes a seed.",
    )
    parser.add_argument(
        "--direct-runs",
        type=int,
        default=None,
        help="Number of direct simulation runs.",
    )
    parser.add_argument(
        "--direct-base",
        type=int,
        default=None,
        help="Replicates in the first direct run.",
    )
    parser.add_argument(
        "--antithetic-runs",
        type=int,
        default=None,
        help="Number of antithetic simulation runs.",
    )
    parser.add_argument(
        "--antithetic-base",
        type=int,
        default=None,
        help="Replicates in the first antithetic run.",
    )
    parser.add_argument(
        "--multiplier",
        type=int,
        default=None,
        help="Replicate growth factor between consecutive runs.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging verbosity (logs go to stderr).",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> SimulationConfig:
    """parameters.py defaults < YAML file < command-line flags."""
    config = default_config() if args.config is None else load_config(args.config)
    config = config.with_overrides(
        seed=args.seed,
        direct_run_count=args.direct_runs,
        direct_base_replicates=args.direct_base,
        antithetic_run_count=args.antithetic_runs,
        antithetic_base_replicates=args.antithetic_base,
        replicate_multiplier=args.multiplier,
    )
    if args.random_seed:
        config = replace(config, seed=None)
    return config


def strategy_sweeps(config: SimulationConfig) -> List[Tuple[Strategy, int, int]]:
    """(strategy, run_count, base_replicates) for each sweep, in report order."""
    return [
        (Strategy.DIRECT, config.direct_run_count, config.direct_base_replicates),
        (
            Strategy.ANTITHETIC,
            config.antithetic_run_count,
            config.antithetic_base_replicates,
        ),
    ]


def format_header() -> str:
    return ", ".join(CSV_COLUMNS)


def format_row(result: RunResult) -> str:
    values = [
        str(result.replicate_count),
        str(result.estimated_price),
        str(result.standard_error),
        str(result.ci_lower),
        str(result.ci_upper),
        str(result.elapsed_seconds),
        str(result.efficiency),
    ]
    return ", ".join(values)


def render_report(
    config: SimulationConfig,
    out: TextIO,
    source: Optional[NormalSource] = None,
    clock: Callable[[], float] = time.perf_counter,
) -> None:
    """Write the full report, one row as soon as each run finishes."""
    params = config.model_parameters
    if source is None:
        source = NormalSource(config.seed)

    print(f"BSM Deterministic Call Price: {black_scholes_price(params)}", file=out)

    for strategy, run_count, base in strategy_sweeps(config):
        print(file=out)
        print(
            "CSV Data table for Stochastic BSM Simulation using "
            f"{strategy.label} Method.",
            file=out,
        )
        print(format_header(), file=out)
        for result in sweep(
            strategy,
            run_count,
            base,
            params,
            source,
            multiplier=config.replicate_multiplier,
            confidence_multiplier=config.confidence_multiplier,
            chunk_size=config.chunk_size,
            clock=clock,
        ):
            print(format_row(result), file=out)
            out.flush()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = build_config(args)
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    logger.info("Running with configuration: %s", config.as_dict())
    render_report(config, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
