import argparse
import sys
from pathlib import Path
from typing import Dict, List

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import default_config, load_config
from methods import RunResult, Strategy, simulation_run
from models import NormalSource, black_scholes_price


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Compare direct and antithetic estimators at the same sample "
            "sizes and print variance reduction factors."
        )
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file with configuration options.",
    )
    parser.add_argument(
        "--R-values",
        nargs="+",
        type=int,
        default=[1_000, 10_000, 100_000, 1_000_000],
        help="Sample sizes to compare.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=12345,
        help="Seed shared by both estimators at every sample size.",
    )
    return parser.parse_args()


def compare_at(
    R_values: List[int], config, seed: int
) -> List[Dict[str, float]]:
    """
    Run both strategies at every size in ``R_values``.

    Each (strategy, R) pair gets a fresh source with the same seed, so the
    two estimators see the same normal draws.
    """
    params = config.model_parameters
    rows: List[Dict[str, float]] = []

    for R_value in R_values:
        by_strategy: Dict[Strategy, RunResult] = {}
        for strategy in Strategy:
            by_strategy[strategy] = simulation_run(
                strategy,
                R_value,
                params,
                NormalSource(seed),
                confidence_multiplier=config.confidence_multiplier,
                chunk_size=config.chunk_size,
            )

        direct = by_strategy[Strategy.DIRECT]
        anti = by_strategy[Strategy.ANTITHETIC]
        var_direct = direct.standard_error**2
        var_anti = anti.standard_error**2

        rows.append(
            {
                "R": R_value,
                "se_direct": direct.standard_error,
                "se_antithetic": anti.standard_error,
                "vrf": var_direct / var_anti if var_anti > 0.0 else float("inf"),
                "efficiency_ratio": (
                    direct.efficiency / anti.efficiency
                    if anti.efficiency > 0.0
                    else float("inf")
                ),
            }
        )
    return rows


def main() -> None:
    args = parse_args()
    config = default_config() if args.config is None else load_config(args.config)

    print(f"BSM price: {black_scholes_price(config.model_parameters):.6f}")
    print(
        f"{'R':>10} | {'SE direct':>12} | {'SE antithetic':>13} | "
        f"{'VRF':>8} | {'eff. ratio':>10}"
    )
    for row in compare_at(args.R_values, config, args.seed):
        print(
            f"{row['R']:>10} | {row['se_direct']:>12.6f} | "
            f"{row['se_antithetic']:>13.6f} | {row['vrf']:>8.3f} | "
            f"{row['efficiency_ratio']:>10.3f}"
        )


if __name__ == "__main__":
    main()
