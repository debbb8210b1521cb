import argparse
import sys
from pathlib import Path
from typing import Dict, List

import plotly.graph_objects as go

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import default_config, load_config
from methods import RunResult, sweep
from models import NormalSource, black_scholes_price
from run_sweeps import strategy_sweeps


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Run the direct and antithetic sweeps and plot the estimated "
            "price against the sample size, with the closed-form price as "
            "reference."
        )
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file with configuration options.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Fixed seed for reproducibility (default: parameters.py seed).",
    )
    parser.add_argument(
        "--output",
        default="plots/sweep_convergence.html",
        help="Path of the HTML file with the chart.",
    )
    return parser.parse_args()


def build_figure(
    results: Dict[str, List[RunResult]], bsm_price: float
) -> go.Figure:
    fig = go.Figure()
    all_R: List[int] = []

    for label, runs in results.items():
        R_values = [res.replicate_count for res in runs]
        all_R.extend(R_values)
        fig.add_trace(
            go.Scatter(
                x=R_values,
                y=[res.estimated_price for res in runs],
                mode="lines+markers",
                name=f"{label} estimator",
                error_y=dict(
                    type="data",
                    array=[1.96 * res.standard_error for res in runs],
                    visible=True,
                    thickness=1.2,
                    width=3,
                ),
            )
        )

    if all_R:
        fig.add_trace(
            go.Scatter(
                x=[min(all_R), max(all_R)],
                y=[bsm_price, bsm_price],
                mode="lines",
                name="BSM closed form",
                line=dict(color="#444", dash="dash"),
            )
        )

    fig.update_layout(
        title="Monte Carlo estimate vs sample size",
        xaxis=dict(
            title="Sample size R (log scale)",
            type="log",
            gridcolor="rgba(0,0,0,0.15)",
        ),
        yaxis=dict(
            title="Estimated call price",
            gridcolor="rgba(0,0,0,0.15)",
        ),
        template="plotly_white",
        margin=dict(l=60, r=30, t=60, b=50),
        legend=dict(yanchor="top", y=0.98, xanchor="right", x=0.98),
    )
    return fig


def main() -> None:
    args = parse_args()
    config = default_config() if args.config is None else load_config(args.config)
    config = config.with_overrides(seed=args.seed)
    params = config.model_parameters
    source = NormalSource(config.seed)

    results: Dict[str, List[RunResult]] = {}
    for strategy, run_count, base in strategy_sweeps(config):
        runs = []
        for res in sweep(
            strategy,
            run_count,
            base,
            params,
            source,
            multiplier=config.replicate_multiplier,
            confidence_multiplier=config.confidence_multiplier,
            chunk_size=config.chunk_size,
        ):
            runs.append(res)
            print(
                f"{strategy.value:>10} R={res.replicate_count:>10}: "
                f"est={res.estimated_price:.6f}, se={res.standard_error:.6f}"
            )
        results[strategy.label] = runs

    fig = build_figure(results, black_scholes_price(params))

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(str(output_path), include_plotlyjs="cdn")
    print(f"Chart saved to: {output_path}")


if __name__ == "__main__":
    main()
