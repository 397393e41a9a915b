"""Run the Monte-Carlo portfolio optimizer offline and persist the result.

Usage:
    uv run python scripts/optimize_portfolio.py --risk_tolerance 1.0 --seed 42
"""

from __future__ import annotations

import argparse
import sys

import numpy as np
import pandas as pd
from loguru import logger

from src.optimization.monte_carlo import InfeasiblePortfolioError, OptimizerSettings
from src.optimization.pipeline import build_optimization_payload
from src.utils.io_utils import load_yaml_config, write_frame_csv, write_json


def main(
    config_path: str = "configs/optimization.yaml",
    risk_tolerance: float = 1.0,
    time_horizon: float | None = None,
    seed: int | None = None,
    output: str | None = None,
) -> int:
    config = load_yaml_config(config_path)
    settings = OptimizerSettings.from_config(config)
    outputs = config.get("output") or {}

    try:
        result = build_optimization_payload(
            risk_tolerance,
            time_horizon,
            rng=np.random.default_rng(seed),
            settings=settings,
            frontier_grid=config.get("frontier"),
        )
    except InfeasiblePortfolioError as e:
        logger.error(str(e))
        return 1

    portfolio = result["optimized_portfolio"]
    logger.info(
        f"Expected return {portfolio['expected_return']:.2f}%, "
        f"volatility {portfolio['volatility']:.2f}%, Sharpe {portfolio['sharpe_ratio']:.3f}"
    )
    logger.info(f"Allocation:\n{pd.DataFrame(portfolio['allocation']).to_string(index=False)}")

    result["run"] = {
        "risk_tolerance": risk_tolerance,
        "time_horizon": time_horizon,
        "seed": seed,
        "n_simulations": settings.n_simulations,
    }
    write_json(result, output or outputs.get("result_path", "models/portfolio_optimization.json"))
    write_frame_csv(
        pd.DataFrame(result["efficient_frontier"]),
        outputs.get("frontier_path", "data/processed/efficient_frontier.csv"),
    )
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", default="configs/optimization.yaml")
    parser.add_argument("--risk_tolerance", type=float, default=1.0)
    parser.add_argument("--time_horizon", type=float, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", default=None)
    args = parser.parse_args()
    sys.exit(
        main(
            args.config,
            args.risk_tolerance,
            args.time_horizon,
            args.seed,
            args.output,
        )
    )
