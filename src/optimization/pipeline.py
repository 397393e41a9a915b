"""End-to-end optimization payload: optimizer, frontier and risk metrics."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping, Sequence

import numpy as np
from loguru import logger

from src.evaluation.risk_metrics import allocation_table, portfolio_risk_metrics
from src.optimization.asset_universe import DEFAULT_UNIVERSE, AssetClass
from src.optimization.frontier import efficient_frontier
from src.optimization.monte_carlo import OptimizerSettings, optimize_portfolio


def build_optimization_payload(
    risk_tolerance: float,
    time_horizon: Any = None,
    constraints: Any = None,
    *,
    rng: np.random.Generator | None = None,
    settings: OptimizerSettings | None = None,
    frontier_grid: Mapping[str, float] | None = None,
    universe: Sequence[AssetClass] = DEFAULT_UNIVERSE,
) -> dict[str, Any]:
    """Optimize, then attach the frontier and risk metrics.

    Raises InfeasiblePortfolioError before any metric is derived when no
    sampled portfolio fits the requested risk tolerance.
    """
    settings = settings or OptimizerSettings()
    best = optimize_portfolio(
        risk_tolerance,
        time_horizon,
        constraints,
        rng=rng,
        universe=universe,
        settings=settings,
    )

    volatility_pct = best.volatility * 100
    frontier = efficient_frontier(
        **dict(frontier_grid or {}), risk_free_rate=settings.risk_free_rate
    )

    logger.info(
        f"Optimized portfolio (risk tolerance {risk_tolerance}): "
        f"return={best.expected_return:.2%}, vol={best.volatility:.2%}, "
        f"sharpe={best.sharpe_ratio:.3f}, trial={best.trial_index}"
    )
    return {
        "optimized_portfolio": {
            "weights": best.weights.tolist(),
            "expected_return": best.expected_return * 100,
            "volatility": volatility_pct,
            "sharpe_ratio": best.sharpe_ratio,
            "allocation": allocation_table(best.weights, universe),
        },
        "efficient_frontier": frontier.to_dict(orient="records"),
        "risk_metrics": portfolio_risk_metrics(volatility_pct, risk_tolerance),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
