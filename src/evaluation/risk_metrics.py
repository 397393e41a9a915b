"""Derived risk metrics for an optimized allocation.

VaR, expected shortfall and max drawdown are fixed multiples of portfolio
volatility (in percent), not statistically estimated quantiles.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from src.optimization.asset_universe import DEFAULT_UNIVERSE, AssetClass

VAR95_MULTIPLIER = 1.65
EXPECTED_SHORTFALL_MULTIPLIER = 2.1
MAX_DRAWDOWN_MULTIPLIER = 1.8
BASE_BETA = 0.85
BETA_RISK_SLOPE = 0.3


def portfolio_risk_metrics(volatility_pct: float, risk_tolerance: float) -> dict[str, float]:
    """Approximate tail metrics from percent volatility and requested risk tolerance."""
    return {
        "var95": volatility_pct * VAR95_MULTIPLIER,
        "expected_shortfall": volatility_pct * EXPECTED_SHORTFALL_MULTIPLIER,
        "max_drawdown": volatility_pct * MAX_DRAWDOWN_MULTIPLIER,
        "beta": BASE_BETA + (risk_tolerance / 10) * BETA_RISK_SLOPE,
    }


def round_half_up(values: np.ndarray) -> np.ndarray:
    return np.floor(np.asarray(values, dtype=float) + 0.5).astype(int)


def allocation_table(
    weights: np.ndarray,
    universe: Sequence[AssetClass] = DEFAULT_UNIVERSE,
) -> list[dict]:
    """Per-asset allocation rows: integer-percent weight, return/vol in percent.

    Each weight is rounded independently, so the integer column may not sum
    to exactly 100.
    """
    if len(weights) != len(universe):
        raise ValueError(f"Got {len(weights)} weights for {len(universe)} asset classes")
    pct = round_half_up(np.asarray(weights, dtype=float) * 100)
    return [
        {
            "asset": asset.name,
            "weight": int(w),
            "expected_return": asset.expected_return * 100,
            "volatility": asset.volatility * 100,
        }
        for asset, w in zip(universe, pct)
    ]
