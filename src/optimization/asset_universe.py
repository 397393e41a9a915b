"""Static asset-class universe for the Monte-Carlo optimizer.

Annualized expected returns and volatilities are decimal fractions.
The ``correlation`` column is a correlation-to-market placeholder; the
variance model in ``monte_carlo`` does not use it.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Sequence

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class AssetClass:
    name: str
    expected_return: float
    volatility: float
    correlation: float


DEFAULT_UNIVERSE: tuple[AssetClass, ...] = (
    AssetClass("US Large Cap", 0.10, 0.15, 1.0),
    AssetClass("International Developed", 0.08, 0.18, 0.7),
    AssetClass("Emerging Markets", 0.12, 0.25, 0.6),
    AssetClass("Government Bonds", 0.04, 0.05, -0.2),
    AssetClass("Corporate Bonds", 0.06, 0.08, 0.3),
    AssetClass("REITs", 0.09, 0.20, 0.5),
    AssetClass("Commodities", 0.07, 0.22, 0.1),
)


def universe_arrays(
    universe: Sequence[AssetClass] = DEFAULT_UNIVERSE,
) -> tuple[np.ndarray, np.ndarray]:
    """Return (expected_returns, volatilities) as float vectors in universe order."""
    if len(universe) == 0:
        raise ValueError("Asset universe is empty")
    expected_returns = np.array([a.expected_return for a in universe], dtype=float)
    volatilities = np.array([a.volatility for a in universe], dtype=float)
    return expected_returns, volatilities


def universe_frame(universe: Sequence[AssetClass] = DEFAULT_UNIVERSE) -> pd.DataFrame:
    """Tabular view of the universe, one row per asset class."""
    return pd.DataFrame([asdict(a) for a in universe])
