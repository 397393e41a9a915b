"""Illustrative efficient frontier.

Closed-form curve over a swept target-return grid. It is not derived from the
sampled candidates or any covariance structure; it exists for charting.
"""

from __future__ import annotations

import numpy as np
import pandas as pd


def target_return_grid(start: float = 0.04, stop: float = 0.15, step: float = 0.01) -> np.ndarray:
    """Inclusive grid start..stop. Rounded so float drift cannot drop the last point."""
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if stop < start:
        raise ValueError(f"stop ({stop}) must be >= start ({start})")
    n_points = int(round((stop - start) / step)) + 1
    return np.round(start + step * np.arange(n_points), 10)


def efficient_frontier(
    start: float = 0.04,
    stop: float = 0.15,
    step: float = 0.01,
    risk_free_rate: float = 0.02,
) -> pd.DataFrame:
    """Frontier points with return and volatility in percent.

    volatility = sqrt(target * 0.8) * 100
    sharpe     = (target - rf) / (volatility / 100)
    """
    target = target_return_grid(start, stop, step)
    risk_level = np.sqrt(target * 0.8) * 100
    return pd.DataFrame(
        {
            "expected_return": target * 100,
            "volatility": risk_level,
            "sharpe_ratio": (target - risk_free_rate) / (risk_level / 100),
        }
    )
