"""Unit tests for the illustrative efficient frontier."""

from __future__ import annotations

import math

import numpy as np
import pytest

from src.optimization.frontier import efficient_frontier, target_return_grid


def test_default_frontier_has_twelve_points():
    df = efficient_frontier()
    assert len(df) == 12
    assert list(df.columns) == ["expected_return", "volatility", "sharpe_ratio"]


def test_frontier_returns_span_four_to_fifteen_percent():
    df = efficient_frontier()
    np.testing.assert_allclose(df["expected_return"], np.arange(4, 16), rtol=1e-12)


def test_frontier_risk_level_formula():
    df = efficient_frontier()
    for ret_pct, vol in zip(df["expected_return"], df["volatility"]):
        target = ret_pct / 100
        assert vol == pytest.approx(math.sqrt(target * 0.8) * 100, rel=1e-12)


def test_frontier_sharpe_formula():
    df = efficient_frontier(risk_free_rate=0.02)
    first = df.iloc[0]
    assert first["sharpe_ratio"] == pytest.approx((0.04 - 0.02) / math.sqrt(0.04 * 0.8))


def test_frontier_is_monotonic_in_risk():
    df = efficient_frontier()
    assert df["volatility"].is_monotonic_increasing


def test_grid_keeps_last_point_despite_float_drift():
    grid = target_return_grid(0.04, 0.15, 0.01)
    assert grid[-1] == 0.15
    assert len(grid) == 12


def test_custom_grid():
    df = efficient_frontier(start=0.05, stop=0.10, step=0.05)
    np.testing.assert_allclose(df["expected_return"], [5.0, 10.0])


@pytest.mark.parametrize("kwargs", [{"step": 0}, {"step": -0.01}, {"start": 0.2, "stop": 0.1}])
def test_grid_rejects_bad_bounds(kwargs):
    with pytest.raises(ValueError):
        target_return_grid(**kwargs)
