"""Unit tests for the static asset-class universe."""

from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from src.optimization.asset_universe import (
    DEFAULT_UNIVERSE,
    AssetClass,
    universe_arrays,
    universe_frame,
)


def test_default_universe_has_seven_asset_classes():
    names = [a.name for a in DEFAULT_UNIVERSE]
    assert names == [
        "US Large Cap",
        "International Developed",
        "Emerging Markets",
        "Government Bonds",
        "Corporate Bonds",
        "REITs",
        "Commodities",
    ]


def test_asset_class_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_UNIVERSE[0].volatility = 0.5


def test_universe_arrays_follow_universe_order():
    rets, vols = universe_arrays(DEFAULT_UNIVERSE)
    np.testing.assert_array_equal(rets, [0.10, 0.08, 0.12, 0.04, 0.06, 0.09, 0.07])
    np.testing.assert_array_equal(vols, [0.15, 0.18, 0.25, 0.05, 0.08, 0.20, 0.22])


def test_universe_arrays_rejects_empty_universe():
    with pytest.raises(ValueError, match="empty"):
        universe_arrays(())


def test_correlations_are_bounded():
    assert all(-1.0 <= a.correlation <= 1.0 for a in DEFAULT_UNIVERSE)


def test_universe_frame_columns():
    df = universe_frame([AssetClass("Cash", 0.03, 0.01, 0.0)])
    assert list(df.columns) == ["name", "expected_return", "volatility", "correlation"]
    assert df.iloc[0]["name"] == "Cash"
