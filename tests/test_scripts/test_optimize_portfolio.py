"""Tests for scripts/optimize_portfolio.py."""

from __future__ import annotations

import json

import pandas as pd
import yaml

from scripts import optimize_portfolio as script_mod


def _write_config(tmp_path, n_simulations: int = 500) -> str:
    config = {
        "simulation": {"n_simulations": n_simulations},
        "frontier": {"start": 0.04, "stop": 0.15, "step": 0.01},
        "output": {
            "result_path": str(tmp_path / "models" / "result.json"),
            "frontier_path": str(tmp_path / "processed" / "frontier.csv"),
        },
    }
    path = tmp_path / "optimization.yaml"
    path.write_text(yaml.safe_dump(config))
    return str(path)


def test_main_writes_result_and_frontier(tmp_path) -> None:
    config_path = _write_config(tmp_path)

    exit_code = script_mod.main(config_path, risk_tolerance=1.0, time_horizon=5, seed=42)

    assert exit_code == 0
    result = json.loads((tmp_path / "models" / "result.json").read_text())
    assert len(result["optimized_portfolio"]["allocation"]) == 7
    assert result["run"] == {
        "risk_tolerance": 1.0,
        "time_horizon": 5,
        "seed": 42,
        "n_simulations": 500,
    }
    frontier = pd.read_csv(tmp_path / "processed" / "frontier.csv")
    assert len(frontier) == 12


def test_main_output_override(tmp_path) -> None:
    config_path = _write_config(tmp_path)
    out = tmp_path / "custom.json"

    assert script_mod.main(config_path, risk_tolerance=1.0, seed=1, output=str(out)) == 0
    assert out.exists()
    assert not (tmp_path / "models" / "result.json").exists()


def test_main_infeasible_returns_non_zero(tmp_path) -> None:
    config_path = _write_config(tmp_path)

    exit_code = script_mod.main(config_path, risk_tolerance=100.0, seed=0)

    assert exit_code == 1
    assert not (tmp_path / "models" / "result.json").exists()
