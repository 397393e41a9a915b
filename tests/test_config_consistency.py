"""Tests for config/code consistency.

Validates that configs/optimization.yaml matches the defaults the code falls
back to, preventing the class of bug where configs drift from implementation.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
import yaml

from src.optimization.frontier import efficient_frontier
from src.optimization.monte_carlo import OptimizerSettings

PROJECT_ROOT = Path(__file__).resolve().parents[1]
CONFIG_PATH = PROJECT_ROOT / "configs" / "optimization.yaml"


@pytest.fixture
def opt_config() -> dict:
    return yaml.safe_load(CONFIG_PATH.read_text())


class TestSimulationConfig:
    def test_matches_code_defaults(self, opt_config: dict) -> None:
        assert OptimizerSettings.from_config(opt_config) == OptimizerSettings(), (
            "configs/optimization.yaml simulation section drifted from OptimizerSettings defaults"
        )

    def test_only_known_keys(self, opt_config: dict) -> None:
        known = set(OptimizerSettings.__dataclass_fields__)
        assert set(opt_config["simulation"]) <= known


class TestFrontierConfig:
    def test_grid_matches_defaults(self, opt_config: dict) -> None:
        configured = efficient_frontier(**opt_config["frontier"])
        default = efficient_frontier()
        np.testing.assert_allclose(configured.to_numpy(), default.to_numpy())


class TestOutputConfig:
    def test_outputs_are_relative_posix_paths(self, opt_config: dict) -> None:
        for key, path in opt_config["output"].items():
            assert not Path(path).is_absolute(), f"output.{key} must be project-relative"
            assert "\\" not in path, f"output.{key}='{path}' contains Windows backslashes"
