"""Shared dependencies: optimizer config, settings and per-request RNG."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

import numpy as np
from loguru import logger

from api.config import OPTIMIZATION_CONFIG, OPTIMIZER_SEED
from src.optimization.monte_carlo import OptimizerSettings
from src.utils.io_utils import load_yaml_config


@lru_cache(maxsize=1)
def get_optimization_config() -> dict[str, Any]:
    """Load optimization.yaml (cached). Missing file falls back to code defaults."""
    config = load_yaml_config(OPTIMIZATION_CONFIG, required=False)
    if config:
        logger.info(f"Loaded optimizer config from {OPTIMIZATION_CONFIG}")
    return config


def get_optimizer_settings() -> OptimizerSettings:
    return OptimizerSettings.from_config(get_optimization_config())


def get_frontier_grid() -> dict[str, float]:
    return dict(get_optimization_config().get("frontier") or {})


def get_rng() -> np.random.Generator:
    """Fresh generator per request; never shared across requests."""
    return np.random.default_rng(OPTIMIZER_SEED)
