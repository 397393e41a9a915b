"""Portfolio optimization service: maps API requests onto the optimizer pipeline."""

from __future__ import annotations

from typing import Any, Mapping

import numpy as np

from api.schemas.portfolio import OptimizationRequest
from src.optimization.monte_carlo import OptimizerSettings
from src.optimization.pipeline import build_optimization_payload


def optimize_request(
    req: OptimizationRequest,
    rng: np.random.Generator,
    settings: OptimizerSettings,
    frontier_grid: Mapping[str, float] | None = None,
) -> dict[str, Any]:
    """Run one optimization for a validated request.

    ``time_horizon`` and ``constraints`` are passed through untouched; the
    optimizer ignores them.
    """
    return build_optimization_payload(
        req.risk_tolerance,
        req.time_horizon,
        req.constraints,
        rng=rng,
        settings=settings,
        frontier_grid=frontier_grid,
    )
