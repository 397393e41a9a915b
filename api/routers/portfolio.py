"""Portfolio optimization endpoints."""

from __future__ import annotations

import numpy as np
from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from api.dependencies import get_frontier_grid, get_optimizer_settings, get_rng
from api.schemas.portfolio import AssetClassInfo, OptimizationRequest, OptimizationResponse
from api.services.optimizer_service import optimize_request
from src.optimization.asset_universe import DEFAULT_UNIVERSE, universe_frame
from src.optimization.monte_carlo import InfeasiblePortfolioError, OptimizerSettings

router = APIRouter(tags=["portfolio"])


@router.post("/api/v1/portfolio-optimization", response_model=OptimizationResponse)
@router.post("/optimize", response_model=OptimizationResponse)
def optimize(
    req: OptimizationRequest,
    rng: np.random.Generator = Depends(get_rng),
    settings: OptimizerSettings = Depends(get_optimizer_settings),
    frontier_grid: dict = Depends(get_frontier_grid),
):
    """Monte-Carlo search for the best-Sharpe allocation within the risk band.

    Returns 422 when no sampled portfolio matches the requested risk
    tolerance. Any other failure is logged and returned as a generic 500.
    """
    try:
        return optimize_request(req, rng, settings, frontier_grid)
    except InfeasiblePortfolioError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=422, detail=str(e))
    except Exception:
        logger.exception("Portfolio optimization error")
        raise HTTPException(status_code=500, detail="Failed to optimize portfolio")


@router.get("/api/v1/assets", response_model=list[AssetClassInfo])
def list_assets():
    """Asset classes available to the optimizer."""
    return universe_frame(DEFAULT_UNIVERSE).to_dict(orient="records")
