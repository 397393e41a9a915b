"""Portfolio optimization schemas.

Wire format is camelCase; Python attributes stay snake_case.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OptimizationRequest(CamelModel):
    """Portfolio optimization request."""

    risk_tolerance: float = Field(
        ..., description="Risk appetite on a 1-10 scale (not bounds-checked)"
    )
    time_horizon: Any = Field(None, description="Years; accepted as-is and unused")
    constraints: Any = Field(None, description="Free-form; accepted as-is and unused")


class AllocationItem(CamelModel):
    asset: str
    weight: int = Field(..., description="Integer percent, rounded per asset")
    expected_return: float = Field(..., description="Asset expected return (%)")
    volatility: float = Field(..., description="Asset volatility (%)")


class OptimizedPortfolio(CamelModel):
    weights: list[float] = Field(..., description="Normalized weights, sum to 1")
    expected_return: float = Field(..., description="Portfolio expected return (%)")
    volatility: float = Field(..., description="Portfolio volatility (%)")
    sharpe_ratio: float
    allocation: list[AllocationItem]


class FrontierPoint(CamelModel):
    expected_return: float = Field(..., description="Target return (%)")
    volatility: float = Field(..., description="Risk level (%)")
    sharpe_ratio: float


class RiskMetrics(CamelModel):
    var95: float
    expected_shortfall: float
    max_drawdown: float
    beta: float


class OptimizationResponse(CamelModel):
    """Portfolio optimization results."""

    optimized_portfolio: OptimizedPortfolio
    efficient_frontier: list[FrontierPoint]
    risk_metrics: RiskMetrics
    timestamp: str


class AssetClassInfo(CamelModel):
    name: str
    expected_return: float
    volatility: float
    correlation: float
