"""FastAPI application for Monte-Carlo portfolio optimization.

Endpoints:
  /health                          — Health check
  /ready                           — Readiness check
  /api/v1/portfolio-optimization   — Optimized allocation, frontier, risk metrics
  /optimize                        — Alias of the above
  /api/v1/assets                   — Asset-class universe

Run: uv run uvicorn api.main:app --reload
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from api.config import API_TITLE, API_VERSION, CORS_ORIGINS
from api.routers import health, portfolio


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Validate optimizer config on startup."""
    logger.info("Loading optimizer settings...")
    try:
        from api.dependencies import get_optimizer_settings

        settings = get_optimizer_settings()
        logger.success(
            f"Optimizer ready: {settings.n_simulations:,} simulations, "
            f"rf={settings.risk_free_rate}, band=±{settings.tolerance_band}"
        )
    except Exception as e:
        logger.warning(f"Optimizer config invalid: {e}. Requests will fail until fixed.")
    yield
    logger.info("Shutting down")


app = FastAPI(
    title=API_TITLE,
    description="Monte-Carlo constrained portfolio optimization",
    version=API_VERSION,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(health.router)
app.include_router(portfolio.router)
