"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from api.config import OPTIMIZATION_CONFIG

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    """Basic health check."""
    return {"status": "ok"}


@router.get("/ready")
def ready():
    """Readiness check: optimizer config is present."""
    checks = {"optimization_config": OPTIMIZATION_CONFIG.exists()}
    return {"ready": all(checks.values()), "checks": checks}
