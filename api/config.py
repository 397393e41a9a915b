"""API configuration and paths."""

from __future__ import annotations

import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
CONFIG_DIR = PROJECT_ROOT / "configs"
OPTIMIZATION_CONFIG = CONFIG_DIR / "optimization.yaml"


def _env_int(name: str) -> int | None:
    raw = os.environ.get(name, "").strip()
    return int(raw) if raw else None


# Fixed seed makes every request reproducible; unset draws fresh entropy per request.
OPTIMIZER_SEED = _env_int("OPTIMIZER_SEED")

# API
API_TITLE = "Portfolio Optimization API"
API_VERSION = "0.1.0"
CORS_ORIGINS = ["http://localhost:8501", "http://localhost:3000"]
