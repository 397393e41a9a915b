"""Shared I/O utilities for config loading and artifact writing."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pandas as pd
import yaml
from loguru import logger


def load_yaml_config(path: str | Path, required: bool = True) -> dict[str, Any]:
    """Load a YAML config file into a dict.

    Args:
        path: Config file path.
        required: If False, a missing file yields an empty dict with a warning.

    Returns:
        Parsed mapping (empty dict for an empty file).

    Raises:
        FileNotFoundError: If the file is missing and ``required`` is True.
        ValueError: If the top-level YAML node is not a mapping.
    """
    p = Path(path)
    if not p.exists():
        if required:
            raise FileNotFoundError(f"Config not found: {p}")
        logger.warning(f"Config not found: {p}. Using built-in defaults")
        return {}

    with open(p) as f:
        config = yaml.safe_load(f) or {}
    if not isinstance(config, dict):
        raise ValueError(f"Config {p} must be a mapping, got {type(config).__name__}")
    return config


def write_json(payload: dict[str, Any], path: str | Path) -> Path:
    """Write a JSON artifact, creating parent directories."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(payload, indent=2))
    logger.info(f"Wrote {p}")
    return p


def write_frame_csv(df: pd.DataFrame, path: str | Path) -> Path:
    """Write a DataFrame to CSV without the index, creating parent directories."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(p, index=False)
    logger.info(f"Wrote {p} ({len(df):,} rows)")
    return p
