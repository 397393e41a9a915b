"""Monte-Carlo constrained portfolio optimization.

Samples random long-only weight vectors over a fixed asset universe, scores
each by Sharpe ratio and keeps the best candidate whose risk score lies
within a tolerance band of the requested risk tolerance.

Portfolio variance uses an independent-asset model,
``sum((vol_i * w_i) ** 2)``, with no covariance cross-terms. This is a known
simplification, not true mean-variance portfolio risk.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

import numpy as np
from loguru import logger

from src.optimization.asset_universe import DEFAULT_UNIVERSE, AssetClass, universe_arrays


class InfeasiblePortfolioError(ValueError):
    """No sampled portfolio fell within the risk-tolerance band."""

    def __init__(
        self,
        risk_tolerance: float,
        min_risk_score: float,
        max_risk_score: float,
        tolerance_band: float,
    ) -> None:
        self.risk_tolerance = risk_tolerance
        self.min_risk_score = min_risk_score
        self.max_risk_score = max_risk_score
        self.tolerance_band = tolerance_band
        super().__init__(
            f"No feasible portfolio for risk tolerance {risk_tolerance}: sampled risk "
            f"scores span [{min_risk_score:.2f}, {max_risk_score:.2f}] and none fall "
            f"within ±{tolerance_band} of the request"
        )


class DegenerateSampleError(ArithmeticError):
    """A weight draw or candidate portfolio cannot be scored."""


@dataclass(frozen=True)
class OptimizerSettings:
    n_simulations: int = 10_000
    risk_free_rate: float = 0.02
    tolerance_band: float = 1.5
    risk_score_scale: float = 10.0

    @classmethod
    def from_config(cls, config: Mapping[str, Any] | None) -> OptimizerSettings:
        """Build settings from the ``simulation`` section of optimization.yaml."""
        section = dict((config or {}).get("simulation") or {})
        defaults = cls()
        unknown = set(section) - set(defaults.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown simulation settings: {sorted(unknown)}")

        settings = cls(
            n_simulations=int(section.get("n_simulations", defaults.n_simulations)),
            risk_free_rate=float(section.get("risk_free_rate", defaults.risk_free_rate)),
            tolerance_band=float(section.get("tolerance_band", defaults.tolerance_band)),
            risk_score_scale=float(section.get("risk_score_scale", defaults.risk_score_scale)),
        )
        if settings.n_simulations < 1:
            raise ValueError(f"n_simulations must be >= 1, got {settings.n_simulations}")
        return settings


@dataclass(frozen=True, eq=False)
class CandidatePortfolio:
    """Winning trial; all metrics are decimals, not percentages."""

    weights: np.ndarray
    expected_return: float
    volatility: float
    sharpe_ratio: float
    risk_score: float
    trial_index: int


def normalize_weights(draws: np.ndarray) -> np.ndarray:
    """Scale each row of raw draws so it sums to 1."""
    draws = np.asarray(draws, dtype=float)
    totals = draws.sum(axis=-1, keepdims=True)
    if np.any(totals <= 0):
        raise DegenerateSampleError("Weight draw sums to zero; cannot normalize")
    return draws / totals


def portfolio_expected_return(weights: np.ndarray, expected_returns: np.ndarray) -> np.ndarray:
    return np.sum(expected_returns * weights, axis=-1)


def portfolio_volatility(weights: np.ndarray, volatilities: np.ndarray) -> np.ndarray:
    """Independent-asset volatility: sqrt(sum((vol_i * w_i)^2)), no covariance."""
    return np.sqrt(np.sum((volatilities * weights) ** 2, axis=-1))


def sharpe_ratio(
    expected_return: np.ndarray,
    volatility: np.ndarray,
    risk_free_rate: float = 0.02,
) -> np.ndarray:
    volatility = np.asarray(volatility, dtype=float)
    if np.any(volatility <= 0):
        raise DegenerateSampleError("Portfolio volatility is zero; Sharpe ratio undefined")
    return (np.asarray(expected_return, dtype=float) - risk_free_rate) / volatility


def score_portfolios(
    weights: np.ndarray,
    universe: Sequence[AssetClass] = DEFAULT_UNIVERSE,
    settings: OptimizerSettings | None = None,
) -> dict[str, np.ndarray]:
    """Score every row of a weight matrix against the universe."""
    settings = settings or OptimizerSettings()
    expected_returns, volatilities = universe_arrays(universe)
    ret = portfolio_expected_return(weights, expected_returns)
    vol = portfolio_volatility(weights, volatilities)
    return {
        "expected_return": ret,
        "volatility": vol,
        "sharpe_ratio": sharpe_ratio(ret, vol, settings.risk_free_rate),
        "risk_score": vol * settings.risk_score_scale,
    }


def optimize_portfolio(
    risk_tolerance: float,
    time_horizon: Any = None,
    constraints: Any = None,
    *,
    rng: np.random.Generator | None = None,
    universe: Sequence[AssetClass] = DEFAULT_UNIVERSE,
    settings: OptimizerSettings | None = None,
) -> CandidatePortfolio:
    """Find the best-Sharpe sampled portfolio within the risk-tolerance band.

    Runs ``settings.n_simulations`` trials. Trial ``i`` uses row ``i`` of
    ``rng.random((n_simulations, n_assets))``, normalized to sum to one. A trial
    is accepted when ``abs(risk_score - risk_tolerance) < tolerance_band``;
    among accepted trials the highest Sharpe ratio wins, ties going to the
    earliest trial.

    Args:
        risk_tolerance: Requested risk on the 1-10 scale. Not bounds-checked;
            out-of-range values simply match no trial.
        time_horizon: Accepted and ignored.
        constraints: Accepted and ignored.
        rng: Random source. Defaults to a fresh unseeded generator.
        universe: Asset classes to allocate across.
        settings: Simulation parameters.

    Raises:
        InfeasiblePortfolioError: If no trial satisfies the band.
        DegenerateSampleError: If a draw cannot be normalized or scored.
    """
    settings = settings or OptimizerSettings()
    rng = rng if rng is not None else np.random.default_rng()

    draws = rng.random((settings.n_simulations, len(universe)))
    weights = normalize_weights(draws)
    scores = score_portfolios(weights, universe, settings)

    risk_score = scores["risk_score"]
    accepted = np.abs(risk_score - risk_tolerance) < settings.tolerance_band
    n_accepted = int(accepted.sum())
    logger.debug(
        f"Monte-Carlo: {n_accepted:,}/{settings.n_simulations:,} trials within "
        f"±{settings.tolerance_band} of risk tolerance {risk_tolerance}"
    )
    if n_accepted == 0:
        raise InfeasiblePortfolioError(
            risk_tolerance=risk_tolerance,
            min_risk_score=float(risk_score.min()),
            max_risk_score=float(risk_score.max()),
            tolerance_band=settings.tolerance_band,
        )

    # argmax returns the first maximum, matching a strict ">" running max.
    best = int(np.argmax(np.where(accepted, scores["sharpe_ratio"], -np.inf)))
    return CandidatePortfolio(
        weights=weights[best].copy(),
        expected_return=float(scores["expected_return"][best]),
        volatility=float(scores["volatility"][best]),
        sharpe_ratio=float(scores["sharpe_ratio"][best]),
        risk_score=float(risk_score[best]),
        trial_index=best,
    )
