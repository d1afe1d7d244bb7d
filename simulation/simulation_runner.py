import logging
import numpy as np
import pandas as pd
from dataclasses import dataclass, fields
from typing import Any, Dict, Iterable, Optional

from stats_errors import EmptyInputError, InvalidParameterError
from statistical_analysis.confidence_interval_builder import credible_interval
from statistical_analysis.log_odds import logodds_to_probabilities
from statistical_analysis.zero_inflated import ZeroInflatedGamma


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationConfig:
    seed: Optional[int] = None
    n_simulations: int = 10000

    def __post_init__(self):
        if self.n_simulations < 1:
            raise InvalidParameterError(f"n_simulations must be at least 1, got {self.n_simulations}")

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> 'SimulationConfig':
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config.items() if k in known})

    def rng(self) -> np.random.Generator:
        """Fresh generator; the same seed always replays the same draws"""
        return np.random.default_rng(self.seed)


def simulate_binomial_rates(p: float, trials: int, config: SimulationConfig) -> np.ndarray:
    """Observed success rates from repeated binomial experiments"""
    if not (0 <= p <= 1):
        raise InvalidParameterError(f"p must lie in [0, 1], got {p}")
    if trials < 1:
        raise InvalidParameterError(f"Trials must be at least 1, got {trials}")
    logger.debug("Simulating %d binomial experiments (p=%s, trials=%d)", config.n_simulations, p, trials)
    successes = config.rng().binomial(trials, p, config.n_simulations)
    return successes / trials


def simulate_poisson_counts(rate: float, config: SimulationConfig) -> np.ndarray:
    if rate <= 0:
        raise InvalidParameterError(f"Poisson rate must be positive, got {rate}")
    logger.debug("Simulating %d Poisson counts (rate=%s)", config.n_simulations, rate)
    return config.rng().poisson(rate, config.n_simulations)


def simulate_logistic_outcomes(
    intercept: float,
    slope: float,
    x: Iterable[float],
    config: SimulationConfig
) -> pd.DataFrame:
    """Bernoulli outcomes whose log-odds are linear in x"""
    x_values = np.asarray(list(x), dtype=float)
    if x_values.size == 0:
        raise EmptyInputError("Need at least one x value to simulate outcomes")
    log_odds = intercept + slope * x_values
    probability = logodds_to_probabilities(log_odds)
    outcome = config.rng().binomial(1, probability)
    return pd.DataFrame({
        'x': x_values,
        'log_odds': log_odds,
        'probability': probability,
        'outcome': outcome
    })


def simulate_zigamma_means(params: ZeroInflatedGamma, config: SimulationConfig) -> np.ndarray:
    """Sample mean of params.n zero-inflated draws, once per simulation"""
    logger.debug(
        "Simulating %d zero-inflated gamma means of size %d", config.n_simulations, params.n
    )
    n = int(params.n)
    draws = params.sample(config.n_simulations * n, config.rng())
    return draws.reshape(config.n_simulations, n).mean(axis=1)


def summarize_draws(draws: Iterable[float], level: float = 0.95) -> pd.Series:
    """Mean, spread and credible interval of a set of draws"""
    arr = np.asarray(list(draws), dtype=float)
    if arr.size == 0:
        raise EmptyInputError("Cannot summarize zero draws")
    interval = credible_interval(arr, level)
    std = float(np.std(arr, ddof=1)) if arr.size > 1 else 0.0
    return pd.Series({
        'mean': float(np.mean(arr)),
        'std': std,
        'standard_error': std / np.sqrt(arr.size),
        'lower': interval.lower,
        'upper': interval.upper,
        'n': arr.size
    })
