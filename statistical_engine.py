import logging
import numpy as np
import pandas as pd
from dataclasses import dataclass, fields
from typing import Any, Dict, Iterable, Optional

from stats_errors import InvalidParameterError
from statistical_analysis.confidence_interval_builder import (
    Interval,
    credible_interval,
    logodds_interval,
    mean_interval,
    proportion_interval,
)
from statistical_analysis.log_odds import (
    logodds_to_probability,
    probability_to_logodds,
    rate_statistic,
)
from statistical_analysis.range_formatter import format_range
from statistical_analysis.zero_inflated import ZeroInflatedGamma, ZeroInflatedMoments
from simulation.simulation_runner import (
    SimulationConfig,
    simulate_zigamma_means,
    summarize_draws,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineConfig:
    interval_level: float = 0.95
    percent_accuracy: int = 1
    range_separator: str = ' to '
    seed: Optional[int] = None
    n_simulations: int = 2000

    def __post_init__(self):
        if not (0 < self.interval_level < 1):
            raise InvalidParameterError(
                f"interval_level must lie strictly between 0 and 1, got {self.interval_level}"
            )

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> 'EngineConfig':
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config.items() if k in known})

    @property
    def simulation(self) -> SimulationConfig:
        return SimulationConfig(seed=self.seed, n_simulations=self.n_simulations)


class StatisticalEngine:
    """Transforms, intervals and moments used across the blog posts, with shared defaults"""

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()

    def to_logodds(self, p: float) -> float:
        return probability_to_logodds(p)

    def to_probability(self, l: float) -> float:
        return logodds_to_probability(l)

    def rate(self, successes: int, trials: int) -> float:
        return rate_statistic(successes, trials)

    def format_range(self, values: Iterable[float], as_percent: bool = False,
                     accuracy: Optional[int] = None) -> str:
        if accuracy is None:
            accuracy = self.config.percent_accuracy
        return format_range(values, as_percent, accuracy, self.config.range_separator)

    def calculate_confidence_interval(
        self,
        data: Optional[Iterable[float]] = None,
        successes: Optional[int] = None,
        trials: Optional[int] = None,
        method: str = 'wilson',
        level: Optional[float] = None
    ) -> Interval:
        """Confidence or credible interval using the specified method.

        'wilson' and other proportion methods and 'logit' take successes/trials;
        't' and 'percentile' take data.
        """
        if level is None:
            level = self.config.interval_level

        if method in ('percentile', 't'):
            if data is None:
                raise ValueError(f"Interval method {method} requires data")
        elif successes is None or trials is None:
            raise ValueError(f"Interval method {method} requires successes and trials")

        if method == 'percentile':
            return credible_interval(data, level)
        elif method == 't':
            return mean_interval(data, level)
        elif method == 'logit':
            return logodds_interval(successes, trials, level)
        else:
            return proportion_interval(successes, trials, level, method)

    def zigamma_moments(self, zero_prob: float, shape: float, scale: float, n: int) -> ZeroInflatedMoments:
        return ZeroInflatedGamma(zero_prob, shape, scale, n).moments()

    def validate_zigamma_moments(self, params: ZeroInflatedGamma) -> pd.DataFrame:
        """Compare the closed-form mean and standard error against a simulation"""
        analytic = params.moments()
        simulated = summarize_draws(
            simulate_zigamma_means(params, self.config.simulation),
            self.config.interval_level
        )
        logger.debug("Simulated zero-inflated means: %s", simulated.to_dict())

        comparison = pd.DataFrame({
            'analytic': [analytic.mean, analytic.standard_error],
            'simulated': [simulated['mean'], simulated['std']]
        }, index=['mean', 'standard_error'])
        comparison['relative_error'] = np.abs(
            comparison['simulated'] - comparison['analytic']
        ) / comparison['analytic']
        return comparison
