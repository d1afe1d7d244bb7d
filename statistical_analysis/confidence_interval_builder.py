import numpy as np
import scipy.stats as stats
from statsmodels.stats.proportion import proportion_confint
from dataclasses import dataclass
from typing import Iterable
from math import sqrt

from stats_errors import EmptyInputError, InvalidParameterError
from statistical_analysis.log_odds import (
    logodds_to_probability,
    probability_to_logodds,
    rate_statistic,
)
from statistical_analysis.range_formatter import format_bounds


@dataclass(frozen=True)
class Interval:
    lower: float
    upper: float
    level: float
    method: str

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper

    def format(self, as_percent: bool = False, accuracy: int = 1) -> str:
        return format_bounds(self.lower, self.upper, as_percent, accuracy)


def format_interval(interval: Interval, as_percent: bool = False, accuracy: int = 1) -> str:
    return interval.format(as_percent=as_percent, accuracy=accuracy)


def credible_interval(draws: Iterable[float], level: float = 0.95) -> Interval:
    """Equal-tailed percentile interval of posterior or simulation draws"""
    _check_level(level)
    arr = np.asarray(list(draws), dtype=float)
    if arr.size == 0:
        raise EmptyInputError("Cannot build an interval from zero draws")
    alpha = 1 - level
    lower, upper = np.quantile(arr, [alpha / 2, 1 - alpha / 2])
    return Interval(float(lower), float(upper), level, 'percentile')


def proportion_interval(
    successes: int,
    trials: int,
    level: float = 0.95,
    method: str = 'wilson'
) -> Interval:
    """Confidence interval for a binomial proportion"""
    _check_level(level)
    rate_statistic(successes, trials)
    if method not in ('wilson', 'normal', 'agresti_coull', 'beta', 'jeffreys', 'binom_test'):
        raise ValueError(f"Unknown proportion interval method: {method}")
    lower, upper = proportion_confint(successes, trials, alpha=1 - level, method=method)
    return Interval(float(lower), float(upper), level, method)


def mean_interval(data: Iterable[float], level: float = 0.95) -> Interval:
    """Student-t confidence interval for a mean"""
    _check_level(level)
    arr = np.asarray(list(data), dtype=float)
    if arr.size < 2:
        raise EmptyInputError("A mean interval needs at least two observations")
    mean = np.mean(arr)
    sem = stats.sem(arr)
    if sem == 0:
        return Interval(float(mean), float(mean), level, 't')
    lower, upper = stats.t.interval(level, arr.size - 1, loc=mean, scale=sem)
    return Interval(float(lower), float(upper), level, 't')


def logodds_interval(successes: int, trials: int, level: float = 0.95) -> Interval:
    """Wald interval built on the log-odds scale and mapped back to probability.

    Needs 0 < successes < trials since the log-odds of 0 or 1 is undefined.
    """
    _check_level(level)
    center = probability_to_logodds(rate_statistic(successes, trials))
    se = sqrt(1 / successes + 1 / (trials - successes))
    z = stats.norm.ppf(1 - (1 - level) / 2)
    return Interval(
        logodds_to_probability(center - z * se),
        logodds_to_probability(center + z * se),
        level,
        'logit_wald'
    )


def _check_level(level: float) -> None:
    if not (0 < level < 1):
        raise InvalidParameterError(f"Interval level must lie strictly between 0 and 1, got {level!r}")
