import numpy as np
from scipy.special import expit, logit
from typing import Iterable, Union
from math import exp, isfinite, log

from stats_errors import DomainError, InvalidParameterError


ArrayLike = Union[Iterable[float], np.ndarray]


def probability_to_logodds(p: float) -> float:
    """Convert a probability in the open interval (0, 1) to log-odds"""
    if not (0 < p < 1):
        raise DomainError(f"Probability must lie strictly between 0 and 1, got {p!r}")
    return log(p / (1 - p))


def logodds_to_probability(l: float) -> float:
    """Convert log-odds back to a probability.

    Uses the two-branch logistic so exp() never overflows. In double
    precision the result rounds to exactly 1.0 once l exceeds roughly 36.7
    and underflows to 0.0 below roughly -745; in between it stays strictly
    inside (0, 1). NaN propagates.
    """
    if l >= 0:
        return 1.0 / (1.0 + exp(-l))
    if l < 0:
        z = exp(l)
        return z / (1.0 + z)
    return float('nan')


def probabilities_to_logodds(values: ArrayLike) -> np.ndarray:
    """Vectorised probability_to_logodds; every element must lie in (0, 1)"""
    arr = np.asarray(values, dtype=float)
    if arr.size and not np.all((arr > 0) & (arr < 1)):
        bad = arr[~((arr > 0) & (arr < 1))]
        raise DomainError(f"Probabilities must lie strictly between 0 and 1, got {bad.tolist()}")
    return logit(arr)


def logodds_to_probabilities(values: ArrayLike) -> np.ndarray:
    """Vectorised logodds_to_probability"""
    return expit(np.asarray(values, dtype=float))


def rate_statistic(successes: int, trials: int) -> float:
    """Observed success rate for a binomial outcome"""
    if trials < 1:
        raise InvalidParameterError(f"Trials must be at least 1, got {trials}")
    if not (0 <= successes <= trials):
        raise InvalidParameterError(
            f"Successes must lie between 0 and trials ({trials}), got {successes}"
        )
    return successes / trials


def odds_ratio_to_probability(baseline_p: float, odds_ratio: float) -> float:
    """Apply an odds ratio to a baseline probability on the log-odds scale"""
    if not (isfinite(odds_ratio) and odds_ratio > 0):
        raise InvalidParameterError(f"Odds ratio must be positive, got {odds_ratio!r}")
    return logodds_to_probability(probability_to_logodds(baseline_p) + log(odds_ratio))
