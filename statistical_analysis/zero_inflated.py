import numpy as np
from dataclasses import dataclass
from math import isfinite, sqrt

from stats_errors import InvalidParameterError


@dataclass(frozen=True)
class ZeroInflatedMoments:
    mean: float
    variance: float
    std: float
    standard_error: float


@dataclass(frozen=True)
class ZeroInflatedGamma:
    """Mixture that is exactly zero with probability zero_prob, else Gamma(shape, scale).

    Typical use is revenue per visitor: no purchase vs. purchase amount.
    """
    zero_prob: float
    shape: float
    scale: float
    n: int = 1

    def __post_init__(self):
        values = (self.zero_prob, self.shape, self.scale, self.n)
        if not all(isfinite(v) for v in values):
            raise InvalidParameterError(f"Parameters must be finite, got {values}")
        if not (0 <= self.zero_prob < 1):
            raise InvalidParameterError(f"zero_prob must lie in [0, 1), got {self.zero_prob}")
        if self.shape <= 0:
            raise InvalidParameterError(f"shape must be positive, got {self.shape}")
        if self.scale <= 0:
            raise InvalidParameterError(f"scale must be positive, got {self.scale}")
        if isinstance(self.n, bool) or not float(self.n).is_integer():
            raise InvalidParameterError(f"n must be a whole number, got {self.n!r}")
        if self.n < 1:
            raise InvalidParameterError(f"n must be at least 1, got {self.n}")

    @property
    def gamma_mean(self) -> float:
        return self.shape * self.scale

    def moments(self) -> ZeroInflatedMoments:
        """Closed-form moments via the law of total variance.

        Within-component variance (1 - pi) * k * theta^2 plus between-component
        variance (1 - pi) * pi * (k * theta)^2.
        """
        keep = 1 - self.zero_prob
        mean = keep * self.gamma_mean
        variance = keep * self.shape * self.scale ** 2 + keep * self.zero_prob * self.gamma_mean ** 2
        std = sqrt(variance)
        return ZeroInflatedMoments(
            mean=mean,
            variance=variance,
            std=std,
            standard_error=std / sqrt(self.n)
        )

    def sample(self, size: int, rng: np.random.Generator) -> np.ndarray:
        """Draw from the mixture with the caller's generator"""
        nonzero = rng.random(size) >= self.zero_prob
        amounts = rng.gamma(self.shape, self.scale, size)
        return np.where(nonzero, amounts, 0.0)


def zigamma_mean_se(zero_prob: float, shape: float, scale: float, n: int) -> ZeroInflatedMoments:
    """Mean, standard deviation and standard error of a zero-inflated gamma"""
    return ZeroInflatedGamma(zero_prob=zero_prob, shape=shape, scale=scale, n=n).moments()
