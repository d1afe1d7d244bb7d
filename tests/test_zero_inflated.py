import math

import numpy as np
import pytest

from stats_errors import InvalidParameterError
from statistical_analysis.zero_inflated import ZeroInflatedGamma, zigamma_mean_se


def test_no_zero_inflation_reduces_to_gamma() -> None:
    moments = zigamma_mean_se(zero_prob=0, shape=5, scale=10, n=1000)

    assert moments.mean == pytest.approx(50)
    assert moments.variance == pytest.approx(500)
    assert moments.std == pytest.approx(math.sqrt(5) * 10)
    assert moments.standard_error == pytest.approx(0.707, abs=1e-3)


def test_quarter_zero_inflation() -> None:
    moments = zigamma_mean_se(zero_prob=0.25, shape=5, scale=10, n=1000)

    assert moments.mean == pytest.approx(37.5)
    assert moments.variance == pytest.approx(843.75)
    assert moments.std == pytest.approx(29.05, abs=1e-2)
    assert moments.standard_error == pytest.approx(0.919, abs=1e-3)


def test_matches_law_of_total_variance() -> None:
    # E[X^2] - E[X]^2 with E[X^2] = (1 - pi) * (k theta^2 + (k theta)^2)
    pi, k, theta = 0.6, 2.5, 4.0
    ex = (1 - pi) * k * theta
    ex2 = (1 - pi) * (k * theta ** 2 + (k * theta) ** 2)
    moments = zigamma_mean_se(pi, k, theta, 1)
    assert moments.variance == pytest.approx(ex2 - ex ** 2)
    assert moments.standard_error == pytest.approx(moments.std)


@pytest.mark.parametrize(
    "zero_prob, shape, scale, n",
    [
        (1.0, 5, 10, 10),
        (-0.1, 5, 10, 10),
        (0.2, 0, 10, 10),
        (0.2, 5, -1, 10),
        (0.2, 5, 10, 0),
        (float("nan"), 5, 10, 10),
        (0.2, float("inf"), 10, 10),
        (0.25, 5, 10, 2.5),
        (0.25, 5, 10, True),
    ],
)
def test_invalid_parameters_raise(zero_prob, shape, scale, n) -> None:
    with pytest.raises(InvalidParameterError):
        zigamma_mean_se(zero_prob, shape, scale, n)


def test_sample_matches_moments() -> None:
    params = ZeroInflatedGamma(zero_prob=0.25, shape=5, scale=10)
    draws = params.sample(200_000, np.random.default_rng(42))

    assert np.mean(draws == 0) == pytest.approx(0.25, abs=0.01)
    assert np.mean(draws) == pytest.approx(37.5, rel=0.02)
    assert np.var(draws) == pytest.approx(843.75, rel=0.03)
