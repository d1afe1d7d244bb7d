import pytest

from stats_errors import InvalidParameterError
from statistical_engine import EngineConfig, StatisticalEngine
from statistical_analysis.zero_inflated import ZeroInflatedGamma


def test_engine_defaults_follow_config() -> None:
    engine = StatisticalEngine(EngineConfig(percent_accuracy=0, range_separator=" - "))

    assert engine.format_range([0.1, 0.5, 0.9], as_percent=True) == "10% - 90%"
    assert engine.format_range([3, 1, 4]) == "1 - 4"


def test_engine_transforms() -> None:
    engine = StatisticalEngine()

    assert engine.to_probability(engine.to_logodds(0.2)) == pytest.approx(0.2)
    assert engine.rate(5, 20) == 0.25


@pytest.mark.parametrize("method", ["wilson", "logit", "jeffreys"])
def test_proportion_intervals_bracket_rate(method: str) -> None:
    interval = StatisticalEngine().calculate_confidence_interval(successes=40, trials=100, method=method)

    assert interval.lower < 0.4 < interval.upper
    assert interval.level == 0.95


def test_data_intervals() -> None:
    engine = StatisticalEngine(EngineConfig(interval_level=0.8))
    data = [1.0, 2.0, 3.0, 4.0, 5.0]

    assert engine.calculate_confidence_interval(data=data, method="t").level == 0.8
    assert engine.calculate_confidence_interval(data=data, method="percentile").contains(3.0)


def test_zigamma_moments_and_validation() -> None:
    engine = StatisticalEngine(EngineConfig(seed=2024, n_simulations=1000))
    assert engine.zigamma_moments(0.25, 5, 10, 1000).mean == pytest.approx(37.5)

    comparison = engine.validate_zigamma_moments(ZeroInflatedGamma(0.25, 5, 10, 100))

    assert list(comparison.index) == ["mean", "standard_error"]
    assert comparison.loc["mean", "relative_error"] < 0.02
    assert comparison.loc["standard_error", "relative_error"] < 0.1


def test_config_validation_and_from_dict() -> None:
    config = EngineConfig.from_dict({"interval_level": 0.9, "plot_theme": "bw"})

    assert config.interval_level == 0.9
    assert config.simulation.n_simulations == config.n_simulations
    with pytest.raises(InvalidParameterError):
        EngineConfig(interval_level=1.5)


@pytest.mark.parametrize("level", [0.0, 1.0, -0.5])
def test_explicit_invalid_level_is_not_replaced_by_default(level: float) -> None:
    with pytest.raises(InvalidParameterError):
        StatisticalEngine().calculate_confidence_interval(successes=4, trials=10, level=level)


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"method": "percentile"}, "requires data"),
        ({"method": "t"}, "requires data"),
        ({"method": "wilson", "successes": 4}, "requires successes and trials"),
        ({"method": "logit", "trials": 10}, "requires successes and trials"),
    ],
)
def test_missing_interval_inputs_are_named(kwargs, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        StatisticalEngine().calculate_confidence_interval(**kwargs)
