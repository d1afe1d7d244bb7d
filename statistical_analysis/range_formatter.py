import numpy as np
from typing import Iterable, Tuple

from stats_errors import EmptyInputError, InvalidParameterError


DEFAULT_SEPARATOR = ' to '


def value_range(values: Iterable[float]) -> Tuple[float, float]:
    """Return (min, max) of a non-empty numeric collection"""
    arr = np.asarray(list(values), dtype=float)
    if arr.size == 0:
        raise EmptyInputError("Cannot compute the range of an empty collection")
    if np.isnan(arr).any():
        raise InvalidParameterError("Range is undefined for collections containing NaN")
    return float(arr.min()), float(arr.max())


def format_number(value: float) -> str:
    """Integral values without a decimal point, others in shortest repr"""
    value = float(value)
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def format_percent(value: float, accuracy: int = 1) -> str:
    _check_accuracy(accuracy)
    return f"{value * 100:.{accuracy}f}%"


def format_bounds(
    lower: float,
    upper: float,
    as_percent: bool = False,
    accuracy: int = 1,
    separator: str = DEFAULT_SEPARATOR
) -> str:
    if as_percent:
        return format_percent(lower, accuracy) + separator + format_percent(upper, accuracy)
    return format_number(lower) + separator + format_number(upper)


def format_range(
    values: Iterable[float],
    as_percent: bool = False,
    accuracy: int = 1,
    separator: str = DEFAULT_SEPARATOR
) -> str:
    """Format the min and max of values, e.g. "1 to 5" or "32.1% to 45.6%".

    accuracy is the number of decimal places used when as_percent is set.
    """
    _check_accuracy(accuracy)
    lower, upper = value_range(values)
    return format_bounds(lower, upper, as_percent, accuracy, separator)


def _check_accuracy(accuracy: int) -> None:
    if isinstance(accuracy, bool) or not isinstance(accuracy, (int, np.integer)) or accuracy < 0:
        raise InvalidParameterError(f"accuracy must be a non-negative integer, got {accuracy!r}")
