import math
import numpy as np
from numpy import ndarray as NDArray

from ..config import SMALLEST_POSITIVE

LOG10_SMALLEST_POSITIVE = math.log10(SMALLEST_POSITIVE)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for non-negative input."""
    return int(math.floor(value + 0.5))


def safe_log10(value: float) -> float:
    """
    Base-10 logarithm that never raises.

    Zero maps to the log of the smallest positive double and negative
    values (or NaN) map to NaN.
    """
    if value > 0:
        return math.log10(value)
    if value == 0:
        return LOG10_SMALLEST_POSITIVE
    return math.nan


def np_safe_log10(values: NDArray) -> NDArray:
    """Vectorized: same contract as :func:`safe_log10`."""
    values = np.asarray(values, dtype=float)
    positive = values > 0
    logs = np.log10(np.where(positive, values, 1.0))
    return np.where(
        positive,
        logs,
        np.where(values == 0, LOG10_SMALLEST_POSITIVE, np.nan),
    )


def count_decimals(value: float) -> int:
    """Number of digits after the decimal point in the shortest repr of ``value``."""
    if not math.isfinite(value) or float(value).is_integer():
        return 0
    text = repr(float(value))
    return len(text.split(".")[1]) if "." in text and "e" not in text else 0
