"""
Gradient step planning.

A color scheme plus a :class:`ScoreRange` gives five ordered breakpoints.
The ``dynamic`` scheme adapts to the data. E-values cluster near zero and
span many orders of magnitude, so small ranges are binned in log space.
Ranges bounded away from zero are binned linearly.
"""
from __future__ import annotations
import math
import warnings
from typing import Callable, Dict

from boundednumbers.functions import clamp

from ..config import SUBNORMAL_EXPONENT, SUBNORMAL_THRESHOLD
from ..errors import RangeOrderWarning
from ..types.scheme_types import ColorScheme, GradientSteps, SchemeLike
from ..types.score_types import ScoreRange
from ..utils.num_utils import safe_log10

FIXED_STEPS: GradientSteps = (0.0, 1e-1, 1e0, 1e1, 1e2)
NCBIBLAST_STEPS: GradientSteps = (0.0, 40.0, 50.0, 80.0, 200.0)
EVALUE_STEPS: GradientSteps = (0.0, 1e-5, 1e-2, 1.0, 100.0)


def _subnormal_steps() -> GradientSteps:
    e = SUBNORMAL_EXPONENT
    return (0.0, 10.0 ** e, 10.0 ** (e / 2), 10.0 ** (e / 4), 10.0 ** (e / 8))


def _log_bisected_steps(score_range: ScoreRange) -> GradientSteps:
    """Every score is at or below 1: bisect towards ``max`` in log10 space."""
    lowest, highest = score_range.min, score_range.max
    max_log = math.log10(highest)

    if lowest == 0 and score_range.min_non_zero > 0:
        second = math.log10(score_range.min_non_zero) - 1
    else:
        min_log = safe_log10(lowest)
        second = min_log + (max_log - min_log) / 2
    third = second + (max_log - second) / 2
    fourth = third + (max_log - third) / 2

    # Powers of ten may land an ulp outside the range when min == max
    a, b, c = (clamp(10.0 ** step, lowest, highest) for step in (second, third, fourth))
    return (lowest, a, b, c, highest)


def _straddling_steps(score_range: ScoreRange) -> GradientSteps:
    """Scores on both sides of 1: split around 1 by how many decades they cover."""
    lowest, highest = score_range.min, score_range.max
    diff = safe_log10(score_range.min_non_zero) - math.log10(highest)

    if abs(diff) <= 2:
        inner = (1.0, (2 + highest) / 3, (2 + 2 * highest) / 3)
    elif abs(diff) <= 4:
        inner = (10.0 ** (diff / 2), 1.0, (highest + 1) / 2)
    else:
        inner = (10.0 ** (diff / 2), 10.0 ** (diff / 4), 1.0)

    # Narrow ranges (max < 2, or min * max > 1) would otherwise overshoot the ends
    a, b, c = (clamp(step, lowest, highest) for step in inner)
    return (lowest, a, b, c, highest)


def _linear_steps(score_range: ScoreRange) -> GradientSteps:
    lowest, highest = score_range.min, score_range.max
    return (
        lowest,
        (3 * lowest + highest) / 4,
        (lowest + highest) / 2,
        (lowest + 3 * highest) / 4,
        highest,
    )


def dynamic_steps(score_range: ScoreRange) -> GradientSteps:
    """Data-driven breakpoints for the ``dynamic`` scheme."""
    if not score_range.is_ordered:
        warnings.warn(
            f"Score range is not ordered or has negative values: {score_range}",
            RangeOrderWarning,
            stacklevel=3,
        )

    if score_range.max < SUBNORMAL_THRESHOLD:
        return _subnormal_steps()
    if score_range.min < 1:
        if score_range.max <= 1:
            return _log_bisected_steps(score_range)
        return _straddling_steps(score_range)
    return _linear_steps(score_range)


STEP_PLANNERS: Dict[ColorScheme, Callable[[ScoreRange], GradientSteps]] = {
    ColorScheme.FIXED: lambda _: FIXED_STEPS,
    ColorScheme.DYNAMIC: dynamic_steps,
    ColorScheme.NCBIBLAST: lambda _: NCBIBLAST_STEPS,
    ColorScheme.BLASTERJS: lambda _: EVALUE_STEPS,
}


def compute_steps(scheme: SchemeLike, score_range: ScoreRange) -> GradientSteps:
    """
    Five ordered breakpoints for coloring scores under ``scheme``.

    Args:
        scheme: A ColorScheme member or its name. Unknown names fall back to
            the default E-value ladder ``[0, 1e-5, 1e-2, 1, 100]``.
        score_range: Minimum, maximum and minimum non-zero score of the data.

    Returns:
        Tuple of five floats. Never raises. An unordered range emits a
        RangeOrderWarning and may produce non-monotonic or NaN steps.
    """
    resolved = ColorScheme.coerce(scheme)
    if resolved is None:
        return EVALUE_STEPS
    return STEP_PLANNERS[resolved](score_range)
