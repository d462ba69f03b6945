from __future__ import annotations
import math
from typing import Sequence

import numpy as np
from numpy import ndarray as NDArray

from ..config import GRADIENT_SATURATION, GRADIENT_VALUE, SENTINEL_GREY, STEP_COUNT
from ..conversions.to_rgb import format_rgb, hsv_to_rgb, np_hsv_to_rgb
from ..errors import ConfigurationError
from ..types.scheme_types import ColoringMode, coloring_mode_for
from ..utils.num_utils import np_safe_log10, safe_log10
from .palettes import Palette, PaletteLike, palette_for

LENGTH_MISMATCH_MESSAGE = "Color Scheme and Gradient Steps should have matching lengths!"


def _checked_palette(steps: Sequence[float], scheme: PaletteLike) -> Palette:
    palette = palette_for(scheme)
    if not len(steps) == len(palette) == STEP_COUNT:
        raise ConfigurationError(LENGTH_MISMATCH_MESSAGE)
    return palette


def gradient_position(score: float, steps: Sequence[float]) -> float:
    """
    Continuous position of ``score`` along the steps, in [0, 4].

    The integer part is the bucket index and the fraction is the position
    inside the bucket, measured in log10 space. A bucket starting at 0 uses
    the smallest positive double in place of log10(0).
    """
    for index in range(STEP_COUNT - 1):
        start, end = steps[index], steps[index + 1]
        if score < end:
            log_start = safe_log10(start)
            span = safe_log10(end) - log_start
            fraction = (safe_log10(score) - log_start) / span if span else 0.0
            return index + fraction
    return float(STEP_COUNT - 1)


def color_by_gradient(score: float, steps: Sequence[float], scheme: PaletteLike) -> str:
    """
    Map a score onto a continuous hue ramp.

    Args:
        score: Score to color
        steps: Five gradient steps
        scheme: ColorScheme, scheme name or Palette (only used for score 0)

    Returns:
        ``"rgb(r,g,b)"`` string

    Raises:
        ConfigurationError: If steps and palette are not both of length 5
    """
    palette = _checked_palette(steps, scheme)
    if score == 0:
        return palette.css(0)
    h = gradient_position(score, steps)
    return format_rgb(hsv_to_rgb(h / 6, GRADIENT_SATURATION, GRADIENT_VALUE))


def color_by_bucket(score: float, steps: Sequence[float], scheme: PaletteLike) -> str:
    """
    Map a score to one of the five palette colors.

    Scores below ``steps[1]`` take color 0 and scores at or above
    ``steps[4]`` take color 4. The grey sentinel is only reached when no
    comparison holds, i.e. a NaN score or malformed steps.
    """
    palette = _checked_palette(steps, scheme)
    if score == 0 or score < steps[1]:
        return palette.css(0)
    for index in range(1, STEP_COUNT - 1):
        if steps[index] <= score < steps[index + 1]:
            return palette.css(index)
    if score >= steps[STEP_COUNT - 1]:
        return palette.css(STEP_COUNT - 1)
    return format_rgb(SENTINEL_GREY)


def color_for_score(score: float, steps: Sequence[float], scheme: PaletteLike) -> str:
    """Color a score with the coloring mode its scheme uses (buckets for ncbiblast)."""
    if not isinstance(scheme, Palette) and coloring_mode_for(scheme) is ColoringMode.BUCKET:
        return color_by_bucket(score, steps, scheme)
    return color_by_gradient(score, steps, scheme)


def np_gradient_position(scores: NDArray, steps: Sequence[float]) -> NDArray:
    """Vectorized: :func:`gradient_position` for sorted steps."""
    scores = np.asarray(scores, dtype=float)
    steps_arr = np.asarray(steps, dtype=float)

    bucket = np.searchsorted(steps_arr[1:], scores, side="right")
    lower = np.minimum(bucket, STEP_COUNT - 2)
    log_start = np_safe_log10(steps_arr[lower])
    span = np_safe_log10(steps_arr[lower + 1]) - log_start
    safe_span = np.where(span != 0, span, 1.0)
    fraction = np.where(span != 0, (np_safe_log10(scores) - log_start) / safe_span, 0.0)

    return np.where(bucket >= STEP_COUNT - 1, float(STEP_COUNT - 1), lower + fraction)


def np_color_by_gradient(scores: NDArray, steps: Sequence[float], scheme: PaletteLike) -> NDArray:
    """
    Vectorized: :func:`color_by_gradient` for many scores.

    Returns:
        Integer RGB array of shape scores.shape + (3,)
    """
    palette = _checked_palette(steps, scheme)
    scores = np.asarray(scores, dtype=float)
    h = np_gradient_position(scores, steps)
    rgb = np_hsv_to_rgb(h / 6, GRADIENT_SATURATION, GRADIENT_VALUE)
    rgb[scores == 0] = palette.first
    return rgb


def css_colors(rgb: NDArray) -> list[str]:
    """Format an (N, 3) RGB array as ``"rgb(r,g,b)"`` strings."""
    return [format_rgb(tuple(row)) for row in np.asarray(rgb).reshape(-1, 3)]


def is_sentinel(color: str) -> bool:
    return color == format_rgb(SENTINEL_GREY)
