from __future__ import annotations
import math
from typing import List, Sequence

from ..utils.num_utils import count_decimals, round_half_up

# Approximate rendered width, in pixels, of labels 1 to 8 characters long
PADDING_BY_LENGTH = {
    1: 2.5,
    2: 10,
    3: 15.5,
    4: 21,
    5: 29,
    6: 35,
    7: 41,
    8: 47,
}

START_LABEL_SHIFT = 2.5


def padding_for(label: object) -> float:
    """Rough pixel width of a short label, 0 outside 1-8 characters."""
    return PADDING_BY_LENGTH.get(len(str(label)), 0)


def start_label_left(start_px: float) -> float:
    return start_px - START_LABEL_SHIFT


def end_label_left(end_px: float, label: object) -> float:
    """Left edge for a label that should end at ``end_px``."""
    return end_px - padding_for(label)


def number_to_string(value: float) -> str:
    """
    Format a score for the legend.

    Tiny and huge values use two-decimal exponent notation (``1.00e-5``),
    integers get a ``.0`` suffix, and anything with more than two decimals
    is rounded half up to two.
    """
    if not math.isfinite(value) or value == 0:
        return "0"
    if value < 1e-4 or value > 1e4:
        mantissa, exponent = f"{value:.2e}".split("e")
        return f"{mantissa}e{int(exponent):+d}"
    if float(value).is_integer():
        return f"{int(value)}.0"
    if count_decimals(value) > 2:
        return f"{round_half_up(value * 100) / 100:.2f}"
    return repr(float(value))


def bucket_labels(steps: Sequence[float]) -> List[str]:
    """Legend text for the five buckets: ``<s1``, ``s1 - s2`` ... ``≥s4``."""
    texts = [number_to_string(step) for step in steps]
    labels = [f"<{texts[1]}"]
    labels += [f"{texts[i]} - {texts[i + 1]}" for i in range(1, len(texts) - 1)]
    labels.append(f"≥{texts[-1]}")
    return labels


def scale_tick_positions(scale_label_width: float, scale_width: float, buckets: int = 4) -> List[float]:
    """Evenly spaced x-coordinates of the ``buckets + 1`` color scale ticks."""
    if buckets < 1:
        raise ValueError("buckets must be >= 1")
    step = scale_width / buckets
    return [scale_label_width + step * i for i in range(buckets + 1)]
