import math
from typing import Callable, Dict, Tuple

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import UnitFloat

from ..types.scheme_types import RGB
from ..utils.num_utils import round_half_up

# Sector index -> (r, g, b) picked from (v, p, q, t)
_SECTORS: Dict[int, Callable[[float, float, float, float], Tuple[float, float, float]]] = {
    0: lambda v, p, q, t: (v, t, p),
    1: lambda v, p, q, t: (q, v, p),
    2: lambda v, p, q, t: (p, v, t),
    3: lambda v, p, q, t: (p, q, v),
    4: lambda v, p, q, t: (t, p, v),
    5: lambda v, p, q, t: (v, p, q),
}


def _to_unit(value: float) -> float:
    # NaN has no position in [0, 1]; treat it as the lower bound
    if math.isnan(value):
        return 0.0
    return float(UnitFloat(value))


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """
    Convert an HSV triple to 8-bit RGB.

    Args:
        h: Hue as a fraction of the full circle, [0, 1]
        s: Saturation, [0, 1]
        v: Value, [0, 1]

    Out-of-range inputs are clamped into [0, 1] rather than rejected.

    Returns:
        (r, g, b) integers in [0, 255]
    """
    h, s, v = _to_unit(h), _to_unit(s), _to_unit(v)

    i = math.floor(h * 6)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    r, g, b = _SECTORS[i % 6](v, p, q, t)
    return round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255)


def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV arrays (all channels in [0, 1]) to 8-bit RGB.

    Returns:
        Integer array of shape (..., 3)
    """
    h = np.clip(np.nan_to_num(np.asarray(h, dtype=float), nan=0.0), 0.0, 1.0)
    s = np.clip(np.nan_to_num(np.asarray(s, dtype=float), nan=0.0), 0.0, 1.0)
    v = np.clip(np.nan_to_num(np.asarray(v, dtype=float), nan=0.0), 0.0, 1.0)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    sector = np.floor(h * 6)
    f = h * 6 - sector
    i = sector.astype(int) % 6
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    r = np.choose(i, [v, q, p, p, t, v])
    g = np.choose(i, [t, v, v, q, p, p])
    b = np.choose(i, [p, p, t, v, v, q])

    rgb = np.stack([r, g, b], axis=-1)
    return np.floor(rgb * 255 + 0.5).astype(int)


def format_rgb(rgb: RGB) -> str:
    """Format an RGB triple as ``"rgb(r,g,b)"``."""
    r, g, b = rgb
    return f"rgb({int(r)},{int(g)},{int(b)})"
