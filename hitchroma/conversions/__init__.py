"""
hitchroma color space conversions
=================================

HSV -> RGB:
    hsv_to_rgb(h, s, v)
        Scalar conversion, all channels as fractions in [0, 1], 8-bit output
    np_hsv_to_rgb(h, s, v)
        Vectorized conversion, returns an integer array of shape (..., 3)

Formatting:
    format_rgb(rgb)
        ``(r, g, b)`` -> ``"rgb(r,g,b)"``

Examples
--------
>>> from hitchroma.conversions import hsv_to_rgb, format_rgb
>>> hsv_to_rgb(0.0, 1.0, 1.0)
(255, 0, 0)
>>> format_rgb(hsv_to_rgb(1 / 3, 1.0, 1.0))
'rgb(0,255,0)'
"""

from .to_rgb import hsv_to_rgb, np_hsv_to_rgb, format_rgb

__all__ = [
    'hsv_to_rgb',
    'np_hsv_to_rgb',
    'format_rgb',
]
