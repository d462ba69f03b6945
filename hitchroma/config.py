# No dependencies
"""
Default constants for layout and color mapping.

Geometry defaults are expressed as percentages of the canvas width, the way
the result viewer sizes its content, label, scoring and scale areas. Callers
that need other values pass them explicitly.
"""

DEFAULT_CANVAS_WIDTH = 1000

# Percent of the canvas width given to each horizontal area
CONTENT_WIDTH_PCT = 65.5
SCORING_WIDTH_PCT = 7.0
LABEL_WIDTH_PCT = 26.5
SCALE_WIDTH_PCT = 75.0
SCALE_LABEL_WIDTH_PCT = 20.0
MARGIN_WIDTH_PCT = 0.15

# Number of gradient steps (bucket boundaries) and palette entries
STEP_COUNT = 5

# HSV saturation/value used by the continuous log gradient
GRADIENT_SATURATION = 0.75
GRADIENT_VALUE = 1.0

# Below 10**SUBNORMAL_EXPONENT a dynamic range uses a fixed exponent ladder
SUBNORMAL_EXPONENT = -304
SUBNORMAL_THRESHOLD = 10.0 ** SUBNORMAL_EXPONENT

# Smallest positive double, stands in for log10(0)
SMALLEST_POSITIVE = 5e-324

SENTINEL_GREY = (192, 192, 192)
UNCLASSIFIED_GREY = (128, 128, 128)
