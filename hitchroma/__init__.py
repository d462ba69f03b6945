"""
hitchroma - color mapping and layout for alignment hit diagrams
===============================================================

The numeric core behind sequence-search result diagrams (hit tracks,
domains, score legends):

- gradient steps: five breakpoints for a score range under a color scheme
- color mapping: scores -> ``"rgb(r,g,b)"`` via a log hue ramp or buckets
- coordinates: sequence lengths/offsets -> proportional canvas pixels
- legend helpers: label padding, number formatting, tick positions

Everything is pure and stateless. Nothing is drawn here.

Quick Start
-----------
>>> from hitchroma import ColorScheme, ScoreRange, compute_steps, color_by_gradient
>>> score_range = ScoreRange.from_scores([1e-10, 3e-5, 1e-2])
>>> steps = compute_steps(ColorScheme.DYNAMIC, score_range)
>>> color_by_gradient(3e-5, steps, ColorScheme.DYNAMIC)
'rgb(114,255,64)'
"""

from .errors import HitChromaError, ConfigurationError, RangeOrderWarning
from .types import (
    RGB,
    GradientSteps,
    ColorScheme,
    ScoreType,
    ColoringMode,
    DEFAULT_SCHEME,
    score_type_for,
    coloring_mode_for,
    ScoreRange,
    CanvasGeometry,
    Feature,
    PixelSpan,
    DomainSpan,
    QuerySubjectSpans,
    DEFAULT_GEOMETRY,
)
from .conversions import hsv_to_rgb, np_hsv_to_rgb, format_rgb
from .schemes import (
    Palette,
    DEFAULT_GRADIENT,
    NCBIBLAST_GRADIENT,
    palette_for,
    compute_steps,
    gradient_position,
    color_by_gradient,
    color_by_bucket,
    color_for_score,
    np_color_by_gradient,
    DomainDatabase,
    color_by_database,
)
from .layout import (
    total_pixels,
    np_total_pixels,
    track_pixel_span,
    query_subject_pixel_spans,
    scoring_column_span,
    domain_pixel_span,
    track_span_for,
    query_subject_spans_for,
    feature_span,
    padding_for,
    number_to_string,
    bucket_labels,
    scale_tick_positions,
)

__version__ = "1.0.0"

__all__ = [
    # Errors
    "HitChromaError",
    "ConfigurationError",
    "RangeOrderWarning",

    # Value types
    "RGB",
    "GradientSteps",
    "ColorScheme",
    "ScoreType",
    "ColoringMode",
    "DEFAULT_SCHEME",
    "score_type_for",
    "coloring_mode_for",
    "ScoreRange",
    "CanvasGeometry",
    "Feature",
    "PixelSpan",
    "DomainSpan",
    "QuerySubjectSpans",
    "DEFAULT_GEOMETRY",

    # Conversions
    "hsv_to_rgb",
    "np_hsv_to_rgb",
    "format_rgb",

    # Schemes and color mapping
    "Palette",
    "DEFAULT_GRADIENT",
    "NCBIBLAST_GRADIENT",
    "palette_for",
    "compute_steps",
    "gradient_position",
    "color_by_gradient",
    "color_by_bucket",
    "color_for_score",
    "np_color_by_gradient",
    "DomainDatabase",
    "color_by_database",

    # Layout
    "total_pixels",
    "np_total_pixels",
    "track_pixel_span",
    "query_subject_pixel_spans",
    "scoring_column_span",
    "domain_pixel_span",
    "track_span_for",
    "query_subject_spans_for",
    "feature_span",
    "padding_for",
    "number_to_string",
    "bucket_labels",
    "scale_tick_positions",

    # Version
    "__version__",
]
