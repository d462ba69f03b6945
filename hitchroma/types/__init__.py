from .scheme_types import (
    RGB,
    GradientSteps,
    ColorScheme,
    ScoreType,
    ColoringMode,
    SchemeLike,
    DEFAULT_SCHEME,
    score_type_for,
    coloring_mode_for,
)
from .score_types import ScoreRange
from .geometry_types import (
    CanvasGeometry,
    Feature,
    PixelSpan,
    DomainSpan,
    QuerySubjectSpans,
    DEFAULT_GEOMETRY,
)

__all__ = [
    "RGB",
    "GradientSteps",
    "ColorScheme",
    "ScoreType",
    "ColoringMode",
    "SchemeLike",
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
]
