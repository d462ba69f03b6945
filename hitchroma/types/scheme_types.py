from __future__ import annotations
from enum import Enum
from typing import Optional, Tuple, Union

RGB = Tuple[int, int, int]
GradientSteps = Tuple[float, float, float, float, float]


class ColorScheme(str, Enum):
    FIXED = "fixed"
    DYNAMIC = "dynamic"
    NCBIBLAST = "ncbiblast"
    BLASTERJS = "blasterjs"

    @classmethod
    def coerce(cls, value: Union[ColorScheme, str, None]) -> Optional[ColorScheme]:
        """
        Resolve a scheme member from a member or a (case-insensitive) name.

        Returns None for anything that is not a known scheme, so callers can
        apply their own fallback.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class ScoreType(str, Enum):
    EVALUE = "evalue"
    BITSCORE = "bitscore"


class ColoringMode(str, Enum):
    GRADIENT = "gradient"
    BUCKET = "bucket"


SchemeLike = Union[ColorScheme, str]

DEFAULT_SCHEME = ColorScheme.DYNAMIC

scheme_score_types = {
    ColorScheme.FIXED: ScoreType.EVALUE,
    ColorScheme.DYNAMIC: ScoreType.EVALUE,
    ColorScheme.NCBIBLAST: ScoreType.BITSCORE,
    ColorScheme.BLASTERJS: ScoreType.EVALUE,
}

scheme_coloring_modes = {
    ColorScheme.FIXED: ColoringMode.GRADIENT,
    ColorScheme.DYNAMIC: ColoringMode.GRADIENT,
    ColorScheme.NCBIBLAST: ColoringMode.BUCKET,
    ColorScheme.BLASTERJS: ColoringMode.GRADIENT,
}


def score_type_for(scheme: SchemeLike) -> ScoreType:
    """Which hit score a scheme colors by. Unknown schemes use E-values."""
    return scheme_score_types.get(ColorScheme.coerce(scheme), ScoreType.EVALUE)


def coloring_mode_for(scheme: SchemeLike) -> ColoringMode:
    """Continuous gradient or discrete buckets. Unknown schemes use the gradient."""
    return scheme_coloring_modes.get(ColorScheme.coerce(scheme), ColoringMode.GRADIENT)
