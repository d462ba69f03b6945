from .palettes import (
    Palette,
    PaletteLike,
    DEFAULT_GRADIENT,
    NCBIBLAST_GRADIENT,
    scheme_palettes,
    palette_for,
)
from .steps import (
    FIXED_STEPS,
    NCBIBLAST_STEPS,
    EVALUE_STEPS,
    STEP_PLANNERS,
    dynamic_steps,
    compute_steps,
)
from .color_mapper import (
    LENGTH_MISMATCH_MESSAGE,
    gradient_position,
    color_by_gradient,
    color_by_bucket,
    color_for_score,
    np_gradient_position,
    np_color_by_gradient,
    css_colors,
    is_sentinel,
)
from .databases import DomainDatabase, database_aliases, database_colors, color_by_database

__all__ = [
    # palettes
    "Palette",
    "PaletteLike",
    "DEFAULT_GRADIENT",
    "NCBIBLAST_GRADIENT",
    "scheme_palettes",
    "palette_for",
    # gradient steps
    "FIXED_STEPS",
    "NCBIBLAST_STEPS",
    "EVALUE_STEPS",
    "STEP_PLANNERS",
    "dynamic_steps",
    "compute_steps",
    # color mapping
    "LENGTH_MISMATCH_MESSAGE",
    "gradient_position",
    "color_by_gradient",
    "color_by_bucket",
    "color_for_score",
    "np_gradient_position",
    "np_color_by_gradient",
    "css_colors",
    "is_sentinel",
    # domain databases
    "DomainDatabase",
    "database_aliases",
    "database_colors",
    "color_by_database",
]
