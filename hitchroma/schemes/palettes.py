from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple, Union

from ..conversions.to_rgb import format_rgb
from ..types.scheme_types import RGB, ColorScheme, SchemeLike


@dataclass(frozen=True)
class Palette:
    """
    Ordered, read-only list of named RGB entries for one color scheme.

    ``keys`` name each entry (a score or a gradient offset) and ``colors``
    holds the matching RGB triples, in the same order.
    """
    name: str
    keys: Tuple[float, ...]
    colors: Tuple[RGB, ...]

    def __post_init__(self) -> None:
        if len(self.keys) != len(self.colors):
            raise ValueError(
                f"Palette {self.name!r} has {len(self.keys)} keys but {len(self.colors)} colors"
            )

    def __len__(self) -> int:
        return len(self.colors)

    @property
    def first(self) -> RGB:
        return self.colors[0]

    def color_at(self, index: int) -> RGB:
        return self.colors[index]

    def css(self, index: int) -> str:
        return format_rgb(self.colors[index])


DEFAULT_GRADIENT = Palette(
    name="default",
    keys=(0.0, 0.25, 0.5, 0.75, 1.0),
    colors=(
        (255, 64, 64),
        (255, 255, 64),
        (64, 255, 64),
        (64, 255, 255),
        (64, 64, 255),
    ),
)

NCBIBLAST_GRADIENT = Palette(
    name="ncbiblast",
    keys=(0.0, 40.0, 50.0, 80.0, 200.0),
    colors=(
        (0, 0, 0),
        (0, 32, 233),
        (117, 234, 76),
        (219, 61, 233),
        (219, 51, 36),
    ),
)

scheme_palettes: Mapping[ColorScheme, Palette] = MappingProxyType({
    ColorScheme.FIXED: DEFAULT_GRADIENT,
    ColorScheme.DYNAMIC: DEFAULT_GRADIENT,
    ColorScheme.NCBIBLAST: NCBIBLAST_GRADIENT,
    ColorScheme.BLASTERJS: DEFAULT_GRADIENT,
})

PaletteLike = Union[Palette, SchemeLike]


def palette_for(scheme: PaletteLike) -> Palette:
    """Resolve the palette of a scheme. Palettes pass through, unknown names get the default."""
    if isinstance(scheme, Palette):
        return scheme
    resolved = ColorScheme.coerce(scheme)
    if resolved is None:
        return DEFAULT_GRADIENT
    return scheme_palettes[resolved]
