import pytest
from dataclasses import FrozenInstanceError

from hitchroma.schemes import (
    Palette,
    DEFAULT_GRADIENT,
    NCBIBLAST_GRADIENT,
    scheme_palettes,
    palette_for,
)
from hitchroma.types import ColorScheme


def test_every_scheme_has_a_five_color_palette():
    assert set(scheme_palettes) == set(ColorScheme)
    for scheme in ColorScheme:
        assert len(palette_for(scheme)) == 5


def test_default_gradient():
    assert DEFAULT_GRADIENT.keys == (0.0, 0.25, 0.5, 0.75, 1.0)
    assert DEFAULT_GRADIENT.first == (255, 64, 64)
    assert DEFAULT_GRADIENT.css(4) == "rgb(64,64,255)"


def test_ncbiblast_gradient():
    assert palette_for("ncbiblast") is NCBIBLAST_GRADIENT
    assert NCBIBLAST_GRADIENT.keys == (0, 40, 50, 80, 200)
    assert NCBIBLAST_GRADIENT.color_at(2) == (117, 234, 76)


@pytest.mark.parametrize("scheme", ["fixed", "dynamic", "blasterjs", "unknown", None])
def test_other_schemes_use_default_gradient(scheme):
    assert palette_for(scheme) is DEFAULT_GRADIENT


def test_palette_passes_through():
    custom = Palette("custom", (0, 1), ((0, 0, 0), (1, 1, 1)))
    assert palette_for(custom) is custom


def test_palette_key_color_mismatch():
    with pytest.raises(ValueError):
        Palette("broken", (0, 1, 2), ((0, 0, 0),))


def test_palettes_are_read_only():
    with pytest.raises(FrozenInstanceError):
        DEFAULT_GRADIENT.name = "changed"
    with pytest.raises(TypeError):
        scheme_palettes[ColorScheme.FIXED] = NCBIBLAST_GRADIENT
