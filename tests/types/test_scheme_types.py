import pytest

from hitchroma.types import (
    ColorScheme,
    ScoreType,
    ColoringMode,
    DEFAULT_SCHEME,
    score_type_for,
    coloring_mode_for,
)


@pytest.mark.parametrize("value, expected", [
    (ColorScheme.FIXED, ColorScheme.FIXED),
    ("dynamic", ColorScheme.DYNAMIC),
    ("NCBIBLAST", ColorScheme.NCBIBLAST),
    (" blasterjs ", ColorScheme.BLASTERJS),
    ("heatmap", None),
    ("", None),
    (None, None),
    (3, None),
])
def test_coerce(value, expected):
    assert ColorScheme.coerce(value) is expected


def test_scheme_is_str():
    assert ColorScheme.DYNAMIC == "dynamic"
    assert DEFAULT_SCHEME is ColorScheme.DYNAMIC


def test_score_type_for():
    assert score_type_for("ncbiblast") is ScoreType.BITSCORE
    assert score_type_for(ColorScheme.FIXED) is ScoreType.EVALUE
    assert score_type_for("dynamic") is ScoreType.EVALUE
    assert score_type_for("unknown") is ScoreType.EVALUE


def test_coloring_mode_for():
    assert coloring_mode_for("ncbiblast") is ColoringMode.BUCKET
    assert coloring_mode_for("blasterjs") is ColoringMode.GRADIENT
    assert coloring_mode_for("unknown") is ColoringMode.GRADIENT


def test_every_scheme_has_a_score_type_and_mode():
    for scheme in ColorScheme:
        assert isinstance(score_type_for(scheme), ScoreType)
        assert isinstance(coloring_mode_for(scheme), ColoringMode)
