import hitchroma
from hitchroma import ColorScheme, ScoreRange, compute_steps, color_by_gradient


def test_public_names_resolve():
    for name in hitchroma.__all__:
        assert hasattr(hitchroma, name), name


def test_quick_start():
    score_range = ScoreRange.from_scores([1e-10, 3e-5, 1e-2])
    steps = compute_steps(ColorScheme.DYNAMIC, score_range)
    assert color_by_gradient(3e-5, steps, ColorScheme.DYNAMIC) == "rgb(114,255,64)"
