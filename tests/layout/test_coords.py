import numpy as np
import pytest

from hitchroma.layout import (
    total_pixels,
    np_total_pixels,
    track_pixel_span,
    query_subject_pixel_spans,
    scoring_column_span,
    domain_pixel_span,
    track_span_for,
    query_subject_spans_for,
    feature_span,
)
from hitchroma.types import CanvasGeometry, Feature, PixelSpan, DEFAULT_GEOMETRY

# query_len, subj_len, subj_hsp_len, content_width, scoring_width, label_width, margin_width
SCENARIO = (300, 300, 150, 600, 150, 100, 2)


def test_total_pixels():
    assert total_pixels(300, 300, 300, 600, 150) == pytest.approx(299.75)
    assert total_pixels(300, 300, 150, 600, 150) == pytest.approx(149.75)


def test_total_pixels_is_not_rounded():
    assert isinstance(total_pixels(7, 3, 5, 100, 3), float)
    assert total_pixels(7, 3, 5, 100, 3) == pytest.approx(49.7)


def test_total_pixels_increases_with_length():
    lengths = np.arange(1, 500)
    pixels = np_total_pixels(300, 200, lengths, 655, 70)
    assert np.all(np.diff(pixels) > 0)
    assert np.allclose(pixels, [total_pixels(300, 200, n, 655, 70) for n in lengths])


def test_track_pixel_span():
    assert track_pixel_span(600, 100, 2) == (102, 698)


def test_query_subject_scenario():
    start_q, end_q, start_s, end_s = query_subject_pixel_spans(*SCENARIO)
    assert start_q == pytest.approx(102)
    assert end_q == pytest.approx(397.75)
    assert start_s == pytest.approx(551.75)
    assert end_s == pytest.approx(697.5)
    # full-length query draws wider than the half-length subject
    assert end_q - start_q > end_s - start_s
    assert 100 <= start_q < end_q < start_s < end_s <= 700


def test_scoring_column_sits_between_tracks():
    query_len, subj_len, _, content, scoring, label, margin = SCENARIO
    column = scoring_column_span(query_len, subj_len, content, scoring, label, margin)
    _, end_q, start_s, _ = query_subject_pixel_spans(*SCENARIO)
    assert column == pytest.approx((401.75, 547.75))
    assert end_q < column.start_px < column.end_px < start_s


def test_domain_pixel_span():
    span = domain_pixel_span(100, 300, 50, 10, 20, 1)
    assert span.offset_px == pytest.approx(141)
    assert span.width_px == pytest.approx(38)


@pytest.mark.parametrize("start, end, hit_len, margin", [
    (100, 300, 50, 1),
    (102, 698, 1000, 2),
    (0, 10, 3, 0),
    (265, 920, 7, 1.5),
])
def test_full_length_domain_fills_track(start, end, hit_len, margin):
    span = domain_pixel_span(start, end, hit_len, 0, hit_len, margin)
    assert span.offset_px == pytest.approx(start + margin)
    assert span.width_px == pytest.approx((end - start) - 2 * margin)


def test_track_span_for_geometry():
    geometry = CanvasGeometry(content_width=600, label_width=100, margin_width=2, scoring_width=150, scale_width=0)
    assert track_span_for(geometry) == PixelSpan(102, 698)


def test_query_subject_spans_for_geometry():
    geometry = CanvasGeometry(content_width=600, label_width=100, margin_width=2, scoring_width=150, scale_width=0)
    spans = query_subject_spans_for(geometry, 300, 300, 150)
    assert tuple(spans.query) + tuple(spans.subject) == pytest.approx(query_subject_pixel_spans(*SCENARIO))


def test_query_subject_spans_default_to_full_subject():
    spans = query_subject_spans_for(DEFAULT_GEOMETRY, 400, 250)
    right_edge = DEFAULT_GEOMETRY.label_width + DEFAULT_GEOMETRY.content_width + DEFAULT_GEOMETRY.scoring_width
    assert spans.query.end_px < spans.subject.start_px < spans.subject.end_px < right_edge
    assert spans.query.start_px == pytest.approx(DEFAULT_GEOMETRY.label_width + DEFAULT_GEOMETRY.margin_width)


def test_feature_span():
    track = PixelSpan(100, 300)
    assert feature_span(track, 50, Feature(10, 20), 1) == pytest.approx((141, 38))
    assert feature_span(track, 50, Feature.from_coords(20, 10), 1) == pytest.approx((141, 38))


def test_feature_span_rejects_feature_past_hit():
    with pytest.raises(ValueError):
        feature_span(PixelSpan(100, 300), 50, Feature(10, 60), 1)


def test_feature_span_accepts_feature_ending_at_hit():
    span = feature_span(PixelSpan(100, 300), 50, Feature(0, 50), 1)
    assert span.width_px == pytest.approx(198)
