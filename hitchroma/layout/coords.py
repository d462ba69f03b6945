"""
Sequence coordinates -> canvas pixels.

Query and subject tracks share the content width in proportion to their
lengths, after a fixed scoring column between them is set aside. Track
functions return absolute ``(start, end)`` pixels for line drawing. Nested
feature functions return ``(offset, width)`` for rectangle drawing. Nothing
is rounded.
"""
from __future__ import annotations

import numpy as np
from numpy import ndarray as NDArray

from ..types.geometry_types import (
    CanvasGeometry,
    DomainSpan,
    Feature,
    PixelSpan,
    QuerySubjectSpans,
)


def total_pixels(
    query_len: float,
    subj_len: float,
    var_len: float,
    content_width: float,
    scoring_width: float,
) -> float:
    """
    Pixels allotted to ``var_len`` out of the combined query + subject length.

    Args:
        query_len: Query sequence length
        subj_len: Subject sequence length
        var_len: Length to size (query, subject or a sub-length of a hit)
        content_width: Pixels available to both tracks
        scoring_width: Pixels reserved for the scoring column

    Returns:
        ``(var_len * content_width - scoring_width) / (query_len + subj_len)``
    """
    return (var_len * content_width - scoring_width) / (query_len + subj_len)


def np_total_pixels(
    query_len: float,
    subj_len: float,
    var_len: NDArray,
    content_width: float,
    scoring_width: float,
) -> NDArray:
    """Vectorized: :func:`total_pixels` over an array of ``var_len``."""
    var_len = np.asarray(var_len, dtype=float)
    return (var_len * content_width - scoring_width) / (query_len + subj_len)


def track_pixel_span(content_width: float, label_width: float, margin_width: float) -> PixelSpan:
    """Single track spanning the whole content area, inset by the margins."""
    return PixelSpan(
        label_width + margin_width,
        label_width + content_width - margin_width,
    )


def query_subject_pixel_spans(
    query_len: float,
    subj_len: float,
    subj_hsp_len: float,
    content_width: float,
    scoring_width: float,
    label_width: float,
    margin_width: float,
) -> tuple[float, float, float, float]:
    """
    Lay out a query track and a subject track left to right.

    The subject track starts after the query track plus the scoring column.
    Its size follows ``subj_hsp_len``, so a partial subject draws shorter
    than the full-length query.

    Returns:
        ``(start_query, end_query, start_subject, end_subject)`` pixels
    """
    query_px = total_pixels(query_len, subj_len, query_len, content_width, scoring_width)
    subj_px = total_pixels(query_len, subj_len, subj_hsp_len, content_width, scoring_width)

    start_query = label_width + margin_width
    end_query = label_width + query_px - margin_width
    start_subj = label_width + query_px + scoring_width + margin_width
    end_subj = label_width + query_px + scoring_width + subj_px - margin_width
    return start_query, end_query, start_subj, end_subj


def scoring_column_span(
    query_len: float,
    subj_len: float,
    content_width: float,
    scoring_width: float,
    label_width: float,
    margin_width: float,
) -> PixelSpan:
    """Span of the scoring column between the query and subject tracks."""
    query_px = total_pixels(query_len, subj_len, query_len, content_width, scoring_width)
    return PixelSpan(
        label_width + query_px + margin_width,
        label_width + query_px + scoring_width - margin_width,
    )


def domain_pixel_span(
    track_start_px: float,
    track_end_px: float,
    hit_len: float,
    domain_start: float,
    domain_end: float,
    margin_width: float,
) -> DomainSpan:
    """
    Rescale a sub-feature ``[domain_start, domain_end]`` of ``hit_len`` into a track.

    The second value is a rectangle *width*, not an end coordinate.
    """
    scale = (track_end_px - track_start_px) / hit_len
    offset = track_start_px + domain_start * scale + margin_width
    width = track_start_px + domain_end * scale - margin_width - offset
    return DomainSpan(offset, width)


# Geometry-object conveniences

def track_span_for(geometry: CanvasGeometry) -> PixelSpan:
    return track_pixel_span(geometry.content_width, geometry.label_width, geometry.margin_width)


def query_subject_spans_for(
    geometry: CanvasGeometry,
    query_len: float,
    subj_len: float,
    subj_hsp_len: float | None = None,
) -> QuerySubjectSpans:
    """Query/subject spans for a geometry. ``subj_hsp_len`` defaults to ``subj_len``."""
    start_q, end_q, start_s, end_s = query_subject_pixel_spans(
        query_len,
        subj_len,
        subj_len if subj_hsp_len is None else subj_hsp_len,
        geometry.content_width,
        geometry.scoring_width,
        geometry.label_width,
        geometry.margin_width,
    )
    return QuerySubjectSpans(PixelSpan(start_q, end_q), PixelSpan(start_s, end_s))


def feature_span(track: PixelSpan, hit_len: float, feature: Feature, margin_width: float) -> DomainSpan:
    """Rectangle of a validated feature inside a track. Raises ValueError if it runs past ``hit_len``."""
    if feature.end > hit_len:
        raise ValueError(f"Feature end ({feature.end}) is past the hit length ({hit_len})")
    return domain_pixel_span(track.start_px, track.end_px, hit_len, feature.start, feature.end, margin_width)
