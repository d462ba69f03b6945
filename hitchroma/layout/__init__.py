from .coords import (
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
from .legend import (
    PADDING_BY_LENGTH,
    padding_for,
    start_label_left,
    end_label_left,
    number_to_string,
    bucket_labels,
    scale_tick_positions,
)

__all__ = [
    # coordinates
    "total_pixels",
    "np_total_pixels",
    "track_pixel_span",
    "query_subject_pixel_spans",
    "scoring_column_span",
    "domain_pixel_span",
    "track_span_for",
    "query_subject_spans_for",
    "feature_span",
    # legend
    "PADDING_BY_LENGTH",
    "padding_for",
    "start_label_left",
    "end_label_left",
    "number_to_string",
    "bucket_labels",
    "scale_tick_positions",
]
