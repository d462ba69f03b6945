from __future__ import annotations
from dataclasses import dataclass
from typing import NamedTuple

from ..config import (
    DEFAULT_CANVAS_WIDTH,
    CONTENT_WIDTH_PCT,
    SCORING_WIDTH_PCT,
    LABEL_WIDTH_PCT,
    SCALE_WIDTH_PCT,
    SCALE_LABEL_WIDTH_PCT,
    MARGIN_WIDTH_PCT,
)


@dataclass(frozen=True)
class CanvasGeometry:
    """Horizontal pixel budget of the canvas, in pixels."""
    content_width: float
    label_width: float
    margin_width: float
    scoring_width: float
    scale_width: float
    scale_label_width: float = 0.0

    @classmethod
    def for_canvas(cls, canvas_width: float = DEFAULT_CANVAS_WIDTH) -> CanvasGeometry:
        """Derive every width as a fixed share of ``canvas_width``."""
        return cls(
            content_width=CONTENT_WIDTH_PCT * canvas_width / 100,
            label_width=LABEL_WIDTH_PCT * canvas_width / 100,
            margin_width=MARGIN_WIDTH_PCT * canvas_width / 100,
            scoring_width=SCORING_WIDTH_PCT * canvas_width / 100,
            scale_width=SCALE_WIDTH_PCT * canvas_width / 100,
            scale_label_width=SCALE_LABEL_WIDTH_PCT * canvas_width / 100,
        )


@dataclass(frozen=True)
class Feature:
    """A ``[start, end]`` region measured inside a parent length."""
    start: float
    end: float

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"Feature start must be non-negative, got {self.start}")
        if self.start > self.end:
            raise ValueError(f"Feature start ({self.start}) is after its end ({self.end})")

    @classmethod
    def from_coords(cls, first: float, second: float) -> Feature:
        """Build a feature from coordinates that may be reversed (minus strand)."""
        return cls(min(first, second), max(first, second))

    @property
    def length(self) -> float:
        return self.end - self.start


class PixelSpan(NamedTuple):
    """Absolute start/end pixels of a track line."""
    start_px: float
    end_px: float


class DomainSpan(NamedTuple):
    """Origin and *width* of a rectangle nested inside a track."""
    offset_px: float
    width_px: float


class QuerySubjectSpans(NamedTuple):
    query: PixelSpan
    subject: PixelSpan


DEFAULT_GEOMETRY = CanvasGeometry.for_canvas(DEFAULT_CANVAS_WIDTH)
