from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class ScoreRange:
    """
    Summary of the scores (E-values or bit scores) across a result set.

    ``min_non_zero`` is the smallest strictly positive score. It stands in
    for ``min`` wherever a logarithm of zero would otherwise be taken.
    """
    min: float
    max: float
    min_non_zero: float

    @classmethod
    def from_scores(cls, scores: Iterable[float]) -> ScoreRange:
        """
        Scan scores for their minimum, maximum and minimum non-zero value.

        An empty input gives ``ScoreRange(0, 0, 0)``. When no score is
        positive, ``min_non_zero`` is 0.
        """
        lowest = highest = lowest_non_zero = None
        for score in scores:
            score = float(score)
            if lowest is None or score < lowest:
                lowest = score
            if highest is None or score > highest:
                highest = score
            if score > 0.0 and (lowest_non_zero is None or score < lowest_non_zero):
                lowest_non_zero = score
        return cls(
            min=lowest if lowest is not None else 0.0,
            max=highest if highest is not None else 0.0,
            min_non_zero=lowest_non_zero if lowest_non_zero is not None else 0.0,
        )

    @property
    def is_ordered(self) -> bool:
        return 0.0 <= self.min <= self.max and self.min_non_zero >= 0.0
