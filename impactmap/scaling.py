"""
Result ranges and intensity shares.

The intensity of a heatmap cell is the position of its value within the
range of its indicator, where the range is taken over the sectors currently
shown (not over the whole dataset).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from impactmap.core import Indicator, MatrixLike, Sector, matrix_value


@dataclass(frozen=True)
class ResultRange:
    indicator: Indicator
    min: float
    max: float

    @property
    def is_degenerate(self) -> bool:
        # All selected sectors tie; there is no spread to normalize against.
        return self.min == self.max

    def contains(self, value: float) -> bool:
        return self.min <= float(value) <= self.max


def result_ranges(
    indicators: Optional[Sequence[Indicator]],
    sectors: Optional[Sequence[Sector]],
    matrix: Optional[MatrixLike],
) -> List[ResultRange]:
    """
    Calculate the result ranges of the given indicators over the given sectors.

    Args:
        indicators: Selected indicators.
        sectors: Selected sectors.
        matrix: Result matrix (indicator index, sector index) -> value.

    Returns:
        One range per indicator, in the order of `indicators`. Empty if there
        are no indicators, no sectors or no matrix.
    """
    if not indicators or not sectors or matrix is None:
        return []
    ranges: List[ResultRange] = []
    for indicator in indicators:
        lo: Optional[float] = None
        hi: Optional[float] = None
        for sector in sectors:
            r = matrix_value(matrix, indicator.index, sector.index)
            if lo is None or hi is None:
                lo = r
                hi = r
            else:
                lo = min(lo, r)
                hi = max(hi, r)
        ranges.append(ResultRange(indicator=indicator, min=float(lo), max=float(hi)))
    return ranges


def get_share(value: Optional[float], result_range: ResultRange) -> float:
    """
    Map a result value to its share in [0, 1] within a result range.

    A missing or zero value has no signal and maps to 0. A degenerate range
    (min == max) maps every other value to 1. Values outside the range are
    clamped.
    """
    if not value:
        return 0.0
    v = float(value)
    if math.isnan(v):
        return 0.0
    if result_range.is_degenerate:
        return 1.0
    share = (v - result_range.min) / (result_range.max - result_range.min)
    return min(1.0, max(0.0, share))


def cell_alpha(share: float, floor: float = 0.1) -> float:
    """
    Linear opacity for a share: `floor` at 0 and full saturation at 1.
    """
    floor = float(floor)
    if not (0.0 <= floor <= 1.0):
        raise ValueError("floor must be between 0 and 1")
    s = min(1.0, max(0.0, float(share)))
    return floor + (1.0 - floor) * s
